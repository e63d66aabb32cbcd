"""Scanner modes and lexical constants.

This module defines the finite state machine modes shared by the CSS and
JavaScript scanners, plus the character sets both grammars consult.
"""

from __future__ import annotations

from enum import Enum, auto


class LexicalMode(Enum):
    """Scanner lexical modes.

    Each grammar uses a subset:
    - CSS: NORMAL, BLOCK_COMMENT, SINGLE_QUOTE_STRING, DOUBLE_QUOTE_STRING
    - JS: all of them

    """

    NORMAL = auto()  # Plain code
    LINE_COMMENT = auto()  # // ... to end of line
    BLOCK_COMMENT = auto()  # /* ... */
    SINGLE_QUOTE_STRING = auto()
    DOUBLE_QUOTE_STRING = auto()
    TEMPLATE_SPAN = auto()  # `...`, interpolations included
    REGEX_LITERAL = auto()  # /.../flags


class TokenKind(Enum):
    """Class of the last significant JS token, used to read a ``/``."""

    NONE = auto()  # Start of input
    WORD = auto()  # Identifier, keyword or number
    CLOSE = auto()  # ) or ]
    LITERAL = auto()  # String, template span or regex
    PUNCTUATOR = auto()  # Operators, opening brackets, comma, semicolon


WHITESPACE = frozenset(" \t\n\r\f\v")

QUOTE_MODES = {
    "'": LexicalMode.SINGLE_QUOTE_STRING,
    '"': LexicalMode.DOUBLE_QUOTE_STRING,
}

CLOSING_DELIMITERS = {
    LexicalMode.SINGLE_QUOTE_STRING: "'",
    LexicalMode.DOUBLE_QUOTE_STRING: '"',
    LexicalMode.TEMPLATE_SPAN: "`",
}

# Keywords after which an expression (and so a regex) is expected
REGEX_PRECEDING_KEYWORDS = frozenset(
    {
        "await",
        "case",
        "delete",
        "do",
        "else",
        "in",
        "instanceof",
        "new",
        "of",
        "return",
        "throw",
        "typeof",
        "void",
        "yield",
    }
)


def is_identifier_char(char: str) -> bool:
    """Return True for characters that continue a JS identifier or number."""
    return char.isalnum() or char == "_" or char == "$"
