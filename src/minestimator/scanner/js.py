"""JavaScript token length estimator.

Strips line comments, block comments and all whitespace; keeps strings,
template spans and regex literals verbatim. A ``/`` in code is read as
division or as the start of a regex from the last significant token alone.
"""

from __future__ import annotations

from typing import ClassVar

from minestimator.config import EstimatorConfig
from minestimator.scanner.comments import (
    BlockCommentScannerMixin,
    LineCommentScannerMixin,
)
from minestimator.scanner.literals import StringScannerMixin
from minestimator.scanner.modes import (
    QUOTE_MODES,
    REGEX_PRECEDING_KEYWORDS,
    WHITESPACE,
    LexicalMode,
    TokenKind,
    is_identifier_char,
)


class JsScanner(LineCommentScannerMixin, BlockCommentScannerMixin, StringScannerMixin):
    """Scanner for the JavaScript grammar.

    Template span interpolations (``${...}``) are not re-entered; the whole
    span is opaque literal content. End-of-input policy is local: whatever
    construct is open keeps the progress made so far.

    """

    MODES: ClassVar[frozenset[LexicalMode]] = frozenset(LexicalMode)
    HANDLERS: ClassVar[dict[LexicalMode, str]] = {
        LexicalMode.NORMAL: "_scan_normal",
        LexicalMode.LINE_COMMENT: "_scan_line_comment",
        LexicalMode.BLOCK_COMMENT: "_scan_block_comment",
        LexicalMode.SINGLE_QUOTE_STRING: "_scan_string",
        LexicalMode.DOUBLE_QUOTE_STRING: "_scan_string",
        LexicalMode.TEMPLATE_SPAN: "_scan_string",
        LexicalMode.REGEX_LITERAL: "_scan_regex",
    }

    __slots__ = (
        "_last_kind",
        "_word_start",  # Source span of the trailing identifier or number
        "_word_end",
        "_in_char_class",
    )

    def __init__(self, source: str, config: EstimatorConfig | None = None) -> None:
        super().__init__(source, config)
        self._last_kind = TokenKind.NONE
        self._word_start = 0
        self._word_end = 0
        self._in_char_class = False

    @property
    def last_kind(self) -> TokenKind:
        """Class of the last significant token seen."""
        return self._last_kind

    def _scan_normal(self) -> None:
        char = self._source[self._pos]
        if char in WHITESPACE:
            self._skip()
            return

        if char == "/":
            following = self._peek(1)
            if following == "/":
                self._skip(2)
                self._mode = LexicalMode.LINE_COMMENT
            elif following == "*":
                self._open_block_comment(allow_license=False)
            elif self._slash_is_division():
                self._keep()
                self._note_punctuator()
            else:
                self._keep()
                self._mode = LexicalMode.REGEX_LITERAL
                self._in_char_class = False
            return

        self._keep()
        if char in QUOTE_MODES:
            self._mode = QUOTE_MODES[char]
        elif char == "`":
            self._mode = LexicalMode.TEMPLATE_SPAN
        elif is_identifier_char(char):
            self._note_word_char()
        elif char == ")" or char == "]":
            self._last_kind = TokenKind.CLOSE
        else:
            self._note_punctuator()

    def _scan_regex(self) -> None:
        char = self._source[self._pos]
        if char == "\\":
            self._keep(2)
            return

        self._keep()
        if self._config.regex_character_classes:
            if char == "[":
                self._in_char_class = True
                return
            if char == "]":
                self._in_char_class = False
                return
        if char == "/" and not self._in_char_class:
            # Flags
            while self._pos < self._source_len and is_identifier_char(
                self._source[self._pos]
            ):
                self._keep()
            self._leave_literal()

    def _leave_literal(self) -> None:
        super()._leave_literal()
        self._last_kind = TokenKind.LITERAL

    # =========================================================================
    # Lookback
    # =========================================================================

    def _slash_is_division(self) -> bool:
        """Decide whether a ``/`` in code divides a preceding value."""
        kind = self._last_kind
        if kind is TokenKind.WORD:
            word = self._source[self._word_start : self._word_end]
            return word not in REGEX_PRECEDING_KEYWORDS
        return kind is TokenKind.CLOSE or kind is TokenKind.LITERAL

    def _note_word_char(self) -> None:
        """Extend the trailing word, or start one if the last kept char ended it."""
        end = self._pos
        if self._last_kind is not TokenKind.WORD or self._word_end != end - 1:
            self._word_start = end - 1
        self._word_end = end
        self._last_kind = TokenKind.WORD

    def _note_punctuator(self) -> None:
        self._last_kind = TokenKind.PUNCTUATOR


def compute_js_token_length(
    content: str, config: EstimatorConfig | None = None
) -> int:
    """Estimate the length of JavaScript after whitespace and comment removal.

    Never raises. Empty input gives 0.

    Args:
        content: JavaScript source text
        config: Optional config; defaults to the active context config

    Returns:
        Number of meaningful characters (code points, not bytes)

    Example:
        >>> compute_js_token_length("return 1 / 2 // hello")
        9
    """
    return JsScanner(content, config).scan()
