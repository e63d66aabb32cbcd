"""Single-pass lexical scanners for minified-size estimation.

Architecture:
scanner/
├── __init__.py          # Re-exports scanners and estimator functions
├── core.py              # Scanner base class (mode dispatch + cursor primitives)
├── modes.py             # LexicalMode, TokenKind, character constants
├── literals.py          # String and template span mixin
├── comments.py          # Block and line comment mixins
├── css.py               # CssScanner, compute_css_token_length
└── js.py                # JsScanner, compute_js_token_length

Usage:
    >>> from minestimator.scanner import compute_js_token_length
    >>> compute_js_token_length("// ignore\\n12345")
    5

"""

from minestimator.scanner.core import Scanner
from minestimator.scanner.css import CssScanner, compute_css_token_length
from minestimator.scanner.js import JsScanner, compute_js_token_length
from minestimator.scanner.modes import LexicalMode, TokenKind

__all__ = [
    "CssScanner",
    "JsScanner",
    "LexicalMode",
    "Scanner",
    "TokenKind",
    "compute_css_token_length",
    "compute_js_token_length",
]
