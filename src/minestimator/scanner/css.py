"""CSS token length estimator.

Strips comments and all whitespace outside strings, keeps strings verbatim,
and counts what remains. No selector, at-rule or declaration awareness.
"""

from __future__ import annotations

from typing import ClassVar

from minestimator.config import EstimatorConfig, FallbackPolicy
from minestimator.scanner.comments import BlockCommentScannerMixin
from minestimator.scanner.literals import StringScannerMixin
from minestimator.scanner.modes import QUOTE_MODES, WHITESPACE, LexicalMode
from minestimator.utils.logger import get_logger

logger = get_logger(__name__)


class CssScanner(BlockCommentScannerMixin, StringScannerMixin):
    """Scanner for the CSS grammar.

    End-of-input policy is global: if the source ends inside a block
    comment, the estimate is abandoned and the full source length is
    returned. An unterminated string does the same unless the config
    selects ``FallbackPolicy.LOCAL``.

    """

    MODES: ClassVar[frozenset[LexicalMode]] = frozenset(
        {
            LexicalMode.NORMAL,
            LexicalMode.BLOCK_COMMENT,
            LexicalMode.SINGLE_QUOTE_STRING,
            LexicalMode.DOUBLE_QUOTE_STRING,
        }
    )
    HANDLERS: ClassVar[dict[LexicalMode, str]] = {
        LexicalMode.NORMAL: "_scan_normal",
        LexicalMode.BLOCK_COMMENT: "_scan_block_comment",
        LexicalMode.SINGLE_QUOTE_STRING: "_scan_string",
        LexicalMode.DOUBLE_QUOTE_STRING: "_scan_string",
    }

    __slots__ = ()

    def _scan_normal(self) -> None:
        char = self._source[self._pos]
        if char in WHITESPACE:
            self._skip()
        elif self._starts_with("/*"):
            self._open_block_comment(allow_license=self._config.preserve_license_comments)
        elif char in QUOTE_MODES:
            self._keep()
            self._mode = QUOTE_MODES[char]
        else:
            self._keep()

    def _finish(self) -> int:
        mode = self._mode
        if mode is LexicalMode.NORMAL:
            return self._total
        if mode is LexicalMode.BLOCK_COMMENT or (
            self._config.css_unterminated_string is FallbackPolicy.GLOBAL
        ):
            logger.debug(
                "Unterminated %s in CSS; using full length %d",
                mode.name,
                self._source_len,
            )
            return self._source_len
        return super()._finish()


def compute_css_token_length(
    content: str, config: EstimatorConfig | None = None
) -> int:
    """Estimate the length of CSS after whitespace and comment removal.

    Never raises. Empty input gives 0.

    Args:
        content: CSS source text
        config: Optional config; defaults to the active context config

    Returns:
        Number of meaningful characters (code points, not bytes)

    Example:
        >>> compute_css_token_length(".my-class { /* c */ width: 100px; }")
        23
    """
    return CssScanner(content, config).scan()
