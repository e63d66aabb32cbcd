"""Comment scanner mixins.

Comment bodies are skipped in one step using ``str.find`` on the closing
delimiter, so long comments cost a single C-level search.
"""

from __future__ import annotations

from minestimator.config import EstimatorConfig
from minestimator.scanner.core import Scanner
from minestimator.scanner.modes import LexicalMode


class BlockCommentScannerMixin(Scanner):
    """Mixin providing ``/* ... */`` scanning.

    Ordinary comments contribute nothing, delimiters included. When the
    grammar enables it, a comment opening with ``/*!`` is a license comment
    and its whole span is counted as if it were code.

    """

    __slots__ = ("_in_license_comment",)

    def __init__(self, source: str, config: EstimatorConfig | None = None) -> None:
        super().__init__(source, config)
        self._in_license_comment = False

    def _open_block_comment(self, *, allow_license: bool) -> None:
        """Enter BLOCK_COMMENT at a ``/*`` under the cursor."""
        self._mode = LexicalMode.BLOCK_COMMENT
        if allow_license and self._peek(2) == "!":
            self._in_license_comment = True
            self._keep(2)
        else:
            self._in_license_comment = False
            self._skip(2)

    def _scan_block_comment(self) -> None:
        end = self._source.find("*/", self._pos)
        if end == -1:
            span = self._source_len - self._pos
        else:
            span = end + 2 - self._pos

        if self._in_license_comment:
            self._keep(span)
        else:
            self._skip(span)

        if end != -1:
            self._mode = LexicalMode.NORMAL
            self._in_license_comment = False


class LineCommentScannerMixin(Scanner):
    """Mixin providing ``// ...`` scanning up to and including the newline."""

    __slots__ = ()

    def _scan_line_comment(self) -> None:
        idx = self._source.find("\n", self._pos)
        end = self._source_len if idx == -1 else idx + 1
        self._skip(end - self._pos)
        self._mode = LexicalMode.NORMAL
