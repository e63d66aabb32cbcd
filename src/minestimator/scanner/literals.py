"""Quoted literal scanner mixin."""

from __future__ import annotations

from minestimator.scanner.core import Scanner
from minestimator.scanner.modes import CLOSING_DELIMITERS


class StringScannerMixin(Scanner):
    """Mixin providing string and template span scanning.

    Every character of the literal is counted verbatim. A backslash counts
    and escapes exactly one following character, so an escaped delimiter
    never closes the literal. A backslash at end of input counts alone.

    """

    __slots__ = ()

    def _scan_string(self) -> None:
        char = self._source[self._pos]
        if char == "\\":
            self._keep(2)
            return

        self._keep()
        if char == CLOSING_DELIMITERS[self._mode]:
            self._leave_literal()
