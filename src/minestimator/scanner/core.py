"""Single-pass scanner with O(n) guaranteed performance.

A scanner walks an immutable source string once, left to right, with
exactly one lexical mode active at any cursor position. Every step is
dispatched to the handler registered for the current mode, and every
handler advances the cursor by at least one character.

No regex in the hot path. Comment bodies are skipped with ``str.find``.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from minestimator.config import EstimatorConfig, get_estimator_config
from minestimator.scanner.modes import LexicalMode
from minestimator.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Base class for the CSS and JS estimators.

    Subclasses declare the modes their grammar uses in ``MODES`` and map
    each one to a handler method name in ``HANDLERS``. The mapping is
    checked when the subclass is created, so a grammar cannot enter a mode
    it has no handler for.

    Usage:
            >>> from minestimator.scanner import CssScanner
            >>> CssScanner(".a { color: red; }").scan()
            14

    """

    MODES: ClassVar[frozenset[LexicalMode]] = frozenset({LexicalMode.NORMAL})
    HANDLERS: ClassVar[dict[LexicalMode, str]] = {LexicalMode.NORMAL: "_scan_normal"}

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_mode",
        "_total",  # Meaningful characters counted so far
        "_config",
        "_handlers",
    )

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        declared = frozenset(cls.HANDLERS)
        if cls.MODES != declared:
            missing = sorted(m.name for m in cls.MODES ^ declared)
            raise TypeError(f"{cls.__name__}: modes and handlers disagree on {missing}")
        for name in cls.HANDLERS.values():
            if not callable(getattr(cls, name, None)):
                raise TypeError(f"{cls.__name__}: missing handler {name!r}")

    def __init__(self, source: str, config: EstimatorConfig | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: CSS or JavaScript source text
            config: Optional config; defaults to the active context config
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._mode = LexicalMode.NORMAL
        self._total = 0
        self._config = config if config is not None else get_estimator_config()
        self._handlers: dict[LexicalMode, Callable[[], None]] = {
            mode: getattr(self, name) for mode, name in self.HANDLERS.items()
        }

    @property
    def mode(self) -> LexicalMode:
        """Mode active at the current cursor position."""
        return self._mode

    def scan(self) -> int:
        """Scan the whole source and return the meaningful character count.

        Complexity: O(n) where n = len(source)
        Memory: O(1) beyond the source itself
        """
        handlers = self._handlers  # Local var for faster access
        source_len = self._source_len
        while self._pos < source_len:
            handlers[self._mode]()
        return self._finish()

    def _scan_normal(self) -> None:
        """Handle one step of plain code. Implemented by each grammar."""
        raise NotImplementedError

    def _finish(self) -> int:
        """Apply end-of-input policy. Default: keep prior progress."""
        if self._mode is not LexicalMode.NORMAL:
            logger.debug(
                "Unterminated %s at end of input; counted locally",
                self._mode.name,
            )
        return self._total

    # =========================================================================
    # Cursor primitives
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character relative to the cursor.

        Returns:
            The character, or empty string past end of input.
        """
        pos = self._pos + offset
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _starts_with(self, marker: str) -> bool:
        """Check whether the source continues with marker at the cursor."""
        return self._source.startswith(marker, self._pos)

    def _keep(self, count: int = 1) -> None:
        """Count and advance past up to count characters (clamped at EOF)."""
        end = min(self._pos + count, self._source_len)
        self._total += end - self._pos
        self._pos = end

    def _skip(self, count: int = 1) -> None:
        """Advance past up to count characters without counting them."""
        self._pos = min(self._pos + count, self._source_len)

    def _leave_literal(self) -> None:
        """Return to NORMAL after a string, template span or regex closes."""
        self._mode = LexicalMode.NORMAL
