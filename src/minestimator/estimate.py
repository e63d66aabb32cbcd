"""Language dispatch and estimate summaries.

Resolves a language hint (name, MIME type or file extension) to one of the
two estimators and wraps the result with the source length it came from.
Converting the character ratio into transferred bytes is left to callers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from minestimator.config import EstimatorConfig
from minestimator.errors import UnknownLanguageError
from minestimator.scanner import compute_css_token_length, compute_js_token_length


class Language(Enum):
    """Languages with an estimator."""

    CSS = "css"
    JS = "js"

    @classmethod
    def resolve(cls, hint: "Language | str") -> "Language":
        """Resolve a language name, MIME type or file extension.

        Matching is case-insensitive and MIME parameters are ignored.

        Raises:
            UnknownLanguageError: If hint names neither CSS nor JavaScript.

        Example:
            >>> Language.resolve("text/javascript; charset=utf-8")
            <Language.JS: 'js'>
        """
        if isinstance(hint, Language):
            return hint
        key = hint.split(";", 1)[0].strip().lower()
        language = _ALIASES.get(key)
        if language is None:
            raise UnknownLanguageError(hint)
        return language


_ALIASES: dict[str, Language] = {
    "css": Language.CSS,
    ".css": Language.CSS,
    "text/css": Language.CSS,
    "js": Language.JS,
    "javascript": Language.JS,
    "ecmascript": Language.JS,
    "module": Language.JS,
    ".js": Language.JS,
    ".mjs": Language.JS,
    ".cjs": Language.JS,
    "text/javascript": Language.JS,
    "text/ecmascript": Language.JS,
    "application/javascript": Language.JS,
    "application/x-javascript": Language.JS,
    "application/ecmascript": Language.JS,
}

_ESTIMATORS: dict[Language, Callable[[str, EstimatorConfig | None], int]] = {
    Language.CSS: compute_css_token_length,
    Language.JS: compute_js_token_length,
}


@dataclass(frozen=True, slots=True)
class MinificationEstimate:
    """Meaningful character count of one source text.

    Attributes:
        language: Grammar used for the scan
        length: Characters in the source
        token_length: Characters a minifier would keep

    """

    language: Language
    length: int
    token_length: int

    @property
    def removable(self) -> int:
        """Characters a minifier could drop."""
        return self.length - self.token_length

    @property
    def removable_ratio(self) -> float:
        """Share of the source a minifier could drop, 0.0 for empty input."""
        if self.length == 0:
            return 0.0
        return self.removable / self.length


def estimate_token_length(
    content: str,
    language: Language | str,
    config: EstimatorConfig | None = None,
) -> int:
    """Estimate the minified length of content in the given language.

    Raises:
        UnknownLanguageError: If language cannot be resolved.
    """
    return _ESTIMATORS[Language.resolve(language)](content, config)


def estimate(
    content: str,
    language: Language | str,
    config: EstimatorConfig | None = None,
) -> MinificationEstimate:
    """Scan content and summarise how much of it is removable.

    Example:
        >>> result = estimate(".a { color: red; }", "text/css")
        >>> result.token_length, result.removable
        (14, 4)
    """
    resolved = Language.resolve(language)
    return MinificationEstimate(
        language=resolved,
        length=len(content),
        token_length=_ESTIMATORS[resolved](content, config),
    )
