"""Exception classes for minestimator.

The estimators are total over all input strings and never raise. Errors
only come from resolving which estimator to use.
"""

from __future__ import annotations


class MinEstimatorError(Exception):
    """Base exception for all minestimator errors.

    Subclass this for specific error categories.
    """

    pass


class UnknownLanguageError(MinEstimatorError, ValueError):
    """Raised when a language name, MIME type or extension is not recognised."""

    def __init__(self, name: str) -> None:
        """Initialize with the unrecognised name.

        Args:
            name: The language hint that could not be resolved
        """
        self.name = name
        super().__init__(f"Unknown language {name!r}: expected CSS or JavaScript")
