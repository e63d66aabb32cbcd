"""Package logger lookup.

Scanners log at ``debug`` level when a fallback policy replaces the
stripped estimate; the library never attaches handlers. Enable the
records with ``logging.getLogger("minestimator").setLevel(logging.DEBUG)``.
"""

from __future__ import annotations

import logging

_ROOT = "minestimator"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, placed under the ``minestimator`` tree.

    Module names inside the package are used as-is; anything else is
    nested below the package logger so one level setting covers it.

    Example:
        >>> get_logger("minestimator.scanner.css").name
        'minestimator.scanner.css'
        >>> get_logger("audit").name
        'minestimator.audit'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
