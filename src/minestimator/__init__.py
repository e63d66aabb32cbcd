"""
minestimator — Minified-size estimation for CSS and JavaScript

Counts the characters a minifier would keep after removing whitespace and
comments, without running one. Strings, regex literals and template spans
are never altered. Zero runtime dependencies.

Quick Start:
    >>> from minestimator import compute_css_token_length, compute_js_token_length
    >>> compute_css_token_length(".my-class { content: \\"/*\\"; }")
    24
    >>> compute_js_token_length("return 1 / 2 // hello")
    9

    >>> from minestimator import estimate
    >>> estimate("const  x = 1;", "application/javascript").removable
    4

Configuration:
    >>> from minestimator import EstimatorConfig, estimator_config_context
    >>> with estimator_config_context(EstimatorConfig(preserve_license_comments=False)):
    ...     compute_css_token_length("/*! MIT */a{}")
    3
"""

from minestimator.config import (
    EstimatorConfig,
    FallbackPolicy,
    estimator_config_context,
    get_estimator_config,
    reset_estimator_config,
    set_estimator_config,
)
from minestimator.errors import MinEstimatorError, UnknownLanguageError
from minestimator.estimate import (
    Language,
    MinificationEstimate,
    estimate,
    estimate_token_length,
)
from minestimator.scanner import (
    CssScanner,
    JsScanner,
    LexicalMode,
    compute_css_token_length,
    compute_js_token_length,
)

__version__ = "0.1.0"

__all__ = [
    "CssScanner",
    "EstimatorConfig",
    "FallbackPolicy",
    "JsScanner",
    "Language",
    "LexicalMode",
    "MinEstimatorError",
    "MinificationEstimate",
    "UnknownLanguageError",
    "__version__",
    "compute_css_token_length",
    "compute_js_token_length",
    "estimate",
    "estimate_token_length",
    "estimator_config_context",
    "get_estimator_config",
    "reset_estimator_config",
    "set_estimator_config",
]
