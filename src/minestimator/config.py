"""ContextVar-based estimator configuration for minestimator.

Provides context-local configuration using Python's ContextVars (PEP 567).
Scanners read the active config once, when they are created.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from minestimator.config import EstimatorConfig, estimator_config_context

    with estimator_config_context(EstimatorConfig(preserve_license_comments=False)):
        length = compute_css_token_length(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum


class FallbackPolicy(Enum):
    """What to report when input ends inside an unterminated construct.

    GLOBAL: abandon the estimate and report the full source length.
    LOCAL: count the open construct as far as it got and keep prior progress.
    """

    GLOBAL = "global"
    LOCAL = "local"


@dataclass(frozen=True, slots=True)
class EstimatorConfig:
    """Immutable estimator configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        preserve_license_comments: Count CSS ``/*! ... */`` comments verbatim
        css_unterminated_string: Policy for a CSS string still open at EOF
        regex_character_classes: Treat ``/`` inside a JS regex ``[...]``
            class as body content rather than the closing delimiter

    """

    preserve_license_comments: bool = True
    css_unterminated_string: FallbackPolicy = FallbackPolicy.GLOBAL
    regex_character_classes: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EstimatorConfig":
        """Create EstimatorConfig from dictionary.

        Only includes keys that are valid EstimatorConfig fields; unknown keys
        are silently ignored. Fallback policies may be given by value.

        Args:
            config_dict: Dictionary with config values. Keys should match
                EstimatorConfig attribute names.

        Returns:
            New EstimatorConfig instance with values from dict.

        Example:
            >>> config = EstimatorConfig.from_dict({
            ...     "css_unterminated_string": "local",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.css_unterminated_string
            <FallbackPolicy.LOCAL: 'local'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "css_unterminated_string" in filtered:
            filtered["css_unterminated_string"] = FallbackPolicy(
                filtered["css_unterminated_string"]
            )
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: EstimatorConfig = EstimatorConfig()

_estimator_config: ContextVar[EstimatorConfig] = ContextVar(
    "estimator_config",
    default=_DEFAULT_CONFIG,
)


def get_estimator_config() -> EstimatorConfig:
    """Get current estimator configuration (context-local)."""
    return _estimator_config.get()


def set_estimator_config(config: EstimatorConfig) -> None:
    """Set estimator configuration for current context.

    Args:
        config: EstimatorConfig instance to use for this context.

    """
    _estimator_config.set(config)


def reset_estimator_config() -> None:
    """Reset to default configuration."""
    _estimator_config.set(_DEFAULT_CONFIG)


@contextmanager
def estimator_config_context(config: EstimatorConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: EstimatorConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _estimator_config.get()
    _estimator_config.set(config)
    try:
        yield
    finally:
        _estimator_config.set(previous)


__all__ = [
    "EstimatorConfig",
    "FallbackPolicy",
    "estimator_config_context",
    "get_estimator_config",
    "reset_estimator_config",
    "set_estimator_config",
]
