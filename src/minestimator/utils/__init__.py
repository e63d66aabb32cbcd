"""Utility modules for minestimator.

Provides:
- logger: get_logger for logging
"""

from minestimator.utils.logger import get_logger

__all__ = ["get_logger"]
