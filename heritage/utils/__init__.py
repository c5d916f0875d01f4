"""Utility modules for the heritage tracker."""

from heritage.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
