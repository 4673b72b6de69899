"""Utility functions for polyaffine.

This module provides logging setup and configuration.
"""

from polyaffine.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
