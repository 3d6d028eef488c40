"""Utility functions for bdfedit.

This module provides logging setup and configuration.
"""

from bdfedit.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
