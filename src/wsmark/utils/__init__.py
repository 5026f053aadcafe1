"""Utility modules for wsmark.

Provides:
- logger: get_logger for logging
"""

from wsmark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
