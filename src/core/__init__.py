"""
Core module for cross-cutting concerns.

This module provides:
- Structured logging configuration
- Common utilities
"""

from core.logging import configure_logging, get_logger
from core.utils import format_query_value, safe_get

__all__ = [
    "configure_logging",
    "get_logger",
    "format_query_value",
    "safe_get",
]
