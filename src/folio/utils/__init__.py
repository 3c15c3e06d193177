"""Shared utilities."""

from .html import escape_html
from .logging import get_logger, setup_logging

__all__ = [
    "escape_html",
    "get_logger",
    "setup_logging",
]
