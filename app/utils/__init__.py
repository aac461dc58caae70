"""Utility functions."""

from app.utils.error_messages import get_error_message
from app.utils.sports import format_category_name, format_division, format_level
from app.utils.timestamps import utcnow

__all__ = [
    "get_error_message",
    "format_category_name",
    "format_division",
    "format_level",
    "utcnow",
]
