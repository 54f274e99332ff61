"""Utility functions."""

from .formatting import format_count, format_result_count, format_timestamp

__all__ = ["format_count", "format_result_count", "format_timestamp"]
