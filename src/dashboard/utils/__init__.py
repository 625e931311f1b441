"""
Utility helpers for the dashboard.
"""

from .formatting import format_count, format_cell

__all__ = ["format_count", "format_cell"]
