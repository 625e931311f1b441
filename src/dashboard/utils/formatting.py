"""
Formatting utilities for the dashboard.

Values the API could not provide render as the shared placeholder.
"""

import json
from typing import Any, Optional, Union

from dashboard.config import PLACEHOLDER


def format_count(value: Union[int, float, None]) -> str:
    """
    Format a resource count with thousands separators.

    Examples:
        >>> format_count(1234)
        '1,234'
        >>> format_count(None)
        '--'
    """
    if value is None:
        return PLACEHOLDER

    try:
        return f"{int(value):,}"
    except (ValueError, TypeError):
        return PLACEHOLDER


def format_cell(value: Any, max_length: Optional[int] = 80) -> str:
    """
    Format an arbitrary JSON value for a table cell.

    Nested objects and lists are rendered as compact JSON.

    Examples:
        >>> format_cell({"app": "web"})
        '{"app":"web"}'
        >>> format_cell(None)
        '--'
    """
    if value is None or value == "":
        return PLACEHOLDER
    if isinstance(value, (dict, list)):
        text = json.dumps(value, separators=(",", ":"), sort_keys=True)
    else:
        text = str(value)
    if max_length is not None and len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text
