"""
Table components for the dashboard.
"""

from typing import Any, Dict, List, Sequence

import dash_bootstrap_components as dbc
from dash import html

from dashboard.utils.formatting import format_cell


def collect_columns(items: Sequence[Dict[str, Any]]) -> List[str]:
    """Column names in first-seen order across all items."""
    columns: List[str] = []
    for item in items:
        for key in item:
            if key not in columns:
                columns.append(key)
    return columns


def create_resource_table(items: Sequence[Any]) -> Any:
    """Render a list of API objects as a table, one column per key."""
    if not items:
        return html.P("No resources found.", className="text-muted")

    rows = [item if isinstance(item, dict) else {"value": item} for item in items]
    columns = collect_columns(rows)

    return dbc.Table(
        [
            html.Thead(html.Tr([html.Th(col) for col in columns])),
            html.Tbody(
                [
                    html.Tr([html.Td(format_cell(row.get(col))) for col in columns])
                    for row in rows
                ]
            ),
        ],
        striped=True,
        hover=True,
        responsive=True,
        className="mb-0",
    )
