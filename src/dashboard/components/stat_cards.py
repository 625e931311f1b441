"""
Stat card components for the dashboard.
"""

from typing import Any, Dict, List, Optional

import dash_bootstrap_components as dbc
from dash import html

from dashboard.config import PLACEHOLDER


def create_stat_card(
    label: str,
    value: Any = None,
    icon: Optional[str] = None,
    color: str = "primary",
) -> dbc.Card:
    """
    Create a stat card with a label and a single value.

    Args:
        label: Card label, e.g. "Nodes"
        value: Value to display; None renders as the placeholder
        icon: Optional FontAwesome icon class
        color: Bootstrap color name for the icon
    """
    display = PLACEHOLDER if value is None else str(value)

    body = [
        html.P(label, className="text-muted text-uppercase small fw-semibold mb-1"),
        html.H3(display, className="mb-0 fw-bold"),
    ]
    if icon:
        body = [
            dbc.Row(
                [
                    dbc.Col(body, width=9),
                    dbc.Col(
                        html.Div(
                            html.I(className=f"{icon} fa-2x text-{color}"),
                            className="text-end",
                        ),
                        width=3,
                    ),
                ],
                align="center",
            )
        ]

    return dbc.Card(dbc.CardBody(body), className="h-100 shadow-sm")


def create_stat_row(cards_data: List[Dict[str, Any]]) -> dbc.Row:
    """
    Create a row of stat cards.

    Args:
        cards_data: List of dicts with keys matching create_stat_card parameters
    """
    cols = []
    for data in cards_data:
        cols.append(
            dbc.Col(
                create_stat_card(**data),
                sm=6,
                lg=3,
                className="mb-4",
            )
        )

    return dbc.Row(cols)


def create_health_badge(health: Optional[Dict[str, Any]]) -> dbc.Badge:
    """Badge showing whether the orchestrator API answered its health check."""
    if not health:
        return dbc.Badge("API unreachable", color="danger", className="ms-2")

    status = health.get("status", "unknown")
    color = "success" if status == "ok" else "warning"
    return dbc.Badge(f"API {status}", color=color, className="ms-2")
