"""
Resource pages - One listing per resource kind (nodes, containers, ...).
"""

import dash_bootstrap_components as dbc
from dash import dcc, html, callback, Input, Output, State

from dashboard.components.tables import create_resource_table
from dashboard.config import OVERVIEW_REFRESH_INTERVAL, RESOURCE_ICONS, RESOURCE_KINDS
from dashboard.data import list_resources
from dashboard.utils.formatting import format_count

PAGE_SIZE = 50


def create_layout(kind: str):
    """Create the listing layout for one resource kind."""
    return html.Div(
        [
            html.H2(
                [
                    html.I(className=f"{RESOURCE_ICONS[kind]} me-2"),
                    RESOURCE_KINDS[kind],
                ],
                className="fw-bold mb-4",
            ),
            dcc.Store(id="resource-kind", data=kind),
            dbc.Card(
                [
                    dbc.CardHeader(id="resource-summary"),
                    dbc.CardBody(html.Div(id="resource-table")),
                ],
            ),
            dcc.Interval(
                id="resource-refresh",
                interval=OVERVIEW_REFRESH_INTERVAL,
                n_intervals=0,
            ),
        ]
    )


def render_listing(kind: str, result):
    """Render the card header and body for a page of resources."""
    label = RESOURCE_KINDS[kind]
    if result is None:
        return (
            label,
            dbc.Alert(
                f"{label} are unavailable. Check that the orchestrator API is reachable.",
                color="warning",
                className="mb-0",
            ),
        )

    summary = f"{label} - showing {len(result.items)} of {format_count(result.total)}"
    return summary, create_resource_table(result.items)


@callback(
    Output("resource-summary", "children"),
    Output("resource-table", "children"),
    Input("resource-refresh", "n_intervals"),
    State("resource-kind", "data"),
)
def update_listing(_, kind):
    """Update resource table."""
    return render_listing(kind, list_resources(kind, per_page=PAGE_SIZE))
