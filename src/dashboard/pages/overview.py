"""
Overview page - Cluster-wide resource counts.
"""

from dash import dcc, html, callback, Input, Output

from dashboard.components.stat_cards import create_health_badge, create_stat_row
from dashboard.config import OVERVIEW_REFRESH_INTERVAL, RESOURCE_ICONS, RESOURCE_KINDS
from dashboard.data import get_cluster_summary, get_health
from dashboard.utils.formatting import format_count

NOT_CONNECTED_NOTE = "Dashboard will be populated once the API is connected."


def create_layout():
    """Create the overview page layout."""
    return html.Div(
        [
            # Page header
            html.Div(
                [
                    html.H2("Cluster Overview", className="fw-bold mb-0"),
                    html.Span(id="overview-health"),
                ],
                className="d-flex align-items-center mb-4",
            ),

            # Stat cards
            html.Div(id="overview-stats", children=render_stats({})),

            html.P(id="overview-note", className="mt-4 small text-muted"),

            dcc.Interval(
                id="overview-refresh",
                interval=OVERVIEW_REFRESH_INTERVAL,
                n_intervals=0,
            ),
        ]
    )


def render_stats(summary):
    """Render one stat card per resource kind; missing totals show a placeholder."""
    return create_stat_row(
        [
            {
                "label": label,
                "value": format_count(summary.get(kind)),
                "icon": RESOURCE_ICONS[kind],
            }
            for kind, label in RESOURCE_KINDS.items()
        ]
    )


@callback(
    Output("overview-stats", "children"),
    Output("overview-note", "children"),
    Input("overview-refresh", "n_intervals"),
)
def update_stats(_):
    """Update stat cards."""
    summary = get_cluster_summary()
    connected = any(total is not None for total in summary.values())
    return render_stats(summary), None if connected else NOT_CONNECTED_NOTE


@callback(
    Output("overview-health", "children"),
    Input("overview-refresh", "n_intervals"),
)
def update_health(_):
    return create_health_badge(get_health())
