"""
Sidebar navigation component for the dashboard.
"""

import dash_bootstrap_components as dbc
from dash import html

from dashboard.config import RESOURCE_ICONS, RESOURCE_KINDS

NAV_ITEMS = [("/", "Overview", "fas fa-home")] + [
    (f"/{kind}", label, RESOURCE_ICONS[kind]) for kind, label in RESOURCE_KINDS.items()
]


def create_navbar() -> html.Aside:
    """Create the sidebar with the brand and one link per page."""
    return html.Aside(
        [
            html.H1("Orchestrator", className="h5 fw-bold mb-4"),
            dbc.Nav(
                [
                    dbc.NavLink(
                        [html.I(className=f"{icon} me-2"), label],
                        href=href,
                        active="exact",
                    )
                    for href, label, icon in NAV_ITEMS
                ],
                vertical=True,
                pills=True,
            ),
        ],
        className="border-end border-secondary bg-dark p-4 min-vh-100",
        style={"width": "16rem"},
    )
