"""
Orchestrator Dashboard

Browser dashboard for nodes, containers, deployments and services of a
container orchestration cluster. Built with Dash and dash-bootstrap-components.

Usage:
    python -m dashboard.app
    # or
    orchestrator-dashboard

Dashboard will be available at http://localhost:8050
"""

import logging

import dash
from dash import dcc, html, Input, Output, callback
import dash_bootstrap_components as dbc

from dashboard.components.navbar import create_navbar
from dashboard.config import (
    DASHBOARD_DEBUG,
    DASHBOARD_HOST,
    DASHBOARD_PORT,
    LOG_LEVEL,
    ORCHESTRATOR_URL,
    RESOURCE_KINDS,
)
from dashboard.pages import overview, resources

logger = logging.getLogger(__name__)

# Initialize the Dash app with Bootstrap dark theme
app = dash.Dash(
    __name__,
    external_stylesheets=[
        dbc.themes.DARKLY,
        "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css",
    ],
    suppress_callback_exceptions=True,
    title="Container Orchestrator",
    update_title="Loading...",
    meta_tags=[
        {"name": "viewport", "content": "width=device-width, initial-scale=1"},
        {"name": "description", "content": "Kubernetes-style container orchestrator management dashboard"},
    ],
)

app.layout = html.Div(
    [
        # URL routing
        dcc.Location(id="url", refresh=False),

        # Sidebar
        create_navbar(),

        # Page content
        html.Main(id="page-content", className="flex-grow-1 p-4"),
    ],
    className="d-flex min-vh-100",
)


def not_found(pathname):
    return dbc.Container(
        [
            html.H1("404 - Page Not Found", className="text-danger"),
            html.Hr(),
            html.P(f"The page '{pathname}' does not exist."),
            dbc.Button(
                "Go to Overview",
                href="/",
                color="primary",
            ),
        ],
        className="py-5 text-center",
    )


@callback(
    Output("page-content", "children"),
    Input("url", "pathname"),
)
def display_page(pathname):
    """Route to the appropriate page based on URL pathname."""
    if pathname in (None, "/", "/overview"):
        return overview.create_layout()

    kind = pathname.strip("/")
    if kind in RESOURCE_KINDS:
        return resources.create_layout(kind)
    return not_found(pathname)


# Server instance for deployment
server = app.server


def main():
    """Run the dashboard server."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting dashboard on http://{DASHBOARD_HOST}:{DASHBOARD_PORT}")
    logger.info(f"Orchestrator API: {ORCHESTRATOR_URL}")

    app.run(
        debug=DASHBOARD_DEBUG,
        host=DASHBOARD_HOST,
        port=DASHBOARD_PORT,
    )


if __name__ == "__main__":
    main()
