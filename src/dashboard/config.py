"""
Dashboard configuration.

Loads settings from environment variables and provides constants
for the dashboard application.

Configuration is managed via `settings.DashboardSettings` (pydantic-settings)
to ensure type safety and a single source of truth.
"""

import logging
from pathlib import Path

from settings import get_dashboard_settings

_settings = get_dashboard_settings()

# Dashboard server settings
DASHBOARD_HOST = _settings.dashboard_host
DASHBOARD_PORT = _settings.dashboard_port
DASHBOARD_DEBUG = _settings.dashboard_debug

# Orchestrator API origin; every request path is appended to API_PREFIX on it
ORCHESTRATOR_URL = _settings.orchestrator_url
API_PREFIX = "/api/v1"
ORCHESTRATOR_API_KEY = (
    _settings.api_key.get_secret_value() if _settings.api_key is not None else None
)

# Logging
LOG_LEVEL = logging.WARNING if _settings.log_level == "warn" else getattr(logging, _settings.log_level.upper())

# Paths
DASHBOARD_ROOT = Path(__file__).parent

# Resource kinds shown in the sidebar, in display order
RESOURCE_KINDS = {
    "nodes": "Nodes",
    "containers": "Containers",
    "deployments": "Deployments",
    "services": "Services",
}

# Icons per resource kind (Font Awesome)
RESOURCE_ICONS = {
    "nodes": "fas fa-server",
    "containers": "fas fa-cube",
    "deployments": "fas fa-layer-group",
    "services": "fas fa-network-wired",
}

# Placeholder shown for any value the API could not provide
PLACEHOLDER = "--"

# Refresh intervals (milliseconds)
OVERVIEW_REFRESH_INTERVAL = int(_settings.overview_refresh_seconds * 1000)
