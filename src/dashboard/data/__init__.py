"""
Data layer for the dashboard.

Provides the orchestrator API client and the queries built on it.
"""

from .api import fetch_api
from .queries import (
    get_cluster_summary,
    get_health,
    get_resource_total,
    list_resources,
)

__all__ = [
    "fetch_api",
    "get_cluster_summary",
    "get_health",
    "get_resource_total",
    "list_resources",
]
