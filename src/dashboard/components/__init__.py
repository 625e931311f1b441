"""
Reusable dashboard components.
"""

from .navbar import create_navbar
from .stat_cards import create_health_badge, create_stat_card, create_stat_row
from .tables import create_resource_table

__all__ = [
    "create_navbar",
    "create_health_badge",
    "create_stat_card",
    "create_stat_row",
    "create_resource_table",
]
