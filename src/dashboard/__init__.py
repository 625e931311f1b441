"""
Orchestrator Dashboard

Browser dashboard for the state of a container orchestration cluster.

Usage:
    python -m dashboard.app

Dashboard will be available at http://localhost:8050
"""

__version__ = "0.1.0"
