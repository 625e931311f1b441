"""
API queries for the dashboard.

Wraps the async client in synchronous helpers for Dash callbacks. Helpers
return None when the API cannot provide the data; the pages render
placeholders in that case.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, Optional

import httpx

from dashboard.config import ORCHESTRATOR_API_KEY, ORCHESTRATOR_URL, RESOURCE_KINDS
from dashboard.data.api import fetch_api
from dashboard.data.schemas import HealthResponse, PaginatedResponse
from dashboard.exceptions import APIClientError

logger = logging.getLogger(__name__)

# Served at the server root, outside the /api/v1 route group
HEALTH_PATH = "/healthz"


def open_client() -> httpx.AsyncClient:
    """Client pointed at the orchestrator origin."""
    return httpx.AsyncClient(base_url=ORCHESTRATOR_URL)


def _auth_headers() -> Dict[str, str]:
    if ORCHESTRATOR_API_KEY:
        return {"X-API-Key": ORCHESTRATOR_API_KEY}
    return {}


async def _query(
    client: httpx.AsyncClient,
    path: str,
    decoder: Optional[Callable[[Any], Any]] = None,
    **options: Any,
) -> Optional[Any]:
    try:
        return await fetch_api(path, headers=_auth_headers(), client=client, decoder=decoder, **options)
    except APIClientError as e:
        logger.warning(f"API query failed for {path}: [{e.code}] {e}")
    except httpx.HTTPError as e:
        logger.warning(f"API unreachable for {path}: {e}")
    except ValueError as e:
        # Undecodable JSON or a payload that does not fit the expected model
        logger.warning(f"Unexpected API payload for {path}: {e}")
    return None


def run_query(
    path: str,
    decoder: Optional[Callable[[Any], Any]] = None,
    **options: Any,
) -> Optional[Any]:
    """Run one API request synchronously; return None on error."""

    async def _run():
        async with open_client() as client:
            return await _query(client, path, decoder, **options)

    return asyncio.run(_run())


def _check_kind(kind: str) -> None:
    if kind not in RESOURCE_KINDS:
        raise ValueError(f"Unknown resource kind {kind!r}; expected one of {', '.join(RESOURCE_KINDS)}")


def _page_options(page: int, per_page: int) -> Dict[str, Any]:
    return {
        "decoder": PaginatedResponse.model_validate,
        "params": {"page": page, "per_page": per_page},
    }


# ============================================================================
# Health
# ============================================================================

async def _fetch_health() -> Optional[Dict[str, Any]]:
    async with open_client() as client:
        try:
            resp = await client.get(HEALTH_PATH)
            resp.raise_for_status()
            return HealthResponse.model_validate(resp.json()).model_dump()
        except httpx.HTTPError as e:
            logger.warning(f"Health check failed: {e}")
        except ValueError as e:
            logger.warning(f"Unexpected health payload: {e}")
    return None


def get_health() -> Optional[Dict[str, Any]]:
    """Get the API health status."""
    return asyncio.run(_fetch_health())


# ============================================================================
# Resource Queries
# ============================================================================

def list_resources(
    kind: str,
    page: int = 1,
    per_page: int = 50,
) -> Optional[PaginatedResponse]:
    """Get one page of resources of the given kind."""
    _check_kind(kind)
    return run_query(f"/{kind}", **_page_options(page, per_page))


def get_resource_total(kind: str) -> Optional[int]:
    """Get the total number of resources of the given kind."""
    result = list_resources(kind, page=1, per_page=1)
    return result.total if result is not None else None


async def _fetch_summary() -> Dict[str, Optional[int]]:
    async with open_client() as client:
        pages = await asyncio.gather(
            *(_query(client, f"/{kind}", **_page_options(1, 1)) for kind in RESOURCE_KINDS)
        )
    return {
        kind: page.total if page is not None else None
        for kind, page in zip(RESOURCE_KINDS, pages)
    }


def get_cluster_summary() -> Dict[str, Optional[int]]:
    """Get resource totals for every kind shown on the overview, fetched concurrently."""
    return asyncio.run(_fetch_summary())
