"""
Async API client for the orchestrator backend.

Every call issues exactly one request against `API_PREFIX + path` and either
returns the decoded JSON body or raises `APIClientError`. Network failures and
undecodable success bodies propagate as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, TypeVar, Union

import httpx
from pydantic import ValidationError

from dashboard.config import API_PREFIX, ORCHESTRATOR_URL
from dashboard.data.schemas import APIErrorBody
from dashboard.exceptions import APIClientError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_HEADERS = {"Content-Type": "application/json"}

HeaderTypes = Union[httpx.Headers, Mapping[str, str], Sequence[Tuple[str, str]]]


def build_url(path: str) -> str:
    """Prefix a resource path with the API base. No slash normalization."""
    return f"{API_PREFIX}{path}"


def merge_headers(headers: Optional[HeaderTypes] = None) -> Dict[str, str]:
    """
    Caller headers over the defaults.

    Plain dict keys compare case-sensitively. Any other form httpx accepts
    (httpx.Headers, a list of pairs) is flattened with its keys in their
    original case first.
    """
    if headers is None:
        return dict(DEFAULT_HEADERS)
    if not isinstance(headers, dict):
        parsed = headers if isinstance(headers, httpx.Headers) else httpx.Headers(headers)
        headers = {
            key.decode(parsed.encoding): value.decode(parsed.encoding)
            for key, value in parsed.raw
        }
    return {**DEFAULT_HEADERS, **headers}


def error_from_response(resp: httpx.Response) -> APIClientError:
    """Build the client error for a non-success response."""
    try:
        body = APIErrorBody.model_validate_json(resp.content)
    except ValidationError:
        return APIClientError.unknown(resp.status_code, resp.reason_phrase)
    return APIClientError.from_body(resp.status_code, body)


async def fetch_api(
    path: str,
    *,
    method: str = "GET",
    headers: Optional[HeaderTypes] = None,
    client: Optional[httpx.AsyncClient] = None,
    decoder: Optional[Callable[[Any], T]] = None,
    **options: Any,
) -> T:
    """
    Request `path` from the orchestrator API and return the decoded JSON.

    Args:
        path: Resource path relative to /api/v1, e.g. "/nodes"
        method: HTTP method (default GET)
        headers: Extra headers, merged over Content-Type: application/json
        client: httpx.AsyncClient to send through; a short-lived one pointed at
            ORCHESTRATOR_URL is used when omitted
        decoder: Optional callable applied to the parsed JSON on success
        **options: Passed to `httpx.AsyncClient.request` (json, params, timeout, ...).
            Redirects are followed unless follow_redirects=False is given; a
            3xx that is not followed raises APIClientError

    Raises:
        APIClientError: the response status was not 2xx
        httpx.TransportError: the request never got a response
        json.JSONDecodeError: a 2xx response carried an undecodable body
    """
    if client is None:
        async with httpx.AsyncClient(base_url=ORCHESTRATOR_URL) as own_client:
            return await _send(own_client, path, method, headers, decoder, options)
    return await _send(client, path, method, headers, decoder, options)


async def _send(
    client: httpx.AsyncClient,
    path: str,
    method: str,
    headers: Optional[HeaderTypes],
    decoder: Optional[Callable[[Any], T]],
    options: Dict[str, Any],
) -> T:
    url = build_url(path)
    options.setdefault("follow_redirects", True)
    resp = await client.request(method, url, headers=merge_headers(headers), **options)
    logger.debug(f"{method} {url} -> {resp.status_code}")

    if not resp.is_success:
        error = error_from_response(resp)
        logger.warning(f"API request {method} {url} failed: {error.status} {error.code} {error.message}")
        raise error

    data = resp.json()
    if decoder is not None:
        return decoder(data)
    return data
