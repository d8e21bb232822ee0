from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

import httpx

from ..config.loader import (
    DocumentParseError,
    DocumentReadError,
    ensure_mapping,
    load_mapping_file,
    parse_json,
)

_LOGGER = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 20.0
_REMOTE_SCHEMES = ("http://", "https://")
_shared_client: httpx.AsyncClient | None = None
_shared_client_lock: asyncio.Lock | None = None


def _create_client(*, timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True)


async def _get_shared_client() -> httpx.AsyncClient:
    global _shared_client, _shared_client_lock
    if _shared_client is not None:
        return _shared_client

    if _shared_client_lock is None:
        _shared_client_lock = asyncio.Lock()

    async with _shared_client_lock:
        if _shared_client is None:
            _shared_client = _create_client(timeout=_DEFAULT_TIMEOUT)

    assert _shared_client is not None
    return _shared_client


@asynccontextmanager
async def _resolve_client(
    client: httpx.AsyncClient | None,
) -> AsyncIterator[httpx.AsyncClient]:
    if client is not None:
        yield client
        return

    yield await _get_shared_client()


async def _reset_shared_client() -> None:
    global _shared_client, _shared_client_lock
    if _shared_client is not None:
        await _shared_client.aclose()
    _shared_client = None
    _shared_client_lock = None


def is_remote(source: str) -> bool:
    return source.lower().startswith(_REMOTE_SCHEMES)


async def fetch_json_document(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> Any:
    try:
        async with _resolve_client(client) as resolved:
            response = await resolved.get(url)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        # InvalidURL is not an HTTPError subclass
        _LOGGER.warning("Failed to load document from %s: %s", url, exc)
        raise DocumentReadError(url, f"Failed to fetch document ({exc})") from exc

    try:
        return parse_json(response.content, source=url)
    except DocumentParseError as exc:
        _LOGGER.warning("Failed to load document from %s: %s", url, exc)
        raise


async def fetch_mapping(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> Dict[str, Any]:
    document = await fetch_json_document(url, client=client)
    return ensure_mapping(document, source=url)


async def load_mapping(
    source: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> Dict[str, Any]:
    """Load a mapping from an http(s) URL or a local JSON file."""

    if is_remote(source):
        return await fetch_mapping(source, client=client)
    return load_mapping_file(source)


__all__ = ["fetch_json_document", "fetch_mapping", "is_remote", "load_mapping"]
