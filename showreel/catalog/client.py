"""Catalog JSON API adapter (show lookups and per-episode torrent lists)."""

from __future__ import annotations

import asyncio
import time
from typing import Any, Optional
from urllib.parse import quote, urljoin

import aiohttp

from showreel import logger
from showreel.__version__ import __version__
from showreel.catalog.parsers import parse_show, parse_torrents
from showreel.catalog.resilience import RETRYABLE_HTTP_STATUSES, retry_delay_seconds
from showreel.config import CatalogConfig
from showreel.models import Show, TorrentCandidate
from showreel.protocols import CatalogResolver

DEFAULT_USER_AGENT = f"Showreel/{__version__}"
SERVICE_NAME = "Catalog"


class CatalogServiceAdapter(CatalogResolver):
    """Async client for the catalog service; lookups resolve to None on any failure."""

    def __init__(self, catalog: CatalogConfig):
        if not catalog.url:
            raise ValueError("Catalog URL is required.")

        self.catalog = catalog
        self.timeout = catalog.timeout
        self.max_retries = catalog.max_retries
        self.base_url = catalog.url.rstrip("/") + "/"
        self._session: aiohttp.ClientSession | None = None
        self._session_lock = asyncio.Lock()

    async def resolve_show_by_id(self, show_id: str) -> Optional[Show]:
        url = urljoin(self.base_url, f"shows/{quote(show_id, safe='')}")
        try:
            payload = await self._request(url)
            return parse_show(payload, show_id)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            logger.warning(f"Show lookup for {show_id} failed: {exc}")
            return None

    async def resolve_torrents_for_episode(self, locator: str) -> Optional[list[TorrentCandidate]]:
        if not locator:
            logger.warning("Episode has no torrent locator")
            return None
        url = self.locator_url(locator)
        try:
            payload = await self._request(url)
            return parse_torrents(payload)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            logger.warning(f"Torrent lookup for {locator} failed: {exc}")
            return None

    def locator_url(self, locator: str) -> str:
        """Absolute locators are used as-is; relative ones hang off the catalog base URL."""
        if locator.startswith("http://") or locator.startswith("https://"):
            return locator
        return urljoin(self.base_url, locator.lstrip("/"))

    async def _request(self, url: str) -> Any:
        log = logger.get_logger()
        log.api_request("GET", url)
        request_start = time.time()
        session = await self._ensure_session()

        for attempt in range(self.max_retries):
            try:
                async with session.get(url) as response:
                    if response.status == 404:
                        log.api_response(response.status, None, (time.time() - request_start) * 1000)
                        return None
                    if response.status >= 400:
                        text = await response.text()
                        exc = aiohttp.ClientResponseError(
                            request_info=response.request_info,
                            history=response.history,
                            status=response.status,
                            message=text,
                            headers=response.headers,
                        )
                        # Retry only transient server failures and explicit throttling.
                        if attempt < self.max_retries - 1 and response.status in RETRYABLE_HTTP_STATUSES:
                            delay = retry_delay_seconds(attempt=attempt, retry_after=response.headers.get("Retry-After"))
                            log.api_retry(SERVICE_NAME, attempt + 1, self.max_retries, delay)
                            await asyncio.sleep(delay)
                            continue
                        raise exc
                    data = await response.json(content_type=None)
                    log.api_response(response.status, data, (time.time() - request_start) * 1000)
                    return data
            except (asyncio.TimeoutError, aiohttp.ClientConnectionError, aiohttp.ServerTimeoutError):
                if attempt < self.max_retries - 1:
                    delay = 2 ** (attempt + 1)
                    log.api_retry(SERVICE_NAME, attempt + 1, self.max_retries, delay)
                    await asyncio.sleep(delay)
                else:
                    log.api_failed(SERVICE_NAME, self.max_retries)
                    raise
        raise RuntimeError("Unreachable retry exit")

    async def _ensure_session(self) -> aiohttp.ClientSession:
        session = self._session
        if session is not None and not session.closed:
            return session

        async with self._session_lock:
            session = self._session
            if session is None or session.closed:
                timeout = aiohttp.ClientTimeout(total=self.timeout)
                self._session = aiohttp.ClientSession(
                    headers=self._get_headers(),
                    timeout=timeout,
                )
            return self._session

    def _get_headers(self) -> dict[str, str]:
        headers = {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"}
        key = (self.catalog.api_key or "").strip()
        if key:
            headers["Authorization"] = key if key.lower().startswith("bearer ") else f"Bearer {key}"
        return headers

    async def close(self) -> None:
        """Close any open connections."""
        async with self._session_lock:
            session = self._session
            self._session = None
        if session is not None and not session.closed:
            await session.close()

    async def __aenter__(self) -> "CatalogServiceAdapter":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
