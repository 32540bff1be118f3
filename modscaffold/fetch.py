"""Async client for the static resources the scaffolder downloads.

Wraps ``httpx.AsyncClient`` with a caller-supplied timeout and retry policy
and exposes three capabilities: ``fetch_text``, ``fetch_bytes`` and
``fetch_json``.  Any non-2xx response becomes a
:class:`~modscaffold.errors.FetchError` carrying the HTTP status.

Reference data that several generators or prompts need (the SPDX license
mapping and the Gradle release list) lives in a :class:`ReferenceCache`
object, memoised on first use, so tests can hand in a pre-filled cache or a
fake fetcher.

Typical usage::

    fetcher = FetchClient(timeout=30, retries=1)
    cache = ReferenceCache(fetcher)
    mapping = await cache.license_mapping()
    text = await fetcher.fetch_text(mapping["MIT"])
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

import httpx

from modscaffold.errors import FetchError

logger = logging.getLogger(__name__)

LICENSE_INDEX_URL = "https://api.github.com/repos/spdx/license-list-data/contents/text"
GRADLE_RELEASES_URL = "https://api.github.com/repos/gradle/gradle/releases"


class Fetcher(Protocol):
    """The capabilities generators rely on; ``FetchClient`` is the real one."""

    async def fetch_text(self, url: str) -> str: ...

    async def fetch_bytes(self, url: str) -> bytes: ...

    async def fetch_json(self, url: str) -> Any: ...


class FetchClient:
    """HTTP GET helper with timeout and transport-error retries."""

    def __init__(self, timeout: float | None = 30.0, retries: int = 0) -> None:
        if retries < 0:
            raise ValueError("retries must be >= 0")
        self.timeout = timeout
        self.retries = retries

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our timeout."""
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
        )

    async def _get(self, url: str) -> httpx.Response:
        """GET *url*, retrying transport errors, and check the status."""
        attempts = self.retries + 1
        for attempt in range(1, attempts + 1):
            logger.debug("GET %s (attempt %d/%d)", url, attempt, attempts)
            try:
                async with self._client() as client:
                    response = await client.get(url)
            except httpx.TransportError as exc:
                if attempt < attempts:
                    logger.warning("GET %s failed (%s), retrying", url, exc)
                    continue
                raise FetchError(url, reason=str(exc) or type(exc).__name__) from exc
            except httpx.HTTPError as exc:
                # Redirect loops, decoding errors: not worth retrying.
                raise FetchError(url, reason=str(exc) or type(exc).__name__) from exc

            if not response.is_success:
                raise FetchError(url, response.status_code, response.reason_phrase)
            return response

        raise FetchError(url, reason="no attempts made")  # pragma: no cover

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def fetch_text(self, url: str) -> str:
        """Download *url* and return the decoded body."""
        response = await self._get(url)
        return response.text

    async def fetch_bytes(self, url: str) -> bytes:
        """Download *url* and return the raw body."""
        response = await self._get(url)
        return response.content

    async def fetch_json(self, url: str) -> Any:
        """Download *url* and parse the body as JSON."""
        response = await self._get(url)
        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(url, response.status_code, f"invalid JSON: {exc}") from exc


class ReferenceCache:
    """Memoised reference data fetched once per process.

    The first call to each lookup hits the network; later calls (including
    concurrent ones) reuse the same result.  Pre-fill the constructor
    arguments to skip the network entirely.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        license_index_url: str = LICENSE_INDEX_URL,
        gradle_releases_url: str = GRADLE_RELEASES_URL,
        licenses: dict[str, str] | None = None,
        gradle_versions: list[str] | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.license_index_url = license_index_url
        self.gradle_releases_url = gradle_releases_url
        self._licenses = licenses
        self._gradle_versions = gradle_versions
        self._lock = asyncio.Lock()

    async def license_mapping(self) -> dict[str, str]:
        """Return ``{spdx_id: download_url}`` for every SPDX license text."""
        async with self._lock:
            if self._licenses is None:
                files = await self.fetcher.fetch_json(self.license_index_url)
                self._licenses = _parse_license_listing(files)
                logger.debug("Cached %d license texts", len(self._licenses))
            return self._licenses

    async def gradle_versions(self) -> list[str]:
        """Return the Gradle release tags, newest first as GitHub lists them."""
        async with self._lock:
            if self._gradle_versions is None:
                releases = await self.fetcher.fetch_json(self.gradle_releases_url)
                self._gradle_versions = [
                    r["tag_name"] for r in releases if isinstance(r, dict) and r.get("tag_name")
                ]
                logger.debug("Cached %d Gradle versions", len(self._gradle_versions))
            return self._gradle_versions


def _parse_license_listing(files: Any) -> dict[str, str]:
    """Map each ``<id>.txt`` entry of a GitHub contents listing to its URL."""
    mapping: dict[str, str] = {}
    if not isinstance(files, list):
        return mapping
    for entry in files:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name", "")
        url = entry.get("download_url")
        if name.endswith(".txt") and url:
            mapping[name[: -len(".txt")]] = url
    return mapping
