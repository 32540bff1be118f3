"""Shared pytest fixtures for the modscaffold test suite.

Provides reusable fixtures for:
- Project parameters for the ``Demo`` project
- A fake network fetcher serving canned license, release and wrapper data
- A reference cache bound to the fake fetcher
- The fully composed forest for the ``Demo`` project
"""

from __future__ import annotations

from typing import Any

import pytest

from modscaffold.composer import ProjectComposer
from modscaffold.errors import FetchError
from modscaffold.fetch import GRADLE_RELEASES_URL, LICENSE_INDEX_URL, ReferenceCache
from modscaffold.generators.gradle import GRADLE_RAW_URL
from modscaffold.parameters import ProjectParameters
from modscaffold.tree import TreeNode

MIT_URL = "https://raw.githubusercontent.com/spdx/license-list-data/main/text/MIT.txt"
APACHE_URL = "https://raw.githubusercontent.com/spdx/license-list-data/main/text/Apache-2.0.txt"

MIT_TEXT = (
    "MIT License\n\n"
    "Copyright (c) <year> <copyright holders>\n\n"
    "Permission is hereby granted, free of charge, to any person obtaining a copy\n"
)

WRAPPER_JAR = b"PK\x03\x04gradle-wrapper"
GRADLEW = b"#!/bin/sh\nexec java -jar gradle/wrapper/gradle-wrapper.jar \"$@\"\n"
GRADLEW_BAT = b"@rem Gradle startup script for Windows\r\n"


# ---------------------------------------------------------------------------
# Fake network collaborator
# ---------------------------------------------------------------------------


class FakeFetcher:
    """In-memory stand-in for :class:`modscaffold.fetch.FetchClient`.

    ``responses`` maps URLs to payloads.  A missing URL answers like a 404;
    an exception stored as a payload is raised.  Every requested URL is
    recorded in ``calls``.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[str] = []

    def _get(self, url: str) -> Any:
        self.calls.append(url)
        if url not in self.responses:
            raise FetchError(url, 404, "Not Found")
        payload = self.responses[url]
        if isinstance(payload, Exception):
            raise payload
        return payload

    async def fetch_text(self, url: str) -> str:
        payload = self._get(url)
        return payload.decode("utf-8") if isinstance(payload, bytes) else payload

    async def fetch_bytes(self, url: str) -> bytes:
        payload = self._get(url)
        return payload.encode("utf-8") if isinstance(payload, str) else payload

    async def fetch_json(self, url: str) -> Any:
        return self._get(url)


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


@pytest.fixture
def params() -> ProjectParameters:
    """Parameters of the ``Demo`` project under ``com.example``."""
    return ProjectParameters(
        project_name="Demo",
        project_id="demo",
        project_group="com.example",
        project_author="Jane Doe",
    )


# ---------------------------------------------------------------------------
# Network fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def fetch_responses(params: ProjectParameters) -> dict[str, Any]:
    """Canned payloads for every URL a full scaffold run requests."""
    wrapper_base = f"{GRADLE_RAW_URL}/{params.gradle_version}"
    return {
        LICENSE_INDEX_URL: [
            {"name": "MIT.txt", "download_url": MIT_URL},
            {"name": "Apache-2.0.txt", "download_url": APACHE_URL},
            {"name": "README.md", "download_url": "https://example.invalid/README.md"},
        ],
        MIT_URL: MIT_TEXT,
        APACHE_URL: "Apache License\nVersion 2.0, January 2004\n",
        GRADLE_RELEASES_URL: [
            {"tag_name": "v8.12.1"},
            {"tag_name": "v8.12.0"},
            {"tag_name": "v8.11.1"},
        ],
        f"{wrapper_base}/gradle/wrapper/gradle-wrapper.jar": WRAPPER_JAR,
        f"{wrapper_base}/gradlew": GRADLEW,
        f"{wrapper_base}/gradlew.bat": GRADLEW_BAT,
    }


@pytest.fixture
def fake_fetcher(fetch_responses: dict[str, Any]) -> FakeFetcher:
    """Fetcher answering from ``fetch_responses``."""
    return FakeFetcher(fetch_responses)


@pytest.fixture
def cache(fake_fetcher: FakeFetcher) -> ReferenceCache:
    """Empty reference cache that fills itself from the fake fetcher."""
    return ReferenceCache(fake_fetcher)


# ---------------------------------------------------------------------------
# Composed project
# ---------------------------------------------------------------------------


@pytest.fixture
async def forest(
    params: ProjectParameters, fake_fetcher: FakeFetcher, cache: ReferenceCache
) -> list[TreeNode]:
    """The complete forest for the ``Demo`` project with all platforms."""
    composer = ProjectComposer(params, fake_fetcher, cache=cache)
    return await composer.compose()
