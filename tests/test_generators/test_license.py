"""Unit tests for the LICENSE generator (modscaffold.generators.license)."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from modscaffold.errors import FetchError, LicenseError
from modscaffold.generators.license import generate_license
from modscaffold.parameters import ProjectParameters

pytestmark = pytest.mark.unit


class TestGenerateLicense:
    async def test_fills_year_and_holder(self, params, fake_fetcher, cache):
        text = await generate_license(params, fake_fetcher, cache, year=2031)
        assert "Copyright (c) 2031 Jane Doe" in text
        assert "<year>" not in text
        assert (await cache.license_mapping())["MIT"] in fake_fetcher.calls

    async def test_defaults_to_current_year(self, params, fake_fetcher, cache):
        text = await generate_license(params, fake_fetcher, cache)
        assert str(datetime.now(timezone.utc).year) in text

    async def test_unknown_author(self, fake_fetcher, cache):
        params = ProjectParameters(project_name="Demo")
        text = await generate_license(params, fake_fetcher, cache, year=2025)
        assert "Copyright (c) 2025 Unknown Author" in text

    async def test_other_license(self, fake_fetcher, cache):
        params = ProjectParameters(project_license="Apache-2.0")
        text = await generate_license(params, fake_fetcher, cache)
        assert text.startswith("Apache License")

    async def test_empty_license_raises(self, fake_fetcher, cache):
        params = ProjectParameters(project_license="  ")
        with pytest.raises(LicenseError, match="required"):
            await generate_license(params, fake_fetcher, cache)
        assert fake_fetcher.calls == []

    async def test_unknown_license_raises(self, fake_fetcher, cache):
        params = ProjectParameters(project_license="WTFPL-2")
        with pytest.raises(LicenseError, match="WTFPL-2"):
            await generate_license(params, fake_fetcher, cache)

    async def test_text_fetch_failure_propagates(self, params, fake_fetcher, cache):
        url = (await cache.license_mapping())["MIT"]
        fake_fetcher.responses[url] = FetchError(url, 503, "Service Unavailable")
        with pytest.raises(FetchError) as exc_info:
            await generate_license(params, fake_fetcher, cache)
        assert exc_info.value.status == 503
