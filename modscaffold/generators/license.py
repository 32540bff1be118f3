"""LICENSE text from the SPDX license list."""

from __future__ import annotations

from datetime import datetime, timezone

from modscaffold.errors import LicenseError
from modscaffold.fetch import Fetcher, ReferenceCache
from modscaffold.parameters import ProjectParameters


async def generate_license(
    params: ProjectParameters,
    fetcher: Fetcher,
    cache: ReferenceCache,
    year: int | None = None,
) -> str:
    """Download the SPDX text for ``project_license`` and fill in the holder.

    ``<year>`` becomes *year* (default: the current UTC year) and
    ``<copyright holders>`` becomes the project author, or
    ``Unknown Author`` when none was given.

    Raises:
        LicenseError: If the license id is empty or not in the SPDX list.
        FetchError: If the listing or the license text cannot be downloaded.
    """
    license_id = params.project_license.strip()
    if not license_id:
        raise LicenseError("License type is required.")

    mapping = await cache.license_mapping()
    url = mapping.get(license_id)
    if not url:
        raise LicenseError(f"Unsupported license type: {license_id}")

    text = await fetcher.fetch_text(url)
    if year is None:
        year = datetime.now(timezone.utc).year
    text = text.replace("<year>", str(year))
    return text.replace("<copyright holders>", params.project_author or "Unknown Author")
