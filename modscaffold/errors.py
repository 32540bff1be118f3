"""Exception taxonomy for the scaffolder.

Every failure the core can raise derives from :class:`ScaffoldError` so the
CLI entry point has a single type to catch and report.  Apart from
:class:`MalformedNodeError` (which the archive materializer only logs) all of
these abort the run.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every scaffolder failure."""


class FormatError(ScaffoldError):
    """A document or class description violates a serializer invariant."""


class DuplicatePathError(FormatError):
    """Two siblings in the same folder share a path."""

    def __init__(self, path: str, parent: str = "") -> None:
        self.path = path
        self.parent = parent
        where = f" in folder '{parent}'" if parent else ""
        super().__init__(f"Duplicate tree path '{path}'{where}")


class UnrecognizedVariantError(ScaffoldError):
    """A variant-selection generator received a value outside its enum."""

    def __init__(self, kind: str, value: object, allowed: list[str]) -> None:
        self.kind = kind
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"{kind} '{value}' not recognized (expected one of: {', '.join(allowed)})"
        )


class FetchError(ScaffoldError):
    """A network collaborator returned a non-success status or failed."""

    def __init__(self, url: str, status: int | None = None, reason: str = "") -> None:
        self.url = url
        self.status = status
        self.reason = reason
        if status is not None:
            message = f"GET {url} returned HTTP {status}"
        else:
            message = f"GET {url} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class LicenseError(ScaffoldError):
    """The requested license id is empty or unknown to the SPDX list."""


class MalformedNodeError(ScaffoldError):
    """A tree entry is neither a file nor a folder.

    Never raised by the materializer; used to format the skip warning.
    """
