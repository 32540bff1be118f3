"""Structured documents consumed by the TOML and manifest serializers.

A document is an ordered set of ``key -> value`` entries where each value is
one of four explicit variants:

* :class:`ScalarValue` -- a string, boolean or number
* :class:`ScalarSequence` -- an ordered list of scalars
* :class:`DocumentSequence` -- an ordered list of sub-documents (a table array)
* :class:`Document` -- a nested document

Generators normally write plain ``dict``/``list`` literals and convert them
with :func:`to_document`, which is the only place that inspects Python
types.  Mixed sequences (scalars next to mappings) are rejected there with a
:class:`~modscaffold.errors.FormatError` instead of being coerced.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from modscaffold.errors import FormatError

Scalar = Union[str, bool, int, float]

_SCALAR_TYPES = (str, bool, int, float)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALAR_TYPES)


@dataclass(frozen=True)
class ScalarValue:
    """A single string, boolean or number."""

    value: Scalar

    def __post_init__(self) -> None:
        if not _is_scalar(self.value):
            raise FormatError(f"Not a scalar: {self.value!r}")


@dataclass(frozen=True)
class ScalarSequence:
    """An ordered list of scalars (``key = [a, b]`` in TOML)."""

    items: tuple[Scalar, ...] = ()

    def __post_init__(self) -> None:
        for item in self.items:
            if not _is_scalar(item):
                raise FormatError(
                    f"Scalar sequence contains a non-scalar item: {item!r}"
                )


@dataclass(frozen=True)
class DocumentSequence:
    """An ordered list of documents (``[[key]]`` table arrays in TOML)."""

    items: tuple["Document", ...] = ()

    def __post_init__(self) -> None:
        for item in self.items:
            if not isinstance(item, Document):
                raise FormatError(
                    f"Document sequence contains a non-document item: {item!r}"
                )


Value = Union[ScalarValue, ScalarSequence, DocumentSequence, "Document"]


@dataclass(frozen=True)
class Document:
    """An ordered mapping of string keys to :data:`Value` variants."""

    entries: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for key, value in self.entries:
            if not isinstance(key, str):
                raise FormatError(f"Document keys must be strings, got {key!r}")
            if key in seen:
                raise FormatError(f"Duplicate document key '{key}'")
            seen.add(key)
            if not isinstance(
                value, (ScalarValue, ScalarSequence, DocumentSequence, Document)
            ):
                raise FormatError(
                    f"Value for '{key}' is not a document variant: {value!r}"
                )

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def get(self, key: str) -> Value | None:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None


def to_document(data: Mapping[str, Any] | Document) -> Document:
    """Convert a plain mapping (dicts, lists, scalars) into a :class:`Document`.

    Key order follows the mapping's insertion order.  Empty lists become an
    empty :class:`ScalarSequence`.

    Raises:
        FormatError: If a list mixes scalars and mappings, or a value has an
            unsupported type (``None``, sets, arbitrary objects).
    """
    if isinstance(data, Document):
        return data
    if not isinstance(data, Mapping):
        raise FormatError(f"Expected a mapping, got {type(data).__name__}")
    return Document(
        tuple((key, _to_value(key, value)) for key, value in data.items())
    )


def _to_value(key: str, value: Any) -> Value:
    if isinstance(value, (ScalarValue, ScalarSequence, DocumentSequence, Document)):
        return value
    if _is_scalar(value):
        return ScalarValue(value)
    if isinstance(value, Mapping):
        return to_document(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        items = list(value)
        if all(_is_scalar(item) for item in items):
            return ScalarSequence(tuple(items))
        if all(isinstance(item, (Mapping, Document)) for item in items):
            return DocumentSequence(tuple(to_document(item) for item in items))
        raise FormatError(
            f"Sequence for '{key}' mixes scalars and tables; "
            "sequences must be homogeneous"
        )
    raise FormatError(
        f"Unsupported value for '{key}': {type(value).__name__}"
    )


def to_python(document: Document) -> dict[str, Any]:
    """Convert a :class:`Document` back into plain ``dict``/``list`` data."""
    result: dict[str, Any] = {}
    for key, value in document.entries:
        if isinstance(value, ScalarValue):
            result[key] = value.value
        elif isinstance(value, ScalarSequence):
            result[key] = list(value.items)
        elif isinstance(value, DocumentSequence):
            result[key] = [to_python(item) for item in value.items]
        else:
            result[key] = to_python(value)
    return result
