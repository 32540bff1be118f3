"""Serializer for the TOML-like config language used by ``mods.toml``.

Only the subset the generators need is produced:

* ``key = "value"`` / ``key = true`` / ``key = 3`` for scalars
* ``key = [a, b]`` for scalar sequences
* ``[[qualified.key]]`` blocks for table arrays
* ``[qualified.key]`` sections for nested documents (omitted when empty)

Strings are wrapped in double quotes verbatim and keys are emitted exactly as
given, so a key that needs quoting (``dependencies."${project_id}"``) must be
quoted by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .document import (
    Document,
    DocumentSequence,
    Scalar,
    ScalarSequence,
    ScalarValue,
    to_document,
)


def serialize(data: Mapping[str, Any] | Document) -> str:
    """Serialize a document into config-language text.

    The output is trimmed and ends with exactly one newline.

    Raises:
        FormatError: If *data* is a plain mapping containing a mixed
            sequence or an unsupported value.
    """
    document = to_document(data)
    return _serialize(document, ()).lstrip("\n")


def _serialize(document: Document, parents: tuple[str, ...]) -> str:
    result = ""
    for key, value in document.entries:
        qualified = ".".join((*parents, key))
        if isinstance(value, DocumentSequence):
            # Table-array bodies restart at the top level.
            for item in value.items:
                result += f"[[{qualified}]]\n{_serialize(item, ())}\n"
        elif isinstance(value, ScalarSequence):
            items = ", ".join(format_scalar(item) for item in value.items)
            result += f"{key} = [{items}]\n"
        elif isinstance(value, Document):
            if value:
                result += f"\n[{qualified}]\n{_serialize(value, (*parents, key))}"
        else:
            result += f"{key} = {format_scalar(value.value)}\n"
    return result.rstrip() + "\n"


def format_scalar(value: Scalar | ScalarValue) -> str:
    """Render a scalar the way it appears on the right of ``=``."""
    if isinstance(value, ScalarValue):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)
