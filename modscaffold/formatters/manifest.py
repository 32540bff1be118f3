"""Serializer for JSON manifests (``fabric.mod.json``, mixin configs, ``pack.mcmeta``)."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .document import Document, to_document, to_python


def serialize(data: Mapping[str, Any] | Document) -> str:
    """Serialize a document as 2-space indented JSON, preserving key order.

    Plain mappings go through :func:`to_document` first so the same
    homogeneity rules apply as for the TOML serializer.
    """
    document = to_document(data)
    return json.dumps(to_python(document), indent=2, ensure_ascii=False) + "\n"
