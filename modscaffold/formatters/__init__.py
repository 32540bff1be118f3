"""Serializers turning structured data into TOML, JSON and Java text."""

from modscaffold.formatters import java, manifest, toml
from modscaffold.formatters.document import (
    Document,
    DocumentSequence,
    ScalarSequence,
    ScalarValue,
    to_document,
    to_python,
)
from modscaffold.formatters.java import ClassSpec, FieldSpec, MethodSpec

__all__ = [
    "ClassSpec",
    "Document",
    "DocumentSequence",
    "FieldSpec",
    "MethodSpec",
    "ScalarSequence",
    "ScalarValue",
    "java",
    "manifest",
    "to_document",
    "to_python",
    "toml",
]
