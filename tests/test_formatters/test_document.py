"""Unit tests for the structured document model (modscaffold.formatters.document).

Tests cover:
- Variant construction and validation
- to_document conversion of dicts, lists and scalars
- Homogeneity checks for sequences
- to_python conversion back to plain data
"""

from __future__ import annotations

import pytest

from modscaffold.errors import FormatError
from modscaffold.formatters.document import (
    Document,
    DocumentSequence,
    ScalarSequence,
    ScalarValue,
    to_document,
    to_python,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class TestVariants:
    def test_scalar_value_accepts_str_bool_and_numbers(self):
        for value in ("x", True, 3, 1.5):
            assert ScalarValue(value).value == value

    def test_scalar_value_rejects_none(self):
        with pytest.raises(FormatError):
            ScalarValue(None)

    def test_scalar_sequence_rejects_mapping_item(self):
        with pytest.raises(FormatError, match="non-scalar"):
            ScalarSequence(("a", {"b": 1}))

    def test_document_sequence_rejects_scalar_item(self):
        with pytest.raises(FormatError, match="non-document"):
            DocumentSequence((Document(), "x"))

    def test_document_rejects_duplicate_keys(self):
        with pytest.raises(FormatError, match="Duplicate document key 'a'"):
            Document((("a", ScalarValue(1)), ("a", ScalarValue(2))))

    def test_document_rejects_raw_values(self):
        with pytest.raises(FormatError):
            Document((("a", "plain string"),))

    def test_document_accessors(self):
        doc = Document((("a", ScalarValue(1)), ("b", ScalarValue(2))))
        assert len(doc) == 2
        assert doc.keys() == ["a", "b"]
        assert doc.get("b") == ScalarValue(2)
        assert doc.get("missing") is None

    def test_empty_document_is_falsy(self):
        assert not Document()
        assert Document((("a", ScalarValue(1)),))


# ---------------------------------------------------------------------------
# to_document
# ---------------------------------------------------------------------------


class TestToDocument:
    def test_scalars_and_nested(self):
        doc = to_document({"a": "x", "b": [1, 2, 3], "c": {"d": True}})
        assert doc.keys() == ["a", "b", "c"]
        assert doc.get("a") == ScalarValue("x")
        assert doc.get("b") == ScalarSequence((1, 2, 3))
        nested = doc.get("c")
        assert isinstance(nested, Document)
        assert nested.get("d") == ScalarValue(True)

    def test_list_of_mappings_is_table_array(self):
        doc = to_document({"mods": [{"modId": "a"}, {"modId": "b"}]})
        mods = doc.get("mods")
        assert isinstance(mods, DocumentSequence)
        assert [item.get("modId") for item in mods.items] == [
            ScalarValue("a"),
            ScalarValue("b"),
        ]

    def test_empty_list_is_scalar_sequence(self):
        assert to_document({"mixins": []}).get("mixins") == ScalarSequence(())

    def test_mixed_sequence_raises(self):
        with pytest.raises(FormatError, match="homogeneous"):
            to_document({"bad": ["x", {"y": 1}]})

    def test_mixed_sequence_nested_raises(self):
        with pytest.raises(FormatError):
            to_document({"outer": {"inner": [1, {"two": 2}]}})

    def test_none_value_raises(self):
        with pytest.raises(FormatError, match="Unsupported value for 'a'"):
            to_document({"a": None})

    def test_non_mapping_raises(self):
        with pytest.raises(FormatError, match="Expected a mapping"):
            to_document(["a", "b"])

    def test_document_passes_through(self):
        doc = Document((("a", ScalarValue(1)),))
        assert to_document(doc) is doc

    def test_tuple_is_a_sequence(self):
        assert to_document({"t": ("a", "b")}).get("t") == ScalarSequence(("a", "b"))


# ---------------------------------------------------------------------------
# to_python
# ---------------------------------------------------------------------------


class TestToPython:
    def test_restores_plain_data(self):
        data = {
            "required": True,
            "mixins": [],
            "injectors": {"defaultRequire": 1},
            "mods": [{"modId": "demo"}],
        }
        assert to_python(to_document(data)) == data

    def test_preserves_key_order(self):
        data = {"z": 1, "a": 2, "m": 3}
        assert list(to_python(to_document(data))) == ["z", "a", "m"]
