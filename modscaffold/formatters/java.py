"""Java source builder for generated class and interface stubs.

The builder works on a :class:`ClassSpec` description rather than a
structured document.  Output layout::

    package <package>;

    import <import>;            (input order, duplicates kept)

    @<Annotation>
    public <kind> <Name> [extends X] [implements A, B] {
        <fields>

        <methods, blank line between each>
    }

Sections with no entries (imports, fields, methods) are left out entirely.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modscaffold.errors import FormatError

_INDENT = "    "


class FieldSpec(BaseModel):
    """A field declaration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: str
    access_modifier: str = ""
    static_final: bool = False
    initial_value: str | None = None


class MethodSpec(BaseModel):
    """A method (or constructor, when ``return_type`` is ``None``)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    access_modifier: str = ""
    return_type: str | None = "void"
    parameters: list[str] = Field(default_factory=list)
    exceptions: list[str] = Field(default_factory=list)
    annotations: list[str] = Field(default_factory=list)
    body_lines: list[str] = Field(default_factory=list)


class ClassSpec(BaseModel):
    """Description of one Java type to generate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    package: str = ""
    kind: Literal["class", "interface"] = "class"
    superclass: str | None = None
    interfaces: list[str] = Field(default_factory=list)
    imports: list[str] = Field(default_factory=list)
    fields: list[FieldSpec] = Field(default_factory=list)
    methods: list[MethodSpec] = Field(default_factory=list)
    annotations: list[str] = Field(default_factory=list)


def serialize(spec: ClassSpec | Mapping[str, Any]) -> str:
    """Render a class description as Java source.

    Raises:
        FormatError: If a mapping does not describe a valid ``ClassSpec``
            (for example a ``fields`` list mixing field records and strings).
    """
    if not isinstance(spec, ClassSpec):
        try:
            spec = ClassSpec.model_validate(spec)
        except ValidationError as exc:
            raise FormatError(f"Invalid class description: {exc}") from exc

    sections: list[str] = []
    if spec.package:
        sections.append(f"package {spec.package};")
    if spec.imports:
        sections.append("\n".join(f"import {name};" for name in spec.imports))

    body: list[str] = [_declaration(spec)]
    members: list[str] = []
    if spec.fields:
        members.append("\n".join(_field(f) for f in spec.fields))
    if spec.methods:
        members.append("\n\n".join(_method(m) for m in spec.methods))
    if members:
        body.append("\n\n".join(members))
    body.append("}")
    sections.append("\n".join(body))

    return "\n\n".join(sections) + "\n"


def _declaration(spec: ClassSpec) -> str:
    lines = [f"@{annotation}" for annotation in spec.annotations]
    header = f"public {spec.kind} {spec.name}"
    if spec.superclass:
        header += f" extends {spec.superclass}"
    if spec.interfaces:
        keyword = "extends" if spec.kind == "interface" else "implements"
        header += f" {keyword} {', '.join(spec.interfaces)}"
    lines.append(f"{header} {{")
    return "\n".join(lines)


def _field(field: FieldSpec) -> str:
    parts = []
    if field.access_modifier:
        parts.append(field.access_modifier)
    if field.static_final:
        parts.append("static final")
    parts.extend([field.type, field.name])
    declaration = " ".join(parts)
    if field.initial_value is not None:
        declaration += f" = {field.initial_value}"
    return f"{_INDENT}{declaration};"


def _method(method: MethodSpec) -> str:
    lines = [f"{_INDENT}@{annotation}" for annotation in method.annotations]

    parts = []
    if method.access_modifier:
        parts.append(method.access_modifier)
    if method.return_type:
        parts.append(method.return_type)
    parts.append(f"{method.name}({', '.join(method.parameters)})")
    signature = " ".join(parts)
    if method.exceptions:
        signature += f" throws {', '.join(method.exceptions)}"

    lines.append(f"{_INDENT}{signature} {{")
    lines.extend(f"{_INDENT * 2}{line}" for line in method.body_lines)
    lines.append(f"{_INDENT}}}")
    return "\n".join(lines)
