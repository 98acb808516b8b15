"""Declarative field schema for resource kinds."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class FieldRole(str, Enum):
    """How a field participates in writes."""

    REQUIRED = "required-on-create"
    OPTIONAL = "optional-writable"
    READ_ONLY = "read-only"


class FieldKind(str, Enum):
    """How a field's wire value is reduced to its local value."""

    SCALAR = "scalar"
    FOREIGN_KEY = "foreign-key"
    ENUM = "enum-object"
    FOREIGN_KEY_LIST = "list-of-foreign-key"
    JSON = "opaque-json"


class FieldSpec(BaseModel):
    """One field of a resource schema."""

    model_config = ConfigDict(frozen=True)

    name: str
    role: FieldRole = FieldRole.OPTIONAL
    kind: FieldKind = FieldKind.SCALAR
    default: Any = None
    expand: bool = False

    @model_validator(mode="after")
    def _expand_needs_foreign_key(self) -> FieldSpec:
        if self.expand and self.kind is not FieldKind.FOREIGN_KEY:
            raise ValueError(f"Field '{self.name}': only foreign keys can be expanded")
        return self

    @property
    def writable(self) -> bool:
        return self.role is not FieldRole.READ_ONLY

    @property
    def required(self) -> bool:
        return self.role is FieldRole.REQUIRED


class LookupKey(BaseModel):
    """A natural-key field usable to find a resource without its id.

    ``param`` is the query parameter name (defaults to the field name).
    ``id_param`` replaces it when the local value is a numeric identifier,
    e.g. ``device`` filters by name while ``device_id`` filters by id.
    A ``scope`` key only narrows a lookup and never identifies on its own.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    param: str | None = None
    id_param: str | None = None
    scope: bool = False

    def query_param(self, value: Any) -> str:
        if self.id_param and str(value).isdigit():
            return self.id_param
        return self.param or self.field


class ResourceSchema(BaseModel):
    """Static description of one resource kind.

    ``lookup_requires_all`` makes every non-scope lookup key mandatory for a
    natural-key load (interfaces need both the parent and the name).
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    title: str
    path: str
    fields: tuple[FieldSpec, ...]
    lookup: tuple[LookupKey, ...] = ()
    lookup_requires_all: bool = False

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        parts = v.strip("/").split("/")
        if not (v.startswith("/") and v.endswith("/")) or len(parts) != 2 or not all(parts):
            raise ValueError(f"Collection path must look like /<app>/<resource>/, got {v!r}")
        return v

    @model_validator(mode="after")
    def _check_fields(self) -> ResourceSchema:
        names = [f.name for f in self.fields]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"{self.title}: duplicate fields {dupes}")
        if "id" in names:
            raise ValueError(f"{self.title}: 'id' is the identifier, not a field")
        by_name = {f.name: f for f in self.fields}
        for key in self.lookup:
            spec = by_name.get(key.field)
            if spec is None or not spec.writable:
                raise ValueError(
                    f"{self.title}: lookup key '{key.field}' is not a writable field"
                )
        return self

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def has_field(self, name: str) -> bool:
        return any(spec.name == name for spec in self.fields)

    @property
    def required_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.required)

    @property
    def writable_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.writable)

    @property
    def read_only_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if not f.writable)

    @property
    def lookup_fields(self) -> tuple[str, ...]:
        return tuple(key.field for key in self.lookup)

    def item_path(self, identifier: str) -> str:
        return f"{self.path}{identifier}/"


# Builders for compact per-kind tables.

def required(name: str, kind: FieldKind = FieldKind.SCALAR, default: Any = None) -> FieldSpec:
    return FieldSpec(name=name, role=FieldRole.REQUIRED, kind=kind, default=default)


def optional(name: str, kind: FieldKind = FieldKind.SCALAR, default: Any = None) -> FieldSpec:
    return FieldSpec(name=name, role=FieldRole.OPTIONAL, kind=kind, default=default)


def read_only(name: str, kind: FieldKind = FieldKind.SCALAR, default: Any = None) -> FieldSpec:
    return FieldSpec(name=name, role=FieldRole.READ_ONLY, kind=kind, default=default)


def foreign_key(name: str, *, is_required: bool = False, expand: bool = False) -> FieldSpec:
    role = FieldRole.REQUIRED if is_required else FieldRole.OPTIONAL
    return FieldSpec(name=name, role=role, kind=FieldKind.FOREIGN_KEY, expand=expand)


def choice(name: str, default: Any = None, *, is_required: bool = False) -> FieldSpec:
    role = FieldRole.REQUIRED if is_required else FieldRole.OPTIONAL
    return FieldSpec(name=name, role=role, kind=FieldKind.ENUM, default=default)


def foreign_key_list(name: str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.FOREIGN_KEY_LIST, default=[])


def json_field(name: str, default: Any = None) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.JSON, default=default)
