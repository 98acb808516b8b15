"""Payload building and response decoding for schema-driven resources.

Write payloads carry every required field and every optional field that is
locally non-empty. Responses are reduced field by field according to the
field kind: enum objects to their ``value``, nested foreign objects to their
stringified ``id``. A writable field missing from a response keeps its local
value; read-only fields and the identifier always follow the response.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from netbox_mapper.mapper.fields import FieldKind, FieldSpec, ResourceSchema


@dataclass
class DecodedState:
    """Complete local state produced from one response object."""

    identifier: str | None
    values: dict[str, Any]
    read_only: dict[str, Any]
    expanded: dict[str, Any] = field(default_factory=dict)


def is_empty(value: Any) -> bool:
    """True for None and for empty strings, lists and mappings."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def extract_id(value: Any) -> str | None:
    """Reduce a foreign-key wire value to a bare string identifier."""
    if value is None or value == "":
        return None
    if isinstance(value, Mapping):
        ident = value.get("id")
        return None if ident is None else str(ident)
    return str(value)


def extract_id_list(value: Any) -> list[str]:
    """Reduce a list of foreign-key wire values; a lone value counts as one."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        value = [value]
    ids = (extract_id(item) for item in value)
    return [ident for ident in ids if ident is not None]


def extract_enum(value: Any, default: Any = None) -> Any:
    """Reduce a ``{value, label}`` object (or a bare scalar) to its value."""
    if isinstance(value, Mapping):
        inner = value.get("value")
        return default if inner is None else inner
    if value is None:
        return default
    return value


def initial_values(schema: ResourceSchema) -> dict[str, Any]:
    """Defaults for every writable field of a fresh instance."""
    return {f.name: copy.deepcopy(f.default) for f in schema.writable_fields}


def initial_read_only(schema: ResourceSchema) -> dict[str, Any]:
    return {f.name: copy.deepcopy(f.default) for f in schema.read_only_fields}


def missing_required(schema: ResourceSchema, values: Mapping[str, Any]) -> list[str]:
    return [f.name for f in schema.required_fields if is_empty(values.get(f.name))]


def build_payload(schema: ResourceSchema, values: Mapping[str, Any]) -> dict[str, Any]:
    """Serialize the writable fields in schema order.

    An optional field that is empty locally is left out, so a value once set
    cannot be cleared back to empty through edit or update.
    """
    payload: dict[str, Any] = {}
    for spec in schema.writable_fields:
        value = values.get(spec.name)
        if spec.required or not is_empty(value):
            payload[spec.name] = copy.deepcopy(value)
    return payload


def decode_value(spec: FieldSpec, raw: Any) -> Any:
    """Reduce one present wire value to its local form."""
    if spec.kind is FieldKind.FOREIGN_KEY:
        return extract_id(raw)
    if spec.kind is FieldKind.FOREIGN_KEY_LIST:
        return extract_id_list(raw)
    if spec.kind is FieldKind.ENUM:
        return extract_enum(raw, spec.default)
    if raw is None:
        return copy.deepcopy(spec.default)
    return copy.deepcopy(raw)


def decode(
    schema: ResourceSchema,
    response: Mapping[str, Any],
    current: Mapping[str, Any],
) -> DecodedState:
    """Compute the full local state for a response object.

    ``current`` holds the writable values before the call; it is never
    mutated, so a failure anywhere leaves the caller's state untouched.
    """
    values = dict(current)
    read_only: dict[str, Any] = {}
    expanded: dict[str, Any] = {}
    for spec in schema.fields:
        present = spec.name in response
        raw = response.get(spec.name)
        if spec.writable:
            if present:
                values[spec.name] = decode_value(spec, raw)
        else:
            read_only[spec.name] = (
                decode_value(spec, raw) if present else copy.deepcopy(spec.default)
            )
        if spec.expand:
            expanded[spec.name] = copy.deepcopy(raw) if isinstance(raw, Mapping) else None
    return DecodedState(
        identifier=extract_id(response.get("id")),
        values=values,
        read_only=read_only,
        expanded=expanded,
    )
