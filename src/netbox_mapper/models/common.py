"""Field groups shared by most kinds, and the list response shape."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from netbox_mapper.mapper.fields import (
    FieldSpec,
    LookupKey,
    foreign_key,
    json_field,
    optional,
    read_only,
)

# Read-only metadata NetBox returns on every object.
METADATA: tuple[FieldSpec, ...] = (
    read_only("url"),
    read_only("display_url"),
    read_only("display"),
    read_only("created"),
    read_only("last_updated"),
)


def trailer(*, comments: bool = True, owner: bool = True) -> tuple[FieldSpec, ...]:
    """description / comments / owner / tags / custom_fields, in that order."""
    specs = [optional("description", default="")]
    if comments:
        specs.append(optional("comments", default=""))
    if owner:
        specs.append(foreign_key("owner"))
    specs += [json_field("tags", default=[]), json_field("custom_fields", default={})]
    return tuple(specs)


NAME_OR_SLUG = (LookupKey(field="name"), LookupKey(field="slug"))
NAME = (LookupKey(field="name"),)


class PaginatedResponse(BaseModel):
    """NetBox list response: ``{"count", "next", "previous", "results"}``."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[dict[str, Any]] = []
