"""Ownership kinds (``/users/``)."""

from __future__ import annotations

from netbox_mapper.mapper.fields import (
    ResourceSchema,
    foreign_key,
    foreign_key_list,
    required,
)
from netbox_mapper.models.common import METADATA, NAME, trailer

OWNER_GROUP = ResourceSchema(
    kind="owner-group",
    title="OwnerGroup",
    path="/users/owner-groups/",
    fields=(
        required("name"),
        *trailer(comments=False, owner=False),
        *METADATA,
    ),
    lookup=NAME,
)

OWNER = ResourceSchema(
    kind="owner",
    title="Owner",
    path="/users/owners/",
    fields=(
        required("name"),
        foreign_key("group", is_required=True),
        foreign_key_list("user_groups"),
        foreign_key_list("users"),
        *trailer(comments=False, owner=False),
        *METADATA,
    ),
    lookup=NAME,
)
