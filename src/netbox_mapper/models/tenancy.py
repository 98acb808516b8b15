"""Tenancy kinds."""

from __future__ import annotations

from netbox_mapper.mapper.fields import ResourceSchema, foreign_key, read_only, required
from netbox_mapper.models.common import METADATA, NAME_OR_SLUG, trailer

TENANT = ResourceSchema(
    kind="tenant",
    title="Tenant",
    path="/tenancy/tenants/",
    fields=(
        required("name"),
        required("slug"),
        foreign_key("group"),
        *trailer(),
        *METADATA,
    ),
    lookup=NAME_OR_SLUG,
)

TENANT_GROUP = ResourceSchema(
    kind="tenant-group",
    title="TenantGroup",
    path="/tenancy/tenant-groups/",
    fields=(
        required("name"),
        required("slug"),
        foreign_key("parent"),
        *trailer(),
        *METADATA,
        read_only("tenant_count"),
        read_only("_depth"),
    ),
    lookup=NAME_OR_SLUG,
)
