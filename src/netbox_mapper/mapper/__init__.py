"""Schema-driven mapping between NetBox JSON and in-memory resources."""

from netbox_mapper.mapper.fields import (
    FieldKind,
    FieldRole,
    FieldSpec,
    LookupKey,
    ResourceSchema,
)
from netbox_mapper.mapper.resource import Resource, resources

__all__ = [
    "FieldKind",
    "FieldRole",
    "FieldSpec",
    "LookupKey",
    "Resource",
    "ResourceSchema",
    "resources",
]
