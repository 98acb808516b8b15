"""Resource schemas for every supported NetBox kind, keyed by kind name."""

from __future__ import annotations

from netbox_mapper.mapper.fields import ResourceSchema
from netbox_mapper.models.common import PaginatedResponse
from netbox_mapper.models.dcim import (
    DEVICE,
    DEVICE_ROLE,
    DEVICE_TYPE,
    INTERFACE,
    MAC_ADDRESS,
    PLATFORM,
    SITE,
)
from netbox_mapper.models.ipam import IP_ADDRESS, PREFIX, VLAN
from netbox_mapper.models.tenancy import TENANT, TENANT_GROUP
from netbox_mapper.models.users import OWNER, OWNER_GROUP
from netbox_mapper.models.virtualization import (
    CLUSTER,
    CLUSTER_GROUP,
    CLUSTER_TYPE,
    VIRTUAL_MACHINE,
    VM_INTERFACE,
)

SCHEMAS: dict[str, ResourceSchema] = {
    schema.kind: schema
    for schema in (
        CLUSTER,
        CLUSTER_GROUP,
        CLUSTER_TYPE,
        DEVICE,
        DEVICE_ROLE,
        DEVICE_TYPE,
        INTERFACE,
        IP_ADDRESS,
        MAC_ADDRESS,
        OWNER,
        OWNER_GROUP,
        PLATFORM,
        PREFIX,
        SITE,
        TENANT,
        TENANT_GROUP,
        VIRTUAL_MACHINE,
        VLAN,
        VM_INTERFACE,
    )
}


def get_schema(kind: str) -> ResourceSchema:
    """Look up a schema by kind name (``vlan``, ``ip-address``, ...)."""
    try:
        return SCHEMAS[kind.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown resource kind '{kind}'. Known kinds: {', '.join(sorted(SCHEMAS))}"
        ) from None


__all__ = [
    "CLUSTER",
    "CLUSTER_GROUP",
    "CLUSTER_TYPE",
    "DEVICE",
    "DEVICE_ROLE",
    "DEVICE_TYPE",
    "INTERFACE",
    "IP_ADDRESS",
    "MAC_ADDRESS",
    "OWNER",
    "OWNER_GROUP",
    "PLATFORM",
    "PREFIX",
    "SCHEMAS",
    "SITE",
    "TENANT",
    "TENANT_GROUP",
    "VIRTUAL_MACHINE",
    "VLAN",
    "VM_INTERFACE",
    "PaginatedResponse",
    "get_schema",
]
