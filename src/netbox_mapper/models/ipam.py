"""IPAM kinds: IP addresses, prefixes, VLANs."""

from __future__ import annotations

from netbox_mapper.mapper.fields import (
    FieldKind,
    LookupKey,
    ResourceSchema,
    choice,
    foreign_key,
    optional,
    read_only,
    required,
)
from netbox_mapper.models.common import METADATA, trailer

IP_ADDRESS = ResourceSchema(
    kind="ip-address",
    title="IpAddress",
    path="/ipam/ip-addresses/",
    fields=(
        required("address"),
        foreign_key("vrf"),
        foreign_key("tenant"),
        choice("status", "active"),
        choice("role"),
        optional("assigned_object_type"),
        foreign_key("assigned_object_id"),
        foreign_key("nat_inside"),
        optional("dns_name", default=""),
        *trailer(owner=False),
        *METADATA,
        read_only("family", FieldKind.ENUM),
        read_only("assigned_object", FieldKind.JSON),
        read_only("nat_outside", FieldKind.JSON, default=[]),
    ),
    # The same address may live in several VRFs; vrf only narrows the match.
    lookup=(
        LookupKey(field="address"),
        LookupKey(field="vrf", param="vrf_id", scope=True),
    ),
)

PREFIX = ResourceSchema(
    kind="prefix",
    title="Prefix",
    path="/ipam/prefixes/",
    fields=(
        required("prefix"),
        choice("status", "active"),
        foreign_key("vrf"),
        foreign_key("tenant"),
        foreign_key("vlan"),
        foreign_key("role"),
        foreign_key("site"),
        optional("scope_type"),
        foreign_key("scope_id"),
        optional("is_pool", default=False),
        optional("mark_utilized", default=False),
        *trailer(),
        *METADATA,
        read_only("family", FieldKind.ENUM),
        read_only("children"),
        read_only("_depth"),
    ),
    lookup=(LookupKey(field="prefix"),),
)

VLAN = ResourceSchema(
    kind="vlan",
    title="Vlan",
    path="/ipam/vlans/",
    fields=(
        required("vid"),
        required("name"),
        choice("status", "active"),
        foreign_key("site"),
        foreign_key("group"),
        foreign_key("tenant"),
        foreign_key("role"),
        choice("qinq_role"),
        foreign_key("qinq_svlan"),
        *trailer(),
        *METADATA,
        read_only("prefix_count"),
        read_only("l2vpn_termination", FieldKind.JSON),
    ),
    lookup=(LookupKey(field="name"), LookupKey(field="vid")),
)
