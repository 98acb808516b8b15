"""Virtualization kinds: clusters, virtual machines and their interfaces."""

from __future__ import annotations

from netbox_mapper.mapper.fields import (
    FieldKind,
    LookupKey,
    ResourceSchema,
    choice,
    foreign_key,
    foreign_key_list,
    json_field,
    optional,
    read_only,
    required,
)
from netbox_mapper.models.common import METADATA, NAME, NAME_OR_SLUG, trailer

CLUSTER_TYPE = ResourceSchema(
    kind="cluster-type",
    title="ClusterType",
    path="/virtualization/cluster-types/",
    fields=(
        required("name"),
        required("slug"),
        *trailer(),
        *METADATA,
        read_only("cluster_count"),
    ),
    lookup=NAME_OR_SLUG,
)

CLUSTER_GROUP = ResourceSchema(
    kind="cluster-group",
    title="ClusterGroup",
    path="/virtualization/cluster-groups/",
    fields=(
        required("name"),
        required("slug"),
        *trailer(),
        *METADATA,
        read_only("cluster_count"),
    ),
    lookup=NAME_OR_SLUG,
)

CLUSTER = ResourceSchema(
    kind="cluster",
    title="Cluster",
    path="/virtualization/clusters/",
    fields=(
        required("name"),
        foreign_key("type", is_required=True),
        foreign_key("group"),
        choice("status", "active"),
        foreign_key("tenant"),
        optional("scope_type"),
        foreign_key("scope_id"),
        *trailer(),
        *METADATA,
        read_only("scope", FieldKind.JSON),
        read_only("device_count"),
        read_only("virtualmachine_count"),
        read_only("allocated_memory"),
        read_only("allocated_disk"),
        read_only("allocated_vcpus"),
    ),
    lookup=NAME,
)

VIRTUAL_MACHINE = ResourceSchema(
    kind="virtual-machine",
    title="VirtualMachine",
    path="/virtualization/virtual-machines/",
    fields=(
        required("name"),
        choice("status", "offline"),
        foreign_key("site"),
        foreign_key("cluster", expand=True),
        foreign_key("device"),
        optional("serial"),
        foreign_key("role"),
        foreign_key("tenant"),
        foreign_key("platform"),
        foreign_key("primary_ip4", expand=True),
        foreign_key("primary_ip6", expand=True),
        optional("vcpus"),
        optional("memory"),
        optional("disk"),
        foreign_key("config_template"),
        json_field("local_context_data"),
        *trailer(owner=False),
        *METADATA,
        read_only("interface_count"),
        read_only("virtual_disk_count"),
    ),
    lookup=NAME,
)

VM_INTERFACE = ResourceSchema(
    kind="vm-interface",
    title="VirtualMachineInterface",
    path="/virtualization/interfaces/",
    fields=(
        foreign_key("virtual_machine", is_required=True, expand=True),
        required("name"),
        optional("enabled", default=True),
        foreign_key("parent"),
        foreign_key("bridge"),
        optional("mtu"),
        foreign_key("primary_mac_address"),
        optional("description", default=""),
        choice("mode", "access"),
        foreign_key("untagged_vlan"),
        foreign_key_list("tagged_vlans"),
        foreign_key("qinq_svlan"),
        foreign_key("vlan_translation_policy"),
        foreign_key("vrf"),
        json_field("tags", default=[]),
        json_field("custom_fields", default={}),
        *METADATA,
    ),
    lookup=(
        LookupKey(field="virtual_machine", id_param="virtual_machine_id"),
        LookupKey(field="name"),
    ),
    lookup_requires_all=True,
)
