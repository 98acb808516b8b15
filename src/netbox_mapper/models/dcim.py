"""DCIM kinds: sites, devices and their types, roles, platforms, interfaces."""

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

SITE = ResourceSchema(
    kind="site",
    title="Site",
    path="/dcim/sites/",
    fields=(
        required("name"),
        required("slug"),
        choice("status", "active"),
        foreign_key("region"),
        foreign_key("group"),
        foreign_key("tenant"),
        optional("facility", default=""),
        optional("time_zone"),
        optional("physical_address", default=""),
        optional("shipping_address", default=""),
        optional("latitude"),
        optional("longitude"),
        foreign_key_list("asns"),
        *trailer(),
        *METADATA,
        read_only("circuit_count"),
        read_only("device_count"),
        read_only("prefix_count"),
        read_only("rack_count"),
        read_only("virtualmachine_count"),
        read_only("vlan_count"),
    ),
    lookup=NAME_OR_SLUG,
)

DEVICE_ROLE = ResourceSchema(
    kind="device-role",
    title="DeviceRole",
    path="/dcim/device-roles/",
    fields=(
        required("name"),
        required("slug"),
        optional("color", default=""),
        optional("vm_role", default=True),
        foreign_key("config_template"),
        *trailer(comments=False, owner=False),
        *METADATA,
        read_only("device_count"),
        read_only("virtualmachine_count"),
    ),
    lookup=NAME_OR_SLUG,
)

_TEMPLATE_COUNTS = tuple(
    read_only(f"{component}_template_count")
    for component in (
        "console_port",
        "console_server_port",
        "power_port",
        "power_outlet",
        "interface",
        "front_port",
        "rear_port",
        "device_bay",
        "module_bay",
        "inventory_item",
    )
)

DEVICE_TYPE = ResourceSchema(
    kind="device-type",
    title="DeviceType",
    path="/dcim/device-types/",
    fields=(
        foreign_key("manufacturer", is_required=True),
        required("model"),
        required("slug"),
        foreign_key("default_platform"),
        optional("part_number", default=""),
        optional("u_height", default=1.0),
        optional("is_full_depth", default=True),
        optional("exclude_from_utilization", default=False),
        choice("subdevice_role"),
        choice("airflow"),
        optional("weight"),
        choice("weight_unit"),
        *trailer(),
        *METADATA,
        read_only("device_count"),
        *_TEMPLATE_COUNTS,
        read_only("front_image"),
        read_only("rear_image"),
    ),
    lookup=(LookupKey(field="model"), LookupKey(field="slug")),
)

PLATFORM = ResourceSchema(
    kind="platform",
    title="Platform",
    path="/dcim/platforms/",
    fields=(
        required("name"),
        required("slug"),
        foreign_key("parent"),
        foreign_key("manufacturer"),
        foreign_key("config_template"),
        *trailer(),
        *METADATA,
        read_only("device_count"),
        read_only("virtualmachine_count"),
        read_only("_depth"),
    ),
    lookup=NAME_OR_SLUG,
)

_COMPONENT_COUNTS = tuple(
    read_only(f"{component}_count")
    for component in (
        "console_port",
        "console_server_port",
        "power_port",
        "power_outlet",
        "interface",
        "front_port",
        "rear_port",
        "device_bay",
        "module_bay",
        "inventory_item",
    )
)

DEVICE = ResourceSchema(
    kind="device",
    title="Device",
    path="/dcim/devices/",
    fields=(
        required("name"),
        foreign_key("device_type", is_required=True, expand=True),
        foreign_key("role", is_required=True),
        foreign_key("site", is_required=True, expand=True),
        foreign_key("tenant"),
        foreign_key("platform"),
        optional("serial", default=""),
        optional("asset_tag"),
        choice("status", "active"),
        foreign_key("location"),
        foreign_key("rack"),
        optional("position"),
        choice("face"),
        optional("latitude"),
        optional("longitude"),
        choice("airflow"),
        foreign_key("primary_ip4", expand=True),
        foreign_key("primary_ip6", expand=True),
        foreign_key("oob_ip"),
        foreign_key("cluster"),
        foreign_key("virtual_chassis"),
        optional("vc_position"),
        optional("vc_priority"),
        foreign_key("config_template"),
        json_field("local_context_data"),
        *trailer(),
        *METADATA,
        read_only("parent_device", FieldKind.JSON),
        *_COMPONENT_COUNTS,
    ),
    lookup=NAME,
)

INTERFACE = ResourceSchema(
    kind="interface",
    title="NetworkInterface",
    path="/dcim/interfaces/",
    fields=(
        foreign_key("device", is_required=True, expand=True),
        required("name"),
        choice("type", "virtual", is_required=True),
        optional("enabled", default=True),
        foreign_key_list("vdcs"),
        foreign_key("module"),
        optional("label"),
        foreign_key("parent"),
        foreign_key("bridge"),
        foreign_key("lag"),
        optional("mtu"),
        foreign_key("primary_mac_address"),
        optional("speed"),
        choice("duplex"),
        optional("wwn"),
        optional("mgmt_only", default=False),
        optional("description", default=""),
        choice("mode", "access"),
        choice("rf_role"),
        choice("rf_channel"),
        choice("poe_mode"),
        choice("poe_type"),
        optional("rf_channel_frequency"),
        optional("rf_channel_width"),
        optional("tx_power"),
        foreign_key("untagged_vlan"),
        foreign_key_list("tagged_vlans"),
        foreign_key("qinq_svlan"),
        foreign_key("vlan_translation_policy"),
        optional("mark_connected", default=False),
        foreign_key_list("wireless_lans"),
        foreign_key("vrf"),
        json_field("tags", default=[]),
        json_field("custom_fields", default={}),
        *METADATA,
        read_only("cable", FieldKind.JSON),
        read_only("count_ipaddresses"),
        read_only("count_fhrp_groups"),
    ),
    lookup=(
        LookupKey(field="device", id_param="device_id"),
        LookupKey(field="name"),
    ),
    lookup_requires_all=True,
)

MAC_ADDRESS = ResourceSchema(
    kind="mac-address",
    title="MacAddress",
    path="/dcim/mac-addresses/",
    fields=(
        required("mac_address"),
        optional("assigned_object_type"),
        foreign_key("assigned_object_id"),
        *trailer(owner=False),
        read_only("assigned_object", FieldKind.JSON),
        *METADATA,
    ),
    lookup=(LookupKey(field="mac_address"),),
)
