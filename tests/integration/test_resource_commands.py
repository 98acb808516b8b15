"""Integration tests for resource commands — list, show, create, update, edit, delete."""

from __future__ import annotations

import json

import httpx
import respx
from typer.testing import CliRunner

from netbox_mapper.app import app

runner = CliRunner()

BASE = "https://netbox.test/api"
VLANS = f"{BASE}/ipam/vlans/"
COMMON_OPTS = ["--url", BASE, "--key", "k", "--token", "t"]


class TestKinds:
    def test_kinds(self):
        result = runner.invoke(app, ["kinds", "--format", "json"])
        assert result.exit_code == 0
        kinds = {row["kind"]: row for row in json.loads(result.output)}
        assert kinds["vlan"]["path"] == "/ipam/vlans/"
        assert kinds["interface"]["lookup"] == ["device", "name"]


class TestResourceList:
    @respx.mock
    def test_list(self, vlan_response):
        route = respx.get(VLANS).mock(
            return_value=httpx.Response(200, json={"count": 1, "results": [vlan_response]})
        )
        result = runner.invoke(app, [
            "resource", "list", "vlan", "--filter", "status=active", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert "test-vlan" in result.output
        assert route.calls.last.request.url.params["status"] == "active"

    def test_unknown_kind(self):
        result = runner.invoke(app, ["resource", "list", "rack", *COMMON_OPTS])
        assert result.exit_code == 1

    def test_bad_filter(self):
        result = runner.invoke(app, ["resource", "list", "vlan", "--filter", "x", *COMMON_OPTS])
        assert result.exit_code == 1


class TestResourceShow:
    @respx.mock
    def test_show_by_id(self, vlan_response):
        respx.get(f"{VLANS}77/").mock(return_value=httpx.Response(200, json=vlan_response))
        result = runner.invoke(app, ["resource", "show", "vlan", "77", "-f", "json", *COMMON_OPTS])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["id"] == "77"
        assert data["status"] == "active"

    @respx.mock
    def test_show_by_natural_key(self, vlan_response):
        route = respx.get(VLANS).mock(
            return_value=httpx.Response(200, json={"count": 1, "results": [vlan_response]})
        )
        result = runner.invoke(app, [
            "resource", "show", "vlan", "--by", "name=test-vlan", "-f", "json", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert json.loads(result.output)["vid"] == 3999
        assert route.calls.last.request.url.params["name"] == "test-vlan"

    @respx.mock
    def test_show_not_found(self):
        respx.get(VLANS).mock(return_value=httpx.Response(200, json={"count": 0, "results": []}))
        result = runner.invoke(app, ["resource", "show", "vlan", "--by", "name=ghost", *COMMON_OPTS])
        assert result.exit_code == 4

    @respx.mock
    def test_show_ambiguous(self, vlan_response):
        respx.get(VLANS).mock(
            return_value=httpx.Response(200, json={"count": 2, "results": [vlan_response] * 2})
        )
        result = runner.invoke(app, ["resource", "show", "vlan", "--by", "vid=3999", *COMMON_OPTS])
        assert result.exit_code == 5

    @respx.mock
    def test_show_without_key(self):
        route = respx.route()
        result = runner.invoke(app, ["resource", "show", "vlan", *COMMON_OPTS])
        assert result.exit_code == 7
        assert route.call_count == 0

    @respx.mock
    def test_auth_failure(self):
        respx.get(f"{VLANS}77/").mock(return_value=httpx.Response(403, json={"detail": "no"}))
        result = runner.invoke(app, ["resource", "show", "vlan", "77", *COMMON_OPTS])
        assert result.exit_code == 3


class TestResourceCreate:
    @respx.mock
    def test_create(self, vlan_response):
        route = respx.post(VLANS).mock(return_value=httpx.Response(201, json=vlan_response))
        result = runner.invoke(app, [
            "resource", "create", "vlan", "--data", '{"vid": 3999, "name": "test-vlan"}',
            *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert "Vlan 77 created" in result.output
        assert json.loads(route.calls.last.request.content) == {
            "vid": 3999, "name": "test-vlan", "status": "active",
        }

    @respx.mock
    def test_create_missing_required(self):
        route = respx.post(VLANS)
        result = runner.invoke(app, [
            "resource", "create", "vlan", "--data", '{"name": "test-vlan"}', *COMMON_OPTS,
        ])
        assert result.exit_code == 7
        assert route.call_count == 0

    def test_create_read_only_field(self):
        result = runner.invoke(app, [
            "resource", "create", "vlan", "--data", '{"display": "x"}', *COMMON_OPTS,
        ])
        assert result.exit_code == 7

    @respx.mock
    def test_create_interface_single_tagged_vlan(self):
        route = respx.post(f"{BASE}/dcim/interfaces/").mock(
            return_value=httpx.Response(201, json={"id": 31, "tagged_vlans": [{"id": 5}]})
        )
        result = runner.invoke(app, [
            "resource", "create", "interface",
            "--data", '{"device": 1, "name": "eth0", "tagged_vlans": 5, "mode": {"value": "tagged"}}',
            *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        body = json.loads(route.calls.last.request.content)
        assert body["tagged_vlans"] == ["5"]
        assert body["mode"] == "tagged"


class TestResourceModify:
    @respx.mock
    def test_update_loads_then_patches(self, vlan_response):
        respx.get(f"{VLANS}77/").mock(return_value=httpx.Response(200, json=vlan_response))
        route = respx.patch(f"{VLANS}77/").mock(
            return_value=httpx.Response(200, json=dict(vlan_response, description="uplink"))
        )
        result = runner.invoke(app, [
            "resource", "update", "vlan", "77", "--data", '{"description": "uplink"}',
            *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert "updated" in result.output
        body = json.loads(route.calls.last.request.content)
        assert body["description"] == "uplink"
        assert body["vid"] == 3999

    @respx.mock
    def test_edit_puts(self, vlan_response):
        respx.get(f"{VLANS}77/").mock(return_value=httpx.Response(200, json=vlan_response))
        route = respx.put(f"{VLANS}77/").mock(return_value=httpx.Response(200, json=vlan_response))
        result = runner.invoke(app, [
            "resource", "edit", "vlan", "77", "--data", '{"name": "renamed"}', *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert json.loads(route.calls.last.request.content)["name"] == "renamed"


class TestResourceDelete:
    @respx.mock
    def test_delete_force(self):
        route = respx.delete(f"{VLANS}77/").mock(return_value=httpx.Response(204))
        result = runner.invoke(app, ["resource", "delete", "vlan", "77", "--force", *COMMON_OPTS])
        assert result.exit_code == 0
        assert "deleted" in result.output
        assert route.called

    @respx.mock
    def test_delete_cancelled(self):
        route = respx.delete(f"{VLANS}77/")
        result = runner.invoke(app, ["resource", "delete", "vlan", "77", *COMMON_OPTS], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert route.call_count == 0

    @respx.mock
    def test_delete_server_error(self):
        respx.delete(f"{VLANS}77/").mock(return_value=httpx.Response(500, text="boom"))
        result = runner.invoke(app, ["resource", "delete", "vlan", "77", "--force", *COMMON_OPTS])
        assert result.exit_code == 2


def test_missing_credentials(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "netbox_mapper.config.manager.CONFIG_FILE", tmp_path / "config.toml",
    )
    result = runner.invoke(app, ["resource", "show", "vlan", "77", "--url", BASE])
    assert result.exit_code == 6
