"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from netbox_mapper.client.gateway import NetboxClient
from netbox_mapper.config.manager import ConfigManager
from netbox_mapper.config.models import ServiceProfile

BASE = "https://netbox.test/api"


def pytest_addoption(parser):
    parser.addoption("--netbox-url", action="store", default=None)
    parser.addoption("--netbox-key", action="store", default=None)
    parser.addoption("--netbox-token", action="store", default=None)


@pytest.fixture
def live_settings(request) -> dict:
    url = request.config.getoption("--netbox-url")
    key = request.config.getoption("--netbox-key")
    token = request.config.getoption("--netbox-token")
    if not url or not key or not token:
        pytest.skip("Live NetBox credentials not provided")
    return {"url": url, "key": key, "token": token}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep NETBOX_* variables from the developer shell out of the tests."""
    for var in ("NETBOX_URL_PREFIX", "NETBOX_KEY", "NETBOX_TOKEN", "NETBOX_PROFILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ServiceProfile:
    return ServiceProfile(name="test-nb", url=BASE, key="k", token="t")


@pytest.fixture
def client(sample_profile: ServiceProfile):
    with NetboxClient(sample_profile) as c:
        yield c


@pytest.fixture
def vlan_response() -> dict:
    """A VLAN object as NetBox returns it."""
    return {
        "id": 77,
        "url": f"{BASE}/ipam/vlans/77/",
        "display": "test-vlan (3999)",
        "vid": 3999,
        "name": "test-vlan",
        "status": {"value": "active", "label": "Active"},
        "site": None,
        "group": None,
        "tenant": None,
        "role": None,
        "description": "",
        "comments": "",
        "tags": [],
        "custom_fields": {},
        "created": "2026-01-01T00:00:00Z",
        "last_updated": "2026-01-01T00:00:00Z",
        "prefix_count": 0,
    }
