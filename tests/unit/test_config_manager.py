"""Tests for config manager."""

import stat

import pytest

from netbox_mapper.client.errors import ConfigurationError
from netbox_mapper.config.manager import ConfigManager
from netbox_mapper.config.models import ServiceProfile


def _profile(name: str, url: str = "https://nb/api") -> ServiceProfile:
    return ServiceProfile(name=name, url=url, key=f"{name}-key", token=f"{name}-token")


class TestConfigManager:
    def test_load_empty(self, config_manager: ConfigManager):
        assert config_manager.config.profiles == {}
        assert config_manager.config.default_profile is None

    def test_add_profile(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        assert "test-nb" in config_manager.config.profiles
        assert config_manager.config.default_profile == "test-nb"

    def test_add_sets_first_as_default(self, config_manager: ConfigManager):
        config_manager.add_profile(_profile("first"))
        config_manager.add_profile(_profile("second"))
        assert config_manager.config.default_profile == "first"

    def test_remove_profile(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        assert config_manager.remove_profile("test-nb") is True
        assert "test-nb" not in config_manager.config.profiles

    def test_remove_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.remove_profile("nope") is False

    def test_remove_default_reassigns(self, config_manager: ConfigManager):
        config_manager.add_profile(_profile("a"))
        config_manager.add_profile(_profile("b"))
        config_manager.set_default("a")
        config_manager.remove_profile("a")
        assert config_manager.config.default_profile == "b"

    def test_set_default_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.set_default("nope") is False

    def test_get_default_profile(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        p = config_manager.get_profile()
        assert p is not None
        assert p.name == "test-nb"

    def test_save_and_reload(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        mgr2 = ConfigManager(config_path=config_manager.config_path)
        p = mgr2.get_profile("test-nb")
        assert p is not None
        assert p.url == "https://netbox.test/api"
        assert p.key == "k"
        assert p.token == "t"
        assert p.verify_ssl is True

    def test_saved_file_is_owner_only(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        mode = stat.S_IMODE(config_manager.config_path.stat().st_mode)
        assert mode == 0o600

    def test_defaults_not_written(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        text = config_manager.config_path.read_text()
        assert "verify_ssl" not in text
        assert "timeout" not in text


class TestResolveProfile:
    def test_from_profile(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_profile()
        assert resolved.name == "test-nb"
        assert resolved.url == "https://netbox.test/api"
        assert resolved.key == "k"
        assert resolved.token == "t"

    def test_cli_overrides(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_profile(url="https://other/api/", token="new")
        assert resolved.url == "https://other/api"
        assert resolved.key == "k"
        assert resolved.token == "new"

    def test_env_vars(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NETBOX_URL_PREFIX", "https://env-nb/api")
        monkeypatch.setenv("NETBOX_KEY", "env-key")
        monkeypatch.setenv("NETBOX_TOKEN", "env-token")
        resolved = config_manager.resolve_profile()
        assert resolved.name == "cli"
        assert resolved.url == "https://env-nb/api"
        assert resolved.key == "env-key"
        assert resolved.token == "env-token"

    def test_flags_beat_env(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NETBOX_URL_PREFIX", "https://env-nb/api")
        monkeypatch.setenv("NETBOX_KEY", "env-key")
        monkeypatch.setenv("NETBOX_TOKEN", "env-token")
        resolved = config_manager.resolve_profile(key="flag-key")
        assert resolved.key == "flag-key"
        assert resolved.token == "env-token"

    def test_env_selects_profile(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        config_manager.add_profile(_profile("a", "https://a/api"))
        config_manager.add_profile(_profile("b", "https://b/api"))
        monkeypatch.setenv("NETBOX_PROFILE", "b")
        assert config_manager.resolve_profile().url == "https://b/api"

    def test_no_url_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="No NetBox url configured"):
            config_manager.resolve_profile()

    def test_no_token_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="NETBOX_TOKEN"):
            config_manager.resolve_profile(url="https://nb/api", key="k")
