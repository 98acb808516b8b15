"""Configuration manager — read/write TOML config, resolve profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from netbox_mapper.client.errors import ConfigurationError
from netbox_mapper.config.constants import (
    CONFIG_FILE,
    DEFAULT_TIMEOUT,
    ENV_KEY,
    ENV_PROFILE,
    ENV_TOKEN,
    ENV_URL_PREFIX,
)
from netbox_mapper.config.models import CLIConfig, ServiceProfile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves connection profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        data = tomllib.loads(self.config_path.read_bytes().decode())
        profiles: dict[str, ServiceProfile] = {}
        for name, prof_data in data.get("profiles", {}).items():
            profiles[name] = ServiceProfile(name=name, **prof_data)
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only: the file holds API tokens
        os.chmod(self.config_path.parent, 0o700)
        data: dict[str, Any] = {}
        if self.config.default_profile:
            data["default_profile"] = self.config.default_profile
        if self.config.default_format != "table":
            data["default_format"] = self.config.default_format
        if self.config.profiles:
            data["profiles"] = {}
            for name, profile in self.config.profiles.items():
                prof_dict = profile.model_dump(exclude={"name"}, exclude_none=True)
                if prof_dict.get("verify_ssl") is True:
                    del prof_dict["verify_ssl"]
                if prof_dict.get("timeout") == DEFAULT_TIMEOUT:
                    del prof_dict["timeout"]
                data["profiles"][name] = prof_dict
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: ServiceProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ServiceProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        key: str | None = None,
        token: str | None = None,
    ) -> ServiceProfile:
        """Resolve the connection settings.

        Precedence: CLI flags > env vars > config profile. All three of URL,
        key and token must resolve, otherwise no client can be built.
        """
        profile = self.get_profile(profile_name or os.environ.get(ENV_PROFILE))

        resolved = {
            "url": url or os.environ.get(ENV_URL_PREFIX) or (profile.url if profile else None),
            "key": key or os.environ.get(ENV_KEY) or (profile.key if profile else None),
            "token": token or os.environ.get(ENV_TOKEN) or (profile.token if profile else None),
        }
        env_names = {"url": ENV_URL_PREFIX, "key": ENV_KEY, "token": ENV_TOKEN}
        for setting, value in resolved.items():
            if not value:
                raise ConfigurationError(
                    f"No NetBox {setting} configured. Use 'netbox-mapper config add',"
                    f" set {env_names[setting]} or pass --{setting}."
                )

        return ServiceProfile(
            name=profile.name if profile else "cli",
            url=resolved["url"].rstrip("/"),
            key=resolved["key"],
            token=resolved["token"],
            verify_ssl=profile.verify_ssl if profile else True,
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
        )
