"""Shared helpers for CLI commands — client factory, options, input parsing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from netbox_mapper.client.gateway import NetboxClient
from netbox_mapper.config.manager import ConfigManager

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Connection profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="API base URL override"),
]
KeyOpt = Annotated[
    str | None,
    typer.Option("--key", help="Token key override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="Token secret override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]
DataOpt = Annotated[
    str,
    typer.Option("--data", "-d", help="JSON object of fields, or @file path"),
]


def make_client(
    profile: str | None,
    url: str | None,
    key: str | None,
    token: str | None,
) -> NetboxClient:
    """Create a NetboxClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_profile(profile_name=profile, url=url, key=key, token=token)
    return NetboxClient(resolved)


def parse_pairs(pairs: list[str] | None, option: str) -> dict[str, str]:
    """Parse repeated ``key=value`` options into a dict."""
    result: dict[str, str] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Invalid {option} '{pair}'. Use key=value.")
        result[name] = value
    return result


def parse_data(data: str) -> dict[str, Any]:
    """Parse a JSON object from a string or an ``@file`` reference."""
    if data.startswith("@"):
        file_path = Path(data[1:])
        if not file_path.exists():
            raise ValueError(f"Data file not found: {file_path}")
        data = file_path.read_text()
    try:
        parsed = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON data: {exc}") from None
    if not isinstance(parsed, dict):
        raise ValueError("Data must be a JSON object of field names to values.")
    return parsed
