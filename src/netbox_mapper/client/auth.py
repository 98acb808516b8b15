"""Authentication for the NetBox REST API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from netbox_mapper.config.models import ServiceProfile


class BearerTokenAuth(httpx.Auth):
    """Send ``Authorization: Bearer <key>.<token>`` on every request."""

    def __init__(self, key: str, token: str) -> None:
        self.key = key
        self.token = token

    @property
    def header_value(self) -> str:
        return f"Bearer {self.key}.{self.token}"

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self.header_value
        yield request


def resolve_auth(profile: ServiceProfile) -> BearerTokenAuth:
    """Build the auth strategy for a service profile."""
    return BearerTokenAuth(profile.key, profile.token)
