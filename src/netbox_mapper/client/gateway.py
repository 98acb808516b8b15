"""NetBox HTTP client."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx
import pydantic

from netbox_mapper.client.auth import resolve_auth
from netbox_mapper.client.errors import (
    AuthenticationError,
    ConfigurationError,
    HTTPStatusError,
    ResponseDecodeError,
    ServiceConnectionError,
)
from netbox_mapper.config.models import ServiceProfile

logger = logging.getLogger(__name__)


class NetboxClient:
    """Synchronous JSON gateway for the NetBox REST API.

    One client is built per service and shared by every resource that talks
    to it. The base URL and credentials are fixed at construction.
    """

    def __init__(self, profile: ServiceProfile) -> None:
        missing = [s for s in ("url", "key", "token") if not getattr(profile, s)]
        if missing:
            raise ConfigurationError(
                f"Cannot build a NetBox client without: {', '.join(missing)}"
            )
        self.profile = profile
        self.base_url = profile.url
        if not profile.verify_ssl:
            logger.warning("TLS certificate verification is disabled for %s", profile.url)
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(profile),
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )

    @classmethod
    def from_settings(
        cls,
        url: str | None,
        key: str | None,
        token: str | None,
        **options: Any,
    ) -> NetboxClient:
        """Build a client from raw settings, failing fast when one is missing."""
        try:
            profile = ServiceProfile(
                name="default", url=url or "", key=key or "", token=token or "", **options,
            )
        except pydantic.ValidationError as exc:
            raise ConfigurationError(f"Invalid NetBox settings: {exc}") from exc
        return cls(profile)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> NetboxClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> Any:
        status = response.status_code
        if not response.is_success:
            try:
                body: Any = response.json()
            except (json.JSONDecodeError, UnicodeDecodeError):
                body = response.text
            if status in (401, 403):
                msg = f"Authentication failed (HTTP {status}). Check your API key and token."
                if self.base_url.startswith("http://"):
                    msg += (
                        " Note: this service is addressed over HTTP (not HTTPS);"
                        " proxies commonly strip the Authorization header"
                        " from plain-HTTP requests."
                    )
                raise AuthenticationError(status, body, msg)
            raise HTTPStatusError(status, body)

        if status == 204 and not response.content:
            return {}
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ResponseDecodeError(
                f"Failed to decode JSON response (HTTP {status}): {response.text!r}",
                status_code=status,
                body=response.text,
            ) from exc

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        ``params`` are only applied to GET requests; ``body`` is sent as JSON.
        """
        method = method.upper()
        kwargs: dict[str, Any] = {}
        if params and method == "GET":
            kwargs["params"] = dict(params)
        if body is not None:
            kwargs["json"] = dict(body)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.ConnectError as exc:
            raise ServiceConnectionError(
                f"Cannot connect to NetBox at {self.profile.url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise ServiceConnectionError(
                f"Request to {self.profile.url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise ServiceConnectionError(
                f"Invalid URL for NetBox at {self.profile.url}: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise ServiceConnectionError(
                f"Request to {self.profile.url} failed: {exc}"
            ) from exc
        logger.debug("%s %s -> %s", method, response.request.url, response.status_code)
        return self._handle_response(response)

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Mapping[str, Any]) -> Any:
        return self.request("POST", path, body=body)

    def put(self, path: str, body: Mapping[str, Any]) -> Any:
        return self.request("PUT", path, body=body)

    def patch(self, path: str, body: Mapping[str, Any]) -> Any:
        return self.request("PATCH", path, body=body)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
