"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class NetboxMapperError(Exception):
    """Base exception for netbox-mapper."""

    exit_code: int = 1


class ConfigurationError(NetboxMapperError):
    """Connection settings are incomplete or invalid."""

    exit_code = 6


class TransportError(NetboxMapperError):
    """The request did not produce a usable JSON response."""

    exit_code = 2

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ServiceConnectionError(TransportError):
    """Cannot reach the service (DNS, refused connection, timeout, bad URL)."""


class HTTPStatusError(TransportError):
    """The service answered with a non-2xx status code."""

    def __init__(self, status_code: int, body: Any = None, message: str = "") -> None:
        super().__init__(
            message or f"HTTP {status_code}: {body}",
            status_code=status_code,
            body=body,
        )


class AuthenticationError(HTTPStatusError):
    """Authentication failed (401/403)."""

    exit_code = 3


class ResponseDecodeError(TransportError):
    """A 2xx response whose body is not the expected JSON."""


class MapperError(NetboxMapperError):
    """Precondition failure raised by the resource mapper."""

    exit_code = 7


class ValidationError(MapperError):
    """A required field is empty at create time."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Validation error")


class MissingKeyError(MapperError):
    """No identifier (or natural key) to address the resource with."""


class NotFoundError(MapperError):
    """A natural-key lookup matched nothing."""

    exit_code = 4


class AmbiguousResultError(MapperError):
    """A natural-key lookup matched more than one resource."""

    exit_code = 5


class FieldError(MapperError):
    """Unknown field, or an attempt to write a read-only field."""


def error_handler(func: F) -> F:
    """Decorator that catches NetboxMapperError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except NetboxMapperError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
