"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class FilaCLIError(Exception):
    """Base exception for fila-cli."""

    exit_code: int = 1


class TransportError(FilaCLIError):
    """The request never produced an HTTP response."""

    exit_code = 2


class ConfigurationError(FilaCLIError):
    """Missing or invalid CLI configuration."""

    exit_code = 6


class MalformedResponseError(FilaCLIError):
    """A successful response whose body could not be decoded."""

    exit_code = 8


class ApiError(FilaCLIError):
    """Non-2xx response from the API.

    ``body`` is the decoded ``{"message": ..., "errors": {...}}`` object, or a
    synthetic ``{"message": <reason phrase>}`` when the response carried no
    JSON object.
    """

    def __init__(self, status: int, body: dict[str, Any]) -> None:
        self.status = status
        self.body = body
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return str(self.body.get("message") or f"HTTP {self.status}")

    @property
    def field_errors(self) -> dict[str, str] | None:
        errors = self.body.get("errors")
        return errors if isinstance(errors, dict) else None


class AuthenticationError(ApiError):
    """Missing, invalid or expired token (401)."""

    exit_code = 3


class PermissionDeniedError(ApiError):
    """Authenticated but not allowed (403)."""

    exit_code = 3


class NotFoundError(ApiError):
    """Resource not found (404)."""

    exit_code = 4


class ConflictError(ApiError):
    """Resource conflict (409)."""

    exit_code = 5


class ValidationError(ApiError):
    """Field validation failed (422)."""

    exit_code = 7


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
}


def api_error_for(status: int, body: dict[str, Any]) -> ApiError:
    """Build the ApiError subclass matching *status*."""
    cls = _STATUS_ERRORS.get(status, ApiError)
    return cls(status, body)


def error_handler(func: F) -> F:
    """Decorator that catches FilaCLIError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except FilaCLIError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            if isinstance(exc, ApiError) and exc.field_errors:
                for field, msg in exc.field_errors.items():
                    err_console.print(f"  [red]{field}[/]: {msg}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
