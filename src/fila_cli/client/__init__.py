"""HTTP client for the Fila REST API."""

from fila_cli.client.api import FilaClient
from fila_cli.client.errors import (
    ApiError,
    AuthenticationError,
    ConflictError,
    FilaCLIError,
    MalformedResponseError,
    NotFoundError,
    PermissionDeniedError,
    TransportError,
    ValidationError,
)
from fila_cli.client.query import build_query

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConflictError",
    "FilaCLIError",
    "FilaClient",
    "MalformedResponseError",
    "NotFoundError",
    "PermissionDeniedError",
    "TransportError",
    "ValidationError",
    "build_query",
]
