"""Bearer token authentication for the Fila API."""

from __future__ import annotations

from collections.abc import Callable, Generator

import httpx

TokenResolver = Callable[[], "str | None"]


def as_resolver(token: str | TokenResolver | None) -> TokenResolver:
    """Normalize a fixed token, a resolver or nothing into a resolver."""
    if callable(token):
        return token
    return lambda: token


class BearerTokenAuth(httpx.Auth):
    """Set ``Authorization: Bearer <token>`` when the resolver yields a token.

    The resolver is called once per request so a token saved or deleted
    between calls is picked up without rebuilding the client.
    """

    def __init__(self, token: str | TokenResolver | None) -> None:
        self.resolve = as_resolver(token)

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.resolve()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request
