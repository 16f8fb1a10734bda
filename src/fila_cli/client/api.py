"""Fila API HTTP client."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel

from fila_cli.client.auth import BearerTokenAuth, TokenResolver
from fila_cli.client.errors import (
    MalformedResponseError,
    TransportError,
    api_error_for,
)
from fila_cli.client.resources import (
    AnalistasResource,
    AposentadoriaResource,
    AuthResource,
    DatalakeResource,
    ProcessosResource,
    UnidadesResource,
    UsuariosResource,
)
from fila_cli.config.constants import DEFAULT_API_BASE

# Statuses that carry no payload worth decoding.
_EMPTY_STATUSES = (202, 204)


def _serialize(body: BaseModel | Mapping[str, Any] | Any) -> str:
    if isinstance(body, BaseModel):
        return body.model_dump_json()
    return json.dumps(body)


def _error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        return data
    return {"message": response.reason_phrase}


class FilaClient:
    """Asynchronous HTTP client for the Fila REST API.

    ``token`` may be a fixed string or a zero-argument callable resolving the
    current token (``None`` for anonymous calls). ``transport`` replaces the
    network layer, e.g. with a request-scoped or mock transport. No timeout
    is applied unless one is given.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        token: str | TokenResolver | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=BearerTokenAuth(token),
            transport=transport,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )
        self.auth = AuthResource(self)
        self.usuarios = UsuariosResource(self)
        self.processos = ProcessosResource(self)
        self.aposentadoria = AposentadoriaResource(self)
        self.analistas = AnalistasResource(self)
        self.unidades = UnidadesResource(self)
        self.datalake = DatalakeResource(self)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> FilaClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _handle_response(self, response: httpx.Response) -> Any:
        if not response.is_success:
            raise api_error_for(response.status_code, _error_body(response))
        if response.status_code in _EMPTY_STATUSES:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Invalid JSON in {response.status_code} response from "
                f"{response.request.url}: {exc}"
            ) from exc

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """Send *method* to *path* and return the decoded JSON body.

        Raises ApiError (or a status-specific subclass) on non-2xx responses
        and TransportError when no response was received.
        """
        headers: dict[str, str] = {}
        content: str | None = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            content = _serialize(body)
        try:
            response = await self._client.request(
                method, path, content=content, headers=headers,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request to {self.base_url}{path} timed out: {exc}"
            ) from exc
        except (httpx.TransportError, httpx.InvalidURL) as exc:
            raise TransportError(
                f"Cannot reach API at {self.base_url}: {exc}"
            ) from exc
        return self._handle_response(response)

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
