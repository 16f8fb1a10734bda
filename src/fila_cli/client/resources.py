"""Resource namespaces — one class per backend resource.

Each method maps to exactly one endpoint. Optional filters are dropped from
the query string when absent; identifiers are interpolated as given and left
for the backend to reject.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import pydantic
from pydantic import TypeAdapter

from fila_cli.client.errors import MalformedResponseError
from fila_cli.client.query import build_query
from fila_cli.models import (
    Analista,
    AnalistaCreateRequest,
    CadastrarRequest,
    DatalakeProcesso,
    Documento,
    EntrarRequest,
    Escopo,
    HistoricoStatusProcesso,
    Paginated,
    Papel,
    Processo,
    ProcessoAposentadoria,
    ProcessoCreateRequest,
    RecuperarSenhaRequest,
    RedefinirSenhaRequest,
    Servidor,
    StatusProcesso,
    Token,
    UnidadeSei,
    Usuario,
    UsuarioCreateRequest,
)

if TYPE_CHECKING:
    from fila_cli.client.api import FilaClient

M = TypeVar("M")

Body = pydantic.BaseModel | Mapping[str, Any]


def parse(shape: type[M] | Any, data: Any) -> M:
    """Validate decoded JSON *data* into *shape*."""
    try:
        return TypeAdapter(shape).validate_python(data)
    except pydantic.ValidationError as exc:
        raise MalformedResponseError(
            f"Unexpected response shape for {getattr(shape, '__name__', shape)}: {exc}"
        ) from exc


class Resource:
    """Base namespace bound to a FilaClient."""

    def __init__(self, client: FilaClient) -> None:
        self._client = client


class AuthResource(Resource):
    async def entrar(self, credentials: EntrarRequest | Body) -> Token:
        """Exchange CPF and password for a session token."""
        data = await self._client.post("/auth/entrar", credentials)
        return parse(Token, data)

    async def token_info(self, token: str, escopo: Escopo | str) -> Usuario:
        """Return the owner of a one-time ``setup`` or ``reset-senha`` token."""
        escopo = Escopo(escopo)
        if escopo is Escopo.AUTH:
            raise ValueError("token_info only accepts 'setup' or 'reset-senha' tokens")
        data = await self._client.get(
            f"/auth/token{build_query({'token': token, 'escopo': escopo})}"
        )
        return parse(Usuario, data)

    async def cadastrar(self, data: CadastrarRequest | Body) -> None:
        await self._client.post("/auth/cadastrar", data)

    async def recuperar_senha(self, data: RecuperarSenhaRequest | Body) -> None:
        await self._client.post("/auth/recuperar-senha", data)

    async def redefinir_senha(self, data: RedefinirSenhaRequest | Body) -> None:
        await self._client.post("/auth/redefinir-senha", data)

    async def me(self) -> Usuario:
        return parse(Usuario, await self._client.get("/auth/me"))

    async def me_analista(self) -> Analista:
        return parse(Analista, await self._client.get("/auth/me/analista"))


class UsuariosResource(Resource):
    async def list(self, papel: Papel | str | None = None) -> list[Usuario]:
        data = await self._client.get(f"/usuarios{build_query({'papel': papel})}")
        return parse(list[Usuario], data)

    async def create(self, data: UsuarioCreateRequest | Body) -> Usuario:
        return parse(Usuario, await self._client.post("/usuarios", data))

    async def get(self, usuario_id: int) -> Usuario:
        return parse(Usuario, await self._client.get(f"/usuarios/{usuario_id}"))

    async def delete(self, usuario_id: int) -> None:
        await self._client.delete(f"/usuarios/{usuario_id}")

    async def enviar_cadastro(self, usuario_id: int) -> None:
        """Resend the account setup email."""
        await self._client.post(f"/usuarios/{usuario_id}/enviar-cadastro")

    async def get_analista(self, usuario_id: int) -> Analista:
        data = await self._client.get(f"/usuarios/{usuario_id}/analista")
        return parse(Analista, data)

    async def create_analista(
        self, usuario_id: int, data: AnalistaCreateRequest | Body,
    ) -> Analista:
        result = await self._client.post(f"/usuarios/{usuario_id}/analista", data)
        return parse(Analista, result)

    async def afastar_analista(self, usuario_id: int) -> None:
        """Mark the analyst as away; no new cases are assigned."""
        await self._client.post(f"/usuarios/{usuario_id}/analista/afastar")

    async def retornar_analista(self, usuario_id: int) -> None:
        await self._client.post(f"/usuarios/{usuario_id}/analista/retornar")


class _PaginatedResource(Resource, ABC):
    @abstractmethod
    async def list(self, **params: Any) -> Paginated[Any]:
        """Fetch one page."""

    async def iter_all(self, *, limit: int | None = None, **filters: Any) -> AsyncIterator[Any]:
        """Yield every item across all pages, starting at page 1."""
        page = 1
        while True:
            result = await self.list(page=page, limit=limit, **filters)
            for item in result.data:
                yield item
            if not result.has_next or not result.data:
                break
            page += 1


class ProcessosResource(_PaginatedResource):
    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        numero: str | None = None,
    ) -> Paginated[Processo]:
        query = build_query({"page": page, "limit": limit, "numero": numero})
        return parse(Paginated[Processo], await self._client.get(f"/processos{query}"))

    async def create(self, data: ProcessoCreateRequest | Body) -> Processo:
        return parse(Processo, await self._client.post("/processos", data))

    async def get(self, processo_id: str) -> Processo:
        return parse(Processo, await self._client.get(f"/processos/{processo_id}"))

    async def documentos(self, processo_id: str) -> list[Documento]:
        data = await self._client.get(f"/processos/{processo_id}/documentos")
        return parse(list[Documento], data)


class AposentadoriaResource(_PaginatedResource):
    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        numero: str | None = None,
        status: StatusProcesso | str | None = None,
    ) -> Paginated[ProcessoAposentadoria]:
        query = build_query({
            "page": page,
            "limit": limit,
            "numero": numero,
            "status": status,
        })
        data = await self._client.get(f"/aposentadoria{query}")
        return parse(Paginated[ProcessoAposentadoria], data)

    async def get(self, pa_id: int) -> ProcessoAposentadoria:
        data = await self._client.get(f"/aposentadoria/{pa_id}")
        return parse(ProcessoAposentadoria, data)

    async def historico(self, pa_id: int) -> list[HistoricoStatusProcesso]:
        data = await self._client.get(f"/aposentadoria/{pa_id}/historico")
        return parse(list[HistoricoStatusProcesso], data)


class AnalistasResource(Resource):
    async def list(self) -> list[Analista]:
        return parse(list[Analista], await self._client.get("/analistas"))


class UnidadesResource(Resource):
    async def list(self) -> list[UnidadeSei]:
        return parse(list[UnidadeSei], await self._client.get("/unidades"))


class DatalakeResource(Resource):
    """Read-only lookups against the state datalake."""

    async def processos(self, unidade: str) -> list[DatalakeProcesso]:
        data = await self._client.get(
            f"/datalake/processos{build_query({'unidade': unidade})}"
        )
        return parse(list[DatalakeProcesso], data)

    async def unidades_processos(self) -> list[str]:
        data = await self._client.get("/datalake/processos/unidades")
        return parse(list[str], data)

    async def servidor(self, cpf: str) -> Servidor:
        return parse(Servidor, await self._client.get(f"/datalake/servidores/{cpf}"))
