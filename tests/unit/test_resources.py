"""Tests for the resource namespaces: paths, queries and response models."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone

import httpx
import pytest
import respx

from fila_cli.client.api import FilaClient
from fila_cli.client.errors import MalformedResponseError, ValidationError
from fila_cli.client.resources import _PaginatedResource
from fila_cli.models import (
    Analista,
    AnalistaCreateRequest,
    EntrarRequest,
    Escopo,
    Papel,
    Processo,
    StatusProcesso,
    Token,
    Usuario,
    UsuarioCreateRequest,
)

API = "https://fila.test/api/v1"


def call(fn):
    """Run *fn(client)* against a fresh client."""

    async def go():
        async with FilaClient(API, "tok") as client:
            return await fn(client)

    return asyncio.run(go())


def _page(items, *, page, total, limit, **extra):
    return {
        "data": items,
        "limit": limit,
        "current_page": page,
        "total_count": total,
        **extra,
    }


class TestAuthResource:
    @respx.mock
    def test_entrar(self):
        route = respx.post(f"{API}/auth/entrar").mock(
            return_value=httpx.Response(201, json={
                "token": "abc", "expira": "2025-01-01T12:00:00Z",
            })
        )
        token = call(lambda c: c.auth.entrar({"cpf": "123.456.789-01", "senha": "x"}))
        assert isinstance(token, Token)
        assert token.token == "abc"
        assert token.expira == datetime(2025, 1, 1, 12, tzinfo=timezone.utc)
        request = route.calls.last.request
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"cpf": "123.456.789-01", "senha": "x"}

    @respx.mock
    def test_entrar_with_model(self):
        route = respx.post(f"{API}/auth/entrar").mock(
            return_value=httpx.Response(200, json={"token": "t", "expira": "2025-01-01T00:00:00Z"})
        )
        call(lambda c: c.auth.entrar(EntrarRequest(cpf="123.456.789-01", senha="segredo123")))
        assert json.loads(route.calls.last.request.content)["senha"] == "segredo123"

    @respx.mock
    def test_token_info(self, usuario_gestor):
        route = respx.get(f"{API}/auth/token").mock(
            return_value=httpx.Response(200, json=usuario_gestor)
        )
        usuario = call(lambda c: c.auth.token_info("abc123", Escopo.RESET_SENHA))
        assert usuario.nome == "Maria Gestora"
        params = route.calls.last.request.url.params
        assert params["token"] == "abc123"
        assert params["escopo"] == "reset-senha"

    @respx.mock
    def test_token_info_accepts_plain_string(self, usuario_gestor):
        route = respx.get(f"{API}/auth/token").mock(
            return_value=httpx.Response(200, json=usuario_gestor)
        )
        call(lambda c: c.auth.token_info("abc123", "setup"))
        assert route.calls.last.request.url.params["escopo"] == "setup"

    def test_token_info_rejects_auth_scope(self):
        with pytest.raises(ValueError, match="setup"):
            call(lambda c: c.auth.token_info("abc", "auth"))

    def test_token_info_rejects_unknown_scope(self):
        with pytest.raises(ValueError):
            call(lambda c: c.auth.token_info("abc", "bogus"))

    @respx.mock
    def test_cadastrar_returns_none(self):
        route = respx.post(f"{API}/auth/cadastrar").mock(return_value=httpx.Response(204))
        result = call(lambda c: c.auth.cadastrar({
            "token": "t", "senha": "segredo123", "confirmar_senha": "segredo123",
        }))
        assert result is None
        assert route.called

    @respx.mock
    def test_recuperar_senha_accepted(self):
        respx.post(f"{API}/auth/recuperar-senha").mock(return_value=httpx.Response(202))
        assert call(lambda c: c.auth.recuperar_senha({"cpf": "123.456.789-01"})) is None

    @respx.mock
    def test_redefinir_senha_validation_error(self):
        body = {
            "message": "A validação dos dados falhou",
            "errors": {"confirmar_senha": "As senhas não coincidem"},
        }
        respx.post(f"{API}/auth/redefinir-senha").mock(
            return_value=httpx.Response(422, json=body)
        )
        with pytest.raises(ValidationError) as exc_info:
            call(lambda c: c.auth.redefinir_senha({
                "token": "t", "senha": "a", "confirmar_senha": "b",
            }))
        assert exc_info.value.status == 422
        assert exc_info.value.field_errors == {"confirmar_senha": "As senhas não coincidem"}

    @respx.mock
    def test_me(self, usuario_analista):
        respx.get(f"{API}/auth/me").mock(
            return_value=httpx.Response(200, json=usuario_analista)
        )
        usuario = call(lambda c: c.auth.me())
        assert isinstance(usuario, Usuario)
        assert usuario.papel == Papel.ANALISTA.value
        assert usuario.pendencias[0].slug == "dados-analista"

    @respx.mock
    def test_me_analista(self):
        respx.get(f"{API}/auth/me/analista").mock(
            return_value=httpx.Response(200, json={
                "usuario_id": 7, "orgao": "SEPLAG", "sei_unidade_id": "110001",
                "sei_unidade_sigla": "SEPLAG/DCCTA", "afastado": False,
            })
        )
        analista = call(lambda c: c.auth.me_analista())
        assert isinstance(analista, Analista)
        assert analista.orgao == "SEPLAG"

    @respx.mock
    def test_unknown_fields_kept(self, usuario_gestor):
        respx.get(f"{API}/auth/me").mock(
            return_value=httpx.Response(200, json={**usuario_gestor, "novo_campo": 1})
        )
        usuario = call(lambda c: c.auth.me())
        assert usuario.model_extra == {"novo_campo": 1}

    @respx.mock
    def test_shape_mismatch(self):
        respx.get(f"{API}/auth/me").mock(
            return_value=httpx.Response(200, json={"nome": "sem id"})
        )
        with pytest.raises(MalformedResponseError, match="Usuario"):
            call(lambda c: c.auth.me())


class TestUsuariosResource:
    @respx.mock
    def test_list_without_filter(self, usuario_gestor):
        route = respx.get(f"{API}/usuarios").mock(
            return_value=httpx.Response(200, json=[usuario_gestor])
        )
        usuarios = call(lambda c: c.usuarios.list())
        assert [u.id for u in usuarios] == [1]
        assert route.calls.last.request.url.query == b""

    @respx.mock
    def test_list_by_papel(self):
        route = respx.get(f"{API}/usuarios").mock(return_value=httpx.Response(200, json=[]))
        call(lambda c: c.usuarios.list(papel=Papel.GESTOR))
        assert route.calls.last.request.url.params["papel"] == "GESTOR"

    @respx.mock
    def test_create(self, usuario_gestor):
        route = respx.post(f"{API}/usuarios").mock(
            return_value=httpx.Response(201, json=usuario_gestor)
        )
        data = UsuarioCreateRequest(
            nome="Maria Gestora", cpf="111.222.333-44",
            email="maria@example.gov.br", papel=Papel.GESTOR,
        )
        usuario = call(lambda c: c.usuarios.create(data))
        assert usuario.id == 1
        assert json.loads(route.calls.last.request.content)["papel"] == "GESTOR"

    @respx.mock
    def test_get(self, usuario_gestor):
        respx.get(f"{API}/usuarios/1").mock(
            return_value=httpx.Response(200, json=usuario_gestor)
        )
        assert call(lambda c: c.usuarios.get(1)).email == "maria@example.gov.br"

    @respx.mock
    def test_delete(self):
        route = respx.delete(f"{API}/usuarios/3").mock(return_value=httpx.Response(204))
        assert call(lambda c: c.usuarios.delete(3)) is None
        assert route.called

    @respx.mock
    def test_enviar_cadastro(self):
        route = respx.post(f"{API}/usuarios/3/enviar-cadastro").mock(
            return_value=httpx.Response(204)
        )
        call(lambda c: c.usuarios.enviar_cadastro(3))
        assert "Content-Type" not in route.calls.last.request.headers

    @respx.mock
    def test_analista_endpoints(self):
        analista = {"usuario_id": 7, "orgao": "SEPLAG", "sei_unidade_id": "110001"}
        get_route = respx.get(f"{API}/usuarios/7/analista").mock(
            return_value=httpx.Response(200, json=analista)
        )
        create_route = respx.post(f"{API}/usuarios/7/analista").mock(
            return_value=httpx.Response(201, json=analista)
        )
        afastar = respx.post(f"{API}/usuarios/7/analista/afastar").mock(
            return_value=httpx.Response(204)
        )
        retornar = respx.post(f"{API}/usuarios/7/analista/retornar").mock(
            return_value=httpx.Response(204)
        )

        async def flow(c):
            await c.usuarios.get_analista(7)
            created = await c.usuarios.create_analista(
                7, AnalistaCreateRequest(unidade_id="110001", orgao="SEPLAG"),
            )
            await c.usuarios.afastar_analista(7)
            await c.usuarios.retornar_analista(7)
            return created

        created = call(flow)
        assert created.usuario_id == 7
        assert get_route.called and afastar.called and retornar.called
        assert json.loads(create_route.calls.last.request.content) == {
            "unidade_id": "110001", "orgao": "SEPLAG",
        }


class TestProcessosResource:
    @respx.mock
    def test_list_pagination_fields(self, processo):
        route = respx.get(f"{API}/processos").mock(
            return_value=httpx.Response(200, json=_page(
                [processo] * 10, page=2, total=25, limit=10,
            ))
        )
        result = call(lambda c: c.processos.list(page=2, limit=10))
        assert result.total_pages == 3
        assert result.has_next is True
        assert result.has_previous is True
        assert len(result.data) == 10
        assert isinstance(result.data[0], Processo)
        params = route.calls.last.request.url.params
        assert params["page"] == "2"
        assert params["limit"] == "10"
        assert "numero" not in params

    @respx.mock
    def test_list_filters_by_numero(self):
        route = respx.get(f"{API}/processos").mock(
            return_value=httpx.Response(200, json=_page([], page=1, total=0, limit=20))
        )
        call(lambda c: c.processos.list(numero="1500.01.0000001/2025-01"))
        assert route.calls.last.request.url.params["numero"] == "1500.01.0000001/2025-01"

    @respx.mock
    def test_create(self, processo):
        route = respx.post(f"{API}/processos").mock(
            return_value=httpx.Response(201, json=processo)
        )
        result = call(lambda c: c.processos.create({"numero": processo["numero"]}))
        assert result.id == processo["id"]
        assert json.loads(route.calls.last.request.content) == {"numero": processo["numero"]}

    @respx.mock
    def test_get(self, processo):
        respx.get(f"{API}/processos/{processo['id']}").mock(
            return_value=httpx.Response(200, json=processo)
        )
        assert call(lambda c: c.processos.get(processo["id"])).aposentadoria is True

    @respx.mock
    def test_documentos(self, processo):
        respx.get(f"{API}/processos/{processo['id']}/documentos").mock(
            return_value=httpx.Response(200, json=[{
                "id": 1, "numero": "123", "tipo": "Requerimento",
                "assinaturas": [{"nome": "Fulano", "cpf": "***.456.789-**"}],
            }])
        )
        docs = call(lambda c: c.processos.documentos(processo["id"]))
        assert docs[0].assinaturas[0].nome == "Fulano"

    @respx.mock
    def test_iter_all_walks_pages(self, processo):
        route = respx.get(f"{API}/processos")
        route.side_effect = [
            httpx.Response(200, json=_page([processo, processo], page=1, total=3, limit=2)),
            httpx.Response(200, json=_page([processo], page=2, total=3, limit=2)),
        ]

        async def collect(c):
            return [p async for p in c.processos.iter_all(limit=2)]

        items = call(collect)
        assert len(items) == 3
        pages = [c.request.url.params["page"] for c in route.calls]
        assert pages == ["1", "2"]


class TestAposentadoriaResource:
    @respx.mock
    def test_list_with_status(self, caso_aposentadoria):
        route = respx.get(f"{API}/aposentadoria").mock(
            return_value=httpx.Response(200, json=_page(
                [caso_aposentadoria], page=1, total=1, limit=20,
                total_pages=1, has_next=False, has_prev=False,
            ))
        )
        result = call(lambda c: c.aposentadoria.list(status=StatusProcesso.EM_ANALISE))
        assert result.data[0].score == 87
        assert result.has_previous is False
        params = route.calls.last.request.url.params
        assert params["status"] == "EM_ANALISE"
        assert "page" not in params

    @respx.mock
    def test_get_and_historico(self, caso_aposentadoria):
        respx.get(f"{API}/aposentadoria/42").mock(
            return_value=httpx.Response(200, json=caso_aposentadoria)
        )
        respx.get(f"{API}/aposentadoria/42/historico").mock(
            return_value=httpx.Response(200, json=[{
                "id": 1, "processo_aposentadoria_id": 42,
                "status_anterior": None, "status_novo": "ANALISE_PENDENTE",
                "usuario_id": None, "alterado_em": "2025-03-01T10:00:00Z",
            }])
        )

        async def flow(c):
            return await c.aposentadoria.get(42), await c.aposentadoria.historico(42)

        caso, historico = call(flow)
        assert caso.status == "EM_ANALISE"
        assert historico[0].status_novo == "ANALISE_PENDENTE"


class TestListings:
    @respx.mock
    def test_analistas(self):
        respx.get(f"{API}/analistas").mock(
            return_value=httpx.Response(200, json=[{"usuario_id": 7, "orgao": "SEPLAG"}])
        )
        assert call(lambda c: c.analistas.list())[0].usuario_id == 7

    @respx.mock
    def test_unidades(self):
        respx.get(f"{API}/unidades").mock(
            return_value=httpx.Response(200, json=[{"id": "110001", "sigla": "SEPLAG/DCCTA"}])
        )
        assert call(lambda c: c.unidades.list())[0].sigla == "SEPLAG/DCCTA"

    def test_paginated_base_is_abstract(self):
        with pytest.raises(TypeError):
            _PaginatedResource(FilaClient(API))

    @respx.mock
    def test_repeated_reads_are_identical(self):
        respx.get(f"{API}/unidades").mock(
            return_value=httpx.Response(200, json=[{"id": "110001", "sigla": "SEPLAG/DCCTA"}])
        )

        async def twice(c):
            return await c.unidades.list(), await c.unidades.list()

        first, second = call(twice)
        assert first == second


class TestDatalakeResource:
    @respx.mock
    def test_processos_by_unidade(self):
        route = respx.get(f"{API}/datalake/processos").mock(
            return_value=httpx.Response(200, json=[{
                "numero_processo": "1500.01.0000001/2025-01",
                "sigla_unidade": "SEPLAG/DCCTA",
                "unidade_geradora": {"sigla_unidade": "SEPLAG", "id_unidade": "1"},
            }])
        )
        result = call(lambda c: c.datalake.processos("SEPLAG/DCCTA"))
        assert result[0].unidade_geradora.sigla_unidade == "SEPLAG"
        assert route.calls.last.request.url.params["unidade"] == "SEPLAG/DCCTA"

    @respx.mock
    def test_unidades_processos(self):
        respx.get(f"{API}/datalake/processos/unidades").mock(
            return_value=httpx.Response(200, json=["SEPLAG/DCCTA", "SEPLAG/DCCP"])
        )
        assert call(lambda c: c.datalake.unidades_processos()) == ["SEPLAG/DCCTA", "SEPLAG/DCCP"]

    @respx.mock
    def test_servidor(self):
        respx.get(f"{API}/datalake/servidores/12345678901").mock(
            return_value=httpx.Response(200, json={
                "id_pessoa": 99, "nome": "Fulano", "masp": "123", "cpf": "12345678901",
            })
        )
        assert call(lambda c: c.datalake.servidor("12345678901")).id_pessoa == 99
