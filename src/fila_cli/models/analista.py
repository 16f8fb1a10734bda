"""Analyst and SEI unit data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from fila_cli.models.common import ApiModel


class Analista(ApiModel):
    """Complementary data of a user with the ANALISTA role."""

    usuario_id: int
    orgao: str = ""
    sei_unidade_id: str = ""
    sei_unidade_sigla: str = ""
    afastado: bool = False
    ultima_atribuicao_em: datetime | None = None


class AnalistaCreateRequest(BaseModel):
    unidade_id: str
    orgao: str


class UnidadeSei(ApiModel):
    id: str
    sigla: str = ""
    descricao: str = ""
