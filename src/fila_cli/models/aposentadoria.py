"""Retirement case data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from fila_cli.models.common import ApiModel


class StatusProcesso(str, Enum):
    """Lifecycle status of a retirement case."""

    ANALISE_PENDENTE = "ANALISE_PENDENTE"
    EM_ANALISE = "EM_ANALISE"
    EM_DILIGENCIA = "EM_DILIGENCIA"
    RETORNO_DILIGENCIA = "RETORNO_DILIGENCIA"
    LEITURA_INVALIDA = "LEITURA_INVALIDA"
    CONCLUIDO = "CONCLUIDO"


class ProcessoAposentadoria(ApiModel):
    id: int
    processo_id: str = ""
    numero: str = ""
    data_requerimento: datetime | None = None
    cpf_requerente: str = ""
    data_nascimento_requerente: datetime | None = None
    invalidez: bool = False
    judicial: bool = False
    prioridade: bool = False
    score: int = 0
    status: str = StatusProcesso.ANALISE_PENDENTE.value
    analista_id: int | None = None
    analise_ia: dict[str, Any] | None = None
    criado_em: datetime | None = None
    atualizado_em: datetime | None = None


class HistoricoStatusProcesso(ApiModel):
    """One status transition of a retirement case."""

    id: int
    processo_aposentadoria_id: int
    status_anterior: str | None = None
    status_novo: str
    usuario_id: int | None = None
    observacao: str | None = None
    alterado_em: datetime | None = None
