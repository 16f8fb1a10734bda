"""SEI process data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from fila_cli.models.common import ApiModel


class Processo(ApiModel):
    """A process imported from SEI."""

    id: str
    numero: str
    status: str = ""
    link_acesso: str = ""
    sei_unidade_id: str = ""
    sei_unidade_sigla: str = ""
    aposentadoria: bool | None = None
    analisado_em: datetime | None = None
    metadados_ia: dict[str, Any] | None = None
    criado_em: datetime | None = None
    atualizado_em: datetime | None = None


class Assinatura(ApiModel):
    nome: str = ""
    cpf: str = ""


class Documento(ApiModel):
    """A document attached to a process."""

    id: int
    numero: str = ""
    tipo: str = ""
    conteudo: str = ""
    link_acesso: str = ""
    data: str = ""
    unidade_geradora: str = ""
    assinaturas: list[Assinatura] = Field(default_factory=list)


class ProcessoCreateRequest(BaseModel):
    numero: str
