"""Read-only datalake lookup models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from fila_cli.models.common import ApiModel


class UnidadeGeradora(ApiModel):
    sigla_unidade: str = ""
    id_unidade: str = ""


class DatalakeProcesso(ApiModel):
    """An open process listed by the datalake for a unit."""

    numero_processo: str
    sigla_unidade: str = ""
    data_recebimento: datetime | None = None
    unidade_geradora: UnidadeGeradora = Field(default_factory=UnidadeGeradora)


class Servidor(ApiModel):
    """Civil servant record looked up by CPF."""

    id_pessoa: int
    nome: str = ""
    masp: str = ""
    cpf: str = ""
    sexo: str = ""
    data_nascimento: datetime | None = None
    possui_deficiencia: bool = False
