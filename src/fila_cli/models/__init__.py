"""Pydantic data models for the Fila REST API."""

from fila_cli.models.analista import Analista, AnalistaCreateRequest, UnidadeSei
from fila_cli.models.aposentadoria import (
    HistoricoStatusProcesso,
    ProcessoAposentadoria,
    StatusProcesso,
)
from fila_cli.models.auth import (
    CadastrarRequest,
    EntrarRequest,
    Escopo,
    Papel,
    PendingAction,
    RecuperarSenhaRequest,
    RedefinirSenhaRequest,
    Token,
    Usuario,
    UsuarioCreateRequest,
)
from fila_cli.models.common import ErrorBody, Paginated
from fila_cli.models.datalake import DatalakeProcesso, Servidor, UnidadeGeradora
from fila_cli.models.processo import (
    Assinatura,
    Documento,
    Processo,
    ProcessoCreateRequest,
)

__all__ = [
    "Analista",
    "AnalistaCreateRequest",
    "Assinatura",
    "CadastrarRequest",
    "DatalakeProcesso",
    "Documento",
    "EntrarRequest",
    "ErrorBody",
    "Escopo",
    "HistoricoStatusProcesso",
    "Paginated",
    "Papel",
    "PendingAction",
    "Processo",
    "ProcessoAposentadoria",
    "ProcessoCreateRequest",
    "RecuperarSenhaRequest",
    "RedefinirSenhaRequest",
    "Servidor",
    "StatusProcesso",
    "Token",
    "UnidadeGeradora",
    "UnidadeSei",
    "Usuario",
    "UsuarioCreateRequest",
]
