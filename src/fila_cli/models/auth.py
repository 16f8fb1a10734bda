"""Authentication and user data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from fila_cli.models.common import ApiModel


class Papel(str, Enum):
    """Role controlling what a user may do."""

    ADMIN = "ADMIN"
    ANALISTA = "ANALISTA"
    GESTOR = "GESTOR"
    SUBSECRETARIO = "SUBSECRETARIO"


class Escopo(str, Enum):
    """Purpose of a token."""

    AUTH = "auth"
    SETUP = "setup"
    RESET_SENHA = "reset-senha"


class Token(ApiModel):
    """Session token issued by ``/auth/entrar``."""

    token: str
    expira: datetime


class PendingAction(ApiModel):
    """Action the user still has to complete (e.g. finish analyst data)."""

    slug: str
    title: str


class Usuario(ApiModel):
    id: int
    nome: str = ""
    cpf: str = ""
    email: str = ""
    email_verificado: bool = False
    # Kept as text so a role added by the backend does not break decoding.
    papel: str | None = None
    pendencias: list[PendingAction] = Field(default_factory=list)


class EntrarRequest(BaseModel):
    cpf: str
    senha: str


class CadastrarRequest(BaseModel):
    """Finish account setup with the token sent by email."""

    token: str
    senha: str
    confirmar_senha: str


class RecuperarSenhaRequest(BaseModel):
    cpf: str


class RedefinirSenhaRequest(BaseModel):
    """Reset a password with a ``reset-senha`` token."""

    token: str
    senha: str
    confirmar_senha: str


class UsuarioCreateRequest(BaseModel):
    nome: str
    cpf: str
    email: str
    papel: Papel
