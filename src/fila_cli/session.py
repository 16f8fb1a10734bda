"""Session bridge between stored credentials and the API client."""

from __future__ import annotations

from typing import Protocol

from fila_cli.client.api import FilaClient
from fila_cli.client.errors import AuthenticationError
from fila_cli.models import Papel, Token, Usuario

# Roles allowed to manage users, processes and retirement cases.
GESTAO_PAPEIS = (Papel.ADMIN, Papel.GESTOR, Papel.SUBSECRETARIO)


class TokenStore(Protocol):
    """Where the host keeps the session token between invocations."""

    def get_token(self) -> str | None: ...

    def save_token(self, token: Token) -> None: ...

    def delete_token(self) -> None: ...


async def current_user(client: FilaClient) -> Usuario:
    """Return the user owning the client's token."""
    return await client.auth.me()


async def load_session(client: FilaClient, store: TokenStore) -> Usuario | None:
    """Resolve the identity behind the stored token.

    Returns ``None`` when nothing is stored. A 401 means the token is invalid
    or expired server-side, so it is deleted from *store* before the error
    propagates.
    """
    if not store.get_token():
        return None
    try:
        return await current_user(client)
    except AuthenticationError:
        store.delete_token()
        raise


def has_papel(usuario: Usuario | None, *papeis: Papel) -> bool:
    """Report whether *usuario* holds one of *papeis*."""
    if usuario is None or usuario.papel is None:
        return False
    return usuario.papel in {p.value for p in papeis}
