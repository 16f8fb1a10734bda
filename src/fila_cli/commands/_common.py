"""Shared helpers for CLI commands — client factory, options, sessions."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Coroutine, Sequence
from contextlib import asynccontextmanager
from typing import Annotated, Any, TypeVar

import typer

from fila_cli.client.api import FilaClient
from fila_cli.client.auth import TokenResolver
from fila_cli.client.errors import ConfigurationError, PermissionDeniedError
from fila_cli.config.constants import DEFAULT_API_BASE
from fila_cli.config.manager import ConfigManager, ProfileTokenStore
from fila_cli.config.models import Profile
from fila_cli.models import Papel
from fila_cli.session import GESTAO_PAPEIS, has_papel, load_session

T = TypeVar("T")

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Config profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="API URL override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="Session token override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]
PageOpt = Annotated[
    int | None,
    typer.Option("--page", help="Page number (starts at 1)"),
]
LimitOpt = Annotated[
    int | None,
    typer.Option("--limit", help="Items per page (backend max 50)"),
]
AllOpt = Annotated[
    bool,
    typer.Option("--all", help="Fetch every page"),
]


def get_manager() -> ConfigManager:
    return ConfigManager()


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Drive an async client call from a synchronous Typer command."""
    return asyncio.run(coro)


def make_client(profile: Profile, token: str | TokenResolver | None = None) -> FilaClient:
    """Create a FilaClient for *profile* (its API base under ``/api/v1``)."""
    return FilaClient(
        f"{profile.url}{DEFAULT_API_BASE}",
        token=token,
        timeout=profile.timeout,
    )


def resolve_store(
    profile_name: str | None, url: str | None, token: str | None,
) -> ProfileTokenStore:
    """Resolve the active profile from CLI options, env vars, or config."""
    mgr = get_manager()
    profile = mgr.resolve_profile(profile_name=profile_name, url=url, token=token)
    return ProfileTokenStore(mgr, profile)


@asynccontextmanager
async def open_client(
    profile_name: str | None,
    url: str | None,
    token: str | None,
    *,
    papeis: Sequence[Papel] | None = GESTAO_PAPEIS,
) -> AsyncIterator[FilaClient]:
    """Open an authenticated client, checking the caller's role first.

    The stored token is cleared when the API rejects it. Pass
    ``papeis=None`` to skip the role check (any logged-in user).
    """
    store = resolve_store(profile_name, url, token)
    async with make_client(store.profile, store.get_token) as client:
        usuario = await load_session(client, store)
        if usuario is None:
            raise ConfigurationError(
                "Not logged in. Run 'fila auth entrar' or pass --token."
            )
        if papeis and not has_papel(usuario, *papeis):
            allowed = ", ".join(p.value for p in papeis)
            raise PermissionDeniedError(
                403, {"message": f"This command requires one of the roles: {allowed}"},
            )
        yield client
