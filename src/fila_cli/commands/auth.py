"""Auth commands — log in/out, current user, account setup and password reset."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from fila_cli.client.errors import error_handler
from fila_cli.commands._common import (
    FormatOpt,
    ProfileOpt,
    TokenOpt,
    UrlOpt,
    make_client,
    open_client,
    resolve_store,
    run,
)
from fila_cli.models import (
    CadastrarRequest,
    EntrarRequest,
    Escopo,
    RecuperarSenhaRequest,
    RedefinirSenhaRequest,
)
from fila_cli.output.formatter import output
from fila_cli.session import current_user
from fila_cli.utils.cpf import format_cpf, is_valid_cpf_format

app = typer.Typer(name="auth", help="Log in, log out, and manage account credentials.")
console = Console()

SENHA_MIN = 8
SENHA_MAX = 60


def _check_cpf(value: str) -> str:
    cpf = format_cpf(value)
    if not is_valid_cpf_format(cpf):
        raise ValueError("CPF must have the format 000.000.000-00")
    return cpf


def _check_senha(senha: str) -> str:
    if not SENHA_MIN <= len(senha) <= SENHA_MAX:
        raise ValueError(f"Password must have between {SENHA_MIN} and {SENHA_MAX} characters")
    return senha


def _ask_new_senha() -> tuple[str, str]:
    senha = _check_senha(typer.prompt("New password", hide_input=True))
    confirmar = typer.prompt("Confirm password", hide_input=True)
    return senha, confirmar


@app.command()
@error_handler
def entrar(
    cpf: Annotated[str | None, typer.Option("--cpf", help="CPF (000.000.000-00)")] = None,
    senha: Annotated[str | None, typer.Option("--senha", help="Password (prompted if omitted)")] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
) -> None:
    """Log in and store the session token in the profile."""
    cpf = _check_cpf(cpf or typer.prompt("CPF"))
    senha = _check_senha(senha or typer.prompt("Password", hide_input=True))
    store = resolve_store(profile, url, None)

    async def _run():
        async with make_client(store.profile) as client:
            return await client.auth.entrar(EntrarRequest(cpf=cpf, senha=senha))

    token = run(_run())
    store.save_token(token)
    console.print(
        f"[green]Logged in.[/] Session valid until {token.expira:%Y-%m-%d %H:%M} "
        f"(profile '{store.profile.name}')."
    )


@app.command()
@error_handler
def sair(profile: ProfileOpt = None) -> None:
    """Log out by deleting the stored session token."""
    store = resolve_store(profile, None, None)
    if not store.manager.delete_token(store.profile.name):
        console.print("[yellow]No active session.[/]")
        return
    console.print("[green]Logged out.[/]")


@app.command()
@error_handler
def me(
    analista: Annotated[bool, typer.Option("--analista", help="Show analyst data instead")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show the logged-in user."""

    async def _run():
        async with open_client(profile, url, token, papeis=None) as client:
            if analista:
                return await client.auth.me_analista()
            return await current_user(client)

    data = run(_run())
    output(data, fmt, title="Analista" if analista else "Usuário")
    pendencias = getattr(data, "pendencias", None)
    if pendencias and fmt == "table":
        for p in pendencias:
            console.print(f"[yellow]Pending:[/] {p.title}")


@app.command("token-info")
@error_handler
def token_info(
    token_value: Annotated[str, typer.Argument(metavar="TOKEN", help="One-time token")],
    escopo: Annotated[str, typer.Option("--escopo", help="setup or reset-senha")] = Escopo.SETUP.value,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show the owner of an account-setup or password-reset token."""
    store = resolve_store(profile, url, None)

    async def _run():
        async with make_client(store.profile) as client:
            return await client.auth.token_info(token_value, escopo)

    output(run(_run()), fmt, title="Token owner")


@app.command()
@error_handler
def cadastrar(
    token_value: Annotated[str, typer.Option("--token", help="Setup token from the invitation email")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
) -> None:
    """Finish account setup by choosing a password."""
    store = resolve_store(profile, url, None)
    senha, confirmar = _ask_new_senha()

    async def _run():
        async with make_client(store.profile) as client:
            await client.auth.cadastrar(CadastrarRequest(
                token=token_value, senha=senha, confirmar_senha=confirmar,
            ))

    run(_run())
    console.print("[green]Account set up.[/] Log in with 'fila auth entrar'.")


@app.command("recuperar-senha")
@error_handler
def recuperar_senha(
    cpf: Annotated[str, typer.Option("--cpf", help="CPF (000.000.000-00)")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
) -> None:
    """Request a password reset email."""
    cpf = _check_cpf(cpf)
    store = resolve_store(profile, url, None)

    async def _run():
        async with make_client(store.profile) as client:
            await client.auth.recuperar_senha(RecuperarSenhaRequest(cpf=cpf))

    run(_run())
    console.print("[green]If the CPF is registered, a reset email was sent.[/]")


@app.command("redefinir-senha")
@error_handler
def redefinir_senha(
    token_value: Annotated[str, typer.Option("--token", help="Reset token from the email")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
) -> None:
    """Set a new password with a reset token."""
    store = resolve_store(profile, url, None)
    senha, confirmar = _ask_new_senha()

    async def _run():
        async with make_client(store.profile) as client:
            await client.auth.redefinir_senha(RedefinirSenhaRequest(
                token=token_value, senha=senha, confirmar_senha=confirmar,
            ))

    run(_run())
    console.print("[green]Password changed.[/]")
