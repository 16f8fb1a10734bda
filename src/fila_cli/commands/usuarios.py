"""User commands — list, create, delete, and manage analyst data."""

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
    open_client,
    run,
)
from fila_cli.models import AnalistaCreateRequest, Papel, UsuarioCreateRequest
from fila_cli.output.formatter import output
from fila_cli.output.tables import model_rows
from fila_cli.utils.cpf import format_cpf

app = typer.Typer(name="usuarios", help="Manage users and their analyst data.")
analista_app = typer.Typer(name="analista", help="Analyst data of a user.")
app.add_typer(analista_app, name="analista")
console = Console()

_USUARIO_FIELDS = ["id", "nome", "cpf", "email", "papel", "email_verificado"]
_USUARIO_COLUMNS = ["ID", "Nome", "CPF", "Email", "Papel", "Verificado"]

UsuarioIdArg = Annotated[int, typer.Argument(help="User ID")]


@app.command("list")
@error_handler
def list_usuarios(
    papel: Annotated[Papel | None, typer.Option("--papel", help="Filter by role")] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List users, optionally filtered by role."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.usuarios.list(papel=papel)

    usuarios = run(_run())
    if not usuarios and fmt == "table":
        console.print("[yellow]No users found.[/]")
        return
    output(
        usuarios,
        fmt,
        columns=_USUARIO_COLUMNS,
        rows=model_rows(usuarios, _USUARIO_FIELDS),
        title="Usuários",
    )


@app.command()
@error_handler
def show(
    usuario_id: UsuarioIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one user."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.usuarios.get(usuario_id)

    output(run(_run()), fmt, title=f"Usuário {usuario_id}")


@app.command()
@error_handler
def create(
    nome: Annotated[str, typer.Option("--nome", help="Full name")],
    cpf: Annotated[str, typer.Option("--cpf", help="CPF (digits or 000.000.000-00)")],
    email: Annotated[str, typer.Option("--email", help="Contact email")],
    papel: Annotated[Papel, typer.Option("--papel", help="Role (ADMIN cannot be created)")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create a user; the API emails an account setup link."""
    data = UsuarioCreateRequest(nome=nome, cpf=format_cpf(cpf), email=email, papel=papel)

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.usuarios.create(data)

    usuario = run(_run())
    console.print(f"[green]User '{usuario.nome}' created (ID {usuario.id}).[/]")
    if fmt != "table":
        output(usuario, fmt)


@app.command()
@error_handler
def delete(
    usuario_id: UsuarioIdArg,
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a user."""
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Delete user {usuario_id}?"):
            console.print("Cancelled.")
            return

    async def _run():
        async with open_client(profile, url, token) as client:
            await client.usuarios.delete(usuario_id)

    run(_run())
    console.print(f"[green]User {usuario_id} deleted.[/]")


@app.command("enviar-cadastro")
@error_handler
def enviar_cadastro(
    usuario_id: UsuarioIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Resend the account setup email to a user."""

    async def _run():
        async with open_client(profile, url, token) as client:
            await client.usuarios.enviar_cadastro(usuario_id)

    run(_run())
    console.print(f"[green]Setup email sent to user {usuario_id}.[/]")


@analista_app.command("show")
@error_handler
def analista_show(
    usuario_id: UsuarioIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show the analyst data of a user."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.usuarios.get_analista(usuario_id)

    output(run(_run()), fmt, title=f"Analista {usuario_id}")


@analista_app.command("create")
@error_handler
def analista_create(
    usuario_id: UsuarioIdArg,
    unidade: Annotated[str, typer.Option("--unidade", help="SEI unit ID")],
    orgao: Annotated[str, typer.Option("--orgao", help="Agency")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Register analyst data for a user with the ANALISTA role."""
    data = AnalistaCreateRequest(unidade_id=unidade, orgao=orgao)

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.usuarios.create_analista(usuario_id, data)

    output(run(_run()), fmt, title=f"Analista {usuario_id}")


@analista_app.command("afastar")
@error_handler
def analista_afastar(
    usuario_id: UsuarioIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Mark an analyst as away so no cases are assigned."""

    async def _run():
        async with open_client(profile, url, token) as client:
            await client.usuarios.afastar_analista(usuario_id)

    run(_run())
    console.print(f"[green]Analyst {usuario_id} marked as away.[/]")


@analista_app.command("retornar")
@error_handler
def analista_retornar(
    usuario_id: UsuarioIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Bring an analyst back into the assignment queue."""

    async def _run():
        async with open_client(profile, url, token) as client:
            await client.usuarios.retornar_analista(usuario_id)

    run(_run())
    console.print(f"[green]Analyst {usuario_id} is back.[/]")
