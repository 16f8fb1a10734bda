"""Process commands — list, create, show, and documents of SEI processes."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from fila_cli.client.errors import error_handler
from fila_cli.commands._common import (
    AllOpt,
    FormatOpt,
    LimitOpt,
    PageOpt,
    ProfileOpt,
    TokenOpt,
    UrlOpt,
    open_client,
    run,
)
from fila_cli.models import ProcessoCreateRequest
from fila_cli.output.formatter import output
from fila_cli.output.tables import model_rows

app = typer.Typer(name="processos", help="SEI processes tracked by the queue.")
console = Console()

_PROCESSO_FIELDS = ["id", "numero", "status", "sei_unidade_sigla", "aposentadoria", "analisado_em"]
_PROCESSO_COLUMNS = ["ID", "Número", "Status", "Unidade", "Aposentadoria", "Analisado em"]


@app.command("list")
@error_handler
def list_processos(
    numero: Annotated[str | None, typer.Option("--numero", help="Filter by process number")] = None,
    page: PageOpt = None,
    limit: LimitOpt = None,
    fetch_all: AllOpt = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List processes, one page at a time or all with --all."""

    async def _run():
        async with open_client(profile, url, token) as client:
            if fetch_all:
                return [p async for p in client.processos.iter_all(limit=limit, numero=numero)], None
            result = await client.processos.list(page=page, limit=limit, numero=numero)
            return result.data, result

    processos, result = run(_run())
    output(
        processos,
        fmt,
        columns=_PROCESSO_COLUMNS,
        rows=model_rows(processos, _PROCESSO_FIELDS),
        title="Processos",
    )
    if result is not None and fmt == "table":
        console.print(
            f"Page {result.current_page} of {result.total_pages} "
            f"({result.total_count} processes)"
        )


@app.command()
@error_handler
def show(
    processo_id: Annotated[str, typer.Argument(help="Process ID (UUID)")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one process."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.processos.get(processo_id)

    output(run(_run()), fmt, title="Processo")


@app.command()
@error_handler
def create(
    numero: Annotated[str, typer.Argument(help="SEI process number")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Register a process by its SEI number."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.processos.create(ProcessoCreateRequest(numero=numero))

    processo = run(_run())
    console.print(f"[green]Process {processo.numero} registered (ID {processo.id}).[/]")
    if fmt != "table":
        output(processo, fmt)


@app.command()
@error_handler
def documentos(
    processo_id: Annotated[str, typer.Argument(help="Process ID (UUID)")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List the documents of a process."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.processos.documentos(processo_id)

    docs = run(_run())
    rows = [
        [d.id, d.numero, d.tipo, d.data, d.unidade_geradora, len(d.assinaturas)]
        for d in docs
    ]
    output(
        docs,
        fmt,
        columns=["ID", "Número", "Tipo", "Data", "Unidade", "Assinaturas"],
        rows=rows,
        title="Documentos",
    )
