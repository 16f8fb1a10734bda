"""Retirement case commands — list, show, and status history."""

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
from fila_cli.models import StatusProcesso
from fila_cli.output.formatter import output
from fila_cli.output.tables import model_rows

app = typer.Typer(name="aposentadoria", help="Retirement cases in the analysis queue.")
console = Console()

_CASO_FIELDS = ["id", "numero", "status", "score", "prioridade", "judicial", "invalidez", "analista_id"]
_CASO_COLUMNS = ["ID", "Número", "Status", "Score", "Prioridade", "Judicial", "Invalidez", "Analista"]

CasoIdArg = Annotated[int, typer.Argument(help="Retirement case ID")]


@app.command("list")
@error_handler
def list_casos(
    numero: Annotated[str | None, typer.Option("--numero", help="Filter by process number")] = None,
    status: Annotated[StatusProcesso | None, typer.Option("--status", help="Filter by status")] = None,
    page: PageOpt = None,
    limit: LimitOpt = None,
    fetch_all: AllOpt = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List retirement cases."""

    async def _run():
        async with open_client(profile, url, token) as client:
            if fetch_all:
                casos = [
                    c async for c in client.aposentadoria.iter_all(
                        limit=limit, numero=numero, status=status,
                    )
                ]
                return casos, None
            result = await client.aposentadoria.list(
                page=page, limit=limit, numero=numero, status=status,
            )
            return result.data, result

    casos, result = run(_run())
    output(
        casos,
        fmt,
        columns=_CASO_COLUMNS,
        rows=model_rows(casos, _CASO_FIELDS),
        title="Aposentadoria",
    )
    if result is not None and fmt == "table":
        console.print(
            f"Page {result.current_page} of {result.total_pages} "
            f"({result.total_count} cases)"
        )


@app.command()
@error_handler
def show(
    caso_id: CasoIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one retirement case."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.aposentadoria.get(caso_id)

    output(run(_run()), fmt, title=f"Processo de aposentadoria {caso_id}")


@app.command()
@error_handler
def historico(
    caso_id: CasoIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show the status history of a retirement case."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.aposentadoria.historico(caso_id)

    entries = run(_run())
    output(
        entries,
        fmt,
        columns=["Quando", "De", "Para", "Usuário", "Observação"],
        rows=model_rows(
            entries,
            ["alterado_em", "status_anterior", "status_novo", "usuario_id", "observacao"],
        ),
        title=f"Histórico {caso_id}",
    )
