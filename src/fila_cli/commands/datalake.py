"""Datalake commands — read-only lookups of open processes and servants."""

from __future__ import annotations

from typing import Annotated

import typer

from fila_cli.client.errors import error_handler
from fila_cli.commands._common import (
    FormatOpt,
    ProfileOpt,
    TokenOpt,
    UrlOpt,
    open_client,
    run,
)
from fila_cli.output.formatter import output
from fila_cli.utils.cpf import format_cpf

app = typer.Typer(name="datalake", help="Read-only datalake lookups.")


@app.command()
@error_handler
def processos(
    unidade: Annotated[str, typer.Option("--unidade", "-u", help="Unit acronym")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List open processes received by a unit."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.datalake.processos(unidade)

    items = run(_run())
    rows = [
        [p.numero_processo, p.sigla_unidade, p.data_recebimento, p.unidade_geradora.sigla_unidade]
        for p in items
    ]
    output(
        items,
        fmt,
        columns=["Número", "Unidade", "Recebido em", "Unidade geradora"],
        rows=rows,
        title=f"Processos abertos em {unidade}",
    )


@app.command()
@error_handler
def unidades(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List units that have open processes."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.datalake.unidades_processos()

    siglas = run(_run())
    output(siglas, fmt, columns=["Unidade"], rows=[[s] for s in siglas], title="Unidades")


@app.command()
@error_handler
def servidor(
    cpf: Annotated[str, typer.Argument(help="CPF of the servant")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Look up a civil servant by CPF."""
    cpf = format_cpf(cpf)

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.datalake.servidor(cpf)

    output(run(_run()), fmt, title="Servidor")
