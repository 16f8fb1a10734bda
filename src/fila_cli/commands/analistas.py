"""Analyst commands."""

from __future__ import annotations

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
from fila_cli.output.tables import model_rows

app = typer.Typer(name="analistas", help="Analysts available for case assignment.")


@app.command("list")
@error_handler
def list_analistas(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List analysts."""

    async def _run():
        async with open_client(profile, url, token) as client:
            return await client.analistas.list()

    analistas = run(_run())
    output(
        analistas,
        fmt,
        columns=["Usuário", "Órgão", "Unidade", "Afastado", "Última atribuição"],
        rows=model_rows(
            analistas,
            ["usuario_id", "orgao", "sei_unidade_sigla", "afastado", "ultima_atribuicao_em"],
        ),
        title="Analistas",
    )
