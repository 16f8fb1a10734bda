"""SEI unit commands."""

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

app = typer.Typer(name="unidades", help="SEI units.")


@app.command("list")
@error_handler
def list_unidades(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List SEI units."""

    async def _run():
        async with open_client(profile, url, token, papeis=None) as client:
            return await client.unidades.list()

    unidades = run(_run())
    output(
        unidades,
        fmt,
        columns=["ID", "Sigla", "Descrição"],
        rows=model_rows(unidades, ["id", "sigla", "descricao"]),
        title="Unidades SEI",
    )
