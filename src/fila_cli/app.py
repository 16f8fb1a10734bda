"""Root Typer app — global options and command group registration."""

from __future__ import annotations

from typing import Optional

import typer

from fila_cli import __version__
from fila_cli.commands import (
    analistas,
    aposentadoria,
    auth,
    config_cmd,
    datalake,
    processos,
    unidades,
    usuarios,
)

app = typer.Typer(
    name="fila",
    help="CLI for the Fila de Aposentadoria REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"fila-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Fila de Aposentadoria CLI — users, processes, retirement cases, and more."""


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(auth.app, name="auth")
app.add_typer(usuarios.app, name="usuarios")
app.add_typer(processos.app, name="processos")
app.add_typer(aposentadoria.app, name="aposentadoria")
app.add_typer(analistas.app, name="analistas")
app.add_typer(unidades.app, name="unidades")
app.add_typer(datalake.app, name="datalake")


def main() -> None:
    app()
