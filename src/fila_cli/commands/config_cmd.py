"""Config commands — manage API profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from fila_cli.client.errors import error_handler
from fila_cli.commands import _common
from fila_cli.config.models import Profile
from fila_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage API profiles and CLI configuration.")
console = Console()


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="API host URL (a trailing /api/v1 is dropped)")],
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = 30.0,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add or update a profile (a stored session is kept)."""
    mgr = _common.get_manager()
    existing = mgr.get_profile(name)
    profile = Profile(
        name=name,
        url=url,
        timeout=timeout,
        token=existing.token if existing else None,
        expira=existing.expira if existing else None,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _common.get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'fila config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "URL", "Session", "Default"]
    rows = []
    for name, p in profiles.items():
        session = "active" if p.authenticated else "expired" if p.token else "none"
        rows.append([name, p.url, session, "*" if name == default else ""])

    output(
        {"profiles": [p.model_dump(mode="json", exclude={"token"}, exclude_none=True) for p in profiles.values()]},
        fmt,
        columns=columns,
        rows=rows,
        title="Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (default if omitted)")] = None,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    mgr = _common.get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name or 'default'}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump(mode="json", exclude_none=True)
    # Never print the session token
    if "token" in data:
        data["token"] = data["token"][:4] + "..." if len(data["token"]) > 8 else "***"

    output(data, fmt, title=f"Profile: {profile.name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default profile."""
    mgr = _common.get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a profile and its stored session."""
    mgr = _common.get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force:
        if not Confirm.ask(f"Remove profile '{name}'?"):
            console.print("Cancelled.")
            return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
