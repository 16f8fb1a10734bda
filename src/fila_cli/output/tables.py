"""Rich table rendering helpers."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel
from rich.table import Table


def cell(value: Any) -> str:
    """Render one value for a table cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "sim" if value else "não"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return str(value)


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(cell(value) for value in row))
    return table


def model_rows(items: Sequence[BaseModel], fields: Sequence[str]) -> list[list[Any]]:
    """Pick *fields* from each model, in order, as table rows."""
    return [[getattr(item, name, None) for name in fields] for item in items]


def kv_table(data: dict[str, Any] | BaseModel, *, title: str | None = None) -> Table:
    """Render a key-value mapping (or a model's fields) as a two-column table."""
    if isinstance(data, BaseModel):
        data = dict(data)
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Campo", style="bold cyan", no_wrap=True)
    table.add_column("Valor")
    for key, value in data.items():
        if isinstance(value, (list, dict, BaseModel)):
            continue
        table.add_row(key, cell(value))
    return table
