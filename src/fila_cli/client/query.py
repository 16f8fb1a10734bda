"""Query string construction for API paths."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from urllib.parse import urlencode

Scalar = str | int | float | bool | Enum | None


def _render(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_query(params: Mapping[str, Scalar]) -> str:
    """Return ``?k=v&...`` for the present entries of *params*, or ``""``.

    ``None`` and empty-string values are dropped; the remaining keys keep
    their insertion order and are percent-encoded.
    """
    entries = [
        (key, _render(value))
        for key, value in params.items()
        if value is not None and value != ""
    ]
    if not entries:
        return ""
    return "?" + urlencode(entries)
