"""CPF input helpers."""

from __future__ import annotations

import re

CPF_RX = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$")


def format_cpf(value: str) -> str:
    """Format up to 11 digits of *value* as ``000.000.000-00``.

    Non-digits are discarded, so partial input yields a partial mask
    (``"1234"`` becomes ``"123.4"``).
    """
    digits = re.sub(r"\D", "", value)[:11]
    parts = [digits[:3], digits[3:6], digits[6:9]]
    head = ".".join(p for p in parts if p)
    tail = digits[9:]
    return f"{head}-{tail}" if tail else head


def is_valid_cpf_format(value: str) -> bool:
    return CPF_RX.match(value) is not None
