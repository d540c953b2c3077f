from __future__ import annotations

import re

_ALLOWED_RAW_CPF = re.compile(r"[0-9.\-/\s]*")


def normalize_cpf(value: str | None) -> str:
    """Return only the ASCII digits of ``value``, in order.

    Never fails: ``None``, empty or digit-free input yields ``""``.
    '123.456.789-00' -> '12345678900'
    """
    return "".join(ch for ch in (value or "") if "0" <= ch <= "9")


def has_only_cpf_characters(value: str) -> bool:
    """Digits, dots, hyphens, slashes and whitespace are accepted as raw input."""
    return _ALLOWED_RAW_CPF.fullmatch(value) is not None
