"""Ingress helpers for spreadsheet rows.

The endpoint returns either positional row arrays or keyed objects depending
on the call; repositories read both through these helpers so no code outside
the repository indexes ``row[0]``.
"""
from __future__ import annotations

from typing import Any, Iterable, Sequence


def cell(row: Any, index: int, *keys: str, default: Any = None) -> Any:
    if isinstance(row, dict):
        for key in keys:
            value = row.get(key)
            if value is not None and value != "":
                return value
        return default
    if isinstance(row, (list, tuple)):
        if index < len(row):
            value = row[index]
            if value is not None and value != "":
                return value
        return default
    return default


def text(row: Any, index: int, *keys: str, default: str = "") -> str:
    value = cell(row, index, *keys)
    return default if value is None else str(value).strip()


def is_header(row: Any, first_cell_names: Iterable[str]) -> bool:
    """True for the sheet's title row (positional rows only)."""
    if not isinstance(row, (list, tuple)) or not row:
        return False
    first = str(row[0]).strip().lower()
    return first in {n.lower() for n in first_cell_names}


def data_rows(rows: Sequence[Any], header_names: Iterable[str]) -> list:
    names = list(header_names)
    return [r for r in rows if r and not is_header(r, names)]
