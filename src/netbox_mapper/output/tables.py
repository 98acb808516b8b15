"""Rich table rendering helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from rich.table import Table


def cell(value: Any) -> str:
    """Render one value, collapsing nested NetBox objects to a readable label.

    ``{value, label}`` choices show their label, nested objects their
    ``display``/``name``/``id``, lists are comma-joined.
    """
    if value is None:
        return ""
    if isinstance(value, Mapping):
        for key in ("display", "label", "name", "id"):
            if value.get(key) not in (None, ""):
                return str(value[key])
        return ", ".join(f"{k}={cell(v)}" for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return ", ".join(cell(v) for v in value)
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


def kv_table(data: Mapping[str, Any], *, title: str | None = None) -> Table:
    """Render a key-value mapping as a two-column table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, cell(value))
    return table
