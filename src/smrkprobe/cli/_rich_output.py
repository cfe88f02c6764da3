"""Theme-aware Rich rendering helpers shared across all CLI commands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.box import ROUNDED
from rich.panel import Panel
from rich.table import Table

from ._theme import PANEL_PADDING, STATUS_ICONS, STATUS_STYLES


def key_value_panel(
    data: dict[str, Any],
    *,
    title: str | None = None,
    border: str = "smrk.border",
) -> Panel:
    """Render a dict as an aligned key-value panel."""
    max_key_len = max((len(str(k)) for k in data), default=0)
    lines: list[str] = []
    for key, value in data.items():
        padded = str(key).ljust(max_key_len)
        lines.append(f"[smrk.label]{padded}[/smrk.label]  {value}")
    return Panel(
        "\n".join(lines),
        title=title,
        border_style=border,
        box=ROUNDED,
        padding=PANEL_PADDING,
    )


def status_table(
    rows: Sequence[tuple[str, str, str]],
    *,
    title: str | None = None,
    columns: tuple[str, str, str] = ("", "Component", "Value"),
) -> Table:
    """Render a status-icon table (used by ``doctor``).

    Each row is ``(status_key, label, value)`` where *status_key* is one
    of ``"pass"``, ``"fail"``, ``"warn"``, or ``"info"``.
    """
    table = Table(title=title, show_lines=False, padding=(0, 2))
    table.add_column(columns[0], width=3, no_wrap=True)
    table.add_column(columns[1], style="smrk.label", no_wrap=True)
    table.add_column(columns[2])

    for status_key, label, value in rows:
        icon = STATUS_ICONS.get(status_key, STATUS_ICONS["info"])
        style = STATUS_STYLES.get(status_key, "")
        table.add_row(f"[{style}]{icon}[/{style}]", label, value)

    return table


def vector_table(
    x: Sequence[float],
    y: Sequence[float],
    *,
    title: str | None = None,
    max_rows: int,
) -> Table:
    """Render ``m``, ``x(m)`` and ``(Hx)(m)`` side by side, eliding long vectors."""
    table = Table(title=title)
    table.add_column("m", justify="right", style="smrk.label")
    table.add_column("x(m)", justify="right")
    table.add_column("(Hx)(m)", justify="right")

    for position, (x_value, y_value) in enumerate(zip(x, y)):
        if position >= max_rows:
            table.add_row("…", f"[smrk.muted]{len(x) - max_rows} more[/smrk.muted]", "")
            break
        table.add_row(str(position + 1), f"{x_value:.6g}", f"{y_value:.12g}")

    return table
