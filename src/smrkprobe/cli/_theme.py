"""Styles used by the ``smrkprobe`` commands.

Status colors double as the grading of symmetry residuals: a probe whose
largest residual sits at rounding level is shown as passing.
"""

from __future__ import annotations

from rich.theme import Theme

# Residuals at or below this are rounding noise for float64 inner products.
SYMMETRIC_RESIDUAL = 1e-12
# Above this a residual is treated as a real asymmetry.
ASYMMETRIC_RESIDUAL = 1e-9

_GREEN = "#8BD5A0"
_AMBER = "#E8C170"
_RED = "#EF8A8A"
_TEAL = "#7FC8D6"
_SLATE = "#9AA3B5"

SMRK_THEME = Theme(
    {
        "smrk.label": "bold",
        "smrk.muted": _SLATE,
        "smrk.pass": f"bold {_GREEN}",
        "smrk.fail": f"bold {_RED}",
        "smrk.ok": _GREEN,
        "smrk.err": _RED,
        "smrk.caution": _AMBER,
        "smrk.info": _TEAL,
        "smrk.border": _SLATE,
        "smrk.border.info": _TEAL,
    }
)

STATUS_ICONS: dict[str, str] = {
    "pass": "✓",
    "fail": "✗",
    "warn": "!",
    "info": "•",
}

STATUS_STYLES: dict[str, str] = {
    "pass": "smrk.ok",
    "fail": "smrk.err",
    "warn": "smrk.caution",
    "info": "smrk.info",
}

PANEL_PADDING: tuple[int, int] = (1, 2)

# Rows of a vector shown before the table is elided.
VECTOR_PREVIEW_ROWS = 20


def residual_status(value: float) -> str:
    """Grade a symmetry residual as ``"pass"``, ``"warn"`` or ``"fail"``."""
    if value <= SYMMETRIC_RESIDUAL:
        return "pass"
    if value <= ASYMMETRIC_RESIDUAL:
        return "warn"
    # NaN also lands here
    return "fail"
