"""Tests for the CLI theme and residual grading."""

from __future__ import annotations

import importlib.util
import math

import pytest

if importlib.util.find_spec("rich") is None:
    pytest.skip("rich is not installed", allow_module_level=True)

from rich.console import Console

from smrkprobe.cli._theme import (
    SMRK_THEME,
    STATUS_ICONS,
    STATUS_STYLES,
    residual_status,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, "pass"),
        (1e-16, "pass"),
        (1e-12, "pass"),
        (1e-10, "warn"),
        (1e-9, "warn"),
        (1e-6, "fail"),
        (math.nan, "fail"),
    ],
)
def test_residual_status(value: float, expected: str) -> None:
    assert residual_status(value) == expected


def test_every_status_has_icon_and_style() -> None:
    assert set(STATUS_ICONS) == set(STATUS_STYLES)
    for style in STATUS_STYLES.values():
        assert style in SMRK_THEME.styles


def test_theme_renders_markup() -> None:
    console = Console(theme=SMRK_THEME, record=True, width=40)
    console.print("[smrk.fail]boom[/smrk.fail] [smrk.muted]quiet[/smrk.muted]")
    assert "boom quiet" in console.export_text()
