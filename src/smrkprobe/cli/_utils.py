"""Shared utilities for SMRK Probe CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from smrkprobe.config_loader import (
    DEFAULT_CONFIG_FILENAME,
    ProjectConfig,
    default_config,
    load_config,
)


def _parse_vector(value: str) -> list[float]:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if not parts:
        raise ValueError("Vector must contain at least one number.")

    entries: list[float] = []
    for part in parts:
        try:
            entries.append(float(part))
        except ValueError as exc:
            raise ValueError(f"Invalid vector entry: {part!r}") from exc
    return entries


def _load_vector_file(path: Path) -> list[float]:
    """Read a vector from a JSON file holding a list or ``{"x": [...]}``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("x")
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list of numbers or an object with 'x'.")
    return data


def _resolve_project_config(path: Path | None) -> ProjectConfig:
    """Load *path*, else ``./smrkprobe.toml`` when present, else the defaults."""
    if path is not None:
        return load_config(path)
    local = Path(DEFAULT_CONFIG_FILENAME)
    if local.exists():
        return load_config(local)
    return default_config()


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
