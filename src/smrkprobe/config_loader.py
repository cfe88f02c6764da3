"""``smrkprobe.toml`` configuration loader.

Parses ``smrkprobe.toml`` into structured types consumed by the service
facade and ``smrkprobe probe``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from smrkprobe.core.exceptions import ConfigurationError

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redefine]


DEFAULT_CONFIG_FILENAME = "smrkprobe.toml"


@dataclass(frozen=True)
class LimitsSectionConfig:
    """Service guardrails from ``[limits]``."""

    matvec_max_n: int = 50_000
    probe_max_n: int = 20_000
    max_p_max: int = 1_000_000
    max_trials: int = 200


@dataclass(frozen=True)
class ProbeSectionConfig:
    """Probe defaults from ``[probe]``."""

    workers: int = 1
    seed: int = 42
    trials: int = 100


@dataclass(frozen=True)
class ProjectConfig:
    """Top-level parsed representation of ``smrkprobe.toml``."""

    limits: LimitsSectionConfig = field(default_factory=LimitsSectionConfig)
    probe: ProbeSectionConfig = field(default_factory=ProbeSectionConfig)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


def default_config() -> ProjectConfig:
    """Return the built-in configuration used when no file is given."""
    return ProjectConfig()


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"expected a table, got {type(value).__name__}", section=name)
    return value


def _int_field(
    table: dict[str, Any], key: str, default: int, *, section: str, minimum: int = 1
) -> int:
    value = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}", section=section)
    if value < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {value}", section=section)
    return value


def load_config(path: str | Path = DEFAULT_CONFIG_FILENAME) -> ProjectConfig:
    """Load and parse a ``smrkprobe.toml`` file.

    Parameters
    ----------
    path:
        Path to the TOML configuration file.  Defaults to
        ``smrkprobe.toml`` in the current directory.

    Returns
    -------
    ProjectConfig
        Structured configuration object.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    ConfigurationError
        If the file is not valid TOML or a field is malformed.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"invalid TOML in {config_path}: {exc}") from exc

    defaults_limits = LimitsSectionConfig()
    limits_raw = _section(raw, "limits")
    limits = LimitsSectionConfig(
        matvec_max_n=_int_field(
            limits_raw, "matvec_max_n", defaults_limits.matvec_max_n, section="limits"
        ),
        probe_max_n=_int_field(
            limits_raw, "probe_max_n", defaults_limits.probe_max_n, section="limits"
        ),
        max_p_max=_int_field(limits_raw, "max_p_max", defaults_limits.max_p_max, section="limits"),
        max_trials=_int_field(
            limits_raw, "max_trials", defaults_limits.max_trials, section="limits"
        ),
    )

    defaults_probe = ProbeSectionConfig()
    probe_raw = _section(raw, "probe")
    probe = ProbeSectionConfig(
        workers=_int_field(probe_raw, "workers", defaults_probe.workers, section="probe"),
        seed=_int_field(probe_raw, "seed", defaults_probe.seed, section="probe", minimum=0),
        trials=_int_field(probe_raw, "trials", defaults_probe.trials, section="probe"),
    )
    if probe.trials > limits.max_trials:
        raise ConfigurationError(
            f"trials ({probe.trials}) exceeds limits.max_trials ({limits.max_trials})",
            section="probe",
        )

    return ProjectConfig(limits=limits, probe=probe, raw=raw)
