"""
SMRK Probe - matvec and randomized symmetry probe for a prime-shift operator.

Simple Usage:
    from smrkprobe import matvec, symmetry_probe

    # Apply H to a vector of length n
    y = matvec(4, 2, 0.0, 0.0, [1.0, 0.0, 0.0, 0.0])

    # Estimate how far H deviates from self-adjointness
    report = symmetry_probe(4, 2, 0.0, 0.0, seed=42, trials=100)
    print(report.sym_abs_mean, report.sym_abs_max)
"""

from .config_loader import (
    LimitsSectionConfig,
    ProbeSectionConfig,
    ProjectConfig,
    default_config,
    load_config,
)
from .core import (
    ConfigurationError,
    DimensionMismatchError,
    IncompleteProbeError,
    InvalidParameterError,
    InvalidTrialCountError,
    OperatorParams,
    SmrkError,
)
from .operator import PrimeShiftOperator, apply, operator_matrix
from .probe import Accumulator, SymmetryReport, TrialOutcome, finalize, probe, run_symmetry_probe
from .service import get_version, matvec, symmetry_probe

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("smrkprobe")
except PackageNotFoundError:
    __version__ = "0.1.0.dev0"

__all__ = [
    # Service operations
    "get_version",
    "matvec",
    "symmetry_probe",
    # Core
    "OperatorParams",
    "PrimeShiftOperator",
    "apply",
    "operator_matrix",
    "Accumulator",
    "TrialOutcome",
    "SymmetryReport",
    "probe",
    "finalize",
    "run_symmetry_probe",
    # Configuration
    "LimitsSectionConfig",
    "ProbeSectionConfig",
    "ProjectConfig",
    "default_config",
    "load_config",
    # Exceptions
    "SmrkError",
    "InvalidParameterError",
    "InvalidTrialCountError",
    "DimensionMismatchError",
    "IncompleteProbeError",
    "ConfigurationError",
]
