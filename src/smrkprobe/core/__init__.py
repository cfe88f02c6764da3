"""Core types and exceptions shared by the operator and the probe."""

from .exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    IncompleteProbeError,
    InvalidParameterError,
    InvalidTrialCountError,
    SmrkError,
)
from .params import U32_MAX, U64_MAX, OperatorParams, as_finite_float, as_unsigned

__all__ = [
    "ConfigurationError",
    "DimensionMismatchError",
    "IncompleteProbeError",
    "InvalidParameterError",
    "InvalidTrialCountError",
    "OperatorParams",
    "SmrkError",
    "U32_MAX",
    "U64_MAX",
    "as_finite_float",
    "as_unsigned",
]
