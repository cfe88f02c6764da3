"""Custom exceptions for SMRK Probe."""

from __future__ import annotations


class SmrkError(Exception):
    """Base exception for all SMRK Probe errors."""

    error_code = "SMRK_ERROR"


class InvalidParameterError(SmrkError, ValueError):
    """Raised when an operator or probe parameter is out of range."""

    error_code = "SMRK_INVALID_PARAMETER"

    def __init__(self, message: str, parameter: str | None = None):
        self.parameter = parameter
        if parameter:
            message = f"[{parameter}] {message}"
        super().__init__(message)


class InvalidTrialCountError(InvalidParameterError):
    """Raised when a probe is requested with an unusable number of trials."""

    error_code = "SMRK_INVALID_TRIAL_COUNT"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.error_code}: {message}", parameter="trials")


class DimensionMismatchError(SmrkError, ValueError):
    """Raised when a vector length disagrees with the operator dimension."""

    error_code = "SMRK_DIMENSION_MISMATCH"

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        got: int | None = None,
    ):
        self.expected = expected
        self.got = got
        if expected is not None and got is not None:
            message = f"{message} (expected {expected}, got {got})"
        super().__init__(message)


class IncompleteProbeError(SmrkError):
    """Raised when a report is requested from a partially folded accumulator."""

    error_code = "SMRK_INCOMPLETE_PROBE"


class ConfigurationError(SmrkError):
    """Raised when ``smrkprobe.toml`` is malformed."""

    error_code = "SMRK_CONFIGURATION"

    def __init__(self, message: str, section: str | None = None):
        self.section = section
        if section:
            message = f"[{section}] {message}"
        super().__init__(message)
