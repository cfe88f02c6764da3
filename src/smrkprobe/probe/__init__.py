"""Randomized symmetry probe: sampler, driver and report assembly."""

from .accumulator import Accumulator, TrialOutcome
from .driver import ProbeRun, asymmetry, probe, run_symmetry_probe, run_trial
from .report import REPORT_FIELDS, SymmetryReport, finalize
from .sampler import sample_pair, sample_vector, stream_key

__all__ = [
    "Accumulator",
    "ProbeRun",
    "REPORT_FIELDS",
    "SymmetryReport",
    "TrialOutcome",
    "asymmetry",
    "finalize",
    "probe",
    "run_symmetry_probe",
    "run_trial",
    "sample_pair",
    "sample_vector",
    "stream_key",
]
