"""Prime-shift operator evaluation."""

from .arithmetic import log_table, primes_up_to, von_mangoldt_table
from .matvec import PrimeShiftOperator, apply, operator_matrix

__all__ = [
    "PrimeShiftOperator",
    "apply",
    "log_table",
    "operator_matrix",
    "primes_up_to",
    "von_mangoldt_table",
]
