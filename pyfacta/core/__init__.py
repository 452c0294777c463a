"""
Core infrastructure for PyFacta.

This module provides shared abstractions and utilities used by the
domain-specific submodules (regression, insights).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators for point sequences
    functional: curry / pipe for data-last composition
    compute: Timing utilities
"""

from pyfacta.core.result import Result
from pyfacta.core.exceptions import (
    PyFactaError,
    ValidationError,
    InsufficientDataError,
    InvalidInputError,
    DegenerateInputError,
    NumericalError,
    NumericalStabilityError,
)
from pyfacta.core.functional import curry, pipe

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyFactaError",
    "ValidationError",
    "InsufficientDataError",
    "InvalidInputError",
    "DegenerateInputError",
    "NumericalError",
    "NumericalStabilityError",
    # Composition
    "curry",
    "pipe",
]
