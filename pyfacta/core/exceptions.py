"""
Exception hierarchy for PyFacta.

All exceptions inherit from PyFactaError to allow catching any
library-specific error. Exceptions that describe a statistically
meaningful failure carry an ``error_type`` tag; the public entry points
convert those into result values instead of letting them propagate.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyFactaError(Exception):
    """Base exception for all PyFacta errors."""

    #: Error kind reported in RegressionError.error_type, or None when the
    #: exception is a contract violation that should propagate.
    error_type: str | None = None


class ValidationError(PyFactaError):
    """
    Input validation failed.

    Raised when user-provided inputs (including options) fail validation
    checks. Untagged: a bad option is a programming error, not a data problem.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Fewer usable points than the model needs.

    Attributes:
        n_valid: Number of usable points received
        min_required: Number of usable points required
    """
    error_type = "InsufficientData"

    def __init__(self, message: str, n_valid: int, min_required: int = 2):
        super().__init__(message)
        self.n_valid = n_valid
        self.min_required = min_required


class InvalidInputError(ValidationError):
    """
    A coordinate is non-numeric, NaN or infinite.

    Attributes:
        index: Position of the offending point in the caller's sequence
        value: The offending point as received
    """
    error_type = "InvalidInput"

    def __init__(self, message: str, index: int | None = None, value: Any = None):
        super().__init__(message)
        self.index = index
        self.value = value


class DegenerateInputError(ValidationError):
    """
    Input cannot be fitted by the model.

    For a straight line this means every x is identical (a vertical line).

    Attributes:
        denominator: The vanishing normal-equation denominator, if computed
    """
    error_type = "DegenerateInput"

    def __init__(self, message: str, denominator: float | None = None):
        super().__init__(message)
        self.denominator = denominator


class NumericalError(PyFactaError):
    """
    Numerical computation failed.

    Raised when coefficients or goodness-of-fit come out NaN or infinite
    despite inputs that passed validation.

    Attributes:
        quantity: Name of the quantity that failed ('slope', 'r_squared', ...)
    """
    error_type = "MathError"

    def __init__(self, message: str, quantity: str | None = None):
        super().__init__(message)
        self.quantity = quantity


class NumericalStabilityError(NumericalError):
    """
    Problem is too ill-conditioned to trust the result.

    Reserved: the closed-form line fit does not raise it yet.

    Attributes:
        condition_number: Estimated condition number, if available
    """
    error_type = "NumericalStability"

    def __init__(
        self,
        message: str,
        quantity: str | None = None,
        condition_number: float | None = None,
    ):
        super().__init__(message, quantity=quantity)
        self.condition_number = condition_number
