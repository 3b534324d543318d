"""Custom exceptions for unit conversion"""
from typing import List, Optional


class ConversionError(Exception):
    """Base exception for conversions that cannot be performed"""
    pass


class UnresolvedUnitError(ConversionError):
    """Raised when a unit token matches nothing in the catalog"""

    def __init__(self, token: str, suggestions: Optional[List[str]] = None):
        self.token = token
        self.suggestions = suggestions or []
        message = f"Unit '{token}' not recognised"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(message)


class AmbiguousUnitError(ConversionError):
    """Raised in strict alias mode when a token matches several units"""

    def __init__(self, token: str, candidates: List[str]):
        self.token = token
        self.candidates = candidates
        super().__init__(
            f"Unit '{token}' is ambiguous: matches {', '.join(candidates)}"
        )


class NonNumericInputError(ConversionError):
    """Raised when the quantity is not a plain decimal number"""
    pass


class NonFiniteInputError(ConversionError):
    """Raised when the quantity is infinite or NaN"""
    pass


class NonFiniteResultError(ConversionError):
    """Raised when the converted value does not fit in a float"""
    pass


class NegativeValueError(ConversionError):
    """Raised when a negative quantity is given for a unit that cannot be negative"""
    pass


class DimensionMismatchError(ConversionError):
    """Raised when converting between units of different dimensions"""
    pass


class InvalidPrecisionError(ConversionError):
    """Raised when precision is not an integer in the accepted range"""
    pass


class UnknownTemperatureScaleError(ConversionError):
    """Raised when a temperature unit has no known conversion formula"""
    pass


class BatchLimitError(ConversionError):
    """Raised when a batch exceeds the configured size limit"""
    pass
