"""Conversion module for unit conversions."""

from .engine import (
    ConversionEngine,
    ConversionRequest,
    Quantity,
    ResolvedPair,
    format_result,
    normalize_token,
    parse_quantity,
)
from .exceptions import (
    AmbiguousUnitError,
    BatchLimitError,
    ConversionError,
    DimensionMismatchError,
    InvalidPrecisionError,
    NegativeValueError,
    NonFiniteInputError,
    NonFiniteResultError,
    NonNumericInputError,
    UnknownTemperatureScaleError,
    UnresolvedUnitError,
)
from .service import (
    ConversionOutcome,
    ConversionService,
    ConversionSummary,
)
from .temperature import TemperatureConverter

__all__ = [
    'ConversionEngine',
    'ConversionRequest',
    'Quantity',
    'ResolvedPair',
    'format_result',
    'normalize_token',
    'parse_quantity',
    'AmbiguousUnitError',
    'BatchLimitError',
    'ConversionError',
    'DimensionMismatchError',
    'InvalidPrecisionError',
    'NegativeValueError',
    'NonFiniteInputError',
    'NonFiniteResultError',
    'NonNumericInputError',
    'UnknownTemperatureScaleError',
    'UnresolvedUnitError',
    'ConversionOutcome',
    'ConversionService',
    'ConversionSummary',
    'TemperatureConverter',
]
