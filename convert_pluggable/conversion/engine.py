"""Unit conversion engine.

Resolves a pair of unit tokens against the catalog, validates the quantity,
and computes the converted value as a fixed-point string.

Results are formatted with Python's ``format(value, ".Nf")``, which rounds
the exact binary value of the float to nearest, ties to even. ``0.125``
(exactly representable) becomes ``0.12`` at two places, while ``2.675``
(stored slightly below) becomes ``2.67``.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional, Union

from convert_pluggable.catalog import Dimension, UnitCatalog, UnitDefinition, get_catalog
from convert_pluggable.common.config import ConverterConfig, settings
from convert_pluggable.conversion.exceptions import (
    AmbiguousUnitError,
    ConversionError,
    DimensionMismatchError,
    InvalidPrecisionError,
    NegativeValueError,
    NonFiniteInputError,
    NonFiniteResultError,
    NonNumericInputError,
    UnresolvedUnitError,
)
from convert_pluggable.conversion.temperature import TemperatureConverter

logger = logging.getLogger(__name__)

Quantity = Union[str, int, float]

# plain ASCII decimal literal, optionally signed, with optional exponent
DECIMAL_PATTERN = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)
NON_FINITE_PATTERN = re.compile(r"^\s*[+-]?(?:inf(?:inity)?|nan)\s*$", re.IGNORECASE)
DIGIT_PATTERN = re.compile(r"\d")
ALPHA_PATTERN = re.compile(r"[^\W\d_]")


@dataclass(frozen=True)
class ConversionRequest:
    """A single conversion as supplied by a caller."""
    from_unit: str
    to_unit: str
    quantity: Quantity
    precision: int


@dataclass(frozen=True)
class ResolvedPair:
    """The two catalog entries a request resolved to."""
    source: UnitDefinition
    target: UnitDefinition

    @property
    def same_dimension(self) -> bool:
        return self.source.dimension == self.target.dimension

    @property
    def allows_negative(self) -> bool:
        """Negative input is accepted only when both units accept it."""
        return self.source.allows_negative and self.target.allows_negative

    @property
    def ratio(self) -> float:
        return self.target.factor / self.source.factor


def normalize_token(token: str) -> str:
    """Expand the first ``"`` to inches and the first ``'`` to feet."""
    return token.replace('"', "inches", 1).replace("'", "feet", 1)


def parse_quantity(quantity: Quantity) -> Optional[float]:
    """Parse a quantity as a float.

    Returns None when the value is not a number. Infinity and NaN are
    returned as floats so the caller can reject them explicitly.
    """
    if isinstance(quantity, bool):
        return None
    if isinstance(quantity, int):
        try:
            return float(quantity)
        except OverflowError:
            return math.inf if quantity > 0 else -math.inf
    if isinstance(quantity, float):
        return quantity
    if not isinstance(quantity, str):
        return None

    if DECIMAL_PATTERN.match(quantity) or NON_FINITE_PATTERN.match(quantity):
        return float(quantity)
    return None


def format_result(value: float, precision: int) -> str:
    """Format ``value`` as fixed-point with exactly ``precision`` decimals."""
    return format(value, f".{precision}f")


class ConversionEngine:
    """Converts quantities between units of the same dimension."""

    def __init__(
        self,
        catalog: Optional[UnitCatalog] = None,
        config: Optional[ConverterConfig] = None
    ):
        """Initialize engine.

        Args:
            catalog: Unit catalog (defaults to the shared catalog)
            config: Converter configuration (defaults to global settings)
        """
        self.catalog = catalog if catalog is not None else get_catalog()
        self.config = config if config is not None else settings.converter
        self.temperature = TemperatureConverter(
            coefficients=self.config.temperature_coefficients,
            reaumur_fallback=self.config.reaumur_fallback
        )

    def _resolve(self, token: str) -> UnitDefinition:
        if not isinstance(token, str):
            raise UnresolvedUnitError(repr(token))

        normalized = normalize_token(token)
        matches = self.catalog.matches(normalized)

        if not matches:
            suggestions = self.catalog.suggest(
                normalized,
                score_cutoff=self.config.suggestion_cutoff
            )
            raise UnresolvedUnitError(token, suggestions)

        if len(matches) > 1:
            candidates = [unit.name for unit in matches]
            if self.config.strict_aliases:
                raise AmbiguousUnitError(token, candidates)
            logger.warning(
                f"Ambiguous unit '{token}' matches {candidates}, using '{matches[0].name}'"
            )

        return matches[0]

    def resolve_pair(self, from_token: str, to_token: str) -> ResolvedPair:
        """Resolve both unit tokens.

        Raises:
            UnresolvedUnitError: If either token matches no unit
            AmbiguousUnitError: In strict alias mode, if a token matches several units
        """
        pair = ResolvedPair(source=self._resolve(from_token), target=self._resolve(to_token))
        logger.debug(f"Resolved '{from_token}' -> '{pair.source.name}', '{to_token}' -> '{pair.target.name}'")
        return pair

    def _validate_precision(self, precision: Union[int, str]) -> int:
        if isinstance(precision, bool):
            raise InvalidPrecisionError(f"Precision must be an integer, got {precision!r}")
        if isinstance(precision, str) and precision.isdecimal():
            precision = int(precision)
        if not isinstance(precision, int):
            raise InvalidPrecisionError(f"Precision must be an integer, got {precision!r}")

        if precision < 0:
            raise InvalidPrecisionError(f"Precision must not be negative, got {precision}")
        if precision > self.config.max_precision:
            raise InvalidPrecisionError(
                f"Precision {precision} exceeds maximum of {self.config.max_precision}"
            )
        return precision

    def _validate_quantity(self, quantity: Quantity, pair: ResolvedPair) -> float:
        value = parse_quantity(quantity)

        if value is not None:
            if math.isinf(value) or math.isnan(value):
                raise NonFiniteInputError(f"Quantity {quantity!r} is not finite")
            if value < 0 and not pair.allows_negative:
                raise NegativeValueError(
                    f"Negative quantity {quantity!r} not allowed for "
                    f"'{pair.source.name}' -> '{pair.target.name}'"
                )
        elif isinstance(quantity, str) and DIGIT_PATTERN.search(quantity):
            raise NonNumericInputError(f"Quantity {quantity!r} is not a number")

        if isinstance(quantity, str) and ALPHA_PATTERN.search(quantity):
            raise NonNumericInputError(f"Quantity {quantity!r} contains letters")

        if value is None:
            raise NonNumericInputError(f"Quantity {quantity!r} is not a number")

        return value

    def _compute(self, value: float, pair: ResolvedPair) -> float:
        if pair.source.dimension == Dimension.TEMPERATURE:
            return self.temperature.convert(pair.source.name, pair.target.name, value)
        return value * pair.ratio

    def calculate(self, request: ConversionRequest) -> str:
        """Convert a request, raising on any failure.

        Args:
            request: The conversion to perform

        Returns:
            The converted quantity formatted to ``request.precision`` decimals

        Raises:
            ConversionError: If the units, quantity or precision are invalid,
                or the units measure different dimensions
        """
        pair = self.resolve_pair(request.from_unit, request.to_unit)
        return self.convert_pair(pair, request.quantity, request.precision)

    def convert_pair(self, pair: ResolvedPair, quantity: Quantity, precision: int) -> str:
        """Validate and convert a quantity for an already resolved pair."""
        precision = self._validate_precision(precision)
        value = self._validate_quantity(quantity, pair)

        if not pair.same_dimension:
            raise DimensionMismatchError(
                f"Cannot convert between different dimensions: "
                f"{pair.source.name} ({pair.source.dimension.value}) to "
                f"{pair.target.name} ({pair.target.dimension.value})"
            )

        converted = self._compute(value, pair)
        if not math.isfinite(converted):
            raise NonFiniteResultError(
                f"Converting {quantity!r} {pair.source.name} to {pair.target.name} overflows"
            )

        result = format_result(converted, precision)
        logger.debug(f"{quantity} {pair.source.name} = {result} {pair.target.name}")
        return result

    def convert(
        self,
        from_unit: str,
        to_unit: str,
        quantity: Quantity,
        precision: int
    ) -> Optional[str]:
        """Convert a quantity, returning None if the conversion is not possible.

        Args:
            from_unit: Source unit name or alias
            to_unit: Target unit name or alias
            quantity: Number or numeric string to convert
            precision: Digits after the decimal point

        Returns:
            Formatted result, or None
        """
        try:
            return self.calculate(ConversionRequest(from_unit, to_unit, quantity, precision))
        except ConversionError as e:
            logger.debug(f"Conversion {from_unit!r} -> {to_unit!r} of {quantity!r} failed: {e}")
            return None

    def validate_conversion(self, from_unit: str, to_unit: str) -> bool:
        """Check whether two units can be converted between."""
        try:
            return self.resolve_pair(from_unit, to_unit).same_dimension
        except ConversionError:
            return False
