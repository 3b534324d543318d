"""Affine temperature conversion.

Temperature scales do not share a zero point, so they cannot be converted
with a single ratio. Every conversion goes through fahrenheit:

    F  = C * 1.8 + 32               C  = (F - 32) * 0.555
    F  = 1.8 * (K - 273.15) + 32    K  = (F + 459.67) * 0.555
    F  = R - 459.67                 R  = F + 459.67
    F  = Re * 2.25 + 32             Re = (F - 32) * 0.444

The 0.555 and 0.444 coefficients are truncations of 5/9 and 4/9. They are
kept by default so results match what callers have always received; the
"exact" mode uses the true fractions.
"""

import logging
from typing import Dict, Tuple

from .exceptions import UnknownTemperatureScaleError

logger = logging.getLogger(__name__)

FAHRENHEIT = "fahrenheit"
CELSIUS = "celsius"
KELVIN = "kelvin"
RANKINE = "rankine"
REAUMUR = "reaumur"

KNOWN_SCALES = (FAHRENHEIT, CELSIUS, KELVIN, RANKINE, REAUMUR)

COEFFICIENTS: Dict[str, Tuple[float, float]] = {
    "legacy": (0.555, 0.444),
    "exact": (5 / 9, 4 / 9),
}


class TemperatureConverter:
    """Converts between the five supported temperature scales."""

    def __init__(self, coefficients: str = "legacy", reaumur_fallback: bool = False):
        """
        Args:
            coefficients: "legacy" or "exact" fahrenheit -> celsius/reaumur factors
            reaumur_fallback: Treat unrecognised scale names as reaumur
                instead of raising
        """
        if coefficients not in COEFFICIENTS:
            raise ValueError(
                f"Unknown temperature coefficients '{coefficients}', "
                f"expected one of {list(COEFFICIENTS)}"
            )
        self.coefficients = coefficients
        self.celsius_coefficient, self.reaumur_coefficient = COEFFICIENTS[coefficients]
        self.reaumur_fallback = reaumur_fallback

    def scale(self, name: str) -> str:
        """Map a canonical unit name to a known scale.

        Raises:
            UnknownTemperatureScaleError: If the name is not a known scale and
                the reaumur fallback is disabled
        """
        scale = name.lower()
        if scale in KNOWN_SCALES:
            return scale

        if self.reaumur_fallback:
            logger.warning(f"Unrecognised temperature scale '{name}', treating it as reaumur")
            return REAUMUR

        raise UnknownTemperatureScaleError(f"No conversion formula for temperature unit '{name}'")

    def to_fahrenheit(self, name: str, value: float) -> float:
        scale = self.scale(name)

        if scale == FAHRENHEIT:
            return value
        if scale == CELSIUS:
            return value * 1.8 + 32
        if scale == KELVIN:
            return 1.8 * (value - 273.15) + 32
        if scale == RANKINE:
            return value - 459.67
        return value * 2.25 + 32

    def from_fahrenheit(self, name: str, value: float) -> float:
        scale = self.scale(name)

        if scale == FAHRENHEIT:
            return value
        if scale == CELSIUS:
            return (value - 32) * self.celsius_coefficient
        if scale == KELVIN:
            return (value + 459.67) * self.celsius_coefficient
        if scale == RANKINE:
            return value + 459.67
        return (value - 32) * self.reaumur_coefficient

    def convert(self, from_name: str, to_name: str, value: float) -> float:
        """Convert ``value`` from one scale to another.

        Converting a scale to itself returns the value untouched; the legacy
        coefficients would otherwise drift (100 C -> 212 F -> 99.9 C).
        """
        if from_name.lower() == to_name.lower():
            self.scale(from_name)
            return value

        return self.from_fahrenheit(to_name, self.to_fahrenheit(from_name, value))
