"""Unit definition types."""

import enum
from dataclasses import dataclass
from typing import Tuple


class Dimension(str, enum.Enum):
    """Physical dimension a unit measures."""
    MASS = "mass"
    LENGTH = "length"
    DURATION = "duration"
    PRESSURE = "pressure"
    ENERGY = "energy"
    POWER = "power"
    ANGLE = "angle"
    FORCE = "force"
    TEMPERATURE = "temperature"


@dataclass(frozen=True)
class UnitDefinition:
    """A recognised unit and its ratio to the dimension's base unit.

    ``factor`` is how many of this unit make one base unit, so converting
    between two units of one dimension is ``value * (to.factor / from.factor)``.
    Temperature units all carry a factor of 1; they are converted with
    offsets instead.
    """
    name: str
    aliases: Tuple[str, ...]
    dimension: Dimension
    factor: float
    allows_negative: bool = False

    def tokens(self) -> Tuple[str, ...]:
        """Canonical name followed by aliases, in declaration order."""
        return (self.name,) + self.aliases
