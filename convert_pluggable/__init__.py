"""Convert quantities between units of measurement."""

from functools import lru_cache
from typing import Optional

from convert_pluggable.catalog import Dimension, UnitCatalog, UnitDefinition, get_catalog
from convert_pluggable.conversion import (
    ConversionEngine,
    ConversionError,
    ConversionRequest,
    Quantity,
)

__version__ = "0.1.0"


@lru_cache(maxsize=1)
def get_engine() -> ConversionEngine:
    """Return the shared engine built from the default catalog and settings."""
    return ConversionEngine()


def convert(from_unit: str, to_unit: str, quantity: Quantity, precision: int) -> Optional[str]:
    """Convert ``quantity`` from one unit to another.

    >>> convert("feet", "inches", "5", 3)
    '60.000'

    Returns None when the conversion is not possible.
    """
    return get_engine().convert(from_unit, to_unit, quantity, precision)


__all__ = [
    'convert',
    'get_engine',
    'get_catalog',
    'ConversionEngine',
    'ConversionError',
    'ConversionRequest',
    'Dimension',
    'UnitCatalog',
    'UnitDefinition',
]
