"""Unit catalog module."""

from .models import Dimension, UnitDefinition
from .catalog import UnitCatalog, UnitNotFoundError, get_catalog
from .units import UNIT_GROUPS

__all__ = [
    'Dimension',
    'UnitDefinition',
    'UnitCatalog',
    'UnitNotFoundError',
    'get_catalog',
    'UNIT_GROUPS',
]
