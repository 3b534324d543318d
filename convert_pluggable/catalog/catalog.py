"""Read-only unit catalog with alias lookup."""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from rapidfuzz import fuzz, process, utils

from .models import Dimension, UnitDefinition
from .units import UNIT_GROUPS

logger = logging.getLogger(__name__)


class UnitNotFoundError(LookupError):
    """Raised when a token matches no unit in the catalog."""
    pass


class UnitCatalog:
    """Immutable table of unit definitions.

    Lookups are exact string matches against canonical names and aliases.
    Several units share aliases (``n`` is both nautical mile and newton);
    the first definition in declaration order always wins, so resolution
    is deterministic.
    """

    def __init__(self, groups: Iterable[Iterable[UnitDefinition]] = UNIT_GROUPS):
        """Build the catalog.

        Args:
            groups: Unit groups in resolution priority order
        """
        self._units: Tuple[UnitDefinition, ...] = tuple(
            unit for group in groups for unit in group
        )
        self._build_index()

        logger.info(
            f"Built unit catalog with {len(self._units)} units "
            f"across {len(self._by_dimension)} dimensions"
        )

    def _build_index(self) -> None:
        """Build token -> definitions and dimension -> definitions lookups."""
        index: Dict[str, List[UnitDefinition]] = {}
        by_dimension: Dict[Dimension, List[UnitDefinition]] = {}

        for unit in self._units:
            by_dimension.setdefault(unit.dimension, []).append(unit)
            # a unit may repeat a token (horsepower lists "hp" twice)
            for token in dict.fromkeys(unit.tokens()):
                index.setdefault(token, []).append(unit)

        self._index = MappingProxyType({k: tuple(v) for k, v in index.items()})
        self._by_dimension = MappingProxyType({k: tuple(v) for k, v in by_dimension.items()})

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[UnitDefinition]:
        return iter(self._units)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def resolve(self, token: str) -> Optional[UnitDefinition]:
        """Return the first unit matching ``token``, or None."""
        matches = self._index.get(token)
        if not matches:
            return None
        return matches[0]

    def get(self, token: str) -> UnitDefinition:
        """Return the first unit matching ``token``.

        Raises:
            UnitNotFoundError: If nothing matches
        """
        unit = self.resolve(token)
        if unit is None:
            raise UnitNotFoundError(f"Unit '{token}' not in catalog")
        return unit

    def matches(self, token: str) -> Tuple[UnitDefinition, ...]:
        """Return every unit matching ``token`` in declaration order."""
        return self._index.get(token, ())

    def is_ambiguous(self, token: str) -> bool:
        return len(self.matches(token)) > 1

    @staticmethod
    def _dimension(dimension) -> Dimension:
        try:
            return Dimension(dimension)
        except ValueError:
            raise UnitNotFoundError(f"Unknown dimension '{dimension}'") from None

    def dimensions(self) -> List[Dimension]:
        """Dimensions present in the catalog, in declaration order."""
        return list(self._by_dimension.keys())

    def units(self, dimension: Optional[Dimension] = None) -> List[UnitDefinition]:
        """List units, optionally restricted to one dimension.

        Raises:
            UnitNotFoundError: If ``dimension`` is not a known dimension
        """
        if dimension is None:
            return list(self._units)
        return list(self._by_dimension.get(self._dimension(dimension), ()))

    def base_unit(self, dimension: Dimension) -> UnitDefinition:
        """Return the first unit with factor 1 in ``dimension``.

        Raises:
            UnitNotFoundError: If the dimension is unknown or has no units
        """
        units = self._by_dimension.get(self._dimension(dimension), ())
        for unit in units:
            if unit.factor == 1:
                return unit
        if units:
            return units[0]
        raise UnitNotFoundError(f"Dimension '{dimension}' not in catalog")

    def suggest(self, token: str, limit: int = 3, score_cutoff: float = 75.0) -> List[str]:
        """Return close canonical names for a token that did not resolve.

        Suggestions are hints for error messages only; they are never used
        to resolve a unit.
        """
        if not token:
            return []

        results = process.extract(
            token,
            list(self._index.keys()),
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            limit=limit * 3,
            score_cutoff=score_cutoff
        )

        suggestions: List[str] = []
        for matched_token, score, _ in results:
            name = self._index[matched_token][0].name
            if name not in suggestions:
                suggestions.append(name)
            if len(suggestions) == limit:
                break

        logger.debug(f"Suggestions for '{token}': {suggestions}")
        return suggestions


@lru_cache(maxsize=1)
def get_catalog() -> UnitCatalog:
    """Return the process-wide default catalog."""
    return UnitCatalog()
