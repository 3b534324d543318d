"""Batch conversion service."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from convert_pluggable.common.config import settings
from convert_pluggable.conversion.engine import ConversionEngine, ConversionRequest
from convert_pluggable.conversion.exceptions import (
    BatchLimitError,
    ConversionError,
    UnresolvedUnitError,
)

logger = logging.getLogger(__name__)


@dataclass
class ConversionOutcome:
    """Result of one conversion within a batch."""
    request: ConversionRequest
    result: Optional[str] = None
    from_unit: Optional[str] = None
    to_unit: Optional[str] = None
    dimension: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.result is not None


@dataclass
class ConversionSummary:
    """Summary of a batch conversion."""
    total: int
    succeeded: int
    failed: int
    outcomes: List[ConversionOutcome]
    errors: List[str] = field(default_factory=list)
    dimensions_used: Dict[str, int] = field(default_factory=dict)


class ConversionService:
    """Runs conversions and collects per-request outcomes."""

    def __init__(self, engine: ConversionEngine, batch_limit: Optional[int] = None):
        """Initialize conversion service.

        Args:
            engine: ConversionEngine instance
            batch_limit: Maximum requests per batch (defaults to BATCH_LIMIT)
        """
        self.engine = engine
        self.batch_limit = batch_limit if batch_limit is not None else settings.app.batch_limit

    def convert_one(self, request: ConversionRequest) -> ConversionOutcome:
        """Convert a single request without raising.

        Args:
            request: The conversion to perform

        Returns:
            ConversionOutcome holding either the result or the failure reason
        """
        outcome = ConversionOutcome(request=request)

        try:
            pair = self.engine.resolve_pair(request.from_unit, request.to_unit)
            outcome.from_unit = pair.source.name
            outcome.to_unit = pair.target.name
            if pair.same_dimension:
                outcome.dimension = pair.source.dimension.value
            outcome.result = self.engine.convert_pair(pair, request.quantity, request.precision)
        except UnresolvedUnitError as e:
            outcome.error = type(e).__name__
            outcome.message = str(e)
            outcome.suggestions = e.suggestions
        except ConversionError as e:
            outcome.error = type(e).__name__
            outcome.message = str(e)

        return outcome

    def convert_batch(self, requests: Sequence[ConversionRequest]) -> ConversionSummary:
        """Convert many requests, continuing past failures.

        Args:
            requests: Conversions to perform, in order

        Returns:
            ConversionSummary with one outcome per request

        Raises:
            BatchLimitError: If more requests are given than the batch limit
        """
        if len(requests) > self.batch_limit:
            raise BatchLimitError(
                f"Batch of {len(requests)} conversions exceeds limit of {self.batch_limit}"
            )

        logger.info(f"Converting batch of {len(requests)} requests")

        outcomes = [self.convert_one(request) for request in requests]
        errors = [
            f"Request {index}: {outcome.message}"
            for index, outcome in enumerate(outcomes)
            if not outcome.succeeded
        ]
        dimensions_used = Counter(
            outcome.dimension for outcome in outcomes if outcome.succeeded
        )
        succeeded = sum(1 for outcome in outcomes if outcome.succeeded)

        logger.info(
            f"Batch complete: {succeeded} succeeded, {len(outcomes) - succeeded} failed"
        )

        return ConversionSummary(
            total=len(outcomes),
            succeeded=succeeded,
            failed=len(outcomes) - succeeded,
            outcomes=outcomes,
            errors=errors,
            dimensions_used=dict(dimensions_used),
        )
