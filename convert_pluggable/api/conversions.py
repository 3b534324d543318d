"""API endpoints for unit conversion."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from convert_pluggable import get_engine
from convert_pluggable.common.schemas import (
    BatchConversionRequest,
    BatchConversionResponse,
    ConversionOutcomeSchema,
    ConversionResponse,
    ErrorResponse,
)
from convert_pluggable.conversion import (
    BatchLimitError,
    ConversionOutcome,
    ConversionRequest,
    ConversionService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/conversions", tags=["conversions"])


def get_conversion_service() -> ConversionService:
    """Get conversion service instance."""
    return ConversionService(get_engine())


def _outcome_schema(outcome: ConversionOutcome) -> ConversionOutcomeSchema:
    return ConversionOutcomeSchema(
        from_unit=outcome.request.from_unit,
        to_unit=outcome.request.to_unit,
        quantity=outcome.request.quantity,
        precision=outcome.request.precision,
        result=outcome.result,
        source_unit=outcome.from_unit,
        target_unit=outcome.to_unit,
        dimension=outcome.dimension,
        error=outcome.error,
        message=outcome.message,
    )


@router.get(
    "",
    response_model=ConversionResponse,
    responses={400: {"model": ErrorResponse}}
)
def convert_quantity(
    from_unit: str = Query(..., min_length=1),
    to_unit: str = Query(..., min_length=1),
    quantity: str = Query(...),
    precision: int = Query(2),
    service: ConversionService = Depends(get_conversion_service)
) -> ConversionResponse:
    """Convert a quantity between two units.

    Args:
        from_unit: Source unit name or alias
        to_unit: Target unit name or alias
        quantity: Quantity to convert
        precision: Digits after the decimal point
        service: ConversionService instance

    Returns:
        ConversionResponse with the formatted result
    """
    request = ConversionRequest(from_unit, to_unit, quantity, precision)
    outcome = service.convert_one(request)

    if not outcome.succeeded:
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(
                error=outcome.error,
                message=outcome.message,
                suggestions=outcome.suggestions
            ).model_dump()
        )

    return ConversionResponse(
        from_unit=from_unit,
        to_unit=to_unit,
        quantity=quantity,
        precision=precision,
        result=outcome.result,
        source_unit=outcome.from_unit,
        target_unit=outcome.to_unit,
        dimension=outcome.dimension,
    )


@router.post(
    "/batch",
    response_model=BatchConversionResponse,
    responses={400: {"model": ErrorResponse}}
)
def convert_batch(
    body: BatchConversionRequest,
    service: ConversionService = Depends(get_conversion_service)
) -> BatchConversionResponse:
    """Convert many quantities at once.

    Failed conversions are reported per item; the request as a whole only
    fails when the batch is too large.
    """
    requests = [
        ConversionRequest(item.from_unit, item.to_unit, item.quantity, item.precision)
        for item in body.conversions
    ]

    try:
        summary = service.convert_batch(requests)
    except BatchLimitError as e:
        logger.warning(f"Rejected batch: {e}")
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(error=type(e).__name__, message=str(e)).model_dump()
        )

    return BatchConversionResponse(
        total=summary.total,
        succeeded=summary.succeeded,
        failed=summary.failed,
        results=[_outcome_schema(outcome) for outcome in summary.outcomes],
        errors=summary.errors,
        dimensions_used=summary.dimensions_used,
    )
