"""API endpoints for browsing the unit catalog."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from convert_pluggable.catalog import Dimension, UnitCatalog, get_catalog
from convert_pluggable.common.schemas import (
    DimensionSchema,
    ErrorResponse,
    ResolveResponse,
    UnitSchema,
)
from convert_pluggable.conversion import normalize_token

router = APIRouter(prefix="/api/v1/units", tags=["units"])


@router.get("", response_model=List[UnitSchema], responses={404: {"model": ErrorResponse}})
def list_units(
    dimension: Optional[str] = None,
    catalog: UnitCatalog = Depends(get_catalog)
) -> List[UnitSchema]:
    """List supported units, optionally filtered by dimension."""
    if dimension is None:
        return [UnitSchema.model_validate(unit) for unit in catalog.units()]

    try:
        selected = Dimension(dimension)
    except ValueError:
        raise HTTPException(
            status_code=404,
            detail=ErrorResponse(
                error="UnknownDimension",
                message=f"Dimension '{dimension}' not supported"
            ).model_dump()
        )

    return [UnitSchema.model_validate(unit) for unit in catalog.units(selected)]


@router.get("/dimensions", response_model=List[DimensionSchema])
def list_dimensions(catalog: UnitCatalog = Depends(get_catalog)) -> List[DimensionSchema]:
    """List dimensions with their base unit and number of units."""
    return [
        DimensionSchema(
            dimension=dimension,
            base_unit=catalog.base_unit(dimension).name,
            unit_count=len(catalog.units(dimension))
        )
        for dimension in catalog.dimensions()
    ]


@router.get(
    "/resolve/{token:path}",
    response_model=ResolveResponse,
    responses={404: {"model": ErrorResponse}}
)
def resolve_unit(token: str, catalog: UnitCatalog = Depends(get_catalog)) -> ResolveResponse:
    """Show which unit a token resolves to, and every unit it could mean.

    Args:
        token: Unit name or alias, before quote-mark normalization
        catalog: Unit catalog

    Returns:
        ResolveResponse; ``unit`` is the definition conversions will use
    """
    normalized = normalize_token(token)
    matches = catalog.matches(normalized)

    if not matches:
        raise HTTPException(
            status_code=404,
            detail=ErrorResponse(
                error="UnresolvedUnitError",
                message=f"Unit '{token}' not recognised",
                suggestions=catalog.suggest(normalized)
            ).model_dump()
        )

    return ResolveResponse(
        token=token,
        normalized_token=normalized,
        unit=UnitSchema.model_validate(matches[0]),
        matches=[UnitSchema.model_validate(unit) for unit in matches],
        ambiguous=len(matches) > 1
    )
