"""Pydantic schemas for API requests and responses"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from convert_pluggable.catalog import Dimension


# Request Schemas

class ConversionItem(BaseModel):
    """Single conversion within a batch request"""
    from_unit: str = Field(..., min_length=1, max_length=255)
    to_unit: str = Field(..., min_length=1, max_length=255)
    quantity: Union[str, float]
    precision: int = 2


class BatchConversionRequest(BaseModel):
    """Batch conversion request body"""
    conversions: List[ConversionItem]


# Response Schemas

class ConversionResponse(BaseModel):
    """Result of a single conversion"""
    from_unit: str
    to_unit: str
    quantity: Union[str, float]
    precision: int
    result: str
    source_unit: str
    target_unit: str
    dimension: str


class ConversionOutcomeSchema(BaseModel):
    """Outcome of one conversion in a batch"""
    from_unit: str
    to_unit: str
    quantity: Union[str, float]
    precision: int
    result: Optional[str] = None
    source_unit: Optional[str] = None
    target_unit: Optional[str] = None
    dimension: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None


class BatchConversionResponse(BaseModel):
    """Batch conversion summary"""
    total: int
    succeeded: int
    failed: int
    results: List[ConversionOutcomeSchema]
    errors: List[str]
    dimensions_used: Dict[str, int]


class UnitSchema(BaseModel):
    """Unit definition"""
    name: str
    aliases: List[str]
    dimension: Dimension
    factor: float
    allows_negative: bool

    model_config = {"from_attributes": True}


class DimensionSchema(BaseModel):
    """Dimension overview"""
    dimension: Dimension
    base_unit: str
    unit_count: int


class ResolveResponse(BaseModel):
    """Resolution of a single unit token"""
    token: str
    normalized_token: str
    unit: UnitSchema
    matches: List[UnitSchema]
    ambiguous: bool


class ErrorResponse(BaseModel):
    """Error response schema"""
    error: str
    message: str
    suggestions: List[str] = Field(default_factory=list)
