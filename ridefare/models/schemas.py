"""Pydantic models for request/response validation"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List


class CamelModel(BaseModel):
    """Base model serialised with the camelCase keys the mobile client uses"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FareRequest(CamelModel):
    """Request model for fare calculation"""
    origin_lat: float = Field(
        ..., description="Latitud del punto de recogida", ge=-90, le=90,
        strict=True, allow_inf_nan=False, examples=[20.2961]
    )
    origin_lng: float = Field(
        ..., description="Longitud del punto de recogida", ge=-180, le=180,
        strict=True, allow_inf_nan=False, examples=[85.8245]
    )
    dest_lat: float = Field(
        ..., description="Latitud del destino", ge=-90, le=90,
        strict=True, allow_inf_nan=False, examples=[20.2367]
    )
    dest_lng: float = Field(
        ..., description="Longitud del destino", ge=-180, le=180,
        strict=True, allow_inf_nan=False, examples=[85.8352]
    )


class FareEstimate(CamelModel):
    """Fare estimate of a single provider"""
    provider: str
    category: str
    estimated_fare: int = Field(..., ge=0)
    currency: str
    distance: str = Field(..., description="Distancia recalculada, p.ej. '5.2 km'")
    duration: str = Field(..., description="Duración recalculada, p.ej. '15 mins'")
    deep_link: str = Field(
        default="",
        description="URL para abrir la app del proveedor; vacío si no está soportado"
    )


class DistanceInfo(BaseModel):
    """Route distance as returned by the directions provider"""
    value: int = Field(..., description="Distancia en metros", ge=0)
    text: str


class DurationInfo(BaseModel):
    """Route duration as returned by the directions provider"""
    value: int = Field(..., description="Duración en segundos", ge=0)
    text: str


class FareResponse(CamelModel):
    """Response model for fare calculation, cheapest provider first"""
    providers: List[FareEstimate]
    distance: DistanceInfo
    duration: DurationInfo


class ProviderInfo(CamelModel):
    """Pricing configuration exposed to clients"""
    name: str
    category: str
    base_fare: float
    per_km_rate: float
    per_min_rate: float


class ProviderTableResponse(BaseModel):
    """Loaded provider table and its version"""
    version: str
    providers: List[ProviderInfo]


class ErrorDetail(BaseModel):
    code: str = Field(..., examples=["invalid-argument"])
    message: str


class ErrorResponse(BaseModel):
    """Uniform error body"""
    error: ErrorDetail
