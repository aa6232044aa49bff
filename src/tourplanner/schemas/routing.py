"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class LocationModel(BaseModel):
    name: str = Field(..., min_length=1, description="Display name of the stop.")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped


class OptimizeRequest(BaseModel):
    locations: List[LocationModel] = Field(
        ...,
        description="Stops in their original order. The first stop is always the start of the route.",
    )
    max_passes: Optional[int] = Field(
        default=None,
        ge=1,
        description="Optional cap on 2-opt passes. Defaults to the server setting.",
    )


class TourStopModel(BaseModel):
    index: int
    name: str
    sequence: int
    latitude: float
    longitude: float
    distance_from_prev_km: float
    cumulative_km: float


class RouteSummaryModel(BaseModel):
    original_distance: str
    optimized_distance: str
    saved_distance: str
    saved_percent: str


class OptimizeResponse(BaseModel):
    naive_tour: List[int]
    constructed_tour: List[int]
    optimized_tour: List[int]
    naive_distance_km: float
    constructed_distance_km: float
    optimized_distance_km: float
    saved_distance_km: float
    saved_percent: float
    passes: int
    swaps: int
    converged: bool
    stops: List[TourStopModel]
    maps_url: str
    summary: RouteSummaryModel
