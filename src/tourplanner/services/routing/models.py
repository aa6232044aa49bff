"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

# Ordered location indices; a permutation of 0..n-1 describing an open path.
Tour = List[int]


@dataclass(slots=True)
class TourStop:
    index: int
    name: str
    sequence: int
    latitude: float
    longitude: float
    distance_from_prev_km: float
    cumulative_km: float


@dataclass(slots=True)
class RefinementResult:
    tour: Tour
    passes: int
    swaps: int
    converged: bool


@dataclass(slots=True)
class OptimizationResult:
    naive_tour: Tour
    constructed_tour: Tour
    optimized_tour: Tour
    naive_distance_km: float
    constructed_distance_km: float
    optimized_distance_km: float
    saved_distance_km: float
    saved_percent: float
    stops: List[TourStop] = field(default_factory=list)
    passes: int = 0
    swaps: int = 0
    converged: bool = True
