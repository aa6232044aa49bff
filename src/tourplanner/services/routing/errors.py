"""Errors raised by the route optimizer."""

from __future__ import annotations


class RoutingError(ValueError):
    """Base class for caller mistakes detected by the routing services."""


class InsufficientLocations(RoutingError):
    def __init__(self, count: int, minimum: int = 2) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"At least {minimum} locations are required, got {count}.")


class InvalidCoordinate(RoutingError):
    def __init__(self, latitude: float, longitude: float, name: str | None = None) -> None:
        self.latitude = latitude
        self.longitude = longitude
        self.name = name
        label = f" for '{name}'" if name else ""
        super().__init__(
            f"Invalid coordinate{label}: ({latitude}, {longitude}). "
            "Latitude must be within [-90, 90] and longitude within [-180, 180]."
        )
