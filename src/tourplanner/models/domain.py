"""Domain models for geographic points fed to the route optimizer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Location:
    """A named stop. Its identity is its position in the input list."""

    name: str
    coordinate: Coordinate

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Location name must be a non-empty string.")

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude
