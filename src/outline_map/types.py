"""Core types for map generation."""

import math
from enum import Enum

from pydantic import BaseModel


class Biome(str, Enum):
    """Tile classification produced by the grid builder."""

    WATER = "water"
    GRASS = "grass"
    MOUNTAIN = "mountain"
    TOWN = "town"

    @property
    def code(self) -> int:
        """Compact uint8 value used for array storage."""
        return _BIOME_CODES[self]

    @classmethod
    def from_code(cls, value: int) -> "Biome":
        """Convert a uint8 storage value back to a Biome."""
        try:
            return _CODE_BIOMES[int(value)]
        except KeyError:
            raise ValueError(f"Unknown biome code: {value}") from None


_BIOME_CODES: dict[Biome, int] = {
    Biome.WATER: 0,
    Biome.GRASS: 1,
    Biome.MOUNTAIN: 2,
    Biome.TOWN: 3,
}

_CODE_BIOMES: dict[int, Biome] = {code: biome for biome, code in _BIOME_CODES.items()}


class Vector2(BaseModel, frozen=True):
    """Immutable 2D world-space coordinate."""

    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(x=self.x - other.x, y=self.y - other.y)

    def __truediv__(self, scale: float) -> "Vector2":
        return Vector2(x=self.x / scale, y=self.y / scale)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Vector2") -> float:
        """Euclidean distance to another point."""
        return (self - other).length()

    def midpoint(self, other: "Vector2") -> "Vector2":
        """Point halfway between this point and other."""
        return Vector2(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"
