"""Deterministic fantasy map generation."""

from .exceptions import (
    ConfigurationError,
    InvalidSeedError,
    MapError,
    OutOfRangeError,
)
from .terrain import GenerationResult, MapConfig, generate_map
from .types import Biome, Vector2

__all__ = [
    # Types
    "Biome",
    "Vector2",
    # Generation
    "MapConfig",
    "GenerationResult",
    "generate_map",
    # Exceptions
    "MapError",
    "InvalidSeedError",
    "ConfigurationError",
    "OutOfRangeError",
]
