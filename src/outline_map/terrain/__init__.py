"""Procedural map generation package.

Implements the seeded pipeline: hash-based randomness, gradient noise,
tile grid classification, settlement roads, coastline curves and mountain
decoration selection.
"""

from .coastal import CoastlineSegment, extract_coastline
from .config import MapConfig
from .decorations import (
    DecorationCatalog,
    DecorationSelection,
    SequenceCatalog,
    resolve_decorations,
    select_decorations,
)
from .generator import GenerationResult, generate_map
from .grid import WorldGrid, WorldTile, build_world_grid, classify_biome
from .noise import GradientNoiseField
from .persistence import load_map, save_map
from .settlements import Road, connect_towns
from .validation import validate_config

__all__ = [
    "CoastlineSegment",
    "DecorationCatalog",
    "DecorationSelection",
    "GenerationResult",
    "GradientNoiseField",
    "MapConfig",
    "Road",
    "SequenceCatalog",
    "WorldGrid",
    "WorldTile",
    "build_world_grid",
    "classify_biome",
    "connect_towns",
    "extract_coastline",
    "generate_map",
    "load_map",
    "resolve_decorations",
    "save_map",
    "select_decorations",
    "validate_config",
]
