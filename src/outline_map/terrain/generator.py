"""Main map generation orchestration."""

import structlog
from pydantic import BaseModel

from ..types import Biome
from .coastal import CoastlineSegment, extract_coastline
from .config import MapConfig
from .decorations import DecorationSelection, select_decorations
from .grid import WorldGrid, WorldTile, build_world_grid, collect_towns
from .noise import GradientNoiseField
from .settlements import Road, connect_towns
from .validation import validate_config

logger = structlog.get_logger()


class GenerationResult(BaseModel, frozen=True):
    """Everything one generation run hands to the renderer."""

    config: MapConfig
    grid: WorldGrid
    towns: list[WorldTile]
    roads: list[Road]
    coastline: list[CoastlineSegment]
    decorations: list[DecorationSelection]


def generate_map(config: MapConfig) -> GenerationResult:
    """Generate a complete map from configuration.

    Phases run strictly in order; the grid is fully classified before roads,
    coastline and decorations read it.

    Args:
        config: Map generation configuration.

    Returns:
        GenerationResult with grid, towns, roads, coastline and decorations.

    Raises:
        InvalidSeedError: If the seed is not finite.
        ConfigurationError: If the configuration is invalid.
        OutOfRangeError: If the noise lattice does not cover the map.
    """
    validate_config(config)

    logger.info(
        "generation_started",
        seed=config.seed,
        width=config.width,
        height=config.height,
    )

    field = GradientNoiseField.create(config.seed, config.noise.width, config.noise.height)
    logger.info("noise_field_built", width=field.width, height=field.height)

    grid = build_world_grid(field, config)
    towns = collect_towns(grid)
    logger.info("grid_classified", tiles=grid.width * grid.height, towns=len(towns))

    roads = connect_towns(towns)
    logger.info("roads_connected", roads=len(roads))

    coastline = extract_coastline(grid)
    logger.info("coastline_extracted", segments=len(coastline))

    decorations = select_decorations(grid, config.decoration_count)
    logger.info("decorations_selected", decorations=len(decorations))

    _log_biome_stats(grid)

    return GenerationResult(
        config=config,
        grid=grid,
        towns=towns,
        roads=roads,
        coastline=coastline,
        decorations=decorations,
    )


def _log_biome_stats(grid: WorldGrid) -> None:
    """Log the share of tiles per biome."""
    total = grid.width * grid.height
    counts = {biome.value: grid.count(biome) for biome in Biome}
    shares = {name: round(count / total * 100, 1) for name, count in counts.items()}
    logger.info("biome_stats", total=total, counts=counts, percent=shares)
