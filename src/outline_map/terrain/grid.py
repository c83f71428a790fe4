"""Tile grid construction and biome classification."""

from typing import Iterator

import structlog
from pydantic import BaseModel

from ..types import Biome, Vector2
from .config import BiomeConfig, MapConfig
from .noise import GradientNoiseField
from .rng import normalized, scaled

logger = structlog.get_logger()


class WorldTile(BaseModel, frozen=True):
    """Immutable classified tile."""

    position: Vector2
    random_value: float
    noise_level: float
    biome: Biome


class WorldGrid(BaseModel, frozen=True):
    """Immutable tile grid stored row-major, indexed [row][col]."""

    width: int
    height: int
    tiles: tuple[tuple[WorldTile, ...], ...]

    def tile(self, col: int, row: int) -> WorldTile:
        return self.tiles[row][col]

    def iter_tiles(self, border: int = 0) -> Iterator[tuple[int, int, WorldTile]]:
        """Yield (col, row, tile) in row-major order, skipping a border ring.

        Args:
            border: Number of outer rows/columns to skip on every side.
        """
        for row in range(border, self.height - border):
            for col in range(border, self.width - border):
                yield col, row, self.tiles[row][col]

    def count(self, biome: Biome) -> int:
        """Number of tiles classified as biome."""
        return sum(1 for _, _, tile in self.iter_tiles() if tile.biome == biome)


def classify_biome(level: float, random_value: float, config: BiomeConfig) -> Biome:
    """Classify a tile from its noise level and random value.

    Rules are checked in priority order and the first match wins.
    """
    if level > config.mountain_threshold:
        return Biome.MOUNTAIN
    if level > config.town_threshold and random_value < config.town_probability:
        return Biome.TOWN
    if level > config.grass_threshold:
        return Biome.GRASS
    return Biome.WATER


def build_tile(
    col: int,
    row: int,
    field: GradientNoiseField,
    config: MapConfig,
) -> WorldTile:
    """Compute the jittered position, noise level and biome of one cell.

    Depends only on the cell coordinates and configuration, never on
    other tiles.
    """
    xn = col / config.width
    yn = row / config.height
    seed = config.seed
    salts = config.salts
    jitter = config.jitter

    random_value = normalized([seed, salts.random, xn, yn])
    jitter_x = scaled([seed, salts.x, xn, yn], jitter.border_min, jitter.border_max)
    jitter_y = scaled([seed, salts.y, xn, yn], jitter.border_min, jitter.border_max)

    position = Vector2(
        x=(col + jitter_x) * config.tile_size,
        y=(row + jitter_y) * config.tile_size,
    )
    # Shift noise from roughly [-1, 1] to [0, 2]
    level = field.sample(position / config.noise.scale) + 1.0

    return WorldTile(
        position=position,
        random_value=random_value,
        noise_level=level,
        biome=classify_biome(level, random_value, config.biomes),
    )


def build_world_grid(field: GradientNoiseField, config: MapConfig) -> WorldGrid:
    """Build and classify every tile of the grid.

    Args:
        field: Fully constructed noise field.
        config: Map configuration.

    Returns:
        Classified, immutable WorldGrid.

    Raises:
        OutOfRangeError: If a tile samples outside the noise lattice.
    """
    rows = tuple(
        tuple(build_tile(col, row, field, config) for col in range(config.width))
        for row in range(config.height)
    )
    grid = WorldGrid(width=config.width, height=config.height, tiles=rows)
    logger.debug("world_grid_built", width=grid.width, height=grid.height)
    return grid


def collect_towns(grid: WorldGrid) -> list[WorldTile]:
    """Town tiles in row-major discovery order."""
    return [tile for _, _, tile in grid.iter_tiles() if tile.biome == Biome.TOWN]
