"""Shared test fixtures for map generation tests."""

from typing import Callable

import pytest

from outline_map.terrain.config import MapConfig, NoiseConfig
from outline_map.terrain.grid import WorldGrid, WorldTile
from outline_map.types import Biome, Vector2

GridFactory = Callable[[list[list[Biome]]], WorldGrid]


@pytest.fixture
def small_config() -> MapConfig:
    """8x6 map whose tiles stay inside a 4x4 lattice at scale 100."""
    return MapConfig(
        seed=0.42,
        width=8,
        height=6,
        tile_size=25.0,
        noise=NoiseConfig(width=4, height=4, scale=100.0),
    )


@pytest.fixture
def make_grid() -> GridFactory:
    """Build a grid from rows of biomes, tiles spaced 10 units apart.

    Tile (col, row) sits at (col * 10, row * 10).
    """

    def factory(layout: list[list[Biome]]) -> WorldGrid:
        rows = tuple(
            tuple(
                WorldTile(
                    position=Vector2(x=col * 10.0, y=row * 10.0),
                    random_value=0.5,
                    noise_level=1.0,
                    biome=biome,
                )
                for col, biome in enumerate(biomes)
            )
            for row, biomes in enumerate(layout)
        )
        return WorldGrid(width=len(layout[0]), height=len(layout), tiles=rows)

    return factory


@pytest.fixture
def make_town() -> Callable[[float, float], WorldTile]:
    """Build a town tile at (x, y)."""

    def factory(x: float, y: float) -> WorldTile:
        return WorldTile(
            position=Vector2(x=x, y=y),
            random_value=0.01,
            noise_level=1.2,
            biome=Biome.TOWN,
        )

    return factory
