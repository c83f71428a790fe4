"""Tests for mountain decoration selection."""

import pytest

from outline_map.exceptions import ConfigurationError
from outline_map.terrain.decorations import (
    DecorationSelection,
    SequenceCatalog,
    resolve_decorations,
    select_decorations,
)
from outline_map.terrain.grid import WorldGrid, WorldTile
from outline_map.types import Biome, Vector2


def _tile(x: float, y: float, random_value: float, biome: Biome = Biome.MOUNTAIN) -> WorldTile:
    return WorldTile(
        position=Vector2(x=x, y=y),
        random_value=random_value,
        noise_level=1.5,
        biome=biome,
    )


@pytest.fixture
def mountain_grid() -> WorldGrid:
    """2x2 grid whose bottom row sits higher (smaller y) than its top row."""
    return WorldGrid(
        width=2,
        height=2,
        tiles=(
            (_tile(0, 30, 0.1), _tile(10, 12, 0.5, Biome.GRASS)),
            (_tile(0, 20, 0.9), _tile(10, 20, 0.34)),
        ),
    )


class TestSelectDecorations:
    """Tests for select_decorations."""

    def test_only_mountains(self, mountain_grid: WorldGrid) -> None:
        """Non-mountain tiles get no decoration."""
        selections = select_decorations(mountain_grid, 3)
        assert len(selections) == 3
        assert Vector2(x=10, y=12) not in [s.position for s in selections]

    def test_sorted_by_y_stable(self, mountain_grid: WorldGrid) -> None:
        """Ascending y, row-major among equal y."""
        selections = select_decorations(mountain_grid, 3)
        assert [s.position for s in selections] == [
            Vector2(x=0, y=20),
            Vector2(x=10, y=20),
            Vector2(x=0, y=30),
        ]

    def test_index_and_scale(self, mountain_grid: WorldGrid) -> None:
        """Index is floor(random * N); scales grow with the random value."""
        selections = select_decorations(mountain_grid, 3)
        by_x_y = {(s.position.x, s.position.y): s for s in selections}
        assert by_x_y[(0, 20)].catalog_index == 2
        assert by_x_y[(10, 20)].catalog_index == 1
        assert by_x_y[(0, 30)].catalog_index == 0
        assert by_x_y[(0, 30)].x_scale == pytest.approx(1.12)
        assert by_x_y[(0, 30)].y_scale == pytest.approx(1.32)

    def test_indices_within_catalog(self, mountain_grid: WorldGrid) -> None:
        """Indices never reach the catalog size."""
        for size in (1, 2, 5):
            for selection in select_decorations(mountain_grid, size):
                assert 0 <= selection.catalog_index < size


class TestResolveDecorations:
    """Tests for resolve_decorations."""

    def test_pairs_with_handles(self, mountain_grid: WorldGrid) -> None:
        """Each selection is paired with its catalog entry, order kept."""
        catalog = SequenceCatalog(["peak-a", "peak-b", "peak-c"])
        selections = select_decorations(mountain_grid, len(catalog))
        resolved = list(resolve_decorations(selections, catalog))
        assert [handle for _, handle in resolved] == ["peak-c", "peak-b", "peak-a"]
        assert [s for s, _ in resolved] == selections

    def test_index_outside_catalog(self) -> None:
        """Selections past the catalog end are rejected."""
        selection = DecorationSelection(
            catalog_index=2, x_scale=1.1, y_scale=1.3, position=Vector2(x=0, y=0)
        )
        with pytest.raises(ConfigurationError):
            list(resolve_decorations([selection], SequenceCatalog(["only"])))


class TestSequenceCatalog:
    """Tests for SequenceCatalog."""

    def test_len_and_select(self) -> None:
        """Catalog exposes size and indexed handles."""
        catalog = SequenceCatalog(("a", "b"))
        assert len(catalog) == 2
        assert catalog.select(1) == "b"
