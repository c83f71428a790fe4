"""Mountain decoration selection.

The generator only decides which catalog entry a mountain uses and how it is
scaled; the artwork itself lives in a catalog supplied by the renderer.
"""

import math
from typing import Any, Iterator, Protocol, Sequence

from pydantic import BaseModel

from ..exceptions import ConfigurationError
from ..types import Biome, Vector2
from .grid import WorldGrid


class DecorationCatalog(Protocol):
    """Interchangeable decorative assets addressed by index."""

    def __len__(self) -> int: ...

    def select(self, index: int) -> Any: ...


class SequenceCatalog:
    """Catalog backed by an in-memory sequence of opaque handles."""

    def __init__(self, handles: Sequence[Any]):
        self._handles = tuple(handles)

    def __len__(self) -> int:
        return len(self._handles)

    def select(self, index: int) -> Any:
        return self._handles[index]


class DecorationSelection(BaseModel, frozen=True):
    """Placement of one decoration on a mountain tile."""

    catalog_index: int
    x_scale: float
    y_scale: float
    position: Vector2


def select_decorations(grid: WorldGrid, catalog_size: int) -> list[DecorationSelection]:
    """Pick a decoration for every mountain tile.

    Args:
        grid: Classified grid.
        catalog_size: Number of entries in the decoration catalog.

    Returns:
        Selections in drawing order: ascending y, row-major among equal y.
    """
    selections = [
        DecorationSelection(
            catalog_index=math.floor(tile.random_value * catalog_size),
            x_scale=1.1 + tile.random_value * 0.2,
            y_scale=1.3 + tile.random_value * 0.2,
            position=tile.position,
        )
        for _, _, tile in grid.iter_tiles()
        if tile.biome == Biome.MOUNTAIN
    ]
    return sorted(selections, key=lambda s: s.position.y)


def resolve_decorations(
    selections: Sequence[DecorationSelection],
    catalog: DecorationCatalog,
) -> Iterator[tuple[DecorationSelection, Any]]:
    """Pair each selection with its catalog handle, preserving order.

    Raises:
        ConfigurationError: If an index is not present in the catalog.
    """
    size = len(catalog)
    for selection in selections:
        if not 0 <= selection.catalog_index < size:
            raise ConfigurationError(
                f"Decoration index {selection.catalog_index} not in catalog of size {size}"
            )
        yield selection, catalog.select(selection.catalog_index)
