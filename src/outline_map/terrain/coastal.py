"""Coastline extraction from local 3x3 water/grass patterns.

Each interior water tile is checked against a table of corner rules. A rule
looks at the two edge neighbours and the diagonal neighbour of one corner
and, when they form a water/grass boundary, contributes one neighbour as an
anchor. Two anchors bend a single curve through the tile; four anchors bend
two.
"""

from dataclasses import dataclass
from enum import Enum

import structlog
from pydantic import BaseModel

from ..types import Biome, Vector2
from .grid import WorldGrid

logger = structlog.get_logger()

W = Biome.WATER
G = Biome.GRASS


class Corner(str, Enum):
    """Tile corners in rule evaluation order."""

    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"
    TOP_LEFT = "top_left"


class Anchor(str, Enum):
    """Which neighbour of a corner a rule selects."""

    EDGE1 = "edge1"
    CORNER = "corner"
    EDGE2 = "edge2"


# (dx, dy) offsets of (edge1, corner, edge2); +y points down
CORNER_OFFSETS: dict[Corner, tuple[tuple[int, int], tuple[int, int], tuple[int, int]]] = {
    Corner.TOP_RIGHT: ((0, -1), (1, -1), (1, 0)),
    Corner.BOTTOM_RIGHT: ((0, 1), (1, 1), (1, 0)),
    Corner.BOTTOM_LEFT: ((0, 1), (-1, 1), (-1, 0)),
    Corner.TOP_LEFT: ((0, -1), (-1, -1), (-1, 0)),
}


@dataclass(frozen=True)
class CoastRule:
    """Pattern over (edge1, corner, edge2) and the neighbour it anchors."""

    corner: Corner
    pattern: tuple[Biome, Biome, Biome]
    anchor: Anchor


_CORNER_SHAPES: tuple[tuple[tuple[Biome, Biome, Biome], Anchor], ...] = (
    ((W, W, G), Anchor.CORNER),
    ((W, G, G), Anchor.EDGE1),
    ((G, G, W), Anchor.EDGE2),
    ((G, W, W), Anchor.CORNER),
)

COAST_RULES: tuple[CoastRule, ...] = tuple(
    CoastRule(corner=corner, pattern=pattern, anchor=anchor)
    for corner in Corner
    for pattern, anchor in _CORNER_SHAPES
)


class CoastlineSegment(BaseModel, frozen=True):
    """Quadratic curve from start_control, bending at through, to end_control."""

    start_control: Vector2
    through: Vector2
    end_control: Vector2


def coastline_anchors(grid: WorldGrid, col: int, row: int) -> list[Vector2]:
    """Collect anchor positions for the tile at (col, row).

    Only water tiles produce anchors. The tile must be interior so that its
    full 3x3 neighbourhood exists.

    Returns:
        Anchor positions in rule order (top-right, bottom-right,
        bottom-left, top-left).
    """
    if not (0 < col < grid.width - 1 and 0 < row < grid.height - 1):
        raise IndexError(f"Tile ({col}, {row}) is on the grid border")

    if grid.tile(col, row).biome != Biome.WATER:
        return []

    anchors: list[Vector2] = []
    for rule in COAST_RULES:
        neighbours = [
            grid.tile(col + dx, row + dy) for dx, dy in CORNER_OFFSETS[rule.corner]
        ]
        if tuple(n.biome for n in neighbours) != rule.pattern:
            continue
        edge1, corner, edge2 = neighbours
        selected = {Anchor.EDGE1: edge1, Anchor.CORNER: corner, Anchor.EDGE2: edge2}
        anchors.append(selected[rule.anchor].position)
    return anchors


def segments_for_anchors(center: Vector2, anchors: list[Vector2]) -> list[CoastlineSegment]:
    """Turn a tile's anchors into curve segments bending through center.

    Anchor pairs (0, 1) and (2, 3) each make one segment; counts other than
    2 or 4 produce nothing.
    """
    if len(anchors) not in (2, 4):
        return []
    return [
        CoastlineSegment(
            start_control=center.midpoint(anchors[i]),
            through=center,
            end_control=center.midpoint(anchors[i + 1]),
        )
        for i in range(0, len(anchors), 2)
    ]


def extract_coastline(grid: WorldGrid) -> list[CoastlineSegment]:
    """Extract coastline segments from every interior tile of a classified grid.

    Args:
        grid: Fully classified grid.

    Returns:
        Segments in row-major tile order.
    """
    segments: list[CoastlineSegment] = []
    for col, row, tile in grid.iter_tiles(border=1):
        anchors = coastline_anchors(grid, col, row)
        segments.extend(segments_for_anchors(tile.position, anchors))

    logger.debug("coastline_extracted", segments=len(segments))
    return segments
