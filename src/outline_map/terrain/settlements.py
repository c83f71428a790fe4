"""Settlement linking: each town gets a road to its nearest neighbour."""

import numpy as np
import structlog
from pydantic import BaseModel
from scipy.spatial.distance import cdist

from ..types import Vector2
from .grid import WorldTile

logger = structlog.get_logger()


class Road(BaseModel, frozen=True):
    """Directed road from a town to its nearest neighbour."""

    source: Vector2
    target: Vector2
    distance: float


def connect_towns(towns: list[WorldTile]) -> list[Road]:
    """Emit one road per town, towards its nearest other town.

    Mutual nearest neighbours produce two roads over the same segment; these
    are kept as-is.

    Args:
        towns: Town tiles in discovery order.

    Returns:
        Roads in the same order as their source towns. Ties go to the
        earliest-discovered candidate.
    """
    if len(towns) < 2:
        return []

    positions = np.array(
        [[town.position.x, town.position.y] for town in towns], dtype=np.float64
    )
    distances = cdist(positions, positions)
    np.fill_diagonal(distances, np.inf)
    # argmin returns the first index among equal minima
    nearest = np.argmin(distances, axis=1)

    roads = [
        Road(
            source=town.position,
            target=towns[int(j)].position,
            distance=float(distances[i, j]),
        )
        for i, (town, j) in enumerate(zip(towns, nearest))
    ]
    logger.debug("towns_connected", towns=len(towns), roads=len(roads))
    return roads
