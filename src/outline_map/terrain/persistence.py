"""Map persistence: save and load generated maps."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import TypeAdapter

from ..types import Biome, Vector2
from .coastal import CoastlineSegment
from .config import MapConfig
from .decorations import DecorationSelection
from .generator import GenerationResult
from .grid import WorldGrid, WorldTile, collect_towns
from .settlements import Road

logger = structlog.get_logger()

FORMAT_VERSION = 1

_ROADS = TypeAdapter(list[Road])
_COASTLINE = TypeAdapter(list[CoastlineSegment])
_DECORATIONS = TypeAdapter(list[DecorationSelection])

_REQUIRED_ARRAYS = ("positions", "random_values", "noise_levels", "biomes", "metadata")


def save_map(path: Path, result: GenerationResult) -> Path:
    """Save a generated map to disk.

    Tiles are stored as numpy arrays in a compressed .npz archive; roads,
    coastline, decorations and metadata are stored as JSON blobs.

    Args:
        path: Output path. Any other suffix is replaced with .npz.
        result: Generation result to save.

    Returns:
        The path actually written.
    """
    if path.suffix != ".npz":
        path = path.with_suffix(".npz")

    positions, random_values, noise_levels, biomes = _grid_to_arrays(result.grid)

    metadata = {
        "version": FORMAT_VERSION,
        "config": result.config.model_dump(mode="json"),
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

    np.savez_compressed(
        path,
        positions=positions,
        random_values=random_values,
        noise_levels=noise_levels,
        biomes=biomes,
        roads=_ROADS.dump_json(result.roads),
        coastline=_COASTLINE.dump_json(result.coastline),
        decorations=_DECORATIONS.dump_json(result.decorations),
        metadata=json.dumps(metadata).encode("utf-8"),
    )

    file_size = path.stat().st_size / 1024
    logger.info("map_saved", path=str(path), size_kb=round(file_size, 1))
    return path


def load_map(path: Path) -> GenerationResult:
    """Load a map saved by save_map.

    Args:
        path: Path to .npz file.

    Returns:
        The reconstructed GenerationResult.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Map file not found: {path}")

    with np.load(path) as data:
        missing = [name for name in _REQUIRED_ARRAYS if name not in data]
        if missing:
            raise ValueError(f"Invalid map file: missing {', '.join(missing)}")

        metadata = json.loads(data["metadata"].tobytes().decode("utf-8"))
        if metadata.get("version") != FORMAT_VERSION:
            raise ValueError(f"Unsupported map format version: {metadata.get('version')}")

        grid = _arrays_to_grid(
            data["positions"],
            data["random_values"],
            data["noise_levels"],
            data["biomes"],
        )
        roads = _ROADS.validate_json(_blob(data, "roads"))
        coastline = _COASTLINE.validate_json(_blob(data, "coastline"))
        decorations = _DECORATIONS.validate_json(_blob(data, "decorations"))

    logger.info("map_loaded", path=str(path), width=grid.width, height=grid.height)
    return GenerationResult(
        config=MapConfig.model_validate(metadata["config"]),
        grid=grid,
        towns=collect_towns(grid),
        roads=roads,
        coastline=coastline,
        decorations=decorations,
    )


def _blob(data: Mapping[str, NDArray], name: str) -> bytes:
    if name not in data:
        return b"[]"
    return data[name].tobytes()


def _grid_to_arrays(
    grid: WorldGrid,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64], NDArray[np.uint8]]:
    positions = np.empty((grid.height, grid.width, 2), dtype=np.float64)
    random_values = np.empty((grid.height, grid.width), dtype=np.float64)
    noise_levels = np.empty((grid.height, grid.width), dtype=np.float64)
    biomes = np.empty((grid.height, grid.width), dtype=np.uint8)

    for col, row, tile in grid.iter_tiles():
        positions[row, col] = (tile.position.x, tile.position.y)
        random_values[row, col] = tile.random_value
        noise_levels[row, col] = tile.noise_level
        biomes[row, col] = tile.biome.code

    return positions, random_values, noise_levels, biomes


def _arrays_to_grid(
    positions: NDArray[np.float64],
    random_values: NDArray[np.float64],
    noise_levels: NDArray[np.float64],
    biomes: NDArray[np.uint8],
) -> WorldGrid:
    height, width = biomes.shape
    if positions.shape != (height, width, 2):
        raise ValueError(
            f"Invalid map file: positions shape {positions.shape} "
            f"does not match biomes shape {biomes.shape}"
        )

    rows = tuple(
        tuple(
            WorldTile(
                position=Vector2(
                    x=float(positions[row, col, 0]), y=float(positions[row, col, 1])
                ),
                random_value=float(random_values[row, col]),
                noise_level=float(noise_levels[row, col]),
                biome=Biome.from_code(biomes[row, col]),
            )
            for col in range(width)
        )
        for row in range(height)
    )
    return WorldGrid(width=width, height=height, tiles=rows)
