"""Configuration validation run before any generation work."""

import math

import numpy as np

from ..exceptions import ConfigurationError, InvalidSeedError
from .config import MapConfig

# One ring of tiles around the interior is needed for coastline neighbourhoods
MIN_GRID_SIZE = 3

# Seeds and salts are hashed as float32 words
MAX_KEY_MAGNITUDE = float(np.finfo(np.float32).max)


def validate_config(config: MapConfig) -> None:
    """Check every configuration value against its domain.

    Args:
        config: Map configuration.

    Raises:
        InvalidSeedError: If the seed is not finite or does not fit in float32.
        ConfigurationError: If any other value is out of its domain.
    """
    if not math.isfinite(config.seed):
        raise InvalidSeedError(f"Seed must be finite, got {config.seed}")
    if abs(config.seed) > MAX_KEY_MAGNITUDE:
        raise InvalidSeedError(
            f"Seed magnitude must not exceed {MAX_KEY_MAGNITUDE:g}, got {config.seed}"
        )

    _check_grid(config)
    _check_jitter(config)
    _check_noise(config)
    _check_biomes(config)
    _check_salts(config)

    if config.decoration_count < 1:
        raise ConfigurationError(
            f"decoration_count must be at least 1, got {config.decoration_count}"
        )


def _check_grid(config: MapConfig) -> None:
    if config.width < MIN_GRID_SIZE or config.height < MIN_GRID_SIZE:
        raise ConfigurationError(
            f"Grid {config.width}x{config.height} is smaller than "
            f"{MIN_GRID_SIZE}x{MIN_GRID_SIZE}"
        )
    if not (math.isfinite(config.tile_size) and config.tile_size > 0):
        raise ConfigurationError(f"tile_size must be positive, got {config.tile_size}")


def _check_jitter(config: MapConfig) -> None:
    low = config.jitter.border_min
    high = config.jitter.border_max
    if not (0.0 <= low <= high <= 1.0):
        raise ConfigurationError(
            f"Jitter range must satisfy 0 <= border_min <= border_max <= 1, "
            f"got [{low}, {high}]"
        )


def _check_noise(config: MapConfig) -> None:
    noise = config.noise
    if noise.width < 2 or noise.height < 2:
        raise ConfigurationError(
            f"Noise lattice must be at least 2x2, got {noise.width}x{noise.height}"
        )
    if not (math.isfinite(noise.scale) and noise.scale > 0):
        raise ConfigurationError(f"Noise scale must be positive, got {noise.scale}")


def _check_biomes(config: MapConfig) -> None:
    biomes = config.biomes
    thresholds = (
        biomes.grass_threshold,
        biomes.town_threshold,
        biomes.mountain_threshold,
    )
    if not all(math.isfinite(t) for t in thresholds):
        raise ConfigurationError(f"Biome thresholds must be finite, got {thresholds}")
    if not (biomes.grass_threshold <= biomes.town_threshold <= biomes.mountain_threshold):
        raise ConfigurationError(
            "Biome thresholds must satisfy grass <= town <= mountain, "
            f"got {thresholds}"
        )
    if not (0.0 <= biomes.town_probability <= 1.0):
        raise ConfigurationError(
            f"town_probability must be in [0, 1], got {biomes.town_probability}"
        )


def _check_salts(config: MapConfig) -> None:
    salts = config.salts
    for name, value in (("random", salts.random), ("x", salts.x), ("y", salts.y)):
        if not (math.isfinite(value) and abs(value) <= MAX_KEY_MAGNITUDE):
            raise ConfigurationError(
                f"Salt '{name}' must be finite and fit in float32, got {value}"
            )
