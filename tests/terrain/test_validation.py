"""Tests for configuration validation."""

import numpy as np
import pytest

from outline_map.exceptions import ConfigurationError, InvalidSeedError
from outline_map.terrain import generator
from outline_map.terrain.config import (
    BiomeConfig,
    JitterConfig,
    MapConfig,
    NoiseConfig,
    SaltConfig,
)
from outline_map.terrain.generator import generate_map
from outline_map.terrain.validation import validate_config


class TestValidateConfig:
    """Tests for validate_config."""

    def test_defaults_valid(self) -> None:
        """The default configuration passes."""
        validate_config(MapConfig())

    @pytest.mark.parametrize("seed", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_seed(self, seed: float) -> None:
        """Non-finite seeds are rejected."""
        with pytest.raises(InvalidSeedError):
            validate_config(MapConfig(seed=seed))

    @pytest.mark.parametrize("seed", [1e39, -1e40, 3.5e38])
    def test_seed_beyond_float32(self, seed: float) -> None:
        """Seeds that overflow float32 are rejected."""
        with pytest.raises(InvalidSeedError):
            validate_config(MapConfig(seed=seed))

    def test_seed_at_float32_max_accepted(self) -> None:
        """The largest float32 value is still a usable seed."""
        validate_config(MapConfig(seed=float(np.finfo(np.float32).max)))

    def test_seed_checked_first(self) -> None:
        """A bad seed is reported even when other values are also bad."""
        with pytest.raises(InvalidSeedError):
            validate_config(MapConfig(seed=float("nan"), width=1))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 2, "height": 2},
            {"width": 2},
            {"height": 1},
            {"tile_size": 0.0},
            {"tile_size": -5.0},
            {"decoration_count": 0},
            {"jitter": JitterConfig(border_min=0.8, border_max=0.2)},
            {"jitter": JitterConfig(border_min=-0.1, border_max=0.5)},
            {"jitter": JitterConfig(border_min=0.1, border_max=1.5)},
            {"noise": NoiseConfig(width=1, height=10)},
            {"noise": NoiseConfig(scale=0.0)},
            {"biomes": BiomeConfig(town_probability=1.5)},
            {"biomes": BiomeConfig(town_probability=-0.1)},
            {"biomes": BiomeConfig(grass_threshold=1.5)},
            {"biomes": BiomeConfig(mountain_threshold=float("nan"))},
            {"salts": SaltConfig(x=float("inf"))},
            {"salts": SaltConfig(y=1e39)},
        ],
    )
    def test_out_of_domain(self, overrides: dict) -> None:
        """Values outside their domain raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            validate_config(MapConfig(**overrides))

    def test_boundary_values_accepted(self) -> None:
        """Inclusive bounds are valid."""
        validate_config(
            MapConfig(
                width=3,
                height=3,
                jitter=JitterConfig(border_min=0.0, border_max=1.0),
                biomes=BiomeConfig(town_probability=1.0),
            )
        )

    def test_generation_aborts_before_tiles(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An undersized grid fails before any tile is built."""
        calls: list[object] = []
        monkeypatch.setattr(generator, "build_world_grid", lambda *a: calls.append(a))

        with pytest.raises(ConfigurationError):
            generate_map(MapConfig(width=2, height=2))
        assert calls == []
