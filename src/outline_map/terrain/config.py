"""Map generation configuration models."""

from pydantic import BaseModel, Field


class JitterConfig(BaseModel):
    """Tile center displacement, as a fraction of one tile."""

    border_min: float = Field(default=0.2, description="Minimum offset inside a tile")
    border_max: float = Field(default=0.8, description="Maximum offset inside a tile")


class NoiseConfig(BaseModel):
    """Gradient lattice used for elevation noise."""

    width: int = Field(default=12, description="Lattice width in gradient cells")
    height: int = Field(default=10, description="Lattice height in gradient cells")
    scale: float = Field(
        default=200.0, description="World units per lattice cell when sampling"
    )


class BiomeConfig(BaseModel):
    """Biome classification thresholds on the shifted noise level (0..2)."""

    mountain_threshold: float = Field(
        default=1.4, description="Levels above this become mountains"
    )
    town_threshold: float = Field(
        default=1.0, description="Levels above this may host a town"
    )
    grass_threshold: float = Field(
        default=0.8, description="Levels above this become grass"
    )
    town_probability: float = Field(
        default=0.02, description="Chance that an eligible tile becomes a town"
    )


class SaltConfig(BaseModel):
    """Per-purpose salts mixed into the hash seed chain."""

    random: float = Field(default=0.7, description="Salt for the per-tile random value")
    x: float = Field(default=0.9, description="Salt for horizontal jitter")
    y: float = Field(default=0.8, description="Salt for vertical jitter")


class MapConfig(BaseModel):
    """Complete map generation configuration."""

    seed: float = Field(default=0.3, description="Root seed, conventionally in [0, 1)")
    width: int = Field(default=40, description="Map width in tiles")
    height: int = Field(default=28, description="Map height in tiles")
    tile_size: float = Field(default=25.0, description="World units per tile")
    decoration_count: int = Field(
        default=3, description="Number of interchangeable mountain decorations"
    )

    jitter: JitterConfig = Field(default_factory=JitterConfig)
    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    biomes: BiomeConfig = Field(default_factory=BiomeConfig)
    salts: SaltConfig = Field(default_factory=SaltConfig)
