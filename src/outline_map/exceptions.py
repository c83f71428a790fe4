"""Custom exceptions for map generation."""


class MapError(Exception):
    """Base exception for map generation errors."""

    pass


class InvalidSeedError(MapError):
    """Raised when the generation seed is not a finite number."""

    pass


class ConfigurationError(MapError):
    """Raised when a configuration value is outside its valid domain."""

    pass


class OutOfRangeError(MapError):
    """Raised when a noise sample falls outside the gradient lattice."""

    pass
