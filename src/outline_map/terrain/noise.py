"""Gradient (Perlin-style) noise over a seeded lattice of unit vectors."""

import math

import numpy as np
from numpy.typing import NDArray

from ..exceptions import OutOfRangeError
from ..types import Vector2
from .rng import unit_vector


def smootherstep(t: float) -> float:
    """Quintic easing 6t^5 - 15t^4 + 10t^3 for t in [0, 1].

    First and second derivatives vanish at both ends.
    """
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def interpolate(a: float, b: float, t: float) -> float:
    """Blend from a to b with smootherstep weighting."""
    return a + smootherstep(t) * (b - a)


class GradientNoiseField:
    """Read-only lattice of unit gradients sampled with smooth interpolation."""

    def __init__(self, gradients: NDArray[np.float64]):
        """Wrap a precomputed gradient array.

        Args:
            gradients: Array of shape (height, width, 2) holding unit vectors,
                indexed [y, x].
        """
        if gradients.ndim != 3 or gradients.shape[2] != 2:
            raise ValueError(
                f"Gradient array must have shape (height, width, 2), got {gradients.shape}"
            )
        self._gradients = gradients.copy()
        self._gradients.flags.writeable = False

    @classmethod
    def create(cls, seed: float, width: int, height: int) -> "GradientNoiseField":
        """Build a lattice where cell (x, y) holds unit_vector([seed, x, y]).

        Args:
            seed: Root seed.
            width: Lattice width.
            height: Lattice height.

        Returns:
            A new noise field.
        """
        gradients = np.empty((height, width, 2), dtype=np.float64)
        for y in range(height):
            for x in range(width):
                gradients[y, x] = unit_vector([seed, x, y])
        return cls(gradients)

    @property
    def width(self) -> int:
        return self._gradients.shape[1]

    @property
    def height(self) -> int:
        return self._gradients.shape[0]

    @property
    def gradients(self) -> NDArray[np.float64]:
        """Read-only view of the gradient lattice, indexed [y, x]."""
        return self._gradients

    def gradient(self, x: int, y: int) -> Vector2:
        gx, gy = self._gradients[y, x]
        return Vector2(x=float(gx), y=float(gy))

    def sample(self, coord: Vector2) -> float:
        """Sample noise at a lattice-space coordinate.

        Args:
            coord: Point in lattice units.

        Returns:
            Noise value roughly in [-1, 1]; exactly 0 on lattice points.

        Raises:
            OutOfRangeError: If the enclosing cell is not fully covered.
        """
        xf = math.floor(coord.x)
        yf = math.floor(coord.y)
        if not (0 <= xf and xf + 1 < self.width and 0 <= yf and yf + 1 < self.height):
            raise OutOfRangeError(
                f"Noise sample at {coord} needs lattice cell ({xf}, {yf}) "
                f"outside {self.width}x{self.height} lattice"
            )

        tx = coord.x - xf
        ty = coord.y - yf

        top_left = self._corner_dot(coord, xf, yf)
        top_right = self._corner_dot(coord, xf + 1, yf)
        bottom_left = self._corner_dot(coord, xf, yf + 1)
        bottom_right = self._corner_dot(coord, xf + 1, yf + 1)

        top = interpolate(top_left, top_right, tx)
        bottom = interpolate(bottom_left, bottom_right, tx)
        return interpolate(top, bottom, ty)

    def _corner_dot(self, coord: Vector2, x: int, y: int) -> float:
        gx, gy = self._gradients[y, x]
        return float((coord.x - x) * gx + (coord.y - y) * gy)
