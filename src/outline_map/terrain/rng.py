"""Stateless hash-based random numbers.

Every value is a pure function of the tuple of numbers passed in: each number
is reinterpreted as its 32-bit float bit pattern, the words are hashed, and the
32-bit digest is scaled into [0, 1). Calls never read or update shared state,
so the same tuple always yields the same value.
"""

import hashlib
import math
from typing import Sequence

import numpy as np

_UINT32_SPAN = float(1 << 32)


def _float32_words(seeds: Sequence[float]) -> bytes:
    """Pack seeds as little-endian float32 words."""
    return np.asarray(seeds, dtype="<f4").tobytes()


def normalized(seeds: Sequence[float]) -> float:
    """Hash a seed tuple to a float in [0, 1)."""
    digest = hashlib.blake2b(_float32_words(seeds), digest_size=4).digest()
    return int.from_bytes(digest, "little") / _UINT32_SPAN


def scaled(seeds: Sequence[float], low: float, high: float) -> float:
    """Hash a seed tuple to a float in [low, high)."""
    return low + normalized(seeds) * (high - low)


def unit_vector(seeds: Sequence[float]) -> tuple[float, float]:
    """Hash a seed tuple to a direction on the unit circle."""
    angle = normalized(seeds) * 2 * math.pi
    return math.cos(angle), math.sin(angle)
