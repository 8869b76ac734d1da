"""Seeded Park-Miller random source shared by every generation step."""

from __future__ import annotations

import math

from .base import InvalidSeedError

MULTIPLIER = 16807  # 7**5
MODULUS = 2147483647  # 2**31 - 1


class RandomSource:
    """Minimal standard LCG (``x = x * 16807 mod 2**31 - 1``).

    The constants are fixed so a given seed carves the same maze on every
    platform. Seeds must be explicit integers in ``[1, MODULUS - 1]``; picking
    a seed for a "random" maze is up to the caller.
    """

    def __init__(self, seed: int) -> None:
        self._state = 0
        self.seed(seed)

    def seed(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidSeedError(f"seed must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidSeedError(f"seed must be positive, got {value}")
        # Keeps state * MULTIPLIER below 2**53, so double-precision ports produce the same stream.
        if value >= MODULUS:
            raise InvalidSeedError(f"seed must be below {MODULUS}, got {value}")
        self._state = value

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        """Advance the generator and return a float in ``[0, 1)``."""

        self._state = (self._state * MULTIPLIER) % MODULUS
        return (self._state - 1) / (MODULUS - 1)

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]``, both ends inclusive."""

        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return int(math.floor(self.next() * (high - low + 1))) + low


__all__ = ["RandomSource", "MULTIPLIER", "MODULUS"]
