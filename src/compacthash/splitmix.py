from __future__ import annotations

import logging
import os
import struct

logger = logging.getLogger(__name__)

_MASK_64 = 0xFFFFFFFFFFFFFFFF


class EntropyUnavailableError(RuntimeError):
    """Raised when the operating system cannot provide random bytes."""


class SplitMix64:
    """
    SplitMix64 pseudo-random generator producing unsigned 64-bit integers.

    Each draw advances the state by a fixed odd increment (the golden ratio
    constant) and returns a mixed copy of it, so the generator visits all
    2**64 states before repeating. The same seed always yields the same
    sequence, on every platform.

    Use ``SplitMix64.from_entropy()`` for a non-reproducible stream seeded from
    the operating system.
    """

    INCREMENT = 0x9E3779B97F4A7C15
    MIN = 0
    MAX = _MASK_64

    __slots__ = ("_state",)

    def __init__(self, seed: int = 0):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError("seed must be an int")
        self._state = seed & _MASK_64

    @classmethod
    def from_entropy(cls) -> "SplitMix64":
        """
        Seed a new generator from the OS secure random source.

        Unlike the deterministic constructor this can fail, and two calls
        almost never produce the same stream.

        Raises:
            EntropyUnavailableError: If the platform has no usable entropy source.
        """
        try:
            raw = os.urandom(8)
        except (NotImplementedError, OSError) as exc:
            raise EntropyUnavailableError(
                "operating system entropy source is unavailable"
            ) from exc
        logger.debug("Seeded SplitMix64 from operating system entropy")
        return cls(struct.unpack("<Q", raw)[0])

    def copy(self) -> "SplitMix64":
        dup = self.__class__.__new__(self.__class__)
        dup._state = self._state
        return dup

    def next(self) -> int:
        z = self._state = (self._state + self.INCREMENT) & _MASK_64
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
        return z ^ (z >> 31)

    def discard(self, n: int) -> "SplitMix64":
        """Skip ``n`` outputs in constant time."""
        if n < 0:
            raise ValueError("n must be non-negative")
        self._state = (self._state + self.INCREMENT * n) & _MASK_64
        return self

    def __iter__(self) -> "SplitMix64":
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} at {id(self):#x}>"


__all__ = ["EntropyUnavailableError", "SplitMix64"]
