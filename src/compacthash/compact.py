from __future__ import annotations

import struct
from typing import Union

from .splitmix import SplitMix64
from .widemul import WideMultiply, resolve_wide_multiply

_MASK_64 = 0xFFFFFFFFFFFFFFFF

_GOLDEN = 0x9E3779B97F4A7C15
_PRIME64_2 = 0xC2B2AE3D27D4EB4F
_PRIME64_3 = 0x165667B19E3779F9
_MUM_MULT = 0x2D358DCCAA6C78A5
_MUM_XOR = 0x8BB84B93962EACC9

_BLOCK = struct.Struct("<QQ")
_ZERO_BLOCK = bytes(16)


def _rotr(x: int, b: int) -> int:
    """Rotate right for 64-bit values."""
    return ((x >> b) | (x << (64 - b))) & _MASK_64


def _compress(x: int, y: int, mul: WideMultiply) -> int:
    """Fold an input word into a lane (multiply-unfold-mix, as in wyhash)."""
    x = ((x + y) * _MUM_MULT) & _MASK_64
    lo, hi = mul(x, x ^ _MUM_XOR)
    return x ^ _MUM_XOR ^ lo ^ hi


class CompactHash:
    """
    Pure-Python 64-bit non-cryptographic hash with a 128-bit streaming state.

    Input is consumed in 16-byte blocks, one little-endian word per lane.
    Each ``insert`` call zero-pads its own trailing partial block, so
    splitting input across calls only matches a single call when every split
    falls on a 16-byte boundary.

    The interface mirrors hashlib-style objects and returns 64-bit digests.
    """

    name = "compact_hash"
    digest_size = 8
    block_size = 16

    def __init__(
        self, seed: int = 0, *, wide_multiply: Union[str, WideMultiply] = "native"
    ):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError("seed must be an int")
        seed &= _MASK_64

        self._mul = resolve_wide_multiply(wide_multiply)
        self._lane0 = seed ^ _GOLDEN
        self._lane1 = (_rotr(seed, 9) * _PRIME64_2) & _MASK_64
        self._total_len = 0

    @classmethod
    def from_stream(
        cls, stream: SplitMix64, *, wide_multiply: Union[str, WideMultiply] = "native"
    ) -> "CompactHash":
        """Build a hasher whose seed is the next value drawn from ``stream``."""
        return cls(stream.next(), wide_multiply=wide_multiply)

    @property
    def total_len(self) -> int:
        return self._total_len

    def copy(self) -> "CompactHash":
        dup = self.__class__.__new__(self.__class__)
        dup._mul = self._mul
        dup._lane0 = self._lane0
        dup._lane1 = self._lane1
        dup._total_len = self._total_len
        return dup

    def insert(self, data: bytes) -> "CompactHash":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")

        raw = bytes(data)
        size = len(raw)
        self._total_len = (self._total_len + size) & _MASK_64

        lane0, lane1, mul = self._lane0, self._lane1, self._mul
        offset_limit = size - (size % 16)
        for idx in range(0, offset_limit, 16):
            m0, m1 = _BLOCK.unpack_from(raw, idx)
            lane0 = _compress(lane0, m0, mul)
            lane1 = _compress(lane1, m1, mul)

        if offset_limit < size:
            tail = raw[offset_limit:] + _ZERO_BLOCK[: 16 - (size - offset_limit)]
            m0, m1 = _BLOCK.unpack(tail)
            lane0 = _compress(lane0, m0, mul)
            lane1 = _compress(lane1, m1, mul)

        self._lane0, self._lane1 = lane0, lane1
        return self

    def update(self, data: bytes) -> "CompactHash":
        return self.insert(data)

    def finalize(self) -> int:
        """
        Return the 64-bit digest of everything inserted so far.

        The state is left untouched: repeated calls return the same value and
        more data may be inserted afterwards.
        """
        h = _compress(self._lane0, self._lane1, self._mul)
        # Length mixing keeps b"A" and b"A\0" apart after padding.
        h ^= (self._total_len * _GOLDEN) & _MASK_64
        h = ((h ^ (h >> 33)) * _PRIME64_2) & _MASK_64
        h = ((h ^ (h >> 29)) * _PRIME64_3) & _MASK_64
        return h ^ (h >> 32)

    def digest(self) -> bytes:
        return struct.pack("<Q", self.finalize())

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self.finalize()


__all__ = ["CompactHash"]
