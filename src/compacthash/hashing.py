from __future__ import annotations

import struct
from typing import List, Union

from .compact import CompactHash
from .widemul import WideMultiply

_U64 = struct.Struct("<Q")


def compact_hash(
    data: bytes, seed: int = 0, *, wide_multiply: Union[str, WideMultiply] = "native"
) -> int:
    """
    Hash a bytes-like object in one call.

    Args:
        data: Bytes-like input (bytes, bytearray, memoryview)
        seed: 64-bit seed; larger or negative ints are reduced modulo 2**64
        wide_multiply: "native", "portable", or a custom ``(a, b) -> (lo, hi)``

    Returns:
        The 64-bit digest as an int.

    Raises:
        TypeError: If data is not bytes-like or seed is not an int
    """
    hasher = CompactHash(seed, wide_multiply=wide_multiply)
    hasher.insert(data)
    return hasher.finalize()


def compact_hash_extended(
    data: bytes,
    n_words: int,
    seed: int = 0,
    *,
    wide_multiply: Union[str, WideMultiply] = "native",
) -> List[int]:
    """
    Derive ``n_words`` chained 64-bit words from one input.

    Word 0 equals ``compact_hash(data, seed)``. Every later word is produced
    by inserting its index and the previous word (each as an 8-byte
    little-endian value) into the same hasher and finalizing again, so the
    words must be computed in order.

    Args:
        data: Bytes-like input (bytes, bytearray, memoryview)
        n_words: Number of words to produce; 0 gives an empty list
        seed: 64-bit seed; larger or negative ints are reduced modulo 2**64
        wide_multiply: "native", "portable", or a custom ``(a, b) -> (lo, hi)``

    Returns:
        A list of exactly ``n_words`` 64-bit ints.

    Raises:
        ValueError: If n_words is negative
        TypeError: If n_words is not an int, data is not bytes-like or seed
            is not an int
    """
    if isinstance(n_words, bool) or not isinstance(n_words, int):
        raise TypeError("n_words must be an int")
    if n_words < 0:
        raise ValueError("n_words must be non-negative")
    if n_words == 0:
        return []

    hasher = CompactHash(seed, wide_multiply=wide_multiply)
    hasher.insert(data)
    words = [hasher.finalize()]
    for index in range(1, n_words):
        hasher.insert(_U64.pack(index))
        hasher.insert(_U64.pack(words[-1]))
        words.append(hasher.finalize())
    return words


__all__ = ["compact_hash", "compact_hash_extended"]
