"""
Compact, fast, non-cryptographic 64-bit hashing for byte sequences.
"""

import logging

from .compact import CompactHash
from .hashing import compact_hash, compact_hash_extended
from .splitmix import EntropyUnavailableError, SplitMix64
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)
from .widemul import resolve_wide_multiply, umul128, umul128_portable

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CompactHash",
    "EntropyUnavailableError",
    "SplitMix64",
    "compact_hash",
    "compact_hash_extended",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
    "resolve_wide_multiply",
    "umul128",
    "umul128_portable",
]
