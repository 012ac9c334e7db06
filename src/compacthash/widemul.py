"""
64x64 -> 128-bit multiplication.

The hasher never multiplies wide values itself; it receives one of these
callables so the only platform-sensitive arithmetic lives in one place.
"""

from __future__ import annotations

import logging
from typing import Callable, Tuple, Union

logger = logging.getLogger(__name__)

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF

WideMultiply = Callable[[int, int], Tuple[int, int]]


def umul128(a: int, b: int) -> Tuple[int, int]:
    """Return the (low, high) 64-bit words of ``a * b``."""
    product = a * b
    return product & _MASK_64, (product >> 64) & _MASK_64


def umul128_portable(a: int, b: int) -> Tuple[int, int]:
    """Same as ``umul128`` but assembled from four 32x32-bit partial products."""
    a_lo, a_hi = a & _MASK_32, (a >> 32) & _MASK_32
    b_lo, b_hi = b & _MASK_32, (b >> 32) & _MASK_32

    lo_lo = a_lo * b_lo
    lo_hi = a_lo * b_hi
    hi_lo = a_hi * b_lo
    hi_hi = a_hi * b_hi

    # Carry out of the middle column.
    mid = (lo_lo >> 32) + (lo_hi & _MASK_32) + (hi_lo & _MASK_32)
    lo = ((mid << 32) | (lo_lo & _MASK_32)) & _MASK_64
    hi = (hi_hi + (lo_hi >> 32) + (hi_lo >> 32) + (mid >> 32)) & _MASK_64
    return lo, hi


_IMPLEMENTATIONS = {
    "native": umul128,
    "portable": umul128_portable,
}


def resolve_wide_multiply(impl: Union[str, WideMultiply]) -> WideMultiply:
    """
    Resolve a wide-multiply implementation by name, or pass a callable through.

    Args:
        impl: "native", "portable", or a callable ``(a, b) -> (lo, hi)``

    Raises:
        ValueError: If ``impl`` names an unknown implementation
        TypeError: If ``impl`` is neither a string nor callable
    """
    if callable(impl):
        return impl
    if not isinstance(impl, str):
        raise TypeError("wide_multiply must be a name or a callable")
    try:
        func = _IMPLEMENTATIONS[impl.lower()]
    except KeyError:
        raise ValueError(f"Unsupported wide multiply: {impl}") from None
    logger.debug("Using %s wide multiply", impl.lower())
    return func


__all__ = ["WideMultiply", "resolve_wide_multiply", "umul128", "umul128_portable"]
