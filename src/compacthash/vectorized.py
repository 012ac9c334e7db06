"""
Column hashing for pandas, pyarrow and polars.

Cells must be ``bytes``-like or ``str`` (hashed as UTF-8). Null cells stay
null: every helper returns a nullable uint64 column with a null wherever the
input was null, so a missing value never collides with a real digest.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

from .hashing import compact_hash


def _is_none(value: Any) -> bool:
    return value is None


def _cell_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"Unsupported cell type for compact hashing: {type(value)!r}")


def _hash_cells(
    values: Iterable[Any],
    seed: int,
    is_null: Callable[[Any], bool] = _is_none,
) -> List[Optional[int]]:
    return [
        None if is_null(val) else compact_hash(_cell_bytes(val), seed)
        for val in values
    ]


def hash_pandas_series(series: Any, seed: int = 0):
    """
    Hash a pandas Series of bytes or str values into a nullable UInt64 Series.

    ``None``, ``NaN`` and ``pd.NA`` cells become ``<NA>``.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    def is_null(value: Any) -> bool:
        return not isinstance(value, (bytes, bytearray, memoryview, str)) and bool(
            pd.isna(value)
        )

    hashes = _hash_cells(series, seed, is_null)
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="UInt64")


def hash_arrow_array(array: Any, seed: int = 0):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint64 Array,
    keeping the input's validity mask.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    return pa.array(_hash_cells(arr.to_pylist(), seed), type=pa.uint64())


def hash_polars_series(series: Any, seed: int = 0):
    """
    Hash a polars Series of bytes or str values into a UInt64 Series; nulls
    stay null.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    name = getattr(ser, "name", None) or "hash"
    return pl.Series(name=name, values=_hash_cells(ser, seed), dtype=pl.UInt64)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
