import pytest

from compacthash import (
    CompactHash,
    SplitMix64,
    compact_hash,
    compact_hash_extended,
    resolve_wide_multiply,
    umul128,
    umul128_portable,
)

MASK_64 = 2**64 - 1


def test_umul128_edges():
    assert umul128(0, MASK_64) == (0, 0)
    assert umul128(MASK_64, MASK_64) == (1, MASK_64 - 1)
    assert umul128(2**32, 2**32) == (0, 1)


def test_portable_matches_native():
    stream = SplitMix64(1)
    cases = [(0, 0), (MASK_64, MASK_64), (MASK_64, 1), (2**32, 2**32 - 1)]
    cases += [(stream.next(), stream.next()) for _ in range(500)]
    for a, b in cases:
        assert umul128_portable(a, b) == umul128(a, b)


def test_hash_is_independent_of_wide_multiply():
    data = bytes(range(77))
    assert compact_hash(data, 3, wide_multiply="portable") == compact_hash(data, 3)
    assert compact_hash_extended(data, 3, 3, wide_multiply="portable") == (
        compact_hash_extended(data, 3, 3)
    )


def test_resolve_by_name_and_callable():
    assert resolve_wide_multiply("native") is umul128
    assert resolve_wide_multiply("Portable") is umul128_portable
    assert resolve_wide_multiply(umul128_portable) is umul128_portable


def test_custom_wide_multiply_is_used():
    calls = []

    def counting(a, b):
        calls.append((a, b))
        return umul128(a, b)

    hasher = CompactHash(0, wide_multiply=counting)
    hasher.insert(bytes(16))
    assert len(calls) == 2
    assert hasher.finalize() == compact_hash(bytes(16))


def test_unknown_wide_multiply_fails_before_construction():
    with pytest.raises(ValueError):
        CompactHash(0, wide_multiply="int128")
    with pytest.raises(TypeError):
        resolve_wide_multiply(128)  # type: ignore
