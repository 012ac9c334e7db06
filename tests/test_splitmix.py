import itertools
from unittest.mock import patch

import pytest

from compacthash import EntropyUnavailableError, SplitMix64

SPLITMIX_VECTORS = {
    0: [0xE220A8397B1DCDAF, 0x6E789E6AA1B965F4, 0x06C45D188009454F],
    12345: [0x22118258A9D111A0, 0x346EDCE5F713F8ED, 0x1E9A57BC80E6721D],
}


def test_splitmix_vectors_match_reference():
    for seed, expected in SPLITMIX_VECTORS.items():
        stream = SplitMix64(seed)
        assert [stream.next() for _ in expected] == expected


def test_default_seed_is_zero():
    assert SplitMix64().next() == SplitMix64(0).next()


def test_discard_matches_sequential_draws():
    for n in (0, 1, 2, 17, 1000):
        sequential = SplitMix64(42)
        for _ in range(n):
            sequential.next()
        assert SplitMix64(42).discard(n).next() == sequential.next()


def test_discard_huge_count_wraps():
    # 2**64 increments is a full cycle.
    assert SplitMix64(7).discard(2**64).next() == SplitMix64(7).next()


def test_discard_rejects_negative():
    with pytest.raises(ValueError):
        SplitMix64().discard(-1)


def test_iterator_protocol():
    stream = SplitMix64(12345)
    assert iter(stream) is stream
    assert list(itertools.islice(stream, 3)) == SPLITMIX_VECTORS[12345]
    assert next(SplitMix64(0)) == SPLITMIX_VECTORS[0][0]


def test_copy_continues_independently():
    original = SplitMix64(5)
    original.next()
    dup = original.copy()
    assert dup.next() == original.next()
    dup.next()
    assert dup.next() != original.next()


def test_outputs_within_range():
    stream = SplitMix64(99)
    for value in itertools.islice(stream, 1000):
        assert SplitMix64.MIN <= value <= SplitMix64.MAX


def test_seed_wraps_and_rejects_non_int():
    assert SplitMix64(-1).next() == SplitMix64(2**64 - 1).next()
    with pytest.raises(TypeError):
        SplitMix64(1.5)  # type: ignore


def test_repr_does_not_expose_state():
    assert "12345" not in repr(SplitMix64(12345))


def test_from_entropy_uses_os_random():
    raw = (12345).to_bytes(8, "little")
    with patch("compacthash.splitmix.os.urandom", return_value=raw) as urandom:
        stream = SplitMix64.from_entropy()
    urandom.assert_called_once_with(8)
    assert stream.next() == SPLITMIX_VECTORS[12345][0]


def test_from_entropy_streams_differ():
    assert SplitMix64.from_entropy().next() != SplitMix64.from_entropy().next()


def test_from_entropy_failure_is_reported():
    with patch("compacthash.splitmix.os.urandom", side_effect=NotImplementedError):
        with pytest.raises(EntropyUnavailableError) as excinfo:
            SplitMix64.from_entropy()
    assert isinstance(excinfo.value.__cause__, NotImplementedError)
