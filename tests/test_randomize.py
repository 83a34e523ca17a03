from collections import Counter

import pytest

from pwgen.core.errors import EmptyPoolError
from pwgen.core.pool import ActivePool
from pwgen.core.random_source import SeededSource
from pwgen.core.randomize import TERMINATOR, randomize, randomize_into


def _pool(characters: bytes) -> ActivePool:
    pool = ActivePool()
    pool.activate(characters)
    return pool


class TestRandomizeInto:
    def test_single_character_pool(self) -> None:
        buffer = bytearray(9)
        randomize_into(buffer, 8, _pool(b"0"), SeededSource(1))
        assert bytes(buffer) == b"00000000\x00"

    def test_overwrites_prefix_and_terminates(self) -> None:
        buffer = bytearray(b"\xff" * 12)
        randomize_into(buffer, 5, _pool(b"ab"), SeededSource(3))
        assert set(buffer[:5]) <= set(b"ab")
        assert buffer[5] == TERMINATOR
        assert buffer[6:] == b"\xff" * 6

    def test_zero_length(self) -> None:
        buffer = bytearray(b"x")
        randomize_into(buffer, 0, _pool(b"a"), SeededSource(3))
        assert buffer == bytearray(b"\x00")

    def test_buffer_too_small(self) -> None:
        with pytest.raises(ValueError, match="need at least 9"):
            randomize_into(bytearray(8), 8, _pool(b"a"), SeededSource(1))

    def test_empty_pool(self) -> None:
        with pytest.raises(EmptyPoolError):
            randomize_into(bytearray(9), 8, ActivePool(), SeededSource(1))

    def test_terminator_in_pool_is_not_suppressed(self) -> None:
        buffer = bytearray(5)
        randomize_into(buffer, 4, _pool(b"\x00"), SeededSource(1))
        assert bytes(buffer) == b"\x00" * 5


class TestRandomize:
    def test_exact_length(self) -> None:
        source = SeededSource(11)
        for length in (0, 1, 8, 64):
            assert len(randomize(length, _pool(b"abc"), source)) == length

    def test_draws_only_from_pool(self) -> None:
        value = randomize(200, _pool(b"xyz"), SeededSource(5))
        assert set(value) <= set(b"xyz")

    def test_same_seed_same_output(self) -> None:
        pool = _pool(b"0123456789")
        assert randomize(32, pool, SeededSource(99)) == randomize(
            32, pool, SeededSource(99)
        )

    @pytest.mark.slow
    def test_frequency_follows_multiplicity(self) -> None:
        value = randomize(30000, _pool(b"aab"), SeededSource(2026))
        counts = Counter(value)
        ratio = counts[ord("a")] / counts[ord("b")]
        assert 1.85 < ratio < 2.15
