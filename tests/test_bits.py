"""Tests for bit extraction and precision modes."""

from __future__ import annotations

import pytest
from hypothesis import given
from klaw_well import InvalidBitWidthError, PrecisionMode, Rand, Well1024a
from klaw_well._bits import check_bit_width, get_bits

from tests.sources import CountingSource, FixedSource
from tests.strategies import bit_widths, seeds


class TestPrecisionMode:
    """Tests for the PrecisionMode enum."""

    def test_values(self) -> None:
        assert PrecisionMode.STANDARD.value == 'standard'
        assert PrecisionMode.HIGH.value == 'high'

    def test_from_string(self) -> None:
        assert PrecisionMode('high') is PrecisionMode.HIGH

    def test_bits_and_words(self) -> None:
        assert (PrecisionMode.STANDARD.bits, PrecisionMode.STANDARD.words) == (32, 1)
        assert (PrecisionMode.HIGH.bits, PrecisionMode.HIGH.words) == (53, 2)


class TestGetBits:
    """Tests for get_bits() on a fixed word source."""

    def test_narrow_draw_keeps_low_bits(self) -> None:
        assert get_bits(FixedSource([0xFFFFFFFF]), 5) == 0b11111
        assert get_bits(FixedSource([0xABCD1234]), 16) == 0x1234

    def test_full_word(self) -> None:
        assert get_bits(FixedSource([0xDEADBEEF]), 32) == 0xDEADBEEF

    def test_wide_draw_concatenates_first_word_high(self) -> None:
        assert get_bits(FixedSource([0x1, 0x2]), 40) == (1 << 32) | 2

    def test_wide_draw_masks_surplus_high_bits(self) -> None:
        assert get_bits(FixedSource([0xFFFFFFFF, 0]), 33) == 1 << 32
        assert get_bits(FixedSource([0xFFFFFFFF, 0xFFFFFFFF]), 53) == 2**53 - 1

    @pytest.mark.parametrize(('n', 'words'), [(1, 1), (32, 1), (33, 2), (53, 2)])
    def test_word_consumption(self, n: int, words: int) -> None:
        source = CountingSource(Well1024a(5))
        get_bits(source, n)
        assert source.calls == words

    @given(seed=seeds, n=bit_widths)
    def test_output_below_two_to_the_n(self, seed: int, n: int) -> None:
        source = Well1024a(seed)
        for _ in range(20):
            assert 0 <= get_bits(source, n) < 2**n


class TestCheckBitWidth:
    """Tests for bit width validation."""

    @pytest.mark.parametrize('n', [1, 32, 33, 53])
    def test_accepts_valid(self, n: int) -> None:
        check_bit_width(n)

    @pytest.mark.parametrize('n', [0, 54, -1, 64])
    def test_rejects_invalid(self, n: int) -> None:
        with pytest.raises(InvalidBitWidthError) as exc_info:
            check_bit_width(n)
        assert exc_info.value.bits == n


class TestGetRandBits:
    """Tests for Rand.get_rand_bits()."""

    def test_zero_and_54_fail(self, rng: Rand) -> None:
        with pytest.raises(InvalidBitWidthError):
            rng.get_rand_bits(0)
        with pytest.raises(InvalidBitWidthError):
            rng.get_rand_bits(54)

    def test_each_bit_set_about_half_the_time(self, rng: Rand) -> None:
        draws = 10_000
        counts = [0] * 53
        for _ in range(draws):
            value = rng.get_rand_bits(53)
            for bit in range(53):
                counts[bit] += (value >> bit) & 1
        for count in counts:
            assert 0.45 < count / draws < 0.55

    def test_top_bit_reachable(self, rng: Rand) -> None:
        assert any(rng.get_rand_bits(53) >= 2**52 for _ in range(100))
