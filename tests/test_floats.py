"""Tests for floating point distributions."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from klaw_well import InvalidRangeError, PrecisionMode, Rand
from klaw_well._floats import triangular, unit

from tests.sources import FixedSource
from tests.strategies import float_ranges, seeds


class TestUnit:
    """Tests for unit() on fixed words."""

    def test_standard_divides_by_two_to_the_32(self) -> None:
        assert unit(FixedSource([1 << 31])) == 0.5
        assert unit(FixedSource([0])) == 0.0

    def test_standard_max_below_one(self) -> None:
        assert unit(FixedSource([0xFFFFFFFF])) == (2**32 - 1) / 2**32

    def test_high_divides_by_two_to_the_53(self) -> None:
        source = FixedSource([0xFFFFFFFF, 0xFFFFFFFF])
        assert unit(source, PrecisionMode.HIGH) == (2**53 - 1) / 2**53
        assert source.calls == 2

    def test_high_has_finer_grain(self) -> None:
        assert unit(FixedSource([0, 1]), PrecisionMode.HIGH) == 2.0**-53


class TestRandom:
    """Tests for Rand.random()."""

    @given(seed=seeds)
    def test_in_unit_interval(self, seed: int) -> None:
        rng = Rand(seed)
        for _ in range(50):
            value = rng.random()
            assert isinstance(value, float)
            assert 0.0 <= value < 1.0

    def test_high_precision_in_unit_interval(self, rng: Rand) -> None:
        for _ in range(100):
            assert 0.0 <= rng.random(precision=PrecisionMode.HIGH) < 1.0


class TestUniform:
    """Tests for Rand.uniform()."""

    @given(seed=seeds, bounds=float_ranges())
    def test_within_bounds(self, seed: int, bounds: tuple[float, float]) -> None:
        start, stop = bounds
        rng = Rand(seed)
        for _ in range(20):
            assert start <= rng.uniform(start, stop) <= stop

    def test_mean_near_midpoint(self, rng: Rand) -> None:
        values = [rng.uniform(5.0, 10.0) for _ in range(10_000)]
        assert all(5.0 <= v < 10.0 for v in values)
        assert abs(sum(values) / len(values) - 7.5) < 0.1

    def test_single_argument_is_stop(self, rng: Rand) -> None:
        for _ in range(100):
            assert 0.0 <= rng.uniform(3.0) < 3.0

    @pytest.mark.parametrize(('start', 'stop'), [(10.0, 5.0), (1.0, 1.0)])
    def test_invalid_range(self, rng: Rand, start: float, stop: float) -> None:
        with pytest.raises(InvalidRangeError):
            rng.uniform(start, stop)


class TestTriangular:
    """Tests for triangular sampling."""

    def test_inverse_cdf_at_mode(self) -> None:
        # u = 0.5 with a centered mode lands exactly on the mode
        assert triangular(FixedSource([1 << 31]), 0.0, 1.0, 0.5) == 0.5

    def test_zero_draw_returns_low(self) -> None:
        assert triangular(FixedSource([0]), 2.0, 4.0, 3.0) == 2.0

    def test_mode_at_low_edge(self) -> None:
        assert triangular(FixedSource([0]), 0.0, 1.0, 0.0) == 0.0

    def test_default_mode_is_midpoint(self) -> None:
        assert triangular(FixedSource([1 << 31]), 2.0, 4.0) == 3.0

    @given(seed=seeds)
    def test_within_bounds(self, seed: int) -> None:
        rng = Rand(seed)
        for _ in range(50):
            assert -2.0 <= rng.triangular(-2.0, 6.0, 1.0) <= 6.0

    def test_density_peaks_at_mode(self, rng: Rand) -> None:
        draws = 20_000
        bins = [0] * 10
        for _ in range(draws):
            bins[min(int(rng.triangular() * 10), 9)] += 1
        # expected edge bins ~2% each, central bins ~18% each
        assert bins[4] > 5 * bins[0]
        assert bins[5] > 5 * bins[9]
        assert abs(bins[4] / draws - 0.18) < 0.02
        assert bins[0] / draws < 0.04

    def test_mean(self, rng: Rand) -> None:
        values = [rng.triangular(0.0, 3.0, 0.0) for _ in range(10_000)]
        assert abs(sum(values) / len(values) - 1.0) < 0.05

    @pytest.mark.parametrize('mode', [-0.1, 1.1])
    def test_mode_outside_bounds(self, rng: Rand, mode: float) -> None:
        with pytest.raises(InvalidRangeError, match='mode'):
            rng.triangular(0.0, 1.0, mode)

    def test_empty_range(self, rng: Rand) -> None:
        with pytest.raises(InvalidRangeError):
            rng.triangular(1.0, 1.0)


class TestGauss:
    """Tests for Box-Muller normal variates."""

    def test_mean_and_std(self, rng: Rand) -> None:
        values = [rng.gauss(100.0, 10.0) for _ in range(10_000)]
        mean = sum(values) / len(values)
        std = math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))
        assert abs(mean - 100.0) < 0.5
        assert abs(std - 10.0) < 0.5

    def test_finite_on_zero_draw(self) -> None:
        rng = Rand.from_generator(FixedSource([0]))  # type: ignore[arg-type]
        assert math.isfinite(rng.gauss())
