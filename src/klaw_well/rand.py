"""Stateful random number generator.

``Rand`` owns one WELL1024a stream and exposes every derived draw as a
method. Instances are independent: give each thread or worker its own, or
guard a shared one with a lock.

Example:
    ```python
    from klaw_well import PrecisionMode, Rand

    rng = Rand(42)
    rng.rand_int(1, 7)  # die roll
    rng.uniform(-1.0, 1.0)
    rng.sample(['a', 'b', 'c', 'd'], 2)

    # 53-bit draws for this call only
    rng.random(precision=PrecisionMode.HIGH)

    # or a view of the same stream with HIGH forced
    good = rng.high()
    good.rand_int(0, 2**40)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from klaw_well import _floats, _sequences
from klaw_well._bits import PrecisionMode, check_bit_width, get_bits
from klaw_well._generator import Well1024a
from klaw_well._ranges import Range, draw_below, rand_int
from klaw_well.types import BitWidth

if TYPE_CHECKING:
    from collections.abc import Callable, MutableSequence, Sequence

__all__ = ['Rand']


class Rand:
    """WELL1024a-backed random number generator.

    Args:
        seed: Integer seed for a reproducible stream, or ``None`` for OS
            entropy.
        precision: Default draw width for every method.
        strict: Use rejection sampling for integer draws instead of the
            faster, slightly biased modulo reduction.
    """

    __slots__ = ('_gen', '_precision', '_strict')

    def __init__(
        self,
        seed: int | None = None,
        *,
        precision: PrecisionMode = PrecisionMode.STANDARD,
        strict: bool = False,
    ) -> None:
        self._gen = Well1024a(seed)
        self._precision = precision
        self._strict = strict

    @classmethod
    def from_generator(
        cls,
        gen: Well1024a,
        *,
        precision: PrecisionMode = PrecisionMode.STANDARD,
        strict: bool = False,
    ) -> Rand:
        """Wrap an existing generator without copying its state."""
        rand = cls.__new__(cls)
        rand._gen = gen
        rand._precision = precision
        rand._strict = strict
        return rand

    @property
    def precision(self) -> PrecisionMode:
        return self._precision

    @property
    def strict(self) -> bool:
        return self._strict

    def high(self) -> Rand:
        """Return a view of this stream with HIGH precision forced."""
        return Rand.from_generator(self._gen, precision=PrecisionMode.HIGH, strict=self._strict)

    def seed(self, value: int | None = None) -> None:
        """Re-seed the stream in place."""
        self._gen.seed(value)

    def _resolve(self, precision: PrecisionMode | None) -> PrecisionMode:
        return self._precision if precision is None else precision

    def _below(self, precision: PrecisionMode | None) -> Callable[[int], int]:
        mode = self._resolve(precision)

        def below(n: int) -> int:
            return draw_below(self._gen, n, mode, strict=self._strict)

        return below

    # -- raw draws -----------------------------------------------------------

    def next_word(self) -> int:
        """Return the next raw 32-bit word."""
        return self._gen.next_word()

    def get_rand_bits(self, n: BitWidth) -> int:
        """Return an integer in ``[0, 2**n)`` for ``1 <= n <= 53``.

        Raises:
            InvalidBitWidthError: If ``n`` is outside ``1..53``.
        """
        check_bit_width(n)
        return get_bits(self._gen, n)

    # -- integers ------------------------------------------------------------

    def rand_int(
        self,
        start: int | None = None,
        stop: int | None = None,
        step: int = 1,
        *,
        precision: PrecisionMode | None = None,
        strict: bool | None = None,
    ) -> int:
        """Return a random integer from ``range(start, stop, step)``.

        With no arguments the range is ``[0, 2**32)``; a single argument is
        the exclusive upper bound. Modulo reduction slightly favours lower
        values unless the instance is strict. ``strict`` overrides the
        instance setting for this call.

        Raises:
            InvalidRangeError: If the range is empty or ``step < 1``.
            PrecisionCeilingError: If ``stop - start`` exceeds 2**53.
        """
        bounds = Range.from_args(start, stop, step)
        if strict is None:
            strict = self._strict
        return rand_int(self._gen, bounds, self._resolve(precision), strict=strict)

    # -- floats --------------------------------------------------------------

    def random(self, *, precision: PrecisionMode | None = None) -> float:
        """Return a float in ``[0.0, 1.0)``."""
        return _floats.unit(self._gen, self._resolve(precision))

    def uniform(
        self,
        start: float,
        stop: float | None = None,
        *,
        precision: PrecisionMode | None = None,
    ) -> float:
        """Return a float in ``[start, stop)``; ``uniform(x)`` draws from ``[0, x)``.

        Rounding can rarely yield exactly ``stop``.
        """
        if stop is None:
            start, stop = 0.0, start
        return _floats.uniform(self._gen, start, stop, self._resolve(precision))

    def triangular(
        self,
        low: float = 0.0,
        high: float = 1.0,
        mode: float | None = None,
        *,
        precision: PrecisionMode | None = None,
    ) -> float:
        """Return a float from the triangular distribution on ``[low, high]``."""
        return _floats.triangular(self._gen, low, high, mode, self._resolve(precision))

    def gauss(
        self,
        mu: float = 0.0,
        sigma: float = 1.0,
        *,
        precision: PrecisionMode | None = None,
    ) -> float:
        """Return a normally distributed float."""
        return _floats.gauss(self._gen, mu, sigma, self._resolve(precision))

    # -- sequences -----------------------------------------------------------

    def choice[T](self, seq: Sequence[T], *, precision: PrecisionMode | None = None) -> T:
        """Return a random element of a non-empty sequence.

        Raises:
            EmptyCollectionError: If ``seq`` is empty.
        """
        return _sequences.choice(seq, self._below(precision))

    def choices[T](
        self,
        population: Sequence[T],
        k: int = 1,
        *,
        precision: PrecisionMode | None = None,
    ) -> list[T]:
        """Return ``k`` elements drawn with replacement."""
        return _sequences.choices(population, k, self._below(precision))

    def shuffle[T](self, seq: Sequence[T], *, precision: PrecisionMode | None = None) -> list[T]:
        """Return a shuffled copy of ``seq``."""
        return _sequences.shuffle(seq, self._below(precision))

    def shuffle_inplace[T](
        self,
        seq: MutableSequence[T],
        *,
        precision: PrecisionMode | None = None,
    ) -> None:
        """Shuffle ``seq`` in place."""
        _sequences.shuffle_inplace(seq, self._below(precision))

    def sample[T](
        self,
        population: Sequence[T],
        count: int,
        *,
        precision: PrecisionMode | None = None,
    ) -> list[T]:
        """Return ``count`` elements drawn without replacement.

        Raises:
            InvalidRangeError: If ``count`` is outside ``[0, len(population)]``.
        """
        return _sequences.sample(population, count, self._below(precision))

    def __repr__(self) -> str:
        return f'Rand(precision={self._precision.value}, strict={self._strict})'
