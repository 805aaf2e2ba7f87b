"""Ranged integer mapping on top of the bit extractor.

The default mapping reduces a full-width draw modulo the number of
admissible values. When that number does not divide the draw's range the
lower values are favoured very slightly: for a count ``c`` and a draw of
``b`` bits the relative excess is below ``c / 2**b``. Draws wider than one
word switch to 53-bit precision automatically. ``strict`` mode replaces
the modulo step with rejection sampling and is exactly uniform.
"""

from __future__ import annotations

import msgspec

from klaw_well._bits import MAX_BITS, WORD_BITS, PrecisionMode, WordSource, get_bits
from klaw_well.errors import InvalidRangeError, PrecisionCeilingError
from klaw_well.types import Step

__all__ = ['MAX_SPAN', 'WORD_SPAN', 'Range', 'draw_below', 'rand_int']

WORD_SPAN = 1 << WORD_BITS
MAX_SPAN = 1 << MAX_BITS


class Range(msgspec.Struct, frozen=True, gc=False):
    """Half-open integer range ``[start, stop)`` on a ``step`` grid."""

    start: int
    stop: int
    step: Step = 1

    @classmethod
    def from_args(cls, start: int | None = None, stop: int | None = None, step: int = 1) -> Range:
        """Build a range following ``range()`` argument conventions.

        No arguments select ``[0, 2**32)``; a single argument is the stop.
        """
        if stop is None:
            if start is None:
                return cls(0, WORD_SPAN, step)
            return cls(0, start, step)
        return cls(0 if start is None else start, stop, step)

    @property
    def span(self) -> int:
        return self.stop - self.start

    @property
    def count(self) -> int:
        """Number of admissible values."""
        return -(-self.span // self.step)

    def validate(self) -> None:
        """Check the range can be drawn from.

        Raises:
            InvalidRangeError: If a bound or the step is not an integer,
                ``stop <= start`` or ``step < 1``.
            PrecisionCeilingError: If the span exceeds 2**53.
        """
        for name in ('start', 'stop', 'step'):
            value = getattr(self, name)
            if not isinstance(value, int):
                msg = f'{name} must be an integer, got {type(value).__name__}'
                raise InvalidRangeError(msg)
        if self.stop <= self.start:
            msg = f'stop ({self.stop}) must be greater than start ({self.start})'
            raise InvalidRangeError(msg)
        if self.step < 1:
            msg = f'step must be >= 1, got {self.step}'
            raise InvalidRangeError(msg)
        if self.span > MAX_SPAN:
            raise PrecisionCeilingError(self.span)


def _below_strict(source: WordSource, count: int) -> int:
    bits = max(1, (count - 1).bit_length())
    while True:
        value = get_bits(source, bits)
        if value < count:
            return value


def draw_below(
    source: WordSource,
    count: int,
    precision: PrecisionMode = PrecisionMode.STANDARD,
    *,
    strict: bool = False,
) -> int:
    """Return an integer in ``[0, count)`` for ``1 <= count <= 2**53``."""
    if strict:
        return _below_strict(source, count)
    bits = MAX_BITS if count > WORD_SPAN else precision.bits
    return get_bits(source, bits) % count


def rand_int(
    source: WordSource,
    bounds: Range,
    precision: PrecisionMode = PrecisionMode.STANDARD,
    *,
    strict: bool = False,
) -> int:
    """Draw an integer ``i`` with ``start <= i < stop`` and ``(i - start) % step == 0``.

    Args:
        source: Word generator to draw from.
        bounds: The range to draw from.
        precision: Draw width for spans that fit in one word.
        strict: Use rejection sampling instead of modulo reduction.

    Raises:
        InvalidRangeError: On an empty range or a step below 1.
        PrecisionCeilingError: If the span exceeds 2**53.
    """
    bounds.validate()
    return bounds.start + draw_below(source, bounds.count, precision, strict=strict) * bounds.step
