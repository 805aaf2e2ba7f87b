"""Floating point distributions built from extractor draws.

``unit`` divides a draw by its exact upper bound (2**32 or 2**53), so the
result lies in ``[0, 1)``. Affine mapping into ``[start, stop)`` can still
round up to ``stop`` for rare inputs when the bounds are far apart in
magnitude; results are returned as computed and never clamped.
"""

from __future__ import annotations

import math

from klaw_well._bits import PrecisionMode, WordSource, get_bits
from klaw_well.errors import InvalidRangeError

__all__ = ['gauss', 'triangular', 'uniform', 'unit']


def unit(source: WordSource, precision: PrecisionMode = PrecisionMode.STANDARD) -> float:
    """Return a float in ``[0, 1)`` with ``precision.bits`` random bits."""
    bits = precision.bits
    return get_bits(source, bits) / (1 << bits)


def uniform(
    source: WordSource,
    start: float,
    stop: float,
    precision: PrecisionMode = PrecisionMode.STANDARD,
) -> float:
    """Return ``start + u * (stop - start)`` for a unit draw ``u``.

    Raises:
        InvalidRangeError: If ``stop <= start``.
    """
    if stop <= start:
        msg = f'stop ({stop}) must be greater than start ({start})'
        raise InvalidRangeError(msg)
    return start + unit(source, precision) * (stop - start)


def triangular(
    source: WordSource,
    low: float,
    high: float,
    mode: float | None = None,
    precision: PrecisionMode = PrecisionMode.STANDARD,
) -> float:
    """Sample the triangular distribution by inverting its CDF.

    Args:
        source: Word generator to draw from.
        low: Lower bound.
        high: Upper bound.
        mode: Peak of the density, defaults to the midpoint.
        precision: Width of the underlying unit draw.

    Raises:
        InvalidRangeError: If ``high <= low`` or ``mode`` is outside ``[low, high]``.
    """
    if high <= low:
        msg = f'high ({high}) must be greater than low ({low})'
        raise InvalidRangeError(msg)
    if mode is None:
        mode = (low + high) / 2
    elif not low <= mode <= high:
        msg = f'mode ({mode}) must lie within [{low}, {high}]'
        raise InvalidRangeError(msg)
    u = unit(source, precision)
    width = high - low
    if u < (mode - low) / width:
        return low + math.sqrt(u * width * (mode - low))
    return high - math.sqrt((1 - u) * width * (high - mode))


def gauss(
    source: WordSource,
    mu: float = 0.0,
    sigma: float = 1.0,
    precision: PrecisionMode = PrecisionMode.STANDARD,
) -> float:
    """Normal variate via the Box-Muller transform.

    Consumes two unit draws per call; the paired variate is not cached.
    """
    # 1 - u keeps the log argument in (0, 1].
    radius = math.sqrt(-2.0 * math.log(1.0 - unit(source, precision)))
    theta = 2.0 * math.pi * unit(source, precision)
    return mu + sigma * radius * math.cos(theta)
