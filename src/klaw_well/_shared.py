"""Shared default generator behind the module-level API.

One ``Rand`` instance serves ``klaw_well.*`` and ``klaw_well.good.*``.
Every access goes through ``LOCK`` so concurrent callers never interleave
inside a state update.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import wrapt

from klaw_well._bits import PrecisionMode
from klaw_well.rand import Rand

if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence

__all__ = [
    'LOCK',
    'choice',
    'choices',
    'gauss',
    'get_default',
    'get_rand_bits',
    'rand_int',
    'random',
    'reset_default',
    'sample',
    'seed',
    'shuffle',
    'shuffle_inplace',
    'triangular',
    'uniform',
]

LOCK = threading.RLock()

_default: Rand | None = None


@wrapt.synchronized(LOCK)
def get_default() -> Rand:
    """Return the shared instance, creating it from OS entropy on first use."""
    global _default  # noqa: PLW0603
    if _default is None:
        _default = Rand()
    return _default


@wrapt.synchronized(LOCK)
def reset_default(
    seed: int | None = None,
    *,
    precision: PrecisionMode = PrecisionMode.STANDARD,
    strict: bool = False,
) -> Rand:
    """Replace the shared instance with a freshly seeded one."""
    global _default  # noqa: PLW0603
    _default = Rand(seed, precision=precision, strict=strict)
    return _default


@wrapt.synchronized(LOCK)
def seed(value: int | None = None) -> None:
    """Re-seed the shared stream."""
    get_default().seed(value)


@wrapt.synchronized(LOCK)
def get_rand_bits(n: int) -> int:
    """Return an integer in ``[0, 2**n)`` for ``1 <= n <= 53``."""
    return get_default().get_rand_bits(n)


@wrapt.synchronized(LOCK)
def rand_int(
    start: int | None = None,
    stop: int | None = None,
    step: int = 1,
    *,
    precision: PrecisionMode | None = None,
    strict: bool | None = None,
) -> int:
    """Return a random integer from ``range(start, stop, step)``."""
    return get_default().rand_int(start, stop, step, precision=precision, strict=strict)


@wrapt.synchronized(LOCK)
def random(*, precision: PrecisionMode | None = None) -> float:
    """Return a float in ``[0.0, 1.0)``."""
    return get_default().random(precision=precision)


@wrapt.synchronized(LOCK)
def uniform(start: float, stop: float | None = None, *, precision: PrecisionMode | None = None) -> float:
    """Return a float in ``[start, stop)``."""
    return get_default().uniform(start, stop, precision=precision)


@wrapt.synchronized(LOCK)
def triangular(
    low: float = 0.0,
    high: float = 1.0,
    mode: float | None = None,
    *,
    precision: PrecisionMode | None = None,
) -> float:
    """Return a float from the triangular distribution."""
    return get_default().triangular(low, high, mode, precision=precision)


@wrapt.synchronized(LOCK)
def gauss(mu: float = 0.0, sigma: float = 1.0, *, precision: PrecisionMode | None = None) -> float:
    """Return a normally distributed float."""
    return get_default().gauss(mu, sigma, precision=precision)


@wrapt.synchronized(LOCK)
def choice[T](seq: Sequence[T], *, precision: PrecisionMode | None = None) -> T:
    """Return a random element of a non-empty sequence."""
    return get_default().choice(seq, precision=precision)


@wrapt.synchronized(LOCK)
def choices[T](population: Sequence[T], k: int = 1, *, precision: PrecisionMode | None = None) -> list[T]:
    """Return ``k`` elements drawn with replacement."""
    return get_default().choices(population, k, precision=precision)


@wrapt.synchronized(LOCK)
def shuffle[T](seq: Sequence[T], *, precision: PrecisionMode | None = None) -> list[T]:
    """Return a shuffled copy of ``seq``."""
    return get_default().shuffle(seq, precision=precision)


@wrapt.synchronized(LOCK)
def shuffle_inplace[T](seq: MutableSequence[T], *, precision: PrecisionMode | None = None) -> None:
    """Shuffle ``seq`` in place."""
    get_default().shuffle_inplace(seq, precision=precision)


@wrapt.synchronized(LOCK)
def sample[T](population: Sequence[T], count: int, *, precision: PrecisionMode | None = None) -> list[T]:
    """Return ``count`` elements drawn without replacement."""
    return get_default().sample(population, count, precision=precision)
