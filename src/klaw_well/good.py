"""High-precision namespace.

Same functions as the top-level ``klaw_well`` API, on the same shared
stream, but every draw is built from 53 bits regardless of the operand
magnitude.

Example:
    ```python
    from klaw_well import good

    good.random()  # 53 random mantissa bits
    good.rand_int(10**12)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import wrapt

from klaw_well._bits import PrecisionMode
from klaw_well._shared import LOCK, get_default, get_rand_bits, seed

if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence

__all__ = [
    'choice',
    'choices',
    'gauss',
    'get_rand_bits',
    'rand_int',
    'random',
    'sample',
    'seed',
    'shuffle',
    'shuffle_inplace',
    'triangular',
    'uniform',
]

HIGH = PrecisionMode.HIGH


@wrapt.synchronized(LOCK)
def rand_int(
    start: int | None = None,
    stop: int | None = None,
    step: int = 1,
    *,
    strict: bool | None = None,
) -> int:
    return get_default().rand_int(start, stop, step, precision=HIGH, strict=strict)


@wrapt.synchronized(LOCK)
def random() -> float:
    return get_default().random(precision=HIGH)


@wrapt.synchronized(LOCK)
def uniform(start: float, stop: float | None = None) -> float:
    return get_default().uniform(start, stop, precision=HIGH)


@wrapt.synchronized(LOCK)
def triangular(low: float = 0.0, high: float = 1.0, mode: float | None = None) -> float:
    return get_default().triangular(low, high, mode, precision=HIGH)


@wrapt.synchronized(LOCK)
def gauss(mu: float = 0.0, sigma: float = 1.0) -> float:
    return get_default().gauss(mu, sigma, precision=HIGH)


@wrapt.synchronized(LOCK)
def choice[T](seq: Sequence[T]) -> T:
    return get_default().choice(seq, precision=HIGH)


@wrapt.synchronized(LOCK)
def choices[T](population: Sequence[T], k: int = 1) -> list[T]:
    return get_default().choices(population, k, precision=HIGH)


@wrapt.synchronized(LOCK)
def shuffle[T](seq: Sequence[T]) -> list[T]:
    return get_default().shuffle(seq, precision=HIGH)


@wrapt.synchronized(LOCK)
def shuffle_inplace[T](seq: MutableSequence[T]) -> None:
    get_default().shuffle_inplace(seq, precision=HIGH)


@wrapt.synchronized(LOCK)
def sample[T](population: Sequence[T], count: int) -> list[T]:
    return get_default().sample(population, count, precision=HIGH)
