"""Sequence algorithms driven by a ranged integer draw.

Each function takes ``below``, a callable returning a uniform integer in
``[0, n)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from klaw_well.errors import EmptyCollectionError, InvalidRangeError

if TYPE_CHECKING:
    from collections.abc import Callable, MutableSequence, Sequence

__all__ = ['choice', 'choices', 'sample', 'shuffle', 'shuffle_inplace']


def choice[T](seq: Sequence[T], below: Callable[[int], int]) -> T:
    if not seq:
        raise EmptyCollectionError()
    return seq[below(len(seq))]


def choices[T](population: Sequence[T], k: int, below: Callable[[int], int]) -> list[T]:
    if not population:
        raise EmptyCollectionError()
    n = len(population)
    return [population[below(n)] for _ in range(k)]


def shuffle_inplace[T](seq: MutableSequence[T], below: Callable[[int], int]) -> None:
    """Fisher-Yates shuffle of ``seq`` in place."""
    for i in range(len(seq) - 1, 0, -1):
        j = below(i + 1)
        seq[i], seq[j] = seq[j], seq[i]


def shuffle[T](seq: Sequence[T], below: Callable[[int], int]) -> list[T]:
    """Return a shuffled copy of ``seq``; the input is left untouched."""
    result = list(seq)
    shuffle_inplace(result, below)
    return result


def sample[T](population: Sequence[T], count: int, below: Callable[[int], int]) -> list[T]:
    """Pick ``count`` elements without replacement.

    Runs only ``count`` steps of a forward Fisher-Yates pass. The population
    is never copied: displaced elements are tracked in a dict keyed by
    position, so time and memory are O(count) for any indexable sequence,
    including ``range(10**12)``.

    Raises:
        InvalidRangeError: If ``count`` is outside ``[0, len(population)]``.
    """
    n = len(population)
    if not 0 <= count <= n:
        msg = f'sample count {count} outside [0, {n}]'
        raise InvalidRangeError(msg)
    displaced: dict[int, T] = {}
    result = []
    for i in range(count):
        j = i + below(n - i)
        picked = displaced[j] if j in displaced else population[j]
        displaced[j] = displaced[i] if i in displaced else population[i]
        result.append(picked)
    return result
