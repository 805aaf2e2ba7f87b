"""WELL1024a state vector generator.

Implements the WELL1024a recurrence of Panneton, L'Ecuyer and Matsumoto
("Improved long-period generators based on linear recurrences modulo 2",
ACM TOMS 2006): 32 words of state, period 2**1024 - 1, equidistributed up
to high dimension. Every call rewrites two state words and moves the
rotation index one slot backwards around the ring.

The generator is not thread-safe. Each logical stream owns its instance;
callers sharing one must serialize access themselves.

Usage:
    >>> gen = Well1024a(12345)
    >>> word = gen.next_word()
    >>> 0 <= word < 2**32
    True
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import msgspec

from klaw_well.errors import InvalidSeedError
from klaw_well.types import STATE_WORDS, SeedWords

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ['Well1024a', 'expand_seed']

logger = logging.getLogger(__name__)

MASK32 = 0xFFFFFFFF
_RING = STATE_WORDS - 1

# Tap offsets relative to the rotation index.
M1 = 3
M2 = 24
M3 = 10

# Seed expansion constants (Knuth TAOCP vol. 2, 3rd ed., p. 106).
_SEED_MULT = 1812433253
_SEED_INIT = 19650218


def _split_words(value: int) -> list[int]:
    """Split a non-negative integer into little-endian 32-bit words."""
    key = []
    while True:
        key.append(value & MASK32)
        value >>= 32
        if not value:
            return key


def expand_seed(seed: int) -> list[int]:
    """Expand an integer seed of any size into a full state vector.

    The absolute value of ``seed`` is split into 32-bit key words and fed
    through ``s[i] = 1812433253 * (p ^ (p >> 30)) + i + key[i % len(key)]``
    (mod 2**32), where ``p`` is the previous state word.

    Args:
        seed: Integer seed.

    Returns:
        A list of 32 unsigned 32-bit words.
    """
    key = _split_words(abs(seed))
    words = []
    prev = _SEED_INIT
    for i in range(STATE_WORDS):
        prev = (_SEED_MULT * (prev ^ (prev >> 30)) + i + key[i % len(key)]) & MASK32
        words.append(prev)
    return words


def _entropy_words() -> list[int]:
    raw = os.urandom(4 * STATE_WORDS)
    return [int.from_bytes(raw[i : i + 4], 'little') for i in range(0, len(raw), 4)]


class Well1024a:
    """Deterministic WELL1024a word generator.

    Args:
        seed: Integer seed, expanded with :func:`expand_seed`. ``None``
            draws fresh state from ``os.urandom``.

    Attributes:
        _state: The 32-word state vector. Never all zero.
        _index: Current rotation index, ``0 <= _index < 32``.
    """

    __slots__ = ('_index', '_state')

    def __init__(self, seed: int | None = None) -> None:
        self._state: list[int] = []
        self._index = 0
        self.seed(seed)

    @classmethod
    def from_words(cls, words: Sequence[int]) -> Well1024a:
        """Build a generator from an explicit 32-word state vector.

        Raises:
            InvalidSeedError: If ``words`` is not exactly 32 unsigned 32-bit
                integers, or if every word is zero.
        """
        gen = cls.__new__(cls)
        gen.seed_words(words)
        return gen

    def seed(self, seed: int | None = None) -> None:
        """Reset the state from an integer seed or from OS entropy."""
        if seed is None:
            words = _entropy_words()
            source = 'entropy'
        else:
            words = expand_seed(seed)
            source = 'int'
        if not any(words):
            logger.warning('Seed expanded to an all-zero state, repairing', extra={'source': source})
            words[0] = 1
        self._state = words
        self._index = 0
        logger.debug('Generator seeded', extra={'source': source})

    def seed_words(self, words: Sequence[int]) -> None:
        """Reset the state to an explicit 32-word vector.

        Raises:
            InvalidSeedError: On a malformed or all-zero vector.
        """
        try:
            state = msgspec.convert(list(words), type=SeedWords)
        except msgspec.ValidationError as e:
            raise InvalidSeedError(str(e)) from e
        if not any(state):
            msg = 'state vector is all zero'
            raise InvalidSeedError(msg)
        self._state = state
        self._index = 0
        logger.debug('Generator seeded', extra={'source': 'words'})

    def next_word(self) -> int:
        """Advance the recurrence and return the next 32-bit word."""
        state = self._state
        i = self._index
        z0 = state[(i + _RING) & _RING]
        v1 = state[(i + M1) & _RING]
        z1 = state[i] ^ v1 ^ (v1 >> 8)
        v2 = state[(i + M2) & _RING]
        v3 = state[(i + M3) & _RING]
        z2 = v2 ^ (v2 << 19) ^ v3 ^ (v3 << 14)
        z2 &= MASK32
        state[i] = z1 ^ z2
        i = (i + _RING) & _RING
        state[i] = (z0 ^ (z0 << 11) ^ z1 ^ (z1 << 7) ^ z2 ^ (z2 << 13)) & MASK32
        self._index = i
        return state[i]

    def __repr__(self) -> str:
        return f'Well1024a(index={self._index})'
