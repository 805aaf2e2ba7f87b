"""Bit extraction: compose generator words into integers of a given width."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from klaw_well.errors import InvalidBitWidthError

__all__ = [
    'MAX_BITS',
    'PrecisionMode',
    'WordSource',
    'check_bit_width',
    'get_bits',
]

WORD_BITS = 32
MAX_BITS = 53


class WordSource(Protocol):
    """Anything producing successive unsigned 32-bit words."""

    def next_word(self) -> int: ...


class PrecisionMode(Enum):
    """How many bits derived draws are built from.

    STANDARD draws from a single 32-bit word; HIGH combines two words into a
    53-bit draw, the widest integer a double represents exactly.
    """

    STANDARD = 'standard'
    HIGH = 'high'

    @property
    def bits(self) -> int:
        """Width of a full draw in this mode."""
        return WORD_BITS if self is PrecisionMode.STANDARD else MAX_BITS

    @property
    def words(self) -> int:
        """Number of generator words consumed by a full draw."""
        return 1 if self is PrecisionMode.STANDARD else 2


def check_bit_width(n: int) -> None:
    """Raise InvalidBitWidthError unless ``1 <= n <= 53``."""
    if not 1 <= n <= MAX_BITS:
        raise InvalidBitWidthError(n)


def get_bits(source: WordSource, n: int) -> int:
    """Return an integer with ``n`` uniformly random low bits.

    Widths up to 32 take the low ``n`` bits of one word. Wider draws
    concatenate two consecutive words (first word high) and keep the low
    ``n`` bits of the 64-bit result, so every one of the 2**n outcomes is
    equally likely and no word is reused. The surplus high bits of the
    first word are discarded.

    The width is not validated here; see :func:`check_bit_width`.
    """
    word = source.next_word()
    if n > WORD_BITS:
        word = (word << WORD_BITS) | source.next_word()
    return word & ((1 << n) - 1)
