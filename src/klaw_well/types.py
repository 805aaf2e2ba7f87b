"""Constrained type aliases for decode-time validation.

These aliases carry their bounds in ``msgspec.Meta`` so seed material and
settings can be validated with ``msgspec.convert`` before they reach the
generator.

Usage:
    >>> import msgspec
    >>> from klaw_well.types import SeedWords
    >>>
    >>> msgspec.convert([1] * 32, type=SeedWords)  # ok
    >>> msgspec.convert([1] * 31, type=SeedWords)
    # ValidationError: Expected `array` of length >= 32
"""

from __future__ import annotations

from typing import Annotated

import msgspec

__all__ = [
    'STATE_WORDS',
    'BitWidth',
    'SeedWords',
    'Step',
    'Word',
]

STATE_WORDS = 32
"""Number of 32-bit words in a WELL1024a state vector."""

Word = Annotated[int, msgspec.Meta(ge=0, le=0xFFFFFFFF)]
"""Unsigned 32-bit word."""

SeedWords = Annotated[list[Word], msgspec.Meta(min_length=STATE_WORDS, max_length=STATE_WORDS)]
"""A complete state vector: exactly 32 unsigned 32-bit words."""

BitWidth = Annotated[int, msgspec.Meta(ge=1, le=53)]
"""Number of random bits the extractor can deliver in one draw."""

Step = Annotated[int, msgspec.Meta(ge=1)]
"""Stride between admissible integers in a range."""
