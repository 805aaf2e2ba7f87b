"""Error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'EmptyCollection',
    'EmptyCollectionError',
    'InvalidBitWidth',
    'InvalidBitWidthError',
    'InvalidRange',
    'InvalidRangeError',
    'InvalidSeed',
    'InvalidSeedError',
    'PrecisionCeiling',
    'PrecisionCeilingError',
]


# --- Range Errors ---


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Bounds do not describe a non-empty range - struct variant."""

    detail: str

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.detail)


class InvalidRangeError(ValueError):
    """Bounds do not describe a non-empty range - exception variant."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f'Invalid range: {detail}')

    def to_struct(self) -> InvalidRange:
        """Convert to struct for Result-based code."""
        return InvalidRange(self.detail)


class PrecisionCeiling(msgspec.Struct, frozen=True, gc=False):
    """Requested span exceeds 2**53 - struct variant."""

    span: int

    def to_exception(self) -> PrecisionCeilingError:
        """Convert to exception for raise-based code."""
        return PrecisionCeilingError(self.span)


class PrecisionCeilingError(OverflowError):
    """Requested span exceeds 2**53 - exception variant.

    This is a hard limit of the extractor, not a recoverable condition.
    """

    def __init__(self, span: int) -> None:
        self.span = span
        super().__init__(f'Span {span} exceeds the 2**53 precision ceiling')

    def to_struct(self) -> PrecisionCeiling:
        """Convert to struct for Result-based code."""
        return PrecisionCeiling(self.span)


# --- Collection Errors ---


class EmptyCollection(msgspec.Struct, frozen=True, gc=False):
    """Cannot pick from an empty sequence - struct variant."""

    def to_exception(self) -> EmptyCollectionError:
        """Convert to exception for raise-based code."""
        return EmptyCollectionError()


class EmptyCollectionError(IndexError):
    """Cannot pick from an empty sequence - exception variant."""

    def __init__(self) -> None:
        super().__init__('Cannot choose from an empty sequence')

    def to_struct(self) -> EmptyCollection:
        """Convert to struct for Result-based code."""
        return EmptyCollection()


# --- Extractor/Generator Errors ---


class InvalidBitWidth(msgspec.Struct, frozen=True, gc=False):
    """Bit width outside 1..53 - struct variant."""

    bits: int

    def to_exception(self) -> InvalidBitWidthError:
        """Convert to exception for raise-based code."""
        return InvalidBitWidthError(self.bits)


class InvalidBitWidthError(ValueError):
    """Bit width outside 1..53 - exception variant."""

    def __init__(self, bits: int) -> None:
        self.bits = bits
        super().__init__(f'Bit width must be in 1..53, got {bits}')

    def to_struct(self) -> InvalidBitWidth:
        """Convert to struct for Result-based code."""
        return InvalidBitWidth(self.bits)


class InvalidSeed(msgspec.Struct, frozen=True, gc=False):
    """Seed material cannot form a usable state - struct variant."""

    reason: str

    def to_exception(self) -> InvalidSeedError:
        """Convert to exception for raise-based code."""
        return InvalidSeedError(self.reason)


class InvalidSeedError(ValueError):
    """Seed material cannot form a usable state - exception variant."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'Invalid seed: {reason}')

    def to_struct(self) -> InvalidSeed:
        """Convert to struct for Result-based code."""
        return InvalidSeed(self.reason)
