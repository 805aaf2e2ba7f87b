"""Tests for the dual struct/exception error types."""

from __future__ import annotations

import msgspec
import pytest
from klaw_well.errors import (
    EmptyCollection,
    EmptyCollectionError,
    InvalidBitWidth,
    InvalidBitWidthError,
    InvalidRange,
    InvalidRangeError,
    InvalidSeed,
    InvalidSeedError,
    PrecisionCeiling,
    PrecisionCeilingError,
)


class TestConversion:
    """Struct and exception variants convert into each other."""

    def test_invalid_range(self) -> None:
        err = InvalidRange('stop before start').to_exception()
        assert isinstance(err, InvalidRangeError)
        assert str(err) == 'Invalid range: stop before start'
        assert err.to_struct() == InvalidRange('stop before start')

    def test_precision_ceiling(self) -> None:
        err = PrecisionCeilingError(2**60)
        assert err.to_struct().span == 2**60
        assert isinstance(PrecisionCeiling(5).to_exception(), PrecisionCeilingError)

    def test_empty_collection(self) -> None:
        assert isinstance(EmptyCollection().to_exception(), EmptyCollectionError)
        assert EmptyCollectionError().to_struct() == EmptyCollection()

    def test_bit_width(self) -> None:
        err = InvalidBitWidth(60).to_exception()
        assert err.bits == 60
        assert '60' in str(err)

    def test_seed(self) -> None:
        assert InvalidSeedError('bad').to_struct() == InvalidSeed('bad')


class TestHierarchy:
    """Exceptions subclass the matching builtins."""

    @pytest.mark.parametrize(
        ('exc', 'base'),
        [
            (InvalidRangeError('x'), ValueError),
            (InvalidBitWidthError(0), ValueError),
            (InvalidSeedError('x'), ValueError),
            (EmptyCollectionError(), IndexError),
            (PrecisionCeilingError(1), OverflowError),
        ],
    )
    def test_builtin_base(self, exc: Exception, base: type[Exception]) -> None:
        assert isinstance(exc, base)


class TestStructs:
    """Struct variants are frozen and serializable."""

    def test_frozen(self) -> None:
        err = InvalidBitWidth(0)
        with pytest.raises(AttributeError):
            err.bits = 1  # type: ignore[misc]

    def test_json_encode(self) -> None:
        assert msgspec.json.encode(PrecisionCeiling(10)) == b'{"span":10}'
