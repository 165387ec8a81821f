"""Tests for fixed-length byte types."""

import pytest

from compact_keys.exceptions import InvalidLengthError
from compact_keys.types import Bytes32, Bytes33, StrictBaseModel


class TestBytes32:
    """Tests for Bytes32."""

    def test_accepts_exact_length(self) -> None:
        """32 bytes construct a value equal to the input."""
        data = bytes(range(32))
        assert Bytes32(data) == data

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_rejects_wrong_length(self, length: int) -> None:
        """Any other length raises."""
        with pytest.raises(InvalidLengthError, match="Bytes32 expects exactly 32 bytes"):
            Bytes32(b"\x01" * length)

    def test_from_hex(self) -> None:
        """Hex strings with a 0x prefix are accepted."""
        assert Bytes32("0x" + "ab" * 32) == b"\xab" * 32

    def test_zero(self) -> None:
        """zero() is all zero bytes."""
        assert Bytes32.zero() == b"\x00" * 32

    def test_int_roundtrip(self) -> None:
        """Integers are big-endian and zero-padded."""
        value = Bytes32.from_int(0x0102)
        assert value[-2:] == b"\x01\x02"
        assert value[:30] == b"\x00" * 30
        assert value.to_int() == 0x0102

    def test_from_int_overflow(self) -> None:
        """Integers wider than 32 bytes do not fit."""
        with pytest.raises(OverflowError):
            Bytes32.from_int(1 << 256)

    def test_repr(self) -> None:
        """repr shows the type name and hex."""
        assert repr(Bytes32.zero()) == f"Bytes32({'00' * 32})"


class TestPydanticIntegration:
    """Byte types work as strict pydantic fields."""

    class Record(StrictBaseModel):
        key: Bytes33

    def test_accepts_raw_bytes(self) -> None:
        """Raw bytes of the right length are wrapped."""
        record = self.Record(key=b"\x00" * 33)
        assert isinstance(record.key, Bytes33)

    def test_accepts_instance(self) -> None:
        """Instances pass through unchanged."""
        key = Bytes33(b"\x10" + b"\x01" * 32)
        assert self.Record(key=key).key is key

    def test_rejects_wrong_length(self) -> None:
        """pydantic enforces the length."""
        with pytest.raises(ValueError):
            self.Record(key=b"\x00" * 32)

    def test_serializes_to_hex(self) -> None:
        """JSON dumps use hex strings."""
        record = self.Record(key=b"\xff" * 33)
        assert record.model_dump(mode="json") == {"key": "ff" * 33}
