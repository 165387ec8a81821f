"""
Fixed-length byte types.

Each subclass of `BaseBytes` is an immutable `bytes` of exactly `LENGTH`
bytes. They plug into pydantic so key material can be declared as model
fields and serialized as hex.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterable, Self, SupportsIndex

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from compact_keys.exceptions import InvalidLengthError


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        return bytes(bytearray(value))
    return bytes(value)


class BaseBytes(bytes):
    """
    A base class for fixed-length byte types that inherits from `bytes`.

    Subclasses set `LENGTH`, the exact number of bytes an instance holds.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new instance.

        Raises:
            InvalidLengthError: If the byte length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")

        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise InvalidLengthError(cls.__name__, expected=cls.LENGTH, actual=len(b))
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Create a new instance filled with zero bytes."""
        return cls(b"\x00" * cls.LENGTH)

    @classmethod
    def from_int(cls, value: int) -> Self:
        """
        Encode a non-negative integer big-endian, zero-padded to `LENGTH`.

        Raises:
            OverflowError: If the value does not fit.
        """
        return cls(value.to_bytes(cls.LENGTH, "big"))

    def to_int(self) -> int:
        """Interpret the bytes as a big-endian unsigned integer."""
        return int.from_bytes(self, "big")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        Instances pass through unchanged; raw bytes of the exact length are
        wrapped; values serialize to hex strings.
        """
        from_bytes_validator = core_schema.no_info_plain_validator_function(cls)

        python_schema = core_schema.chain_schema(
            [
                core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH),
                from_bytes_validator,
            ]
        )

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                python_schema,
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: x.hex()),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"

    def __hash__(self) -> int:
        return hash((type(self), bytes(self)))

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes (one P-256 field element or scalar)."""

    LENGTH = 32


class Bytes33(BaseBytes):
    """Fixed-size byte array of exactly 33 bytes (a tagged key)."""

    LENGTH = 33
