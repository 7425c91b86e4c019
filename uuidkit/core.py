"""The UUID value type with its variant and version."""

from __future__ import annotations

import enum
import functools
from collections.abc import Iterable

from uuidkit.errors import ErrorKind, UuidError
from uuidkit.formats import Braced, Hyphenated, Simple, Urn
from uuidkit.parser import parse

_U16 = 0xFFFF
_U32 = 0xFFFF_FFFF
_U64 = 0xFFFF_FFFF_FFFF_FFFF
_U128 = (1 << 128) - 1


class Variant(enum.Enum):
    """The layout family a UUID belongs to, read from byte 8."""

    NCS = "NCS"
    RFC4122 = "RFC4122"
    MICROSOFT = "Microsoft"
    FUTURE = "Future"

    def __str__(self) -> str:
        return self.value


class Version(enum.IntEnum):
    """The version number stored in the high nibble of byte 6."""

    NIL = 0
    MAC = 1
    DCE = 2
    MD5 = 3
    RANDOM = 4
    SHA1 = 5
    SORT_MAC = 6
    SORT_RAND = 7
    CUSTOM = 8
    MAX = 0x0F


def _checked_int(value: int, limit: int, name: str) -> int:
    if not 0 <= value <= limit:
        raise ValueError(f"{name} out of range: {value!r}")
    return value


def _sixteen(data: bytes | bytearray | memoryview | Iterable[int]) -> bytes:
    raw = bytes(data)
    if len(raw) != 16:
        raise UuidError(ErrorKind.BYTE_LENGTH, length=len(raw))
    return raw


def _swap_fields(raw: bytes) -> bytes:
    """Flip the byte order of the first three fields."""
    return raw[3::-1] + raw[5:3:-1] + raw[7:5:-1] + raw[8:]


@functools.total_ordering
class Uuid:
    """An immutable 128-bit universally unique identifier."""

    __slots__ = ("_bytes",)

    def __init__(self, data: bytes | bytearray | memoryview | Iterable[int]) -> None:
        object.__setattr__(self, "_bytes", _sixteen(data))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Uuid is immutable")

    @classmethod
    def nil(cls) -> Uuid:
        """The UUID with all 128 bits cleared."""
        return cls(bytes(16))

    @classmethod
    def max(cls) -> Uuid:
        """The UUID with all 128 bits set."""
        return cls(b"\xff" * 16)

    @classmethod
    def from_fields(cls, d1: int, d2: int, d3: int, d4: bytes | Iterable[int]) -> Uuid:
        """Build a UUID from its four big-endian fields."""
        tail = bytes(d4)
        if len(tail) != 8:
            raise ValueError(f"d4 must hold 8 bytes, found {len(tail)}")
        return cls(
            _checked_int(d1, _U32, "d1").to_bytes(4, "big")
            + _checked_int(d2, _U16, "d2").to_bytes(2, "big")
            + _checked_int(d3, _U16, "d3").to_bytes(2, "big")
            + tail
        )

    @classmethod
    def from_fields_le(
        cls, d1: int, d2: int, d3: int, d4: bytes | Iterable[int]
    ) -> Uuid:
        """Build a UUID from fields whose first three are little-endian."""
        tail = bytes(d4)
        if len(tail) != 8:
            raise ValueError(f"d4 must hold 8 bytes, found {len(tail)}")
        return cls(
            _checked_int(d1, _U32, "d1").to_bytes(4, "little")
            + _checked_int(d2, _U16, "d2").to_bytes(2, "little")
            + _checked_int(d3, _U16, "d3").to_bytes(2, "little")
            + tail
        )

    @classmethod
    def from_u128(cls, value: int) -> Uuid:
        """Build a UUID from a 128-bit integer."""
        return cls(_checked_int(value, _U128, "value").to_bytes(16, "big"))

    @classmethod
    def from_u128_le(cls, value: int) -> Uuid:
        """Build a UUID from a 128-bit integer with all bytes reversed."""
        return cls(_checked_int(value, _U128, "value").to_bytes(16, "little"))

    @classmethod
    def from_u64_pair(cls, high_bits: int, low_bits: int) -> Uuid:
        """Build a UUID from its high and low 64-bit halves."""
        return cls(
            _checked_int(high_bits, _U64, "high_bits").to_bytes(8, "big")
            + _checked_int(low_bits, _U64, "low_bits").to_bytes(8, "big")
        )

    @classmethod
    def from_slice(cls, data: bytes | bytearray | memoryview | Iterable[int]) -> Uuid:
        """Build a UUID from exactly 16 bytes; raise UuidError otherwise."""
        return cls(_sixteen(data))

    @classmethod
    def from_slice_le(
        cls, data: bytes | bytearray | memoryview | Iterable[int]
    ) -> Uuid:
        """Build a UUID from 16 bytes whose first three fields are little-endian."""
        return cls(_swap_fields(_sixteen(data)))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview | Iterable[int]) -> Uuid:
        """Build a UUID from its 16 bytes."""
        return cls(data)

    @classmethod
    def from_bytes_le(
        cls, data: bytes | bytearray | memoryview | Iterable[int]
    ) -> Uuid:
        """Build a UUID from 16 bytes, flipping the first three fields."""
        return cls(_swap_fields(_sixteen(data)))

    @classmethod
    def parse_str(cls, text: str | bytes | bytearray) -> Uuid:
        """Parse a simple, hyphenated, braced or URN string."""
        return cls(parse(text))

    def as_bytes(self) -> bytes:
        """The 16 bytes of the UUID."""
        return self._bytes

    def as_fields(self) -> tuple[int, int, int, bytes]:
        """The four big-endian fields of the UUID."""
        raw = self._bytes
        return (
            int.from_bytes(raw[0:4], "big"),
            int.from_bytes(raw[4:6], "big"),
            int.from_bytes(raw[6:8], "big"),
            raw[8:16],
        )

    def to_fields_le(self) -> tuple[int, int, int, bytes]:
        """The four fields, reading the first three as little-endian."""
        raw = self._bytes
        return (
            int.from_bytes(raw[0:4], "little"),
            int.from_bytes(raw[4:6], "little"),
            int.from_bytes(raw[6:8], "little"),
            raw[8:16],
        )

    def as_u128(self) -> int:
        """The UUID as a 128-bit integer."""
        return int.from_bytes(self._bytes, "big")

    def get_variant(self) -> Variant:
        """The variant encoded in byte 8."""
        byte = self._bytes[8]
        if byte & 0x80 == 0x00:
            return Variant.NCS
        if byte & 0xC0 == 0x80:
            return Variant.RFC4122
        if byte & 0xE0 == 0xC0:
            return Variant.MICROSOFT
        return Variant.FUTURE

    def get_version(self) -> Version | None:
        """The version encoded in byte 6, or None if it is not a known one."""
        number = self._bytes[6] >> 4
        if number == 0:
            return Version.NIL if self._bytes == bytes(16) else None
        if number == 0x0F:
            return Version.MAX if self._bytes == b"\xff" * 16 else None
        if 1 <= number <= 8:
            return Version(number)
        return None

    def hyphenated(self) -> Hyphenated:
        """A formatter for the hyphenated layout."""
        return Hyphenated(self)

    def simple(self) -> Simple:
        """A formatter for the 32-digit layout."""
        return Simple(self)

    def urn(self) -> Urn:
        """A formatter for the URN layout."""
        return Urn(self)

    def braced(self) -> Braced:
        """A formatter for the braced layout."""
        return Braced(self)

    def __bytes__(self) -> bytes:
        return self._bytes

    def __int__(self) -> int:
        return self.as_u128()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __str__(self) -> str:
        return self.hyphenated().encode_lower()

    def __format__(self, spec: str) -> str:
        return format(self.hyphenated(), spec)

    def __repr__(self) -> str:
        return f"Uuid('{self}')"