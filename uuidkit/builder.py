"""A mutable builder for assembling UUIDs field by field."""

from __future__ import annotations

from collections.abc import Iterable

from uuidkit.core import Uuid, Variant, Version

_BytesLike = bytes | bytearray | memoryview | Iterable[int]


def _apply_variant(byte: int, variant: Variant) -> int:
    if variant is Variant.NCS:
        return byte & 0x7F
    if variant is Variant.RFC4122:
        return (byte & 0x3F) | 0x80
    if variant is Variant.MICROSOFT:
        return (byte & 0x1F) | 0xC0
    if variant is Variant.FUTURE:
        return byte | 0xE0
    raise TypeError(f"not a UUID variant: {variant!r}")


class Builder:
    """Builds a Uuid, allowing its variant and version bits to be adjusted."""

    __slots__ = ("_uuid",)

    def __init__(self, uuid: Uuid) -> None:
        if not isinstance(uuid, Uuid):
            raise TypeError(f"expected a Uuid, found {type(uuid).__name__!r}")
        self._uuid = uuid

    @classmethod
    def from_bytes(cls, data: _BytesLike) -> Builder:
        """Start from the 16 given bytes."""
        return cls(Uuid.from_bytes(data))

    @classmethod
    def from_bytes_le(cls, data: _BytesLike) -> Builder:
        """Start from 16 bytes whose first three fields are little-endian."""
        return cls(Uuid.from_bytes_le(data))

    @classmethod
    def from_md5_bytes(cls, md5_bytes: _BytesLike) -> Builder:
        """Start a version 3 UUID from an MD5 digest."""
        return (
            cls.from_bytes(md5_bytes)
            .with_variant(Variant.RFC4122)
            .with_version(Version.MD5)
        )

    @classmethod
    def from_random_bytes(cls, random_bytes: _BytesLike) -> Builder:
        """Start a version 4 UUID from random bytes, setting only version and variant."""
        return (
            cls.from_bytes(random_bytes)
            .with_variant(Variant.RFC4122)
            .with_version(Version.RANDOM)
        )

    @classmethod
    def from_sha1_bytes(cls, sha1_bytes: _BytesLike) -> Builder:
        """Start a version 5 UUID from the first 16 bytes of a SHA-1 digest."""
        return (
            cls.from_bytes(sha1_bytes)
            .with_variant(Variant.RFC4122)
            .with_version(Version.SHA1)
        )

    @classmethod
    def from_custom_bytes(cls, custom_bytes: _BytesLike) -> Builder:
        """Start a version 8 UUID from user-defined bytes."""
        return (
            cls.from_bytes(custom_bytes)
            .with_variant(Variant.RFC4122)
            .with_version(Version.CUSTOM)
        )

    @classmethod
    def from_slice(cls, data: _BytesLike) -> Builder:
        """Start from exactly 16 bytes; raise UuidError for any other length."""
        return cls(Uuid.from_slice(data))

    @classmethod
    def from_slice_le(cls, data: _BytesLike) -> Builder:
        """Like from_slice, flipping the first three fields."""
        return cls(Uuid.from_slice_le(data))

    @classmethod
    def from_fields(cls, d1: int, d2: int, d3: int, d4: _BytesLike) -> Builder:
        """Start from four big-endian field values."""
        return cls(Uuid.from_fields(d1, d2, d3, d4))

    @classmethod
    def from_fields_le(cls, d1: int, d2: int, d3: int, d4: _BytesLike) -> Builder:
        """Start from four field values, the first three little-endian."""
        return cls(Uuid.from_fields_le(d1, d2, d3, d4))

    @classmethod
    def from_u128(cls, value: int) -> Builder:
        """Start from a 128-bit integer."""
        return cls(Uuid.from_u128(value))

    @classmethod
    def from_u128_le(cls, value: int) -> Builder:
        """Start from a 128-bit integer in little-endian byte order."""
        return cls(Uuid.from_u128_le(value))

    @classmethod
    def nil(cls) -> Builder:
        """Start from the nil UUID."""
        return cls(Uuid.nil())

    def with_variant(self, variant: Variant) -> Builder:
        """Return a new builder whose UUID carries the given variant."""
        raw = bytearray(self._uuid.as_bytes())
        raw[8] = _apply_variant(raw[8], variant)
        return type(self)(Uuid.from_bytes(raw))

    def set_variant(self, variant: Variant) -> Builder:
        """Set the variant in place and return this builder."""
        self._uuid = self.with_variant(variant)._uuid
        return self

    def with_version(self, version: Version | int) -> Builder:
        """Return a new builder whose UUID carries the given version number."""
        number = int(version)
        if not 0 <= number <= 0x0F:
            raise ValueError(f"version out of range: {version!r}")
        raw = bytearray(self._uuid.as_bytes())
        raw[6] = (raw[6] & 0x0F) | (number << 4)
        return type(self)(Uuid.from_bytes(raw))

    def set_version(self, version: Version | int) -> Builder:
        """Set the version in place and return this builder."""
        self._uuid = self.with_version(version)._uuid
        return self

    def as_uuid(self) -> Uuid:
        """The UUID built so far."""
        return self._uuid

    def into_uuid(self) -> Uuid:
        """Finish building and return the UUID."""
        return self._uuid

    def __repr__(self) -> str:
        return f"Builder({self._uuid!r})"