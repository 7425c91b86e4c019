"""Wrappers that render a UUID in one particular text layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from uuidkit.encoding import (
    encode_braced,
    encode_hyphenated,
    encode_simple,
    encode_urn,
)


def _raw_bytes(uuid: Any) -> bytes:
    """Return the 16 bytes behind a UUID value or a bytes-like object."""
    as_bytes = getattr(uuid, "as_bytes", None)
    if callable(as_bytes):
        return bytes(as_bytes())
    if isinstance(uuid, (bytes, bytearray, memoryview)):
        return bytes(uuid)
    raw = getattr(uuid, "bytes", None)
    if isinstance(raw, bytes):
        return raw
    raise TypeError(f"cannot format {type(uuid).__name__!r} as a UUID")


@dataclass(frozen=True, order=True)
class _Format:
    """A UUID paired with the layout it is rendered in."""

    uuid: Any

    LENGTH: ClassVar[int] = 0

    def encode_lower(self) -> str:
        raise NotImplementedError

    def encode_upper(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.encode_lower()

    def __format__(self, spec: str) -> str:
        if spec in ("", "x"):
            return self.encode_lower()
        if spec == "X":
            return self.encode_upper()
        return format(self.encode_lower(), spec)


class Hyphenated(_Format):
    """Renders like ``67e55044-10b1-426f-9247-bb680e5fe0c8``."""

    LENGTH: ClassVar[int] = 36

    @classmethod
    def from_uuid(cls, uuid: Any) -> Hyphenated:
        """Wrap ``uuid`` in the hyphenated layout."""
        return cls(uuid)

    def encode_lower(self) -> str:
        """Render the UUID with lower-case hex digits."""
        return encode_hyphenated(_raw_bytes(self.uuid), False)

    def encode_upper(self) -> str:
        """Render the UUID with upper-case hex digits."""
        return encode_hyphenated(_raw_bytes(self.uuid), True)

    def into_uuid(self) -> Any:
        """Return the wrapped UUID."""
        return self.uuid


class Simple(_Format):
    """Renders like ``67e5504410b1426f9247bb680e5fe0c8``."""

    LENGTH: ClassVar[int] = 32

    @classmethod
    def from_uuid(cls, uuid: Any) -> Simple:
        """Wrap ``uuid`` in the simple layout."""
        return cls(uuid)

    def encode_lower(self) -> str:
        """Render the UUID with lower-case hex digits."""
        return encode_simple(_raw_bytes(self.uuid), False)

    def encode_upper(self) -> str:
        """Render the UUID with upper-case hex digits."""
        return encode_simple(_raw_bytes(self.uuid), True)

    def into_uuid(self) -> Any:
        """Return the wrapped UUID."""
        return self.uuid


class Urn(_Format):
    """Renders like ``urn:uuid:67e55044-10b1-426f-9247-bb680e5fe0c8``."""

    LENGTH: ClassVar[int] = 45

    @classmethod
    def from_uuid(cls, uuid: Any) -> Urn:
        """Wrap ``uuid`` in the URN layout."""
        return cls(uuid)

    def encode_lower(self) -> str:
        """Render the UUID with lower-case hex digits."""
        return encode_urn(_raw_bytes(self.uuid), False)

    def encode_upper(self) -> str:
        """Render the UUID with upper-case hex digits."""
        return encode_urn(_raw_bytes(self.uuid), True)

    def into_uuid(self) -> Any:
        """Return the wrapped UUID."""
        return self.uuid


class Braced(_Format):
    """Renders like ``{67e55044-10b1-426f-9247-bb680e5fe0c8}``."""

    LENGTH: ClassVar[int] = 38

    @classmethod
    def from_uuid(cls, uuid: Any) -> Braced:
        """Wrap ``uuid`` in the braced layout."""
        return cls(uuid)

    def encode_lower(self) -> str:
        """Render the UUID with lower-case hex digits."""
        return encode_braced(_raw_bytes(self.uuid), False)

    def encode_upper(self) -> str:
        """Render the UUID with upper-case hex digits."""
        return encode_braced(_raw_bytes(self.uuid), True)

    def into_uuid(self) -> Any:
        """Return the wrapped UUID."""
        return self.uuid