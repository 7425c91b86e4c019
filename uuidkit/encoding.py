"""Rendering of 16 UUID bytes as text in the common layouts."""

from __future__ import annotations

from collections.abc import Iterable

from uuidkit.errors import ErrorKind, UuidError

_GROUP_BYTE_SPANS = ((0, 4), (4, 6), (6, 8), (8, 10), (10, 16))
_URN_PREFIX = "urn:uuid:"


def _checked(data: bytes | bytearray | Iterable[int]) -> bytes:
    raw = bytes(data)
    if len(raw) != 16:
        raise UuidError(ErrorKind.BYTE_LENGTH, length=len(raw))
    return raw


def _hex(raw: bytes, upper: bool) -> str:
    text = raw.hex()
    return text.upper() if upper else text


def format_simple(data: bytes | bytearray | Iterable[int], upper: bool = False) -> bytes:
    """Return the 32 ASCII hex digits of the UUID bytes."""
    return _hex(_checked(data), upper).encode("ascii")


def format_hyphenated(
    data: bytes | bytearray | Iterable[int], upper: bool = False
) -> bytes:
    """Return the 36-character hyphenated ASCII form of the UUID bytes."""
    raw = _checked(data)
    groups = (_hex(raw[start:end], upper) for start, end in _GROUP_BYTE_SPANS)
    return "-".join(groups).encode("ascii")


def encode_simple(data: bytes | bytearray | Iterable[int], upper: bool = False) -> str:
    """Encode as a simple string, like ``67e5504410b1426f9247bb680e5fe0c8``."""
    return format_simple(data, upper).decode("ascii")


def encode_hyphenated(
    data: bytes | bytearray | Iterable[int], upper: bool = False
) -> str:
    """Encode as a hyphenated string, like ``67e55044-10b1-426f-9247-bb680e5fe0c8``."""
    return format_hyphenated(data, upper).decode("ascii")


def encode_braced(data: bytes | bytearray | Iterable[int], upper: bool = False) -> str:
    """Encode as a hyphenated string surrounded by braces."""
    return "{" + encode_hyphenated(data, upper) + "}"


def encode_urn(data: bytes | bytearray | Iterable[int], upper: bool = False) -> str:
    """Encode as a URN, like ``urn:uuid:67e55044-10b1-426f-9247-bb680e5fe0c8``."""
    return _URN_PREFIX + encode_hyphenated(data, upper)