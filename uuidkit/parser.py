"""Decoding of UUID strings into their 16 bytes."""

from __future__ import annotations

from uuidkit.errors import InvalidUuid

_HEX = frozenset(b"0123456789abcdefABCDEF")
_URN_PREFIX = b"urn:uuid:"
_HYPHEN_POSITIONS = (8, 13, 18, 23)
_GROUP_SPANS = ((0, 8), (9, 13), (14, 18), (19, 23), (24, 36))


def _as_bytes(text: str | bytes | bytearray) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8", "surrogatepass")
    return bytes(text)


def _parse_simple(digits: bytes) -> bytes:
    if len(digits) != 32 or not _HEX.issuperset(digits):
        raise ValueError("not a simple UUID")
    return bytes.fromhex(digits.decode("ascii"))


def _parse_hyphenated(text: bytes) -> bytes:
    if len(text) != 36 or any(text[i] != ord("-") for i in _HYPHEN_POSITIONS):
        raise ValueError("not a hyphenated UUID")
    return _parse_simple(b"".join(text[start:end] for start, end in _GROUP_SPANS))


def _decode(raw: bytes) -> bytes:
    length = len(raw)
    if length == 32:
        return _parse_simple(raw)
    if length == 36:
        return _parse_hyphenated(raw)
    if length == 38 and raw.startswith(b"{") and raw.endswith(b"}"):
        return _parse_hyphenated(raw[1:-1])
    if length == 45 and raw.startswith(_URN_PREFIX):
        return _parse_hyphenated(raw[len(_URN_PREFIX):])
    raise ValueError("unrecognised UUID shape")


def try_parse(text: str | bytes | bytearray) -> bytes:
    """Decode a simple, hyphenated, braced or URN UUID string.

    Raises InvalidUuid, which carries the input but no diagnosis.
    """
    raw = _as_bytes(text)
    try:
        return _decode(raw)
    except ValueError:
        pass
    raise InvalidUuid(raw)


def parse(text: str | bytes | bytearray) -> bytes:
    """Decode a UUID string, raising a detailed UuidError on failure."""
    try:
        return try_parse(text)
    except InvalidUuid as invalid:
        raise invalid.into_err() from None