"""Errors raised when UUID input cannot be decoded."""

from __future__ import annotations

import enum

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_URN_PREFIX = b"urn:uuid:"
_BLOCK_STARTS = (0, 9, 14, 19, 24)
_GROUP_LENGTHS = (8, 4, 4, 4, 12)


class ErrorKind(enum.Enum):
    """The reason a UUID could not be built."""

    CHAR = "char"
    SIMPLE_LENGTH = "simple_length"
    BYTE_LENGTH = "byte_length"
    GROUP_COUNT = "group_count"
    GROUP_LENGTH = "group_length"
    INVALID_UTF8 = "invalid_utf8"
    OTHER = "other"


class UuidError(ValueError):
    """A detailed error describing why UUID input is invalid."""

    def __init__(
        self,
        kind: ErrorKind,
        *,
        character: str | None = None,
        index: int | None = None,
        length: int | None = None,
        count: int | None = None,
        group: int | None = None,
    ) -> None:
        self.kind = kind
        self.character = character
        self.index = index
        self.length = length
        self.count = count
        self.group = group
        super().__init__(self._describe())

    @property
    def expected(self) -> int | None:
        """The expected length of the offending group, if any."""
        if self.kind is ErrorKind.GROUP_LENGTH and self.group is not None:
            return _GROUP_LENGTHS[self.group]
        return None

    def _describe(self) -> str:
        kind = self.kind
        if kind is ErrorKind.CHAR:
            return (
                "invalid character: expected an optional prefix of `urn:uuid:` "
                f"followed by [0-9a-fA-F-], found `{self.character}` at {self.index}"
            )
        if kind is ErrorKind.SIMPLE_LENGTH:
            return (
                "invalid length: expected length 32 for simple format, "
                f"found {self.length}"
            )
        if kind is ErrorKind.BYTE_LENGTH:
            return f"invalid length: expected 16 bytes, found {self.length}"
        if kind is ErrorKind.GROUP_COUNT:
            return f"invalid group count: expected 5, found {self.count}"
        if kind is ErrorKind.GROUP_LENGTH:
            return (
                f"invalid group length in group {self.group}: "
                f"expected {self.expected}, found {self.length}"
            )
        if kind is ErrorKind.INVALID_UTF8:
            return "non-UTF8 input"
        return "failed to parse a UUID"

    def _key(self) -> tuple:
        return (self.kind, self.character, self.index, self.length, self.count, self.group)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UuidError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}"
            for name, value in (
                ("character", self.character),
                ("index", self.index),
                ("length", self.length),
                ("count", self.count),
                ("group", self.group),
            )
            if value is not None
        )
        suffix = f", {fields}" if fields else ""
        return f"UuidError({self.kind}{suffix})"


class InvalidUuid(ValueError):
    """Lightweight signal that some input is not a UUID, without details."""

    def __init__(self, data: bytes | bytearray) -> None:
        self.data = bytes(data)
        super().__init__("failed to parse a UUID")

    def into_err(self) -> UuidError:
        """Work out why the input failed and return a detailed error."""
        return diagnose(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidUuid):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash(self.data)


def diagnose(data: str | bytes | bytearray) -> UuidError:
    """Return the detailed error for input that failed to parse as a UUID."""
    if isinstance(data, str):
        try:
            raw = data.encode("utf-8")
        except UnicodeEncodeError:
            return UuidError(ErrorKind.INVALID_UTF8)
    else:
        raw = bytes(data)

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return UuidError(ErrorKind.INVALID_UTF8)

    if len(raw) >= 2 and raw.startswith(b"{") and raw.endswith(b"}"):
        body, offset, simple = text[1:-1], 1, False
    elif raw.startswith(_URN_PREFIX):
        body, offset, simple = text[len(_URN_PREFIX):], len(_URN_PREFIX), False
    else:
        body, offset, simple = text, 0, True

    hyphens: list[int] = []
    position = 0
    for character in body:
        if character == "-":
            hyphens.append(position)
        elif character not in _HEX_DIGITS:
            return UuidError(
                ErrorKind.CHAR, character=character, index=position + offset + 1
            )
        position += len(character.encode("utf-8"))

    if not hyphens and simple:
        # Every character was valid, so the length must be wrong.
        return UuidError(ErrorKind.SIMPLE_LENGTH, length=len(raw))
    if len(hyphens) != 4:
        return UuidError(ErrorKind.GROUP_COUNT, count=len(hyphens) + 1)

    for group, (bound, start, next_start) in enumerate(
        zip(hyphens, _BLOCK_STARTS, _BLOCK_STARTS[1:])
    ):
        if bound != next_start - 1:
            return UuidError(
                ErrorKind.GROUP_LENGTH,
                group=group,
                length=bound - start,
                index=offset + start + 1,
            )

    # The first four groups are fine, so the last one is the wrong length.
    return UuidError(
        ErrorKind.GROUP_LENGTH,
        group=4,
        length=len(raw) - _BLOCK_STARTS[4],
        index=offset + _BLOCK_STARTS[4] + 1,
    )