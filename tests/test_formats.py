from dataclasses import dataclass

import pytest

from uuidkit.errors import ErrorKind, UuidError
from uuidkit.formats import Braced, Hyphenated, Simple, Urn
from uuidkit.parser import parse


@dataclass(frozen=True)
class _Value:
    data: bytes

    def as_bytes(self) -> bytes:
        return self.data


NIL = _Value(bytes(16))
SAMPLE = _Value(parse("936DA01f9abd4d9d80c702af85c822a8"))
BENCH = _Value(parse("F9168C5E-CEB2-4faa-B6BF-329BF39FA1E4"))


@pytest.mark.parametrize(
    "cls, length", [(Hyphenated, 36), (Simple, 32), (Urn, 45), (Braced, 38)]
)
def test_encoded_length_matches_constant(cls, length):
    assert cls.LENGTH == length
    assert len(cls(NIL).encode_lower()) == length
    assert len(cls.from_uuid(NIL).encode_upper()) == length


@pytest.mark.parametrize(
    "cls, lower, upper",
    [
        (
            Hyphenated,
            "936da01f-9abd-4d9d-80c7-02af85c822a8",
            "936DA01F-9ABD-4D9D-80C7-02AF85C822A8",
        ),
        (
            Braced,
            "{936da01f-9abd-4d9d-80c7-02af85c822a8}",
            "{936DA01F-9ABD-4D9D-80C7-02AF85C822A8}",
        ),
        (
            Simple,
            "936da01f9abd4d9d80c702af85c822a8",
            "936DA01F9ABD4D9D80C702AF85C822A8",
        ),
        (
            Urn,
            "urn:uuid:936da01f-9abd-4d9d-80c7-02af85c822a8",
            "urn:uuid:936DA01F-9ABD-4D9D-80C7-02AF85C822A8",
        ),
    ],
)
def test_encode_lower_and_upper(cls, lower, upper):
    wrapped = cls.from_uuid(SAMPLE)
    assert wrapped.encode_lower() == lower
    assert wrapped.encode_upper() == upper


@pytest.mark.parametrize("cls", [Hyphenated, Simple, Urn, Braced])
def test_into_uuid_returns_wrapped_value(cls):
    assert cls(NIL).into_uuid() == NIL
    assert cls.from_uuid(SAMPLE).into_uuid() is SAMPLE


def test_hex_format_specs():
    assert f"{Hyphenated(BENCH):x}" == "f9168c5e-ceb2-4faa-b6bf-329bf39fa1e4"
    assert f"{Simple(BENCH):x}" == "f9168c5eceb24faab6bf329bf39fa1e4"
    assert f"{Urn(BENCH):x}" == "urn:uuid:f9168c5e-ceb2-4faa-b6bf-329bf39fa1e4"
    assert f"{Hyphenated(BENCH):X}" == "F9168C5E-CEB2-4FAA-B6BF-329BF39FA1E4"


def test_str_is_lowercase():
    assert str(Braced(BENCH)) == "{f9168c5e-ceb2-4faa-b6bf-329bf39fa1e4}"
    assert str(Hyphenated(NIL)) == "00000000-0000-0000-0000-000000000000"


def test_other_format_spec_pads_text():
    assert f"{Simple(NIL):>34}" == "  " + "0" * 32


def test_bytes_can_be_wrapped_directly():
    assert Simple(bytes(range(16))).encode_lower() == "000102030405060708090a0b0c0d0e0f"


def test_wrong_byte_length_raises():
    with pytest.raises(UuidError) as info:
        Hyphenated(_Value(bytes(15))).encode_lower()
    assert info.value.kind is ErrorKind.BYTE_LENGTH
    assert info.value.length == 15


def test_unformattable_value_raises_type_error():
    with pytest.raises(TypeError):
        Urn(12345).encode_lower()


def test_equality_and_ordering():
    assert Hyphenated(NIL) == Hyphenated(_Value(bytes(16)))
    assert Simple(b"\x00" * 16) < Simple(b"\x01" * 16)
    assert hash(Braced(NIL)) == hash(Braced(_Value(bytes(16))))