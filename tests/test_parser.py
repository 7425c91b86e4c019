import pytest

from uuidkit.errors import ErrorKind, InvalidUuid, UuidError
from uuidkit.parser import parse, try_parse

RANDOM_BYTES = bytes(
    [0x67, 0xE5, 0x50, 0x44, 0x10, 0xB1, 0x42, 0x6F,
     0x92, 0x47, 0xBB, 0x68, 0x0E, 0x5F, 0xE0, 0xC8]
)


@pytest.mark.parametrize(
    "text",
    [
        "67e55044-10b1-426f-9247-bb680e5fe0c8",
        "67e5504410b1426f9247bb680e5fe0c8",
        "urn:uuid:67e55044-10b1-426f-9247-bb680e5fe0c8",
        "{67e55044-10b1-426f-9247-bb680e5fe0c8}",
        "67E55044-10B1-426F-9247-BB680E5FE0C8",
    ],
)
def test_valid_random(text):
    assert try_parse(text) == RANDOM_BYTES
    assert parse(text) == RANDOM_BYTES


@pytest.mark.parametrize(
    "text",
    ["00000000000000000000000000000000", "00000000-0000-0000-0000-000000000000"],
)
def test_valid_nil(text):
    assert try_parse(text) == bytes(16)


def test_valid_sequential_groups():
    assert try_parse("01020304-1112-2122-3132-414243444546") == bytes(
        [0x01, 0x02, 0x03, 0x04, 0x11, 0x12, 0x21, 0x22,
         0x31, 0x32, 0x41, 0x42, 0x43, 0x44, 0x45, 0x46]
    )


def test_valid_mixed_case():
    assert try_parse("F9168C5E-CEB2-4faa-B6BF-329BF39FA1E4") == bytes(
        [0xF9, 0x16, 0x8C, 0x5E, 0xCE, 0xB2, 0x4F, 0xAA,
         0xB6, 0xBF, 0x32, 0x9B, 0xF3, 0x9F, 0xA1, 0xE4]
    )


def test_accepts_bytes_input():
    assert try_parse(b"67e5504410b1426f9247bb680e5fe0c8") == RANDOM_BYTES


@pytest.mark.parametrize(
    "text",
    [
        "",
        "!",
        "F9168C5E-CEB2-4faa-B6BF-329BF39FA1E45",
        "F9168C5E-CEB2-4faa-BBF-329BF39FA1E4",
        "F9168C5E-CEB2-4faa-BGBF-329BF39FA1E4",
        "F9168C5E-CEB2-4faa-B6BFF329BF39FA1E4",
        "F9168C5E-CEB2-4faa",
        "F9168C5E-CEB2-4faaXB6BFF329BF39FA1E4",
        "F9168C5E-CEB-24fa-eB6BFF32-BF39FA1E4",
        "01020304-1112-2122-3132-41424344",
        "67e5504410b1426f9247bb680e5fe0c88",
        "67e5504410b1426f9247bb680e5fe0cg8",
        "67e5504410b1426f9247bb680e5fe0c",
        "67e550X410b1426f9247bb680e5fe0cd",
        "67e550-4105b1426f9247bb680e5fe0c",
        "{F9168C5E-CEB2-4faa-B6BF-329Bz39FA1E4}",
        "504410岡林aab1426f9247bb680e5fe0c8",
        "F916",
        "F916x",
        "67e5504410b1426f9247bb680e5fe0 8",
        "[67e55044-10b1-426f-9247-bb680e5fe0c8]",
        "urx:uuid:67e55044-10b1-426f-9247-bb680e5fe0c8",
    ],
)
def test_invalid_raises_invalid_uuid(text):
    with pytest.raises(InvalidUuid) as excinfo:
        try_parse(text)
    assert excinfo.value.data == text.encode("utf-8")


def test_parse_reports_group_length():
    with pytest.raises(UuidError) as excinfo:
        parse("F9168C5E-CEB2-4faa-BBF-329BF39FA1E4")
    assert excinfo.value == UuidError(
        ErrorKind.GROUP_LENGTH, group=3, length=3, index=20
    )


def test_parse_reports_character():
    with pytest.raises(UuidError) as excinfo:
        parse("F9168C5E-CEB2-4faa-BGBF-329BF39FA1E4")
    assert excinfo.value.kind is ErrorKind.CHAR
    assert excinfo.value.character == "G"
    assert excinfo.value.index == 21


def test_parse_reports_group_count():
    with pytest.raises(UuidError, match="invalid group count: expected 5, found 4"):
        parse("F9168C5E-CEB2-4faa-B6BFF329BF39FA1E4")


def test_parse_reports_simple_length():
    with pytest.raises(UuidError) as excinfo:
        parse("67e5504410b1426f9247bb680e5fe0c")
    assert excinfo.value == UuidError(ErrorKind.SIMPLE_LENGTH, length=31)


def test_parse_lone_surrogate_reports_invalid_utf8():
    with pytest.raises(UuidError) as excinfo:
        parse("\ud800")
    assert excinfo.value.kind is ErrorKind.INVALID_UTF8


def test_roundtrip_through_hex():
    hex_text = RANDOM_BYTES.hex()
    assert try_parse(hex_text) == RANDOM_BYTES
    assert try_parse(hex_text.upper()) == RANDOM_BYTES