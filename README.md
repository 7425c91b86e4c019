# uuidkit

A small library for working with 128-bit UUIDs: parsing them from text,
building them from bytes, integers or fields, setting their version and
variant bits, and formatting them in the common textual forms. It has no
dependencies outside the standard library.

## Installation

```
pip install uuidkit
```

For running the test suite:

```
pip install "uuidkit[test]"
pytest
```

## Parsing

`uuidkit.core.Uuid.parse_str` accepts four shapes of input, as `str` or
bytes:

- simple: `67e5504410b1426f9247bb680e5fe0c8`
- hyphenated: `67e55044-10b1-426f-9247-bb680e5fe0c8`
- braced: `{67e55044-10b1-426f-9247-bb680e5fe0c8}`
- URN: `urn:uuid:67e55044-10b1-426f-9247-bb680e5fe0c8`

Hex digits may be in upper or lower case.

```python
from uuidkit.core import Uuid, Version

uuid = Uuid.parse_str("67e55044-10b1-426f-9247-bb680e5fe0c8")
assert uuid.get_version() is Version.RANDOM
```

Bad input raises `uuidkit.errors.UuidError`, a subclass of `ValueError`.
Its `kind` attribute is an `ErrorKind` member (`CHAR`, `SIMPLE_LENGTH`,
`BYTE_LENGTH`, `GROUP_COUNT`, `GROUP_LENGTH`, `INVALID_UTF8`, `OTHER`),
and the attributes `character`, `index`, `length`, `count` and `group`
hold the details that apply. The message says what was wrong and where;
positions count from 1:

```python
from uuidkit.errors import UuidError

try:
    Uuid.parse_str("F9168C5E-CEB2-4faa-BGBF-329BF39FA1E4")
except UuidError as err:
    print(err)
    # invalid character: expected an optional prefix of `urn:uuid:`
    # followed by [0-9a-fA-F-], found `G` at 21
```

The lower-level functions in `uuidkit.parser` return the 16 raw bytes:

- `parse(text)` returns the bytes or raises `UuidError`.
- `try_parse(text)` returns the bytes or raises `uuidkit.errors.InvalidUuid`,
  which carries the input but no diagnosis; its `into_err()` method returns
  the detailed `UuidError`.

`uuidkit.errors.diagnose(data)` returns the `UuidError` for any input that
failed to parse.

## Building

```python
from uuidkit.core import Uuid

Uuid.from_u128(0xA1A2A3A4B1B2C1C2D1D2D3D4D5D6D7D8)
Uuid.from_u64_pair(0xA1A2A3A4B1B2C1C2, 0xD1D2D3D4D5D6D7D8)
Uuid.from_fields(0xA1A2A3A4, 0xB1B2, 0xC1C2, bytes.fromhex("d1d2d3d4d5d6d7d8"))
Uuid.from_fields_le(0xA1A2A3A4, 0xB1B2, 0xC1C2, bytes.fromhex("d1d2d3d4d5d6d7d8"))
Uuid.from_bytes(bytes(16))
Uuid.from_slice(bytes(16))
Uuid.nil()
Uuid.max()
```

`from_bytes_le`, `from_slice_le`, `from_fields_le` and `to_fields_le` deal
in mixed-endian input, as found in some GUID representations, and flip the
first three fields; `from_u128_le` reverses all 16 bytes. Byte input of any
length other than 16 raises `UuidError` with kind `BYTE_LENGTH`; integers
out of range raise `ValueError`.

A `Uuid` is immutable, hashable and ordered by its bytes. It reads back with
`as_bytes()`, `as_fields()`, `as_u128()`, `bytes(uuid)` and `int(uuid)`.
`get_variant()` returns a `Variant` (`NCS`, `RFC4122`, `MICROSOFT`,
`FUTURE`); `get_version()` returns a `Version` or `None` when the version
nibble is not a known one (`NIL` and `MAX` only for the all-zero and
all-one UUIDs).

`uuidkit.builder.Builder` sets the version and variant bits for you:

```python
import os

from uuidkit.builder import Builder
from uuidkit.core import Variant, Version

uuid = Builder.from_random_bytes(os.urandom(16)).into_uuid()
assert uuid.get_version() is Version.RANDOM
assert uuid.get_variant() is Variant.RFC4122
```

There are also `from_md5_bytes`, `from_sha1_bytes` and `from_custom_bytes`
for versions 3, 5 and 8, and the same `from_*` constructors and `nil()` as
on `Uuid`. `with_variant` and `with_version` return a new builder;
`set_variant` and `set_version` change the builder in place and return it.
`as_uuid()` and `into_uuid()` give the UUID built so far.

## Formatting

`str(uuid)` gives the lower-case hyphenated form, and `format(uuid, "X")`
the upper-case one. The four adapters in `uuidkit.formats` give the other
forms, in either case:

```python
uuid = Uuid.parse_str("936DA01f9abd4d9d80c702af85c822a8")

uuid.hyphenated().encode_lower()  # '936da01f-9abd-4d9d-80c7-02af85c822a8'
uuid.simple().encode_upper()      # '936DA01F9ABD4D9D80C702AF85C822A8'
uuid.braced().encode_lower()      # '{936da01f-9abd-4d9d-80c7-02af85c822a8}'
uuid.urn().encode_lower()         # 'urn:uuid:936da01f-9abd-4d9d-80c7-02af85c822a8'
```

Each adapter (`Hyphenated`, `Simple`, `Braced`, `Urn`) has a `LENGTH`,
can be made with `from_uuid()`, and converts back with `into_uuid()`.
The functions in `uuidkit.encoding` (`encode_simple`, `encode_hyphenated`,
`encode_braced`, `encode_urn`, and `format_simple` / `format_hyphenated`
returning ASCII bytes) work on 16 raw bytes directly.

## What it does not do

uuidkit does not generate UUIDs itself: there is no random, hash-based or
time-based generator and no clock or node-ID handling. To make a version 3,
4, 5 or 8 UUID, supply the digest or random bytes yourself and pass them to
the matching `Builder` constructor. There is no command-line tool.