# efitypes

Python data types modelled on those of the firmware interface specification.

- `efitypes.chars`: `Char8` (Latin-1) and `Char16` (UCS-2) characters, the
  `NUL_8` and `NUL_16` constants, and `CharConversionError` (a `ValueError`)
  for code points the types cannot hold. `Char16` rejects surrogates.
- `efitypes.enums`: `NewtypeEnum`, an integer-backed enumeration that also
  accepts values it has no name for.
- `efitypes.guid`: `Guid`, with the mixed-endian 16-byte layout used by
  firmware (`from_bytes` / `to_bytes`), parsing of the canonical text form
  (`Guid.parse`), and the `unsafe_guid` class decorator that attaches a
  `GUID` attribute.
- `efitypes.strs`: null-terminated `CStr8`, `CStr16` and `CString16`
  strings, with `FromSliceWithNulError` and `FromStrError` (both
  `ValueError`s carrying a `kind`).
- `efitypes.logger`: `Logger`, a `logging.Handler` that writes records with a
  level, file and line prefix to any object with a `write` method, plus the
  lower-level `DecoratedWriter`, `write_decorated` and `level_name`.

## Installation

```
pip install efitypes
```

## Examples

```python
from efitypes.chars import Char16
from efitypes.guid import Guid, unsafe_guid
from efitypes.strs import CStr8, CStr16, CString16

guid = Guid.from_values(0x12345678, 0x9ABC, 0xDEF0, 0x1234, 0x56789ABCDEF0)
print(guid)  # 12345678-9abc-def0-1234-56789abcdef0
assert Guid.from_bytes(guid.to_bytes()) == guid
assert Guid.parse("12345678-9abc-def0-1234-56789abcdef0") == guid

@unsafe_guid("12345678-9abc-def0-1234-56789abcdef0")
class Emptiness:
    pass

assert Emptiness.GUID == guid

s = CStr16.from_u16_with_nul([65, 66, 67, 0])
assert s.num_bytes() == 8
assert s.as_string() == "ABC"
assert s.to_u16_slice() == (65, 66, 67)

assert CStr8.from_bytes_with_nul(b"abc\0").to_bytes() == b"abc"
assert CString16.from_str("abc").as_string() == "abc"
assert str(Char16.from_char("x")) == "x"
```

Conversion failures raise exceptions:

```python
from efitypes.strs import CStr16, CString16, FromStrError, FromSliceWithNulError

try:
    CString16.from_str("x\0")
except FromStrError as exc:
    print(exc.kind)  # FromStrErrorKind.INTERIOR_NUL

try:
    CStr16.from_u16_with_nul([65, 0, 66, 0])
except FromSliceWithNulError as exc:
    print(exc.kind, exc.position)  # SliceErrorKind.INTERIOR_NUL 1
```

Newtype enums keep unknown values:

```python
from efitypes.enums import NewtypeEnum

class UnixBool(NewtypeEnum):
    FALSE = 0
    TRUE = 1
    FILE_NOT_FOUND = -1

print(repr(UnixBool.TRUE))   # TRUE
print(repr(UnixBool(7)))     # UnixBool(7)
assert int(UnixBool.FILE_NOT_FOUND) == -1
```

Logging to any object with a `write` method:

```python
import io
import logging
from efitypes.logger import Logger

out = io.StringIO()
handler = Logger(out, ignore_errors=False)
log = logging.getLogger("boot")
log.addHandler(handler)
log.warning("disk not found")
# out now holds "[ WARN]: <path>@<line>: disk not found\n"
handler.disable()  # later records are dropped
```

Each further line of a multi-line message is prefixed with the level name
alone. Errors raised by the output propagate unless `ignore_errors=True`.

## What this package does not do

It only provides data types and a logging handler. It does not talk to
firmware, allocate firmware memory, or provide system tables, boot or
runtime services, or protocols; there is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```