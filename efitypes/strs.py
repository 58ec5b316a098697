"""Null-terminated Latin-1 and UCS-2 strings."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from functools import total_ordering
from typing import Protocol

from .chars import NUL_8, NUL_16, Char8, Char16, CharConversionError

__all__ = [
    "SliceErrorKind",
    "FromSliceWithNulError",
    "FromStrErrorKind",
    "FromStrError",
    "CStr8",
    "CStr16",
    "CString16",
]


class SliceErrorKind(enum.Enum):
    """Why a code sequence could not be turned into a null-terminated string."""

    INVALID_CHAR = "invalid character"
    INTERIOR_NUL = "interior nul"
    NOT_NUL_TERMINATED = "not nul terminated"


class FromSliceWithNulError(ValueError):
    """A checked conversion from a code sequence to a C string failed."""

    def __init__(self, kind: SliceErrorKind, position: int | None = None) -> None:
        self.kind = kind
        self.position = position
        if position is None:
            super().__init__(kind.value)
        else:
            super().__init__(f"{kind.value} at position {position}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FromSliceWithNulError):
            return NotImplemented
        return (self.kind, self.position) == (other.kind, other.position)

    def __hash__(self) -> int:
        return hash((self.kind, self.position))


class FromStrErrorKind(enum.Enum):
    """Why a Python string could not be turned into a UCS-2 C string."""

    INVALID_CHAR = "invalid character"
    INTERIOR_NUL = "interior nul"


class FromStrError(ValueError):
    """A conversion from a Python string to a :class:`CString16` failed."""

    def __init__(self, kind: FromStrErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FromStrError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class _TextSink(Protocol):
    def write(self, s: str, /) -> object: ...


@total_ordering
class CStr8:
    """A Latin-1 null-terminated string."""

    __slots__ = ("_chars",)

    def __init__(self, chars: Iterable[Char8]) -> None:
        self._chars: tuple[Char8, ...] = tuple(chars)

    @classmethod
    def from_bytes_with_nul(cls, chars: bytes) -> CStr8:
        """Wrap bytes that end with, and contain only one, NUL byte."""
        data = bytes(chars)
        nul_pos = data.find(0)
        if nul_pos < 0:
            raise FromSliceWithNulError(SliceErrorKind.NOT_NUL_TERMINATED)
        if nul_pos + 1 != len(data):
            raise FromSliceWithNulError(SliceErrorKind.INTERIOR_NUL, nul_pos)
        return cls(Char8(b) for b in data)

    def to_bytes(self) -> bytes:
        """The bytes of the string, without the trailing NUL."""
        return self.to_bytes_with_nul()[:-1]

    def to_bytes_with_nul(self) -> bytes:
        """The bytes of the string, including the trailing NUL."""
        return bytes(int(c) for c in self._chars)

    def __len__(self) -> int:
        return len(self._chars) - 1

    def __iter__(self) -> Iterator[Char8]:
        return iter(self._chars[:-1])

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._chars == other._chars  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._chars < other._chars  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._chars))

    def __str__(self) -> str:
        return "".join(str(c) for c in self)

    def __repr__(self) -> str:
        return f"CStr8([{', '.join(repr(c) for c in self._chars)}])"


@total_ordering
class CStr16:
    """A UCS-2 null-terminated string."""

    __slots__ = ("_chars",)

    def __init__(self, chars: Iterable[Char16]) -> None:
        self._chars: tuple[Char16, ...] = tuple(chars)

    @classmethod
    def from_u16_with_nul(cls, codes: Iterable[int]) -> CStr16:
        """Wrap 16-bit codes that end with, and contain only one, NUL code.

        Every code before the NUL must be a valid UCS-2 code point.
        """
        codes = list(codes)
        chars: list[Char16] = []
        for pos, code in enumerate(codes):
            try:
                char = Char16(code)
            except (CharConversionError, TypeError):
                raise FromSliceWithNulError(SliceErrorKind.INVALID_CHAR, pos) from None
            chars.append(char)
            if char == NUL_16:
                if pos != len(codes) - 1:
                    raise FromSliceWithNulError(SliceErrorKind.INTERIOR_NUL, pos)
                return cls(chars)
        raise FromSliceWithNulError(SliceErrorKind.NOT_NUL_TERMINATED)

    def to_u16_slice(self) -> tuple[int, ...]:
        """The codes of the string, without the trailing NUL."""
        return self.to_u16_slice_with_nul()[:-1]

    def to_u16_slice_with_nul(self) -> tuple[int, ...]:
        """The codes of the string, including the trailing NUL."""
        return tuple(int(c) for c in self._chars)

    def __iter__(self) -> Iterator[Char16]:
        return iter(self._chars[:-1])

    def __len__(self) -> int:
        return len(self._chars) - 1

    def num_bytes(self) -> int:
        """Size of the string in bytes, including the trailing NUL."""
        return len(self._chars) * 2

    def as_str_in_buf(self, buf: _TextSink) -> None:
        """Write each character of the string to ``buf``."""
        for c in self:
            buf.write(str(c))

    def as_string(self) -> str:
        """The string as a Python ``str``."""
        return "".join(str(c) for c in self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._chars == other._chars  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._chars < other._chars  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._chars))

    def __str__(self) -> str:
        return "".join(str(c) for c in self)

    def __repr__(self) -> str:
        return f"CStr16([{', '.join(repr(c) for c in self._chars)}])"


class CString16(CStr16):
    """An owned UCS-2 null-terminated string."""

    __slots__ = ()

    def __init__(self, chars: Iterable[Char16] = (NUL_16,)) -> None:
        super().__init__(chars)

    @classmethod
    def from_str(cls, text: str) -> CString16:
        """Convert a Python string, failing on non-UCS-2 or NUL characters."""
        output: list[Char16] = []
        for ch in text:
            try:
                c = Char16.from_char(ch)
            except CharConversionError:
                raise FromStrError(FromStrErrorKind.INVALID_CHAR) from None
            if c == NUL_16:
                raise FromStrError(FromStrErrorKind.INTERIOR_NUL)
            output.append(c)
        output.append(NUL_16)
        return cls(output)

    def __repr__(self) -> str:
        return f"CString16([{', '.join(repr(c) for c in self._chars)}])"


# Keep the NUL_8 name available alongside the other string helpers.
_NUL_8 = NUL_8