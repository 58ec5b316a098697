"""Latin-1 and UCS-2 character types."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CharConversionError", "Char8", "Char16", "NUL_8", "NUL_16"]

_REPLACEMENT_CHARACTER = "\ufffd"


class CharConversionError(ValueError):
    """A value cannot be represented in the requested character type."""


def _is_surrogate(code: int) -> bool:
    return 0xD800 <= code <= 0xDFFF


@dataclass(frozen=True, order=True, repr=False)
class Char8:
    """A Latin-1 character."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("Char8 value must be an integer")
        if not 0 <= self.value <= 0xFF:
            raise CharConversionError(f"{self.value} is not a Latin-1 code point")

    @classmethod
    def from_char(cls, c: str) -> Char8:
        """Convert a one-character string, failing if it is outside Latin-1."""
        code = ord(c)
        if code > 0xFF:
            raise CharConversionError(f"{c!r} is not a Latin-1 character")
        return cls(code)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return chr(self.value)

    def __repr__(self) -> str:
        return repr(chr(self.value))


@dataclass(frozen=True, order=True, repr=False)
class Char16:
    """A UCS-2 code point."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("Char16 value must be an integer")
        if not 0 <= self.value <= 0xFFFF or _is_surrogate(self.value):
            raise CharConversionError(f"{self.value} is not a UCS-2 code point")

    @classmethod
    def from_char(cls, c: str) -> Char16:
        """Convert a one-character string, failing if it is outside the BMP."""
        code = ord(c)
        if code > 0xFFFF or _is_surrogate(code):
            raise CharConversionError(f"{c!r} is not a UCS-2 character")
        return cls(code)

    @classmethod
    def _from_raw(cls, code: int) -> Char16:
        """Wrap any 16-bit value without checking that it is a valid character."""
        if not 0 <= code <= 0xFFFF:
            raise CharConversionError(f"{code} does not fit in 16 bits")
        obj = object.__new__(cls)
        object.__setattr__(obj, "value", code)
        return obj

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        if _is_surrogate(self.value):
            return _REPLACEMENT_CHARACTER
        return chr(self.value)

    def __repr__(self) -> str:
        if _is_surrogate(self.value):
            return f"Char16({self.value})"
        return repr(chr(self.value))


NUL_8 = Char8(0)
"""Latin-1 version of the NUL character."""

NUL_16 = Char16(0)
"""UCS-2 version of the NUL character."""