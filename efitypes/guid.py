"""Globally unique identifiers as used by UEFI."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from typing import Callable, TypeVar

__all__ = ["Guid", "unsafe_guid"]

_LAYOUT = struct.Struct("<IHH8s")
_CANONICAL = re.compile(
    r"([0-9a-fA-F]{8})-([0-9a-fA-F]{4})-([0-9a-fA-F]{4})-"
    r"([0-9a-fA-F]{4})-([0-9a-fA-F]{12})"
)

T = TypeVar("T")


def _check_range(name: str, value: int, bits: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be a {bits}-bit unsigned integer")


@dataclass(frozen=True)
class Guid:
    """A GUID: an RFC 4122 UUID whose first three fields are little endian.

    ``str()`` gives the canonical textual form.
    """

    a: int = 0
    b: int = 0
    c: int = 0
    d: bytes = bytes(8)

    def __post_init__(self) -> None:
        _check_range("a", self.a, 32)
        _check_range("b", self.b, 16)
        _check_range("c", self.c, 16)
        if not isinstance(self.d, (bytes, bytearray)) or len(self.d) != 8:
            raise ValueError("d must be exactly 8 bytes")
        object.__setattr__(self, "d", bytes(self.d))

    @classmethod
    def from_values(
        cls,
        time_low: int,
        time_mid: int,
        time_high_and_version: int,
        clock_seq_and_variant: int,
        node: int,
    ) -> Guid:
        """Create a GUID from the fields of its canonical representation."""
        _check_range("clock_seq_and_variant", clock_seq_and_variant, 16)
        if not isinstance(node, int) or isinstance(node, bool):
            raise TypeError("node must be an integer")
        if not 0 <= node < (1 << 48):
            raise ValueError("node must be a 48-bit integer")
        d = clock_seq_and_variant.to_bytes(2, "big") + node.to_bytes(6, "big")
        return cls(time_low, time_mid, time_high_and_version, d)

    @classmethod
    def parse(cls, text: str) -> Guid:
        """Parse the canonical ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` form."""
        match = _CANONICAL.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid GUID: {text!r}")
        return cls.from_values(*(int(part, 16) for part in match.groups()))

    @classmethod
    def from_bytes(cls, data: bytes) -> Guid:
        """Decode the 16-byte in-memory layout."""
        if len(data) != _LAYOUT.size:
            raise ValueError(f"a GUID is {_LAYOUT.size} bytes, got {len(data)}")
        return cls(*_LAYOUT.unpack(bytes(data)))

    def to_bytes(self) -> bytes:
        """Encode to the 16-byte in-memory layout."""
        return _LAYOUT.pack(self.a, self.b, self.c, self.d)

    def __str__(self) -> str:
        clock = int.from_bytes(self.d[:2], "big")
        node = int.from_bytes(self.d[2:], "big")
        return f"{self.a:08x}-{self.b:04x}-{self.c:04x}-{clock:04x}-{node:012x}"


def unsafe_guid(text: str) -> Callable[[T], T]:
    """Class decorator attaching a GUID, parsed from ``text``, as ``GUID``."""
    guid = Guid.parse(text)

    def decorate(cls: T) -> T:
        setattr(cls, "GUID", guid)
        return cls

    return decorate