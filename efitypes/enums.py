"""Integer newtypes with named values, modelling C-style enumerations.

Unlike :class:`enum.Enum`, a :class:`NewtypeEnum` accepts any integer, so
values that have no name survive a round trip unchanged.
"""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = ["NewtypeEnum"]


class NewtypeEnum:
    """Base class for C-style enumerations.

    Subclasses declare their variants as integer class attributes::

        class UnixBool(NewtypeEnum):
            FALSE = 0
            TRUE = 1
            FILE_NOT_FOUND = -1

    Each attribute is replaced by an instance of the subclass.
    """

    __slots__ = ("_value",)

    _variants: ClassVar[dict[str, Any]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        variants: dict[str, NewtypeEnum] = {}
        for name, value in list(vars(cls).items()):
            if name.startswith("_"):
                continue
            if isinstance(value, int) and not isinstance(value, bool):
                instance = cls(value)
                setattr(cls, name, instance)
                variants[name] = instance
        cls._variants = variants

    def __init__(self, value: int) -> None:
        if isinstance(value, NewtypeEnum):
            value = value._value
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{type(self).__name__} value must be an integer")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> int:
        """The underlying integer."""
        return self._value

    def __repr__(self) -> str:
        for name, variant in type(self)._variants.items():
            if variant._value == self._value:
                return name
        return f"{type(self).__name__}({self._value})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __int__(self) -> int:
        return self._value