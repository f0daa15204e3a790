"""A value holder that can be assigned only once."""

from __future__ import annotations

from typing import Any

_UNSET = object()


class SetOnce:
    """Hold a value that, once given, never changes."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"SetOnce takes at most one value, got {len(args)}")
        self._value: Any = args[0] if args else _UNSET

    @property
    def value(self) -> Any:
        """The stored value, or None before it is set."""
        return None if self._value is _UNSET else self._value

    def set(self, value: Any) -> bool:
        """Store ``value`` if nothing is stored yet; tell whether it was stored."""
        if self._value is not _UNSET:
            return False
        self._value = value
        return True

    def is_set(self) -> bool:
        """Tell whether a value has been stored."""
        return self._value is not _UNSET

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SetOnce):
            return self.value == other.value
        return self.value == other

    def __repr__(self) -> str:
        return f"SetOnce({self.value!r})" if self.is_set() else "SetOnce()"