"""Ordered key/value collections rendered as URL query or form content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Iterable, Iterator, TypeVar

from .encoding import url_encode

__all__ = [
    "Parameter",
    "Pair",
    "CurlContainer",
    "Parameters",
    "Payload",
    "case_insensitive_less",
]


@dataclass(frozen=True)
class Parameter:
    """A query parameter; an empty value renders as the bare key."""

    key: str
    value: str

    def _render(self, encode: bool) -> str:
        key = url_encode(self.key) if encode else self.key
        if not self.value:
            return key
        value = url_encode(self.value) if encode else self.value
        return f"{key}={value}"


@dataclass(frozen=True)
class Pair:
    """A form field; only the value is ever encoded."""

    key: str
    value: str

    def _render(self, encode: bool) -> str:
        value = url_encode(self.value) if encode else self.value
        return f"{self.key}={value}"


T = TypeVar("T", Parameter, Pair)


class CurlContainer(Generic[T]):
    """An ordered list of parameters or pairs joined with ``&``."""

    element_type: ClassVar[type | None] = None

    def __init__(self, items: Iterable[Any] = (), encode: bool = True) -> None:
        self.encode = encode
        self._items: list[T] = []
        self.add(*items)

    def _coerce(self, item: Any) -> T:
        accepted = (self.element_type,) if self.element_type else (Parameter, Pair)
        if isinstance(item, accepted):
            return item
        if self.element_type is not None and isinstance(item, tuple) and len(item) == 2:
            return self.element_type(*item)
        raise TypeError(f"{type(self).__name__} cannot hold {item!r}")

    def add(self, *args: Any) -> None:
        """Append each argument, an element or a ``(key, value)`` tuple, in order."""
        self._items.extend(self._coerce(item) for item in args)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def content(self) -> str:
        """Render the elements as ``key=value`` joined by ``&``."""
        return "&".join(item._render(self.encode) for item in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, encode={self.encode!r})"


class Parameters(CurlContainer[Parameter]):
    """Query string parameters."""

    element_type = Parameter


class Payload(CurlContainer[Pair]):
    """URL-encoded form body."""

    element_type = Pair


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def case_insensitive_less(a: str, b: str) -> bool:
    """Order two strings lexicographically, ignoring ASCII case."""
    return a.translate(_ASCII_LOWER) < b.translate(_ASCII_LOWER)