"""Certificate information reported for a TLS connection."""

from __future__ import annotations

from typing import Iterable, Iterator

__all__ = ["CertInfo"]


class CertInfo:
    """An ordered list of certificate description lines."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def __getitem__(self, pos: int) -> str:
        return self._entries[pos]

    def __setitem__(self, pos: int, value: str) -> None:
        self._entries[pos] = value

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: str) -> None:
        """Add an entry at the end."""
        self._entries.append(entry)

    def pop(self) -> str:
        """Remove and return the last entry."""
        return self._entries.pop()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CertInfo):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"CertInfo({self._entries!r})"