"""Small request options: timeouts, byte ranges, host resolution and proxies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Mapping

__all__ = [
    "ConnectTimeout",
    "Range",
    "MultiRange",
    "ReserveSize",
    "Resolve",
    "Proxies",
]


@dataclass(frozen=True)
class ConnectTimeout:
    """Time allowed for the connection phase; an int is taken as milliseconds."""

    duration: timedelta

    def __post_init__(self) -> None:
        if not isinstance(self.duration, timedelta):
            object.__setattr__(self, "duration", timedelta(milliseconds=self.duration))


@dataclass
class Range:
    """A byte range; a negative bound is left open."""

    resume_from: int | None = None
    finish_at: int | None = None

    def __post_init__(self) -> None:
        if self.resume_from is None:
            self.resume_from = 0
        if self.finish_at is None:
            self.finish_at = -1

    def __str__(self) -> str:
        start = "" if self.resume_from < 0 else str(self.resume_from)
        end = "" if self.finish_at < 0 else str(self.finish_at)
        return f"{start}-{end}"


class MultiRange:
    """Several byte ranges requested together."""

    def __init__(self, *args: Range) -> None:
        self.ranges: tuple[Range, ...] = args

    def __str__(self) -> str:
        return ", ".join(str(r) for r in self.ranges)

    def __repr__(self) -> str:
        return f"MultiRange{self.ranges!r}"


@dataclass
class ReserveSize:
    """Number of characters to reserve for the response text."""

    size: int


_DEFAULT_PORTS = frozenset({80, 443})


@dataclass
class Resolve:
    """Pin a host name to an address for the given ports (80 and 443 by default)."""

    host: str
    addr: str
    ports: Iterable[int] | None = field(default=None)

    def __post_init__(self) -> None:
        ports = frozenset(self.ports or ())
        for port in ports:
            if not 0 <= port <= 0xFFFF:
                raise ValueError(f"port out of range: {port}")
        self.ports = ports or _DEFAULT_PORTS


class Proxies:
    """Proxy hosts keyed by protocol; missing protocols read as an empty string."""

    def __init__(self, hosts: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._hosts: dict[str, str] = dict(hosts or {})

    def __contains__(self, protocol: object) -> bool:
        return protocol in self._hosts

    def __getitem__(self, protocol: str) -> str:
        return self._hosts.get(protocol, "")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Proxies):
            return NotImplemented
        return self._hosts == other._hosts

    def __repr__(self) -> str:
        return f"Proxies({self._hosts!r})"