"""HTTP cookies and their encoding into a Cookie request header."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator

from .encoding import url_encode

__all__ = ["Cookie", "Cookies"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class Cookie:
    """A single cookie with its attributes; ``expires`` defaults to the Unix epoch."""

    name: str
    value: str
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = field(default=_EPOCH)

    def expires_string(self) -> str:
        """Format ``expires`` as an HTTP date, e.g. ``Thu, 01 Jan 1970 00:00:00 GMT``."""
        moment = self.expires
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        moment = moment.astimezone(timezone.utc)
        return (
            f"{_DAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
            f"{moment.year:04d} {moment:%H:%M:%S} GMT"
        )

    def _is_quoted(self) -> bool:
        return bool(self.value) and self.value.startswith('"') and self.value.endswith('"')


class Cookies:
    """An ordered list of cookies, URL-encoded on output unless ``encode`` is False."""

    def __init__(self, cookies: Cookie | Iterable[Cookie] = (), encode: bool = True) -> None:
        self.encode = encode
        if isinstance(cookies, Cookie):
            cookies = (cookies,)
        self._cookies: list[Cookie] = list(cookies)

    def __getitem__(self, pos: int) -> Cookie:
        return self._cookies[pos]

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def append(self, cookie: Cookie) -> None:
        """Add a cookie at the end."""
        self._cookies.append(cookie)

    def pop(self) -> Cookie:
        """Remove and return the last cookie."""
        return self._cookies.pop()

    def encoded(self) -> str:
        """Render every cookie as ``name=value; ``.

        Values wrapped in double quotes (version 1 cookies) are never encoded.
        """
        parts = []
        for cookie in self._cookies:
            name = url_encode(cookie.name) if self.encode else cookie.name
            if cookie._is_quoted() or not self.encode:
                value = cookie.value
            else:
                value = url_encode(cookie.value)
            parts.append(f"{name}={value}; ")
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookies):
            return NotImplemented
        return self.encode == other.encode and self._cookies == other._cookies

    def __repr__(self) -> str:
        return f"Cookies({self._cookies!r}, encode={self.encode!r})"