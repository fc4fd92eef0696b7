"""The Accept-Encoding request option."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

__all__ = ["AcceptEncodingMethod", "AcceptEncoding"]


class AcceptEncodingMethod(str, Enum):
    """Content encodings known by name."""

    IDENTITY = "identity"
    DEFLATE = "deflate"
    ZLIB = "zlib"
    GZIP = "gzip"
    DISABLED = "disabled"


class AcceptEncoding:
    """A set of accepted content encodings, given as methods or plain strings."""

    def __init__(self, methods: Iterable[AcceptEncodingMethod | str] = ()) -> None:
        self._methods: dict[str, None] = dict.fromkeys(
            m.value if isinstance(m, AcceptEncodingMethod) else str(m) for m in methods
        )

    def __bool__(self) -> bool:
        return bool(self._methods)

    def __str__(self) -> str:
        return ", ".join(self._methods)

    def __repr__(self) -> str:
        return f"AcceptEncoding({list(self._methods)!r})"

    def disabled(self) -> bool:
        """Return True if encoding is switched off.

        Raises ValueError when ``disabled`` is combined with other encodings.
        """
        if AcceptEncodingMethod.DISABLED.value not in self._methods:
            return False
        if len(self._methods) != 1:
            raise ValueError(
                "AcceptEncoding does not accept any other values if 'disabled' is present. "
                f"You set the following encodings: {self}"
            )
        return True