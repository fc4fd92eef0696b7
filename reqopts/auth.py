"""Credentials attached to a request."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["AuthMode", "Authentication", "Bearer"]


class AuthMode(Enum):
    """HTTP authentication schemes."""

    BASIC = auto()
    DIGEST = auto()


class Authentication:
    """A ``user:password`` credential for the chosen scheme.

    Used as a context manager, the credential is wiped on exit.
    """

    __slots__ = ("_auth_string", "_auth_mode")

    def __init__(self, username: str, password: str, auth_mode: AuthMode) -> None:
        self._auth_string = f"{username}:{password}"
        self._auth_mode = auth_mode

    @property
    def auth_string(self) -> str:
        return self._auth_string

    @property
    def auth_mode(self) -> AuthMode:
        return self._auth_mode

    def clear(self) -> None:
        """Drop the stored credential."""
        self._auth_string = ""

    def __enter__(self) -> "Authentication":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()

    def __repr__(self) -> str:
        return f"Authentication(auth_mode={self._auth_mode.name})"


class Bearer:
    """A bearer token; wiped on exit when used as a context manager."""

    __slots__ = ("_token",)

    def __init__(self, token: str) -> None:
        self._token = token

    @property
    def token(self) -> str:
        return self._token

    def clear(self) -> None:
        """Drop the stored token."""
        self._token = ""

    def __enter__(self) -> "Bearer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()

    def __repr__(self) -> str:
        return "Bearer(...)"