"""Hooks that wrap a request and decide how, or whether, it goes ahead."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, Callable, Optional

__all__ = ["ProceedHttpMethod", "Interceptor", "InterceptorMulti"]


class ProceedHttpMethod(Enum):
    """The request an interceptor can send a session on with."""

    GET_REQUEST = 0
    POST_REQUEST = auto()
    PUT_REQUEST = auto()
    DELETE_REQUEST = auto()
    PATCH_REQUEST = auto()
    HEAD_REQUEST = auto()
    OPTIONS_REQUEST = auto()
    DOWNLOAD_CALLBACK_REQUEST = auto()
    DOWNLOAD_FILE_REQUEST = auto()


_SESSION_CALLS: dict[ProceedHttpMethod, str] = {
    ProceedHttpMethod.DELETE_REQUEST: "delete",
    ProceedHttpMethod.GET_REQUEST: "get",
    ProceedHttpMethod.HEAD_REQUEST: "head",
    ProceedHttpMethod.OPTIONS_REQUEST: "options",
    ProceedHttpMethod.PATCH_REQUEST: "patch",
    ProceedHttpMethod.POST_REQUEST: "post",
    ProceedHttpMethod.PUT_REQUEST: "put",
}


class Interceptor(ABC):
    """Wraps a single session's request.

    Subclasses implement ``intercept`` and call ``proceed`` to go on down the chain.
    """

    ProceedHttpMethod = ProceedHttpMethod

    @abstractmethod
    def intercept(self, session: Any) -> Any:
        """Handle the request of *session* and return its response."""

    @staticmethod
    def proceed(
        session: Any,
        method: Optional[ProceedHttpMethod] = None,
        target: Any = None,
    ) -> Any:
        """Continue the request.

        Without *method* the session repeats the request it was making.
        *target* is a write callback for ``DOWNLOAD_CALLBACK_REQUEST`` or a
        writable file for ``DOWNLOAD_FILE_REQUEST``; any other combination
        raises ValueError.
        """
        if method is None:
            if target is not None:
                raise ValueError("A download target needs a download http method!")
            return session.proceed()
        if target is None:
            call = _SESSION_CALLS.get(method)
            if call is None:
                raise ValueError("Can't proceed the session with the provided http method!")
            return getattr(session, call)()
        if callable(target):
            if method is not ProceedHttpMethod.DOWNLOAD_CALLBACK_REQUEST:
                raise ValueError(
                    "WriteCallback argument is only valid for ProceedHttpMethod.DOWNLOAD_CALLBACK!"
                )
        elif method is not ProceedHttpMethod.DOWNLOAD_FILE_REQUEST:
            raise ValueError(
                "File argument is only valid for ProceedHttpMethod.DOWNLOAD_FILE!"
            )
        return session.download(target)


class InterceptorMulti(ABC):
    """Wraps a batch of requests performed together."""

    ProceedHttpMethod = ProceedHttpMethod

    @abstractmethod
    def intercept(self, multi: Any) -> list:
        """Handle the batch and return one response per session."""

    @staticmethod
    def proceed(multi: Any) -> list:
        """Continue the batch down the chain."""
        return multi.proceed()

    @staticmethod
    def prepare_download_session(multi: Any, index: int, write: Callable[..., bool]) -> None:
        """Turn the session at *index* into a download feeding *write*."""
        multi.prepare_download_sessions(index, write)