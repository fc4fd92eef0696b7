"""Transfer error codes and the error value attached to responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

__all__ = ["CurlCode", "ErrorCode", "Error", "error_code_for_curl"]


class CurlCode(IntEnum):
    """Numeric result codes reported by the transfer engine."""

    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    FAILED_INIT = 2
    URL_MALFORMAT = 3
    NOT_BUILT_IN = 4
    COULDNT_RESOLVE_PROXY = 5
    COULDNT_RESOLVE_HOST = 6
    COULDNT_CONNECT = 7
    WEIRD_SERVER_REPLY = 8
    REMOTE_ACCESS_DENIED = 9
    HTTP2 = 16
    PARTIAL_FILE = 18
    QUOTE_ERROR = 21
    HTTP_RETURNED_ERROR = 22
    WRITE_ERROR = 23
    UPLOAD_FAILED = 25
    READ_ERROR = 26
    OUT_OF_MEMORY = 27
    OPERATION_TIMEDOUT = 28
    RANGE_ERROR = 33
    HTTP_POST_ERROR = 34
    SSL_CONNECT_ERROR = 35
    BAD_DOWNLOAD_RESUME = 36
    FILE_COULDNT_READ_FILE = 37
    FUNCTION_NOT_FOUND = 41
    ABORTED_BY_CALLBACK = 42
    BAD_FUNCTION_ARGUMENT = 43
    INTERFACE_FAILED = 45
    TOO_MANY_REDIRECTS = 47
    UNKNOWN_OPTION = 48
    SETOPT_OPTION_SYNTAX = 49
    GOT_NOTHING = 52
    SSL_ENGINE_NOTFOUND = 53
    SSL_ENGINE_SETFAILED = 54
    SEND_ERROR = 55
    RECV_ERROR = 56
    SSL_CERTPROBLEM = 58
    SSL_CIPHER = 59
    PEER_FAILED_VERIFICATION = 60
    BAD_CONTENT_ENCODING = 61
    FILESIZE_EXCEEDED = 63
    USE_SSL_FAILED = 64
    SEND_FAIL_REWIND = 65
    SSL_ENGINE_INITFAILED = 66
    LOGIN_DENIED = 67
    SSL_CACERT_BADFILE = 77
    SSL_SHUTDOWN_FAILED = 80
    AGAIN = 81
    SSL_CRL_BADFILE = 82
    SSL_ISSUER_ERROR = 83
    CHUNK_FAILED = 88
    NO_CONNECTION_AVAILABLE = 89
    SSL_PINNEDPUBKEYNOTMATCH = 90
    SSL_INVALIDCERTSTATUS = 91
    HTTP2_STREAM = 92
    RECURSIVE_API_CALL = 93
    AUTH_ERROR = 94
    HTTP3 = 95
    QUIC_CONNECT_ERROR = 96
    PROXY = 97
    SSL_CLIENTCERT = 98
    UNRECOVERABLE_POLL = 99
    TOO_LARGE = 100


class ErrorCode(IntEnum):
    """Error kinds relevant to HTTP transfers."""

    OK = 0
    UNSUPPORTED_PROTOCOL = auto()
    FAILED_INIT = auto()
    URL_MALFORMAT = auto()
    NOT_BUILT_IN = auto()
    COULDNT_RESOLVE_PROXY = auto()
    COULDNT_RESOLVE_HOST = auto()
    COULDNT_CONNECT = auto()
    WEIRD_SERVER_REPLY = auto()
    REMOTE_ACCESS_DENIED = auto()
    HTTP2 = auto()
    PARTIAL_FILE = auto()
    QUOTE_ERROR = auto()
    HTTP_RETURNED_ERROR = auto()
    WRITE_ERROR = auto()
    UPLOAD_FAILED = auto()
    READ_ERROR = auto()
    OUT_OF_MEMORY = auto()
    OPERATION_TIMEDOUT = auto()
    RANGE_ERROR = auto()
    HTTP_POST_ERROR = auto()
    SSL_CONNECT_ERROR = auto()
    BAD_DOWNLOAD_RESUME = auto()
    FILE_COULDNT_READ_FILE = auto()
    FUNCTION_NOT_FOUND = auto()
    ABORTED_BY_CALLBACK = auto()
    BAD_FUNCTION_ARGUMENT = auto()
    INTERFACE_FAILED = auto()
    TOO_MANY_REDIRECTS = auto()
    UNKNOWN_OPTION = auto()
    SETOPT_OPTION_SYNTAX = auto()
    GOT_NOTHING = auto()
    SSL_ENGINE_NOTFOUND = auto()
    SSL_ENGINE_SETFAILED = auto()
    SEND_ERROR = auto()
    RECV_ERROR = auto()
    SSL_CERTPROBLEM = auto()
    SSL_CIPHER = auto()
    PEER_FAILED_VERIFICATION = auto()
    BAD_CONTENT_ENCODING = auto()
    FILESIZE_EXCEEDED = auto()
    USE_SSL_FAILED = auto()
    SEND_FAIL_REWIND = auto()
    SSL_ENGINE_INITFAILED = auto()
    LOGIN_DENIED = auto()
    SSL_CACERT_BADFILE = auto()
    SSL_SHUTDOWN_FAILED = auto()
    AGAIN = auto()
    SSL_CRL_BADFILE = auto()
    SSL_ISSUER_ERROR = auto()
    CHUNK_FAILED = auto()
    NO_CONNECTION_AVAILABLE = auto()
    SSL_PINNEDPUBKEYNOTMATCH = auto()
    SSL_INVALIDCERTSTATUS = auto()
    HTTP2_STREAM = auto()
    RECURSIVE_API_CALL = auto()
    AUTH_ERROR = auto()
    HTTP3 = auto()
    QUIC_CONNECT_ERROR = auto()
    PROXY = auto()
    SSL_CLIENTCERT = auto()
    UNRECOVERABLE_POLL = auto()
    TOO_LARGE = auto()
    UNKNOWN_ERROR = 1000


_CURL_TO_ERROR: dict[int, ErrorCode] = {
    code: ErrorCode[code.name] for code in CurlCode
}


def error_code_for_curl(curl_code: int) -> ErrorCode:
    """Map a transfer result code to an ErrorCode, or UNKNOWN_ERROR."""
    return _CURL_TO_ERROR.get(curl_code, ErrorCode.UNKNOWN_ERROR)


@dataclass
class Error:
    """The outcome of a transfer; truthy when something went wrong."""

    code: ErrorCode = ErrorCode.OK
    message: str = ""

    @classmethod
    def from_curl_code(cls, curl_code: int, message: str = "") -> "Error":
        """Build an Error from a transfer result code."""
        return cls(error_code_for_curl(curl_code), message)

    def __bool__(self) -> bool:
        return self.code != ErrorCode.OK