"""Percent-encoding and decoding of URL components."""

from urllib.parse import quote, unquote_to_bytes

__all__ = ["url_encode", "url_decode"]


def url_encode(text: str) -> str:
    """Percent-encode every UTF-8 byte of *text* that is not an unreserved character.

    Unreserved characters are ASCII letters, digits and ``-._~``.
    """
    return quote(text, safe="")


def url_decode(text: str) -> str:
    """Turn every ``%XX`` escape in *text* back into its byte.

    A ``+`` is left as it is, and malformed escapes pass through unchanged.
    """
    return unquote_to_bytes(text).decode("utf-8", errors="replace")