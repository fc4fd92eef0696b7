from datetime import datetime, timedelta, timezone

import pytest

from reqopts.cookies import Cookie, Cookies
from reqopts.encoding import url_encode

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_cookie_defaults():
    cookie = Cookie("SID", "31d4d96e407aad42")
    assert cookie.domain == ""
    assert cookie.path == "/"
    assert cookie.include_subdomains is False
    assert cookie.https_only is False
    assert cookie.expires == EPOCH


def test_cookie_attributes_kept():
    expires = EPOCH + timedelta(seconds=3905119080)
    cookie = Cookie("lang", "en-US", "127.0.0.1", False, "/", True, expires)
    assert cookie.name == "lang"
    assert cookie.value == "en-US"
    assert cookie.domain == "127.0.0.1"
    assert cookie.https_only is True
    assert cookie.expires == expires


def test_expires_string_epoch():
    assert Cookie("a", "b").expires_string() == "Thu, 01 Jan 1970 00:00:00 GMT"


def test_expires_string_round_trip():
    expires = EPOCH + timedelta(seconds=3905119080)
    text = Cookie("SID", "x", expires=expires).expires_string()
    parsed = datetime.strptime(text, "%a, %d %b %Y %H:%M:%S GMT").replace(tzinfo=timezone.utc)
    assert parsed == expires
    assert text.endswith(" GMT")


def test_naive_expires_treated_as_utc():
    aware = datetime(2030, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    naive = aware.replace(tzinfo=None)
    assert Cookie("a", "b", expires=naive).expires_string() == Cookie("a", "b", expires=aware).expires_string()


def test_expires_string_converts_other_zones():
    aware = datetime(2030, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    shifted = aware.astimezone(timezone(timedelta(hours=5)))
    assert Cookie("a", "b", expires=shifted).expires_string() == Cookie("a", "b", expires=aware).expires_string()


def test_encoded_plain_values():
    cookies = Cookies([Cookie("SID", "31d4d96e407aad42"), Cookie("lang", "en-US")])
    assert cookies.encoded() == "SID=31d4d96e407aad42; lang=en-US; "


def test_encoded_escapes_name_and_value():
    cookies = Cookies(Cookie("my key", "a b;c"))
    assert cookies.encoded() == f"{url_encode('my key')}={url_encode('a b;c')}; "


def test_encoding_disabled_keeps_raw_text():
    name, value = "my key", "a b;c"
    cookies = Cookies(Cookie(name, value), encode=False)
    assert cookies.encoded() == name + "=" + value + "; "


def test_quoted_value_is_not_encoded():
    value = '"a b"'
    cookies = Cookies(Cookie("v1", value))
    assert cookies.encoded().split("=", 1)[1] == value + "; "


def test_empty_cookies():
    cookies = Cookies()
    assert len(cookies) == 0
    assert not cookies
    assert cookies.encoded() == ""


def test_list_operations():
    first = Cookie("a", "1")
    second = Cookie("b", "2")
    cookies = Cookies(first)
    cookies.append(second)
    assert len(cookies) == 2
    assert cookies[0] == first
    assert cookies[1] == second
    assert list(cookies) == [first, second]
    assert cookies.pop() == second
    assert list(cookies) == [first]


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Cookies()[0]