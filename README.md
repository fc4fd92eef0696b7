# reqopts

Building blocks for an HTTP client. The package holds the option types a
request is made of, the error codes a transfer can end in, a future wrapper
that supports cooperative cancellation, and base classes for interceptors.

## Installing

```
pip install reqopts
```

To run the test suite:

```
pip install "reqopts[test]"
pytest
```

## What is inside

- `reqopts.encoding`: `url_encode` percent-encodes every UTF-8 byte except
  ASCII letters, digits and `-._~`; `url_decode` turns `%XX` escapes back
  into bytes and leaves `+` as it is.
- `reqopts.containers`: `Parameters` (query string) and `Payload` (form
  body), ordered lists of `Parameter` and `Pair` items that can also be given
  as `(key, value)` tuples. `content()` joins them with `&`; set `encode` to
  `False` to leave keys and values as they are. A `Parameter` with an empty
  value renders as the bare key; a `Pair` only ever encodes its value.
  `case_insensitive_less` orders two strings ignoring ASCII case.
- `reqopts.accept_encoding`: `AcceptEncoding` and `AcceptEncodingMethod`.
  `str()` joins the methods with `, `; `disabled()` raises `ValueError` when
  `disabled` is mixed with other encodings.
- `reqopts.errors`: `CurlCode`, `ErrorCode` and `Error`.
  `error_code_for_curl` and `Error.from_curl_code` map a transfer result code
  to an `ErrorCode`, with `UNKNOWN_ERROR` for codes it does not know. An
  `Error` is true when its code is not `OK`.
- `reqopts.options`: `ConnectTimeout` (an int is taken as milliseconds),
  `Range` and `MultiRange` (a negative bound is left open), `ReserveSize`,
  `Resolve` (ports 80 and 443 when none are given) and `Proxies` (a missing
  protocol reads as an empty string).
- `reqopts.auth`: `Authentication` with `AuthMode`, and `Bearer`. Both can be
  used as context managers and wipe the credential on exit, or on `clear()`.
- `reqopts.cookies`: `Cookie` and `Cookies`. `Cookie.expires_string()` gives
  an HTTP date; `Cookies.encoded()` gives the `Cookie:` header value, never
  encoding values wrapped in double quotes.
- `reqopts.cert_info`: `CertInfo`, a list of certificate description lines.
- `reqopts.files`: `File`, `Files` and `Body`. `Body.from_file` reads a whole
  file and raises `ValueError` if it cannot be opened.
- `reqopts.callback`: `CancellationCallback`, a progress callback that
  returns `False` once its `threading.Event` is set, and otherwise defers to
  an optional user callback.
- `reqopts.async_wrapper`: `AsyncWrapper` around a
  `concurrent.futures.Future`, with `CancellationResult` and `FutureStatus`.
  Given a `cancelled` event it can be cancelled, and closing it cancels the
  request. `get`, `wait`, `wait_for` and `wait_until` raise `RuntimeError`
  on a cancelled or already-consumed wrapper.
- `reqopts.interceptor`: `Interceptor` and `InterceptorMulti` abstract base
  classes and `ProceedHttpMethod`. `Interceptor.proceed` calls the matching
  method (`get`, `post`, `download`, ...) on whatever session object it is
  given, and raises `ValueError` for a method and target that do not fit.

## A short tour

```python
from reqopts.containers import Parameters, Payload
from reqopts.options import Range, MultiRange
from reqopts.auth import Authentication, AuthMode
from reqopts.errors import Error, ErrorCode

params = Parameters([("key1", "hello"), ("key2", "world")])
params.content()                 # 'key1=hello&key2=world'

payload = Payload([("x", "a b")])
payload.content()                # 'x=a%20b'

str(MultiRange(Range(1, 3), Range(5, None)))   # '1-3, 5-'

Error.from_curl_code(6).code     # ErrorCode.COULDNT_RESOLVE_HOST

password = "password"
with Authentication("user", password, AuthMode.BASIC) as auth:
    auth.auth_string             # 'user:password'
```

Wrapping a future so it can be cancelled:

```python
import threading
from concurrent.futures import ThreadPoolExecutor
from reqopts.async_wrapper import AsyncWrapper, CancellationResult

with ThreadPoolExecutor() as pool:
    wrapper = AsyncWrapper(pool.submit(sum, [1, 2, 3]), threading.Event())
    wrapper.get()                # 6
```

## What this package does not do

It sends no requests. There is no session or transfer engine here: the option
types describe a request, the error codes describe how one ended, and the
interceptor classes expect a session object supplied by the caller. Nor does
it run work in the background itself; `AsyncWrapper` wraps futures that you
create with an executor of your own.