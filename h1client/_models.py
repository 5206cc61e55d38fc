# The two records that flow through a request: what we're about to put on the
# wire, and what we got back. Both are plain data; all the interesting logic
# lives in _writers.py and _readers.py.

__all__ = ["Request", "Response"]


class Request:
    """An outgoing HTTP request, built fresh for every call.

    Fields:

    .. attribute:: method

       The HTTP method, e.g. ``"GET"``.

    .. attribute:: path

       The request path, without any query string, e.g. ``"/index.html"``.

    .. attribute:: query_params

       Query parameters, as a list of ``(key, value)`` pairs. A mapping is
       accepted too, and converted to a list in iteration order.

    .. attribute:: body

       The request body. Empty means "no body", in which case neither
       ``content-length`` nor ``content-type`` is sent.

    .. attribute:: content_type

       Sent as ``content-type`` whenever there is a body.

    .. attribute:: headers

       Request headers, as a dict mapping lower-cased names to values.

    .. attribute:: cookies

       Cookies to send, as a dict mapping names to values. These all go out
       in a single ``cookie:`` header.

    """

    __slots__ = ("method", "path", "query_params", "body", "content_type",
                 "headers", "cookies")

    def __init__(self, method, path, query_params=(), body=b"",
                 content_type="", headers=None, cookies=None):
        self.method = method
        self.path = path
        if hasattr(query_params, "items"):
            query_params = query_params.items()
        self.query_params = list(query_params)
        self.body = body
        self.content_type = content_type
        self.headers = {} if headers is None else dict(headers)
        self.cookies = {} if cookies is None else dict(cookies)

    def __repr__(self):
        return ("{}(method={!r}, path={!r}, query_params={!r}, body={!r}, "
                "content_type={!r}, headers={!r}, cookies={!r})".format(
                    self.__class__.__name__,
                    self.method,
                    self.path,
                    self.query_params,
                    self.body,
                    self.content_type,
                    self.headers,
                    self.cookies,
                ))

    # Useful for tests
    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in self.__slots__)

    # This is an unhashable type.
    __hash__ = None


class Response:
    """A parsed HTTP response.

    Fields:

    .. attribute:: http_version

       The protocol version from the status line, e.g. ``"HTTP/1.1"``.

    .. attribute:: status_code

       The numeric status code, e.g. ``200``. ``0`` if the status line didn't
       contain one.

    .. attribute:: status

       The *first word* of the reason phrase -- ``"OK"`` for ``200 OK``, but
       also just ``"Not"`` for ``404 Not Found``.

    .. attribute:: headers

       Response headers, as a dict mapping lower-cased names to values. The
       last occurrence of a repeated header wins. ``set-cookie`` never shows
       up here; see :attr:`cookies`.

    .. attribute:: cookies

       The ``name=value`` part of each ``set-cookie`` header, as a dict.
       Attributes like ``Path`` or ``Expires`` are dropped.

    .. attribute:: body

       The response body, as a byte string.

    .. attribute:: raw

       Everything we read off the socket, unparsed, as a byte string. Kept
       around for debugging.

    """

    __slots__ = ("http_version", "status_code", "status", "headers",
                 "cookies", "body", "raw")

    def __init__(self):
        self.reset()

    def reset(self):
        self.http_version = ""
        self.status_code = 0
        self.status = ""
        self.headers = {}
        self.cookies = {}
        self.body = b""
        self.raw = b""

    def get_raw(self):
        # latin-1 maps every byte to a code point, so this never fails
        return self.raw.decode("iso-8859-1")

    def __repr__(self):
        return ("{}(http_version={!r}, status_code={!r}, status={!r}, "
                "headers={!r}, cookies={!r}, body={!r})".format(
                    self.__class__.__name__,
                    self.http_version,
                    self.status_code,
                    self.status,
                    self.headers,
                    self.cookies,
                    self.body,
                ))

    # Useful for tests
    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in self.__slots__)

    # This is an unhashable type.
    __hash__ = None
