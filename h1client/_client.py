# This contains the main HTTPClient class. Everything in h1client revolves
# around this.
#
# A request goes through the following steps, and stops at the first one
# that fails:
#
#   merge headers/cookies -> format -> [resolve] -> connect -> send
#     -> receive -> parse -> update the cookie jar -> disconnect
#
# Every request gets a brand new TCP connection, which is closed before
# request() returns, whatever happened. The only things that carry over from
# one request to the next are the resolved address, the default headers and
# the cookie jar. None of that is locked, so if you share a client between
# threads, serialize the calls yourself.

import logging
import socket

from ._codes import OK, SOCKET_CONNECT, SUBSYSTEM_INIT
from ._connection import (
    open_connection, close_connection, send_all, receive_all,
    RECV_BUFFER_SIZE,
)
from ._cookies import CookieJar, merge_defaults
from ._models import Request, Response
from ._readers import parse_response
from ._resolver import resolve_host
from ._subsystem import is_started
from ._writers import format_request, HTTP_VERSION

# Everything in __all__ gets re-exported as part of the h1client public API.
__all__ = ["HTTPClient"]

_LOGGER = logging.getLogger(__name__)


# Header names may come in as str or bytes; either way they end up as
# lower-cased str, decoded the same way response headers are.
def _lowercase_keys(headers):
    lowered = {}
    for name, value in headers.items():
        if not isinstance(name, str):
            name = bytes(name).decode("iso-8859-1")
        lowered[name.lower()] = value
    return lowered


class HTTPClient:
    """A blocking HTTP/1.1 client for a single host.

    Creating a client doesn't touch the network. The host is resolved the
    first time it is needed (or when you call :meth:`resolve`), and the
    result is reused from then on.

    Every request automatically carries a ``host`` header, and every cookie
    any earlier response on this client has set.

    """

    def __init__(self, host, port, *,
                 recv_buffer_size=RECV_BUFFER_SIZE,
                 socket_factory=socket.socket):
        if recv_buffer_size < 2:
            raise ValueError(
                "recv_buffer_size must be at least 2, not {!r}"
                .format(recv_buffer_size))
        self.host = host
        self.port = port
        self._recv_buffer_size = recv_buffer_size
        self._socket_factory = socket_factory
        self._address = None
        self._system_headers = {"host": "{}:{}".format(host, port)}
        self._cookie_jar = CookieJar()
        self.last_response = None

    @property
    def address(self):
        return self._address

    @property
    def system_headers(self):
        return dict(self._system_headers)

    @property
    def cookies(self):
        return self._cookie_jar.as_dict()

    def resolve(self):
        """Resolve the target host now. Returns the result code."""
        code, address = resolve_host(self.host, self.port)
        if code is OK:
            self._address = address
        return code

    def _build_request(self, method, path, query_params, body, content_type,
                       headers, cookies):
        headers = merge_defaults(_lowercase_keys(headers or {}),
                                 self._system_headers)
        cookies = self._cookie_jar.merge(cookies or {})
        return Request(method, path, query_params or (), body, content_type,
                       headers, cookies)

    def request(self, method, path, query_params=None, body=b"",
                content_type="", headers=None, cookies=None):
        """Send one request and read back the response.

        Returns a ``(code, response)`` pair. On success *code* is
        :data:`OK` and *response* is the parsed :class:`Response`; on failure
        *code* says what went wrong and *response* is ``None``.

        """
        if not is_started():
            _LOGGER.error("Network subsystem is not started")
            return SUBSYSTEM_INIT, None

        request = self._build_request(method, path, query_params, body,
                                      content_type, headers, cookies)
        data = format_request(request, HTTP_VERSION)

        if self._address is None:
            code = self.resolve()
            if code is not OK:
                return code, None

        sock = open_connection(self._address, self._socket_factory)
        if sock is None:
            _LOGGER.error("Couldn't connect to HTTP server %s:%s",
                          self.host, self.port)
            return SOCKET_CONNECT, None

        try:
            code = send_all(sock, data)
            if code is not OK:
                _LOGGER.error("Couldn't send HTTP request, errcode: %r", code)
                return code, None

            response = Response()
            code, raw = receive_all(sock, self._recv_buffer_size)
            if code is not OK:
                _LOGGER.error("Couldn't receive HTTP response, errcode: %r",
                              code)
                return code, None
            code, response = parse_response(raw, response)

            _LOGGER.debug("Raw response:\n%s", response.get_raw())

            self._cookie_jar.update(response.cookies)
            self.last_response = response
            return OK, response
        finally:
            close_connection(sock)
