# Code to parse HTTP responses.
#
# Strategy: split the raw bytes into lines on CRLF and run them through a
# three-state machine:
#
#   STATUS  -> the first line is the status line, then always go to HEADERS
#   HEADERS -> one header per line, until a blank line sends us to BODY
#   BODY    -> everything else is body
#
# This parser never fails. Malformed input just gives a less useful Response:
# header lines without a colon are skipped, an unparseable status code is 0,
# and so on.
#
# Two quirks are deliberate and things downstream rely on them:
#
# - Only the first word of the reason phrase is kept ("404 Not Found" gives
#   status "Not").
# - Header values start two characters after the colon, i.e. we assume
#   exactly one space after the colon. "Foo:bar" gives the value "ar".

import re

from ._codes import OK
from ._models import Response
from ._util import Sentinel, parse_int_prefix

__all__ = ["parse_response"]

_STATUS = Sentinel("STATUS")
_HEADERS = Sentinel("HEADERS")
_BODY = Sentinel("BODY")

_CRLF = b"\r\n"

_status_code_re = re.compile(r"[+-]?\d+")


def _decode(line):
    return line.decode("iso-8859-1")


def _read_status_line(line, response):
    # "HTTP/1.1 200 OK" -> version, code, first word of the reason
    tokens = _decode(line).split()
    if not tokens:
        return
    response.http_version = tokens[0]
    if len(tokens) < 2:
        return
    # The code is the leading digits of the second word; whatever follows
    # them in that word ("200abc") is read as the status text.
    match = _status_code_re.match(tokens[1])
    if match is None:
        return
    response.status_code = int(match.group(0))
    rest = tokens[1][match.end():]
    if rest:
        response.status = rest
    elif len(tokens) >= 3:
        response.status = tokens[2]


def _read_set_cookie(value, response):
    # "name=value; Path=/; HttpOnly" -> {"name": "value"}
    name, sep, cookie_value = value.partition("=")
    if not sep:
        return
    cookie_value = cookie_value.split(";", 1)[0]
    response.cookies[name] = cookie_value


# Returns the content-length announced by this line, or None.
def _read_header_line(line, response):
    text = _decode(line)
    pos = text.find(":")
    if pos == -1:
        return None
    name = text[:pos].lower()
    value = text[pos + 2:]

    if name == "set-cookie":
        _read_set_cookie(value, response)
        return None

    response.headers[name] = value
    if name == "content-length":
        return parse_int_prefix(value)
    return None


def parse_response(raw, response=None):
    """Parse the raw bytes of an HTTP response.

    Fills in *response* (a fresh :class:`Response` if not given), with
    :attr:`Response.raw` set to *raw*. Returns a ``(code, response)`` pair;
    the code is always :data:`OK`.

    """
    if response is None:
        response = Response()
    response.raw = raw

    state = _STATUS
    content_length = 0
    body = bytearray()

    for line in raw.split(_CRLF):
        if state is _STATUS:
            _read_status_line(line, response)
            state = _HEADERS
        elif state is _HEADERS:
            if not line:
                state = _BODY
                continue
            length = _read_header_line(line, response)
            if length is not None:
                content_length = length
        else:
            # The split ate the CRLFs inside the body; put them back for as
            # long as we're still short of the announced content-length.
            body += line
            if len(body) < content_length:
                body += _CRLF

    response.body = bytes(body)
    return OK, response
