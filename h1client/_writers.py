# Code to write HTTP requests.
#
# No validation happens here: whatever method, path or header names the
# caller hands us go on the wire exactly as given. The output layout is:
#
#   METHOD path[?k=v&k=v&] HTTP/1.1\r\n
#   name: value\r\n                        (one per header)
#   cookie: k=v;k=v;\r\n                    (if there are any cookies)
#   content-length: N\r\n                   (if there is a body)
#   content-type: T\r\n                     (if there is a body)
#   \r\n
#   body
#
# Note the trailing "&" on the query string and the trailing ";" on the
# cookie header. Servers we talk to have always accepted both.

from ._util import bytesify, bodyify, fieldify

__all__ = ["format_query", "format_request", "HTTP_VERSION"]

HTTP_VERSION = "HTTP/1.1"


def format_query(query_params):
    if not query_params:
        return b""
    out = [b"?"]
    for key, value in query_params:
        out += [bytesify(key), b"=", bytesify(value), b"&"]
    return b"".join(out)


def format_request(request, http_version=HTTP_VERSION):
    out = []
    write = out.append

    write(b"%s %s%s %s\r\n" % (
        bytesify(request.method),
        bytesify(request.path),
        format_query(request.query_params),
        bytesify(http_version),
    ))

    for name, value in request.headers.items():
        write(b"%s: %s\r\n" % (fieldify(name), fieldify(value)))

    if request.cookies:
        write(b"cookie: ")
        for name, value in request.cookies.items():
            write(b"%s=%s;" % (fieldify(name), fieldify(value)))
        write(b"\r\n")

    body = bodyify(request.body)
    if body:
        write(b"content-length: %d\r\n" % len(body))
        write(b"content-type: %s\r\n" % fieldify(request.content_type))

    write(b"\r\n")
    if body:
        write(body)

    return b"".join(out)
