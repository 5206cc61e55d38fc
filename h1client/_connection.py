# One TCP session, used for exactly one request/response exchange.
#
# These are thin wrappers around the blocking socket API whose only job is to
# turn OSError into result codes, and to implement the two loops the socket
# API doesn't give us directly: "keep writing until everything is out", and
# "keep reading until the peer is done".
#
# There are no timeouts here: if the peer hangs, so do we.

import socket

from ._codes import OK, SOCKET_SEND, SOCKET_RECV

__all__ = [
    "open_connection", "close_connection", "send_all", "receive_all",
    "RECV_BUFFER_SIZE",
]

# Size of the receive chunk. The last byte of each chunk is reserved, so each
# read asks for at most RECV_BUFFER_SIZE - 1 bytes -- and a read that comes
# back with fewer than that is taken to mean the response is complete.
RECV_BUFFER_SIZE = 256


def open_connection(address, socket_factory=socket.socket):
    """Open a TCP connection to *address*.

    Returns the connected socket, or ``None`` if either creating the socket
    or connecting it failed. A socket that was created but couldn't connect
    is closed before returning.

    """
    try:
        sock = socket_factory(address.family, address.type, address.proto)
    except OSError:
        return None

    try:
        sock.connect(address.sockaddr)
    except OSError:
        sock.close()
        return None

    return sock


def close_connection(sock):
    # Safe to call on any socket we handed out, whatever state it's in.
    sock.close()


def send_all(sock, data):
    """Write all of *data* to *sock*, one partial write at a time.

    Returns :data:`OK`, or :data:`SOCKET_SEND` as soon as any single write
    fails. Whatever was written before the failure stays written.

    """
    view = memoryview(data)
    while view:
        try:
            sent = sock.send(view)
        except OSError:
            return SOCKET_SEND
        view = view[sent:]
    return OK


def receive_all(sock, bufsize=RECV_BUFFER_SIZE):
    """Read a whole response off *sock*.

    Returns a ``(code, raw)`` pair. Reads chunks until one comes back short
    (including the empty read we get when the peer closes), which only works
    because the peer either closes the connection or sends less than one
    chunk once it's done -- keep-alive peers will make this hang.

    *bufsize* must be at least 2, since one byte of every chunk is reserved.

    """
    if bufsize < 2:
        raise ValueError(
            "bufsize must be at least 2, not {!r}".format(bufsize))
    chunk_size = bufsize - 1
    chunks = []
    while True:
        try:
            chunk = sock.recv(chunk_size)
        except OSError:
            return SOCKET_RECV, None
        chunks.append(chunk)
        if len(chunk) != chunk_size:
            break
    return OK, b"".join(chunks)
