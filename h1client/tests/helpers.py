import socket

from .._resolver import Address

# A stand-in for a connected socket. It replays a script instead of touching
# the network:
#
# - recv_script: what successive recv() calls return. Each entry is either a
#   bytes object, or an exception instance to raise. Once the script runs out,
#   recv() returns b"", like a peer that has closed the connection.
# - send_sizes: how many bytes successive send() calls accept. Each entry is
#   an int (capped at what was offered), or an exception instance to raise.
#   Once the script runs out, send() accepts everything.
# - connect_error: raised from connect(), if given.
#
# Everything that happens to the socket is recorded for the test to look at.
class FakeSocket:
    def __init__(self, recv_script=(), send_sizes=(), connect_error=None):
        self.recv_script = list(recv_script)
        self.send_sizes = list(send_sizes)
        self.connect_error = connect_error
        self.connected_to = None
        self.recv_sizes = []
        self.sent = bytearray()
        self.send_calls = 0
        self.closed = False

    def connect(self, sockaddr):
        if self.connect_error is not None:
            raise self.connect_error
        self.connected_to = sockaddr

    def send(self, data):
        self.send_calls += 1
        data = bytes(data)
        if self.send_sizes:
            size = self.send_sizes.pop(0)
            if isinstance(size, BaseException):
                raise size
            data = data[:size]
        self.sent += data
        return len(data)

    def recv(self, bufsize):
        self.recv_sizes.append(bufsize)
        if not self.recv_script:
            return b""
        chunk = self.recv_script.pop(0)
        if isinstance(chunk, BaseException):
            raise chunk
        assert len(chunk) <= bufsize
        return chunk

    def close(self):
        self.closed = True


# Plays the part of socket.socket: hands out FakeSockets, and remembers what
# it was asked for.
class FakeSocketFactory:
    def __init__(self, *sockets, create_error=None):
        self.sockets = list(sockets)
        self.create_error = create_error
        self.calls = []
        self.created = []

    def __call__(self, family, type, proto):
        self.calls.append((family, type, proto))
        if self.create_error is not None:
            raise self.create_error
        sock = self.sockets.pop(0)
        self.created.append(sock)
        return sock


def make_address(host="192.0.2.1", port=80):
    return Address(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP,
                   host, port)


# Splits a response into recv()-sized chunks, the way a real socket would
# hand them to us.
def chunked(data, chunk_size=255):
    return [data[i:i + chunk_size] for i in range(0, len(data), chunk_size)]
