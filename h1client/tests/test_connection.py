import socket

import pytest

from .._codes import OK, SOCKET_SEND, SOCKET_RECV
from .._connection import (
    open_connection, close_connection, send_all, receive_all,
    RECV_BUFFER_SIZE,
)

from .helpers import FakeSocket, FakeSocketFactory, make_address, chunked


def test_open_connection():
    sock = FakeSocket()
    factory = FakeSocketFactory(sock)
    address = make_address("192.0.2.1", 8080)

    assert open_connection(address, factory) is sock
    assert factory.calls == [
        (socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP)]
    assert sock.connected_to == ("192.0.2.1", 8080)
    assert not sock.closed


def test_open_connection_failures():
    # Can't even create the socket
    factory = FakeSocketFactory(create_error=OSError("out of descriptors"))
    assert open_connection(make_address(), factory) is None

    # Created, but refused; the half-made socket gets cleaned up
    sock = FakeSocket(connect_error=ConnectionRefusedError())
    assert open_connection(make_address(), FakeSocketFactory(sock)) is None
    assert sock.closed


def test_close_connection():
    sock = FakeSocket()
    close_connection(sock)
    assert sock.closed
    # and again, after the fact
    close_connection(sock)
    assert sock.closed


def test_send_all():
    sock = FakeSocket()
    assert send_all(sock, b"GET / HTTP/1.1\r\n\r\n") is OK
    assert sock.sent == b"GET / HTTP/1.1\r\n\r\n"
    assert sock.send_calls == 1

    # Partial writes get retried until everything is out
    sock = FakeSocket(send_sizes=[3, 1, 4])
    assert send_all(sock, b"0123456789") is OK
    assert sock.sent == b"0123456789"
    assert sock.send_calls == 4

    # Nothing to send means no writes at all
    sock = FakeSocket()
    assert send_all(sock, b"") is OK
    assert sock.send_calls == 0


def test_send_all_failure():
    sock = FakeSocket(send_sizes=[4, BrokenPipeError()])
    assert send_all(sock, b"0123456789") is SOCKET_SEND
    # what made it out stays out
    assert sock.sent == b"0123"


def test_receive_all():
    sock = FakeSocket(recv_script=[b"HTTP/1.1 200 OK\r\n\r\n"])
    assert receive_all(sock) == (OK, b"HTTP/1.1 200 OK\r\n\r\n")
    # A short chunk ends the loop straight away
    assert sock.recv_sizes == [RECV_BUFFER_SIZE - 1]


def test_receive_all_multiple_chunks():
    data = b"x" * 600
    sock = FakeSocket(recv_script=chunked(data))
    assert receive_all(sock) == (OK, data)
    assert sock.recv_sizes == [255, 255, 255]


def test_receive_all_full_chunk_then_close():
    first = b"a" * 255
    sock = FakeSocket(recv_script=[first, b""])
    assert receive_all(sock) == (OK, first)
    assert len(sock.recv_sizes) == 2


def test_receive_all_keeps_nul_bytes():
    sock = FakeSocket(recv_script=[b"a\x00b"])
    assert receive_all(sock) == (OK, b"a\x00b")


def test_receive_all_custom_bufsize():
    sock = FakeSocket(recv_script=[b"abc", b"de"])
    assert receive_all(sock, bufsize=4) == (OK, b"abcde")
    assert sock.recv_sizes == [3, 3]


def test_receive_all_failure():
    sock = FakeSocket(recv_script=[b"a" * 255, ConnectionResetError()])
    assert receive_all(sock) == (SOCKET_RECV, None)


def test_real_socketpair():
    a, b = socket.socketpair()
    try:
        assert send_all(a, b"hello") is OK
        a.close()
        assert receive_all(b) == (OK, b"hello")
    finally:
        close_connection(a)
        close_connection(b)


def test_receive_all_rejects_tiny_bufsize():
    for bufsize in [1, 0]:
        sock = FakeSocket(recv_script=[b"data"])
        with pytest.raises(ValueError):
            receive_all(sock, bufsize=bufsize)
        assert sock.recv_sizes == []

    # 2 is the smallest that works: one byte per read
    sock = FakeSocket(recv_script=[b"a", b"b", b""])
    assert receive_all(sock, bufsize=2) == (OK, b"ab")
