import pytest

from .._util import *
from .. import _codes
from .._codes import *


def test_Sentinel():
    S = Sentinel("S")
    assert repr(S) == "S"
    assert S == S
    assert S in {S}
    S2 = Sentinel("S")
    assert S != S2
    assert S not in {S2}


def test_result_codes():
    codes = [OK, SOCKET_CONNECT, SOCKET_SEND, SOCKET_RECV,
             HOST_ADDRINFO, HOST_NORESULT, SUBSYSTEM_INIT]
    assert [repr(code) for code in codes] == _codes.sentinels
    assert len(set(codes)) == len(codes)


def test_bytesify():
    assert bytesify(b"123") == b"123"
    assert bytesify(bytearray(b"123")) == b"123"
    assert bytesify(memoryview(b"123")) == b"123"
    assert bytesify("123") == b"123"

    with pytest.raises(UnicodeEncodeError):
        bytesify("ሴ")

    with pytest.raises(TypeError):
        bytesify(10)


def test_bodyify():
    assert bodyify(b"\xff") == b"\xff"
    assert bodyify("café") == b"caf\xc3\xa9"
    assert bodyify("") == b""


def test_parse_int_prefix():
    assert parse_int_prefix("42") == 42
    assert parse_int_prefix("  42") == 42
    assert parse_int_prefix("+7") == 7
    assert parse_int_prefix("-3") == -3
    assert parse_int_prefix("12abc") == 12
    assert parse_int_prefix("abc") == 0
    assert parse_int_prefix("") == 0


def test_fieldify():
    assert fieldify("abc") == b"abc"
    assert fieldify(b"\xc3\xa9") == b"\xc3\xa9"
    # latin-1 text maps back onto the bytes it was decoded from
    assert fieldify("Jos\xc3\xa9") == b"Jos\xc3\xa9"
    assert fieldify(b"Jos\xc3\xa9".decode("iso-8859-1")) == b"Jos\xc3\xa9"

    with pytest.raises(UnicodeEncodeError):
        fieldify("ሴ")

    with pytest.raises(TypeError):
        fieldify(10)
