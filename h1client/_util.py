import re

__all__ = ["Sentinel", "bytesify", "bodyify", "fieldify", "parse_int_prefix"]

# Sentinel values
# Inherits identity-based comparison and hashing from object
class Sentinel:
    def __init__(self, name):
        self._name = name

    def __repr__(self):
        return self._name

# Used for methods, paths and query strings. Accepts ascii-strings, or
# bytes/bytearray/memoryview/..., and always returns bytes.
def bytesify(s):
    if isinstance(s, str):
        s = s.encode("ascii")
    if isinstance(s, int):
        raise TypeError("expected bytes-like object, not int")
    return bytes(s)

# Request bodies are arbitrary text, so they get utf-8 rather than the strict
# ascii used for the protocol framing.
def bodyify(s):
    if isinstance(s, str):
        return s.encode("utf-8")
    return bytesify(s)

# Header and cookie fields. The response side decodes these as latin-1, so
# encoding them the same way sends back exactly the bytes the server gave us.
def fieldify(s):
    if isinstance(s, str):
        return s.encode("iso-8859-1")
    return bytesify(s)

# Lenient integer parsing in the style of C's atoi(): leading whitespace and
# a sign are allowed, parsing stops at the first non-digit, and garbage
# parses as 0 instead of raising.
_int_prefix_re = re.compile(r"\s*([+-]?\d+)")

def parse_int_prefix(s):
    match = _int_prefix_re.match(s)
    if match is None:
        return 0
    return int(match.group(1))
