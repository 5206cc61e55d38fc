# Host name resolution.
#
# We only ever talk IPv4 over TCP, so resolution boils down to asking the
# platform resolver for IPv4/TCP candidates and keeping the first one that
# really is one. Two different things can go wrong, and callers care about
# the difference:
#
# - the resolver itself fails (unknown name, no network, ...): HOST_ADDRINFO
# - the resolver answers, but nothing in the answer is usable: HOST_NORESULT

import collections
import logging
import socket

from ._codes import OK, HOST_ADDRINFO, HOST_NORESULT

__all__ = ["Address", "resolve_host"]

_LOGGER = logging.getLogger(__name__)

_AddressBase = collections.namedtuple(
    "_AddressBase", ["family", "type", "proto", "host", "port"])


class Address(_AddressBase):
    """A resolved, connectable network endpoint.

    Immutable. ``family``, ``type`` and ``proto`` are the values to hand to
    :func:`socket.socket`, and :attr:`sockaddr` is what to hand to
    :meth:`socket.socket.connect`.

    """
    __slots__ = ()

    @property
    def sockaddr(self):
        return (self.host, self.port)


def _is_ipv4_tcp(family, socktype, proto):
    return (family == socket.AF_INET
            and socktype == socket.SOCK_STREAM
            and proto == socket.IPPROTO_TCP)


def resolve_host(host, port):
    """Resolve *host* (a name or a literal IPv4 address) and *port*.

    Returns a ``(code, address)`` pair, where *address* is an
    :class:`Address` when *code* is :data:`OK` and ``None`` otherwise.

    """
    try:
        candidates = socket.getaddrinfo(
            host, port, socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP)
    except OSError as exc:
        _LOGGER.warning("Couldn't resolve %s:%s: %s", host, port, exc)
        return HOST_ADDRINFO, None

    for family, socktype, proto, _canonname, sockaddr in candidates:
        if _is_ipv4_tcp(family, socktype, proto):
            address = Address(family, socktype, proto, sockaddr[0], sockaddr[1])
            _LOGGER.debug("Resolved %s:%s to %s:%s",
                          host, port, address.host, address.port)
            return OK, address

    _LOGGER.warning("No IPv4/TCP address found for %s:%s", host, port)
    return HOST_NORESULT, None
