# Process-wide network subsystem lifecycle.
#
# Some platforms need a one-off library initialization before any socket can
# be created, and a matching teardown at exit. Python's socket module does the
# platform-specific part for us when it is imported, so what is left here is
# the bookkeeping: the caller brackets the life of the process with
# startup()/shutdown(), and HTTPClient refuses to touch the network while the
# subsystem is down. Neither call is ever made implicitly.

import logging
import socket

from ._codes import OK, SUBSYSTEM_INIT

__all__ = ["startup", "shutdown", "is_started"]

_LOGGER = logging.getLogger(__name__)

_started = False


def startup():
    """Bring up the process-wide network subsystem.

    Probes the platform by opening (and immediately closing) one IPv4 stream
    socket. Returns :data:`OK` on success, or :data:`SUBSYSTEM_INIT` if the
    platform can't give us a socket at all -- in which case every later
    request will fail with :data:`SUBSYSTEM_INIT` too.

    Calling this again after a successful startup does nothing.

    """
    global _started
    if _started:
        return OK

    try:
        probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        _LOGGER.error("Network subsystem startup failed: %s", exc)
        return SUBSYSTEM_INIT
    probe.close()

    _started = True
    _LOGGER.debug("Network subsystem is up")
    return OK


def shutdown():
    """Tear down the process-wide network subsystem. Always returns :data:`OK`."""
    global _started
    if _started:
        _started = False
        _LOGGER.debug("Network subsystem is down")
    return OK


def is_started():
    return _started
