# Result codes returned by every layer of the client. Nothing in h1client
# raises for network trouble; instead each operation hands back one of these
# sentinels, and callers compare them by identity:
#
#     code, response = client.request("GET", "/")
#     if code is not OK:
#         ...
#
# OK              the operation succeeded
# SOCKET_CONNECT  could not establish the TCP connection
# SOCKET_SEND     a write to the connection failed mid-transfer
# SOCKET_RECV     a read from the connection failed
# HOST_ADDRINFO   name resolution itself failed
# HOST_NORESULT   name resolution succeeded, but returned no IPv4/TCP address
# SUBSYSTEM_INIT  the process-wide network subsystem is not available

from ._util import Sentinel

# Everything in __all__ gets re-exported as part of the h1client public API.
__all__ = []

# Be careful of trailing whitespace here:
sentinels = ("OK "
             # Connection failures
             "SOCKET_CONNECT SOCKET_SEND SOCKET_RECV "
             # Resolution failures
             "HOST_ADDRINFO HOST_NORESULT "
             # Process-wide setup
             "SUBSYSTEM_INIT").split()
for token in sentinels:
    globals()[token] = Sentinel(token)

__all__ += sentinels
