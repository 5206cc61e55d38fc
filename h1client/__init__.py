# A small blocking HTTP/1.1 client, built directly on top of the socket
# module. Every request opens its own TCP connection, writes the request,
# reads until the server is done, parses the result, and closes the
# connection again. A client instance remembers the cookies servers set on
# it and sends them back on later requests.
#
# Deliberately not supported: TLS, chunked transfer-encoding, keep-alive,
# redirects, and anything asynchronous.

from ._version import __version__

from ._codes import *
from ._models import *
from ._resolver import *
from ._connection import *
from ._writers import *
from ._readers import *
from ._cookies import *
from ._subsystem import *
from ._client import *

from . import _codes, _models, _resolver, _connection, _writers, _readers
from . import _cookies, _subsystem, _client

__all__ = []
__all__ += _codes.__all__
__all__ += _models.__all__
__all__ += _resolver.__all__
__all__ += _connection.__all__
__all__ += _writers.__all__
__all__ += _readers.__all__
__all__ += _cookies.__all__
__all__ += _subsystem.__all__
__all__ += _client.__all__
