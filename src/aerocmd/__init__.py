""" Asynchronous command layer for an Aerospike-style database client. This
    includes the client itself, the builders for operation and filter
    descriptors passed to it, and the transport engine that carries the
    resulting requests to a gateway.
"""

# Utility components.

from . import json
from . import status
from . import info

# Descriptor builders and value types, used by multiple other components.

from . import operations
from . import lists
from . import maps
from . import filter
from . import policy
from .cdt_context import CdtContext
from .datatypes import Double, GeoJSON
from .key import Key

# Primary public-facing interfaces.

from . import callbacks
from . import runtime
from . import transport
from .client import Client, language
from .query import Query, Scan
from .config import Config
from .error import CommandError, ClientError, ServerError


def client(config=None, **kwargs):
    """ Return a new, unconnected :class:`Client`.
    """

    return Client(config, **kwargs)


def connect(config=None, callback=None, **kwargs):
    """ Create a :class:`Client` and connect it, see :func:`Client.connect`.
    """

    instance = Client(config, **kwargs)
    return instance.connect(callback)


set_callback_handler = Client.set_callback_handler

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
