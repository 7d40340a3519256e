"""Transport engine implementations."""

import os

from .base import (
    Engine,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
)

_BACKEND = os.environ.get("AEROCMD_TRANSPORT", "zmq")

if _BACKEND == "zmq":
    from . import zmq
    from .zmq import ZmqEngine as DefaultEngine
else:
    raise ImportError(f"unknown AEROCMD_TRANSPORT backend: {_BACKEND!r}")
