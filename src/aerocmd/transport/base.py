"""Transport engine interface.

This is the contract the :class:`aerocmd.client.Client` relies on to reach a
cluster. An engine accepts a request, and later reports the outcome exactly
once by invoking the supplied callback as ``callback(error, *results)``,
where *error* is None or a raw status structure ``{"code": ..., "message":
...}``. Raising :class:`TransportError` from a primitive means the request
was not accepted; the callback will not be invoked in that case.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """A request did not receive a timely response."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


EngineCallback = Callable[..., None]


class Engine(ABC):
    """Minimal contract for a transport engine.

    Concrete engines implement :meth:`submit` plus the connection handling;
    the named primitives below are thin wrappers that give each request its
    command name and argument layout.
    """

    @abstractmethod
    def connect(self, callback: EngineCallback) -> None:
        """Establish the connection, then invoke ``callback(error)``."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the connection. Pending requests fail."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the engine currently holds a usable connection."""

    @abstractmethod
    def submit(self, command: str, args: Dict[str, Any], callback: EngineCallback) -> None:
        """Send one request; *args* maps argument names to values."""

    def register_event_loop(self) -> None:
        """Called when the first client in the process connects."""

    def deregister_event_loop(self) -> None:
        """Called when the last client in the process closes."""

    # Record primitives.

    def get_async(self, key, policy, callback: EngineCallback) -> None:
        self.submit("get", {"key": key, "policy": policy}, callback)

    def put_async(self, key, bins, meta, policy, callback: EngineCallback) -> None:
        self.submit("put", {"key": key, "bins": bins, "meta": meta, "policy": policy}, callback)

    def operate_async(self, key, operations, meta, policy, callback: EngineCallback) -> None:
        args = {"key": key, "operations": operations, "meta": meta, "policy": policy}
        self.submit("operate", args, callback)

    def remove_async(self, key, policy, callback: EngineCallback) -> None:
        self.submit("remove", {"key": key, "policy": policy}, callback)

    def exists_async(self, key, policy, callback: EngineCallback) -> None:
        self.submit("exists", {"key": key, "policy": policy}, callback)

    def select_async(self, key, bins, policy, callback: EngineCallback) -> None:
        self.submit("select", {"key": key, "bins": bins, "policy": policy}, callback)

    def apply_async(self, key, udf, policy, callback: EngineCallback) -> None:
        self.submit("apply", {"key": key, "udf": udf, "policy": policy}, callback)

    # Batch primitives.

    def batch_get(self, keys, policy, callback: EngineCallback) -> None:
        self.submit("batch_get", {"keys": keys, "policy": policy}, callback)

    def batch_exists(self, keys, policy, callback: EngineCallback) -> None:
        self.submit("batch_exists", {"keys": keys, "policy": policy}, callback)

    def batch_select(self, keys, bins, policy, callback: EngineCallback) -> None:
        self.submit("batch_select", {"keys": keys, "bins": bins, "policy": policy}, callback)

    # Cluster administration.

    def index_create(self, options: Dict[str, Any], policy, callback: EngineCallback) -> None:
        self.submit("index_create", {"options": options, "policy": policy}, callback)

    def index_remove(self, namespace, index, policy, callback: EngineCallback) -> None:
        self.submit("index_remove", {"ns": namespace, "index": index, "policy": policy}, callback)

    def udf_register(self, filename, udf_type, policy, callback: EngineCallback) -> None:
        args = {"filename": filename, "type": udf_type, "policy": policy}
        self.submit("udf_register", args, callback)

    def udf_remove(self, module, policy, callback: EngineCallback) -> None:
        self.submit("udf_remove", {"module": module, "policy": policy}, callback)

    def info(self, request: Optional[str], host, policy, callback: EngineCallback) -> None:
        self.submit("info", {"request": request, "host": host, "policy": policy}, callback)

    def query(self, namespace, set, statement, policy, callback: EngineCallback) -> None:
        args = {"ns": namespace, "set": set, "statement": statement, "policy": policy}
        self.submit("query", args, callback)

    def scan(self, namespace, set, statement, policy, callback: EngineCallback) -> None:
        args = {"ns": namespace, "set": set, "statement": statement, "policy": policy}
        self.submit("scan", args, callback)

    def truncate(self, namespace, set, before_nanos, policy, callback: EngineCallback) -> None:
        args = {"ns": namespace, "set": set, "before_nanos": before_nanos, "policy": policy}
        self.submit("truncate", args, callback)

    def info_any(self, request: Optional[str], policy, callback: EngineCallback) -> None:
        self.submit("info_any", {"request": request, "policy": policy}, callback)
