"""ZeroMQ transport engine.

Requests travel over a DEALER socket to a gateway ROUTER that speaks to the
cluster on our behalf. Each request is a multipart message:

    version, id, command, payload_json

and each reply echoes the id:

    version, id, payload_json

where the reply payload is ``{"error": <raw status or null>, "results":
[...]}``. All socket activity happens on the asyncio event loop of the
caller, via :mod:`zmq.asyncio`; the shared context is created when the first
client registers its interest and destroyed when the last one leaves.
"""

from __future__ import annotations

import asyncio
import functools
import itertools
import logging
import os
from typing import Any, Dict, Optional, Tuple

import zmq
import zmq.asyncio

from .. import status
from .base import Engine, EngineCallback, TransportConnectionError, TransportError
from .codec import decode_reply, encode_payload


PROTOCOL_VERSION = "a"
_VERSION_BYTES = PROTOCOL_VERSION.encode()

default_gateway_port = 3100
gateway_variable = "AEROCMD_GATEWAY"

logger = logging.getLogger(__name__)

zmq_context: Optional[zmq.asyncio.Context] = None


def register_event_loop() -> None:
    """Create the process-wide asyncio context, if it does not exist."""

    global zmq_context
    if zmq_context is None:
        zmq_context = zmq.asyncio.Context()
        logger.debug("zmq asyncio context created")


def deregister_event_loop() -> None:
    """Destroy the process-wide context; any remaining sockets are closed."""

    global zmq_context
    if zmq_context is not None:
        zmq_context.destroy(linger=0)
        zmq_context = None
        logger.debug("zmq asyncio context destroyed")


def to_request_frames(msg_id: bytes, command: str, args: Any) -> Tuple[bytes, ...]:
    return (_VERSION_BYTES, msg_id, command.encode(), encode_payload(args))


def from_reply_frames(parts) -> Tuple[bytes, Any, list]:
    """Decode DEALER reply parts into (id, error, results)."""

    if len(parts) < 3:
        raise ValueError("invalid reply: %d frames" % (len(parts)))

    their_version = parts[0]
    msg_id = parts[1]

    if their_version != _VERSION_BYTES:
        error = {
            "code": status.ERR_CLIENT,
            "message": f"reply is protocol {their_version!r}, client expects {_VERSION_BYTES!r}",
        }
        return msg_id, error, []

    error, results = decode_reply(parts[2])
    return msg_id, error, results


class PendingRequest:
    """A request awaiting its reply. :meth:`complete` only acts once."""

    def __init__(self, command: str, callback: EngineCallback):
        self.command = command
        self.callback = callback
        self.timer: Optional[asyncio.TimerHandle] = None
        self.done = False

    def complete(self, error, results) -> None:
        if self.done:
            return

        self.done = True
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None

        self.callback(error, *results)


class ZmqEngine(Engine):
    """Engine connected to a single gateway *address*, a ZeroMQ endpoint
    such as ``tcp://localhost:3100``. If no address is given the
    AEROCMD_GATEWAY environment variable is used, falling back to the first
    configured host on the default gateway port. The client *config* is
    forwarded to the gateway with the initial 'connect' request.
    """

    timeout = 5.0

    def __init__(self, config, address: Optional[str] = None, timeout: Optional[float] = None):
        self.config = config

        if address is None:
            address = os.environ.get(gateway_variable)
        if address is None:
            host = config.hosts[0]["addr"] if config.hosts else "localhost"
            address = f"tcp://{host}:{default_gateway_port}"

        self.address = address
        if timeout is not None:
            self.timeout = float(timeout)

        self.socket = None
        self._connected = False
        self._reader: Optional[asyncio.Task] = None
        self._pending: Dict[bytes, PendingRequest] = {}
        self._ids = itertools.count(1)

    # --- event loop hooks ---

    def register_event_loop(self) -> None:
        register_event_loop()

    def deregister_event_loop(self) -> None:
        deregister_event_loop()

    # --- connection ---

    def connect(self, callback: EngineCallback) -> None:
        if zmq_context is None:
            raise TransportConnectionError("event loop not registered")

        loop = asyncio.get_running_loop()

        if self.socket is None:
            identity = f"aerocmd.ZmqEngine.{id(self)}".encode()
            self.socket = zmq_context.socket(zmq.DEALER)
            self.socket.setsockopt(zmq.LINGER, 0)
            self.socket.identity = identity
            try:
                self.socket.connect(self.address)
            except zmq.ZMQError as exc:
                self.socket.close()
                self.socket = None
                raise TransportConnectionError(f"cannot connect to {self.address}: {exc}") from exc

            self._reader = loop.create_task(self._receive())
            logger.debug("connecting to gateway %s", self.address)

        def connected(error, *results):
            code = status.OK if error is None else error.get("code", status.OK)
            self._connected = code == status.OK
            callback(error, *results)

        self.submit("connect", {"config": self.config}, connected)

    def close(self) -> None:
        self._connected = False

        if self._reader is not None:
            self._reader.cancel()
            self._reader = None

        pending = self._pending
        self._pending = {}
        error = {"code": status.ERR_CLIENT, "message": "Client closed."}
        for request in pending.values():
            request.complete(error, [])

        if self.socket is not None:
            self.socket.close(linger=0)
            self.socket = None
            logger.debug("closed gateway connection %s", self.address)

    def is_connected(self) -> bool:
        return self._connected and self.socket is not None

    # --- requests ---

    def submit(self, command: str, args: Dict[str, Any], callback: EngineCallback) -> None:
        if self.socket is None:
            raise TransportConnectionError("not connected to " + self.address)

        msg_id = str(next(self._ids)).encode()

        try:
            frames = to_request_frames(msg_id, command, args)
        except TypeError as exc:
            raise TransportError(str(exc)) from exc

        loop = asyncio.get_running_loop()
        pending = PendingRequest(command, callback)
        pending.timer = loop.call_later(self.timeout, self._expire, msg_id)
        self._pending[msg_id] = pending

        logger.debug("%s request %s sent to %s", command, msg_id, self.address)
        sent = self.socket.send_multipart(frames)
        sent.add_done_callback(functools.partial(self._sent, msg_id))

    def udf_register(self, filename, udf_type, policy, callback: EngineCallback) -> None:
        """The gateway need not share a filesystem with the client, so the
        module content is read here and sent along with its base name.
        """

        try:
            with open(filename, "rb") as module:
                content = module.read()
        except OSError as exc:
            raise TransportError(f"cannot read UDF module {filename}: {exc.strerror}") from exc

        args = {
            "filename": os.path.basename(filename),
            "content": content,
            "type": udf_type,
            "policy": policy,
        }
        self.submit("udf_register", args, callback)

    # --- internal ---

    def _sent(self, msg_id: bytes, future) -> None:
        if future.cancelled():
            return

        exc = future.exception()
        if exc is None:
            return

        pending = self._pending.pop(msg_id, None)
        if pending is not None:
            pending.complete({"code": status.ERR_CLIENT, "message": str(exc)}, [])

    def _expire(self, msg_id: bytes) -> None:
        pending = self._pending.pop(msg_id, None)
        if pending is None:
            return

        pending.timer = None
        message = f"{pending.command} @ {self.address}: no response in {self.timeout:.2f} sec"
        pending.complete({"code": status.ERR_TIMEOUT, "message": message}, [])

    def _handle_incoming(self, parts) -> None:
        try:
            msg_id, error, results = from_reply_frames(parts)
        except ValueError as exc:
            logger.warning("discarding reply from %s: %s", self.address, exc)
            return

        pending = self._pending.pop(msg_id, None)
        if pending is None:
            logger.warning("late or unknown reply %r from %s", msg_id, self.address)
            return

        # The receive loop must outlive a failing reply handler.
        try:
            pending.complete(error, results)
        except Exception:
            logger.exception("%s reply handler failed", pending.command)

    async def _receive(self) -> None:
        socket = self.socket

        while True:
            try:
                parts = await socket.recv_multipart()
            except zmq.ZMQError as exc:
                logger.debug("gateway socket closed: %s", exc)
                return

            self._handle_incoming(parts)
