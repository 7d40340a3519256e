"""Transport codec for request arguments and reply results.

JSON has no notion of bytes, record keys, typed doubles, or maps with
non-string keys; such values are wrapped in single-entry marker objects so
that they survive the round trip through the gateway:

    {"__bytes__": <base64>}
    {"__key__": {"ns": ..., "set": ..., "key": ..., "digest": ...}}
    {"__double__": <float>}
    {"__geojson__": <str>}
    {"__map__": [[key, value], ...]}
"""

from __future__ import annotations

import base64
from typing import Any, Optional, Tuple

from .. import json
from ..cdt_context import CdtContext
from ..config import Config
from ..datatypes import Double, GeoJSON
from ..filter import FilterPredicate
from ..key import Key
from ..operations import Operation
from ..policy import BasePolicy


def encode(value: Any) -> Any:
    """Return a JSON-safe rendition of *value*."""

    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    if isinstance(value, (bytes, bytearray)):
        return {"__bytes__": base64.b64encode(bytes(value)).decode()}

    if isinstance(value, Key):
        return {"__key__": encode(value.to_dict())}

    if isinstance(value, Double):
        return {"__double__": value.value()}

    if isinstance(value, GeoJSON):
        return {"__geojson__": str(value)}

    if isinstance(value, CdtContext):
        return encode(value.to_list())

    if isinstance(value, (Operation, FilterPredicate, BasePolicy, Config)):
        return encode(value.to_dict())

    if isinstance(value, dict):
        if all(isinstance(name, str) for name in value):
            return {name: encode(item) for name, item in value.items()}
        return {"__map__": [[encode(name), encode(item)] for name, item in value.items()]}

    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]

    raise TypeError(f"cannot encode {type(value).__name__} for transport")


def decode(value: Any) -> Any:
    """Reverse :func:`encode`. Operations, filters and policies come back as
    plain dictionaries; everything else is restored to its original type.
    """

    if isinstance(value, list):
        return [decode(item) for item in value]

    if not isinstance(value, dict):
        return value

    if len(value) == 1:
        marker, inner = next(iter(value.items()))

        if marker == "__bytes__":
            return base64.b64decode(inner)
        if marker == "__key__":
            return Key.from_dict(decode(inner))
        if marker == "__double__":
            return Double(inner)
        if marker == "__geojson__":
            return GeoJSON(inner)
        if marker == "__map__":
            return {_hashable(decode(name)): decode(item) for name, item in inner}

    return {name: decode(item) for name, item in value.items()}


def _hashable(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    return value


def encode_payload(payload: Any) -> bytes:
    """Return the JSON bytes for a request payload."""

    if payload is None:
        return b""

    return json.dumps(encode(payload))


def decode_reply(payload_bytes: Optional[bytes]) -> Tuple[Any, list]:
    """Return (error, results) from the JSON bytes of a reply payload.
    Raises ValueError if the payload cannot be decoded.
    """

    if payload_bytes in (b"", None):
        return None, []

    try:
        d = json.loads(payload_bytes)
    except json.DecodeError as exc:
        raise ValueError(f"malformed reply payload: {exc}") from exc

    if not isinstance(d, dict):
        raise ValueError("reply payload is not an object")

    error = d.get("error")
    results = decode(d.get("results") or [])
    return error, results
