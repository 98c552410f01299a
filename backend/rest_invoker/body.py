"""Request body normalization."""

import datetime
import enum
import json
import uuid
from typing import Any, Optional

from pydantic import BaseModel


def _to_jsonable(obj: Any) -> Any:
    """json.dumps fallback for values the stdlib encoder rejects."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, uuid.UUID):
        return str(obj)
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any) -> str:
    """Serialize a structured value to JSON text.

    Nesting is followed all the way down; nothing is truncated. Cycles raise
    ValueError from the json encoder.
    """
    return json.dumps(value, default=_to_jsonable, ensure_ascii=False)


def normalize_body(body: Any) -> Optional[bytes]:
    """Bytes to put on the wire for a request body.

    Text is sent unchanged as UTF-8, bytes are sent as given, anything else
    is serialized to JSON.
    """
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    return serialize(body).encode("utf-8")
