"""Opaque connection cursors.

A cursor is the URL-safe base64 (unpadded) form of a compact JSON payload::

    {"v": 1, "o": "LATEST", "f": ["created_at", "id"], "k": [{"$dt": "..."}, 7]}

``v`` is the format version, ``o`` the ordering selector the cursor was issued
under, ``f`` the ordering field names and ``k`` the row's values for them.
Values JSON cannot carry natively are wrapped in a single-key tag object so
decoding restores the exact Python type.
"""
import base64
import json
import logging
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Tuple

from taskrelay.pagination.errors import InvalidCursor
from taskrelay.pagination.order import OrderField, OrderSpec

logger = logging.getLogger(__name__)

CURSOR_VERSION = 1

_DECODERS = {
    "$dt": datetime.fromisoformat,
    "$d": date.fromisoformat,
    "$t": time.fromisoformat,
    "$dec": Decimal,
    "$uuid": uuid.UUID,
}


def _tag(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return {"$dt": value.isoformat()}
    if isinstance(value, date):
        return {"$d": value.isoformat()}
    if isinstance(value, time):
        return {"$t": value.isoformat()}
    if isinstance(value, Decimal):
        return {"$dec": str(value)}
    if isinstance(value, uuid.UUID):
        return {"$uuid": str(value)}
    raise TypeError(f"Cannot encode {type(value).__name__} value in a cursor")


def _untag(value: Any) -> Any:
    if isinstance(value, dict):
        if len(value) != 1:
            raise ValueError("malformed value")
        tag, raw = next(iter(value.items()))
        decoder = _DECODERS.get(tag)
        if decoder is None or not isinstance(raw, str):
            raise ValueError(f"unknown value tag {tag!r}")
        return decoder(raw)
    if isinstance(value, list):
        raise ValueError("malformed value")
    return value


def _check_type(field: OrderField, value: Any) -> None:
    expected = field.python_type
    if expected is None:
        return
    if value is None:
        if not field.nullable:
            raise ValueError(f"{field.name} cannot be null")
        return

    if isinstance(value, bool) and expected is not bool:
        matches = False
    elif expected is float:
        matches = isinstance(value, (int, float))
    elif expected is date:
        matches = isinstance(value, date) and not isinstance(value, datetime)
    else:
        matches = isinstance(value, expected)
    if not matches:
        raise ValueError(f"{field.name} expects {expected.__name__}, got {type(value).__name__}")


def cursor_values(row: Any, spec: OrderSpec) -> Tuple[Any, ...]:
    """The row's values for each ordering field, in spec order."""
    return tuple(getattr(row, name) for name in spec.field_names)


def encode_cursor(row: Any, spec: OrderSpec) -> str:
    """Encode the position of ``row`` under ``spec`` as an opaque cursor."""
    payload = {
        "v": CURSOR_VERSION,
        "o": spec.selector,
        "f": list(spec.field_names),
        "k": [_tag(value) for value in cursor_values(row, spec)],
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def _reject(cursor: str, spec: OrderSpec, reason: str) -> InvalidCursor:
    logger.warning(f"Rejected cursor for {spec.selector} ordering: {reason}")
    return InvalidCursor(cursor, reason)


def decode_cursor(cursor: str, spec: OrderSpec) -> Tuple[Any, ...]:
    """Decode a cursor issued under ``spec`` back into its ordering values.

    Raises:
        InvalidCursor: the cursor is malformed, from an unknown format
            version, was issued under a different ordering, or carries a
            value of the wrong type for its field.
    """
    try:
        padded = cursor + "=" * (-len(cursor) % 4)
        payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
    except (TypeError, ValueError):
        raise _reject(cursor, spec, "not a valid cursor") from None

    if not isinstance(payload, dict):
        raise _reject(cursor, spec, "not a valid cursor")
    if payload.get("v") != CURSOR_VERSION:
        raise _reject(cursor, spec, f"unsupported cursor version {payload.get('v')!r}")
    if payload.get("o") != spec.selector:
        raise _reject(
            cursor, spec, f"issued for ordering {payload.get('o')!r}, not {spec.selector!r}"
        )

    values = payload.get("k")
    if payload.get("f") != list(spec.field_names) or not isinstance(values, list):
        raise _reject(cursor, spec, "ordering fields do not match")
    if len(values) != len(spec.fields):
        raise _reject(cursor, spec, "ordering field count does not match")

    try:
        decoded = tuple(_untag(value) for value in values)
        for field, value in zip(spec.fields, decoded):
            _check_type(field, value)
    except (ArithmeticError, TypeError, ValueError) as e:
        raise _reject(cursor, spec, str(e)) from None
    return decoded
