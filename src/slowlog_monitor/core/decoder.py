from __future__ import annotations

from datetime import timedelta
from typing import Any, List

from .errors import SlowlogDecodeError
from .models import SlowlogEntry, SlowlogSchema

UINT64_MAX = 0xFFFFFFFFFFFFFFFF

# References
# SLOWLOG GET reply format, https://redis.io/commands/slowlog-get/
# Redis 4.0 appended client address and client name to every record.


def _as_uint(value: Any, field_name: str) -> int:
    """
    RESP integers arrive as int. Bulk strings holding digits are accepted
    too, the same way the redis client converts them.
    """
    if isinstance(value, bool):
        raise SlowlogDecodeError(f"{field_name}: expected integer, got bool")
    if isinstance(value, int):
        n = value
    elif isinstance(value, (bytes, str)):
        text = value.decode("ascii", errors="replace") if isinstance(value, bytes) else value
        if not text.isascii() or not text.isdigit():
            raise SlowlogDecodeError(f"{field_name}: expected integer, got {value!r}")
        n = int(text)
    else:
        raise SlowlogDecodeError(f"{field_name}: expected integer, got {type(value).__name__}")

    if n < 0 or n > UINT64_MAX:
        raise SlowlogDecodeError(f"{field_name}: expected unsigned 64-bit integer, got {n}")
    return n


def _as_text(value: Any, field_name: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SlowlogDecodeError(f"{field_name}: invalid utf-8") from exc
    raise SlowlogDecodeError(f"{field_name}: expected string, got {type(value).__name__}")


def _as_command(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        raise SlowlogDecodeError(f"command: expected list, got {type(value).__name__}")
    if not value:
        raise SlowlogDecodeError("command: empty token list")
    return [_as_text(tok, "command") for tok in value]


def decode_slowlog(raw: Any, schema: SlowlogSchema) -> SlowlogEntry:
    """
    Decode one raw SLOWLOG GET record into SlowlogEntry.

    The schema is fixed at startup from the probed server version.
    A record with the wrong arity or field types raises SlowlogDecodeError,
    it is never coerced into the other shape.
    """
    if not isinstance(raw, (list, tuple)):
        raise SlowlogDecodeError(f"record: expected list, got {type(raw).__name__}")
    if len(raw) != schema.arity:
        raise SlowlogDecodeError(
            f"record: expected {schema.arity} fields for {schema.name.lower()} schema, got {len(raw)}"
        )

    entry = SlowlogEntry(
        id=_as_uint(raw[0], "id"),
        timestamp=_as_uint(raw[1], "timestamp"),
        duration=timedelta(microseconds=_as_uint(raw[2], "duration")),
        command=_as_command(raw[3]),
    )

    if schema is SlowlogSchema.EXTENDED:
        entry.address = _as_text(raw[4], "address")
        entry.client_name = _as_text(raw[5], "client_name")

    return entry

