from __future__ import annotations

import json
from typing import Any

from jwtmint.exceptions import DecodeError


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"{constant} is not valid JSON")


def serialize(value: Any) -> bytes:
    return json.dumps(value, separators=(",", ":"), allow_nan=False).encode("utf-8")


def parse_object(data: bytes) -> dict[str, Any]:
    """Parse a JSON document whose top level must be an object."""
    try:
        value = json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as error:
        raise DecodeError("Invalid json") from error
    if not isinstance(value, dict):
        raise DecodeError("Invalid json: expected an object")
    return value
