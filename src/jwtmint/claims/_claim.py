from __future__ import annotations

import enum
from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from jwtmint.exceptions import ClaimTypeMismatch

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ClaimType(enum.Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INT64 = "int64"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class Claim:
    """
    Immutable, typed wrapper around a single JSON value.

    Plain Python values are accepted and normalized on construction:
    ``datetime`` becomes INT64 epoch seconds, a ``set``/``frozenset`` of
    strings becomes a sorted ARRAY of STRING, nested lists and dicts become
    ARRAY/OBJECT of Claims. Integers that do not fit in 64 bits are stored as
    NUMBER, the same way a JSON parser limited to int64 would read them.

    Example:
    ```
        Claim("alice").as_string()            # "alice"
        Claim(datetime(2030, 1, 1, tzinfo=timezone.utc)).as_int()
        Claim({"a", "b"}).as_set()            # frozenset({"a", "b"})
    ```
    """

    __slots__ = ("_type", "_value")

    def __init__(self, value: Any = None) -> None:
        if isinstance(value, Claim):
            self._type: ClaimType = value._type
            self._value: Any = value._value
            return
        self._type, self._value = self._normalize(value)

    @staticmethod
    def _normalize(value: Any) -> tuple[ClaimType, Any]:
        if value is None:
            return ClaimType.NULL, None
        # bool is a subclass of int, test it first
        if isinstance(value, bool):
            return ClaimType.BOOLEAN, value
        if isinstance(value, int):
            if _INT64_MIN <= value <= _INT64_MAX:
                return ClaimType.INT64, value
            return ClaimType.NUMBER, float(value)
        if isinstance(value, float):
            return ClaimType.NUMBER, value
        if isinstance(value, str):
            return ClaimType.STRING, value
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return ClaimType.INT64, int(value.timestamp())
        if isinstance(value, (set, frozenset)):
            if not all(isinstance(item, str) for item in value):
                raise TypeError("only sets of strings can be stored as a claim")
            return ClaimType.ARRAY, tuple(Claim(item) for item in sorted(value))
        if isinstance(value, (list, tuple)):
            return ClaimType.ARRAY, tuple(Claim(item) for item in value)
        if isinstance(value, Mapping):
            items: dict[str, Claim] = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeError("claim object keys must be strings")
                items[key] = Claim(item)
            return ClaimType.OBJECT, MappingProxyType(items)
        raise TypeError(f"unsupported claim value type: {type(value).__name__}")

    @property
    def type(self) -> ClaimType:
        return self._type

    def _expect(self, expected: ClaimType) -> Any:
        if self._type is not expected:
            raise ClaimTypeMismatch(
                f"claim is {self._type.value}, not {expected.value}"
            )
        return self._value

    def as_string(self) -> str:
        return self._expect(ClaimType.STRING)

    def as_bool(self) -> bool:
        return self._expect(ClaimType.BOOLEAN)

    def as_int(self) -> int:
        return self._expect(ClaimType.INT64)

    def as_number(self) -> float:
        return self._expect(ClaimType.NUMBER)

    def as_date(self) -> datetime:
        """Interpret an INT64 claim as seconds since the epoch (UTC)."""
        return datetime.fromtimestamp(self.as_int(), tz=timezone.utc)

    def as_array(self) -> tuple[Claim, ...]:
        return self._expect(ClaimType.ARRAY)

    def as_object(self) -> dict[str, Claim]:
        return dict(self._expect(ClaimType.OBJECT))

    def as_set(self) -> frozenset[str]:
        """Return an ARRAY of strings as a set; duplicates collapse."""
        return frozenset(item.as_string() for item in self.as_array())

    def to_json(self) -> Any:
        """Return the plain JSON-compatible Python value."""
        if self._type is ClaimType.ARRAY:
            return [item.to_json() for item in self._value]
        if self._type is ClaimType.OBJECT:
            return {key: item.to_json() for key, item in self._value.items()}
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Claim):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self._type is ClaimType.OBJECT:
            return dict(self._value) == dict(other._value)
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Claim({self.to_json()!r})"
