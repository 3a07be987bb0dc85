"""Tagged value model for registry attributes.

A Value pairs a Kind with a payload that is always interpretable as exactly
that kind. Construction validates the payload, so every Value in the system
satisfies its kind's type and range. Conversion from untrusted input (schema
literals) goes through make(), which applies the lenient default policy for
missing or mistyped literals and rejects out-of-range numbers.
"""

import math
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, assert_never

from datamodels.core.errors import InvalidValueError, ValueOutOfRangeError

FLOAT32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]


class Kind(IntEnum):
    """Attribute value kinds, numbered by their schema type code."""

    STRING = 0
    INT32 = 1
    UINT32 = 2
    BOOL = 3
    DATETIME = 4
    BASE64 = 5
    INT64 = 6
    UINT64 = 7
    FLOAT32 = 8
    FLOAT64 = 9
    BYTE = 10

    @property
    def is_string(self) -> bool:
        return self in (Kind.STRING, Kind.DATETIME, Kind.BASE64)

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_RANGES

    @property
    def is_float(self) -> bool:
        return self in (Kind.FLOAT32, Kind.FLOAT64)

    def default(self) -> "str | int | float | bool":
        """Zero/empty payload used when a literal is absent or mistyped."""
        match self:
            case Kind.STRING | Kind.DATETIME | Kind.BASE64:
                return ""
            case Kind.INT32 | Kind.UINT32 | Kind.INT64 | Kind.UINT64 | Kind.BYTE:
                return 0
            case Kind.FLOAT32 | Kind.FLOAT64:
                return 0.0
            case Kind.BOOL:
                return False
            case _:
                assert_never(self)


_INTEGER_RANGES: dict[Kind, tuple[int, int]] = {
    Kind.INT32: (-(2**31), 2**31 - 1),
    Kind.UINT32: (0, 2**32 - 1),
    Kind.INT64: (-(2**63), 2**63 - 1),
    Kind.UINT64: (0, 2**64 - 1),
    Kind.BYTE: (0, 2**8 - 1),
}


def _to_float32(number: float) -> float:
    return struct.unpack("<f", struct.pack("<f", number))[0]


@dataclass(frozen=True)
class Value:
    """An immutable kind-tagged payload.

    Attributes:
        kind: The value's kind
        payload: str for string kinds, int for integer kinds and Byte,
            float for Float32/Float64, bool for Bool
    """

    kind: Kind
    payload: str | int | float | bool

    def __post_init__(self) -> None:
        kind = Kind(self.kind)
        object.__setattr__(self, "kind", kind)
        payload = self.payload

        match kind:
            case Kind.STRING | Kind.DATETIME | Kind.BASE64:
                if not isinstance(payload, str):
                    raise InvalidValueError(f"{kind.name} payload must be str, got {payload!r}")
            case Kind.BOOL:
                if not isinstance(payload, bool):
                    raise InvalidValueError(f"BOOL payload must be bool, got {payload!r}")
            case Kind.INT32 | Kind.UINT32 | Kind.INT64 | Kind.UINT64 | Kind.BYTE:
                if isinstance(payload, bool) or not isinstance(payload, int):
                    raise InvalidValueError(f"{kind.name} payload must be int, got {payload!r}")
                low, high = _INTEGER_RANGES[kind]
                if not low <= payload <= high:
                    raise ValueOutOfRangeError(
                        f"{payload} is outside {kind.name} range [{low}, {high}]"
                    )
            case Kind.FLOAT32 | Kind.FLOAT64:
                if isinstance(payload, bool) or not isinstance(payload, (int, float)):
                    raise InvalidValueError(f"{kind.name} payload must be float, got {payload!r}")
                try:
                    number = float(payload)
                except OverflowError as e:
                    raise ValueOutOfRangeError(f"{payload} is outside {kind.name} range") from e
                if kind is Kind.FLOAT32:
                    if math.isfinite(number) and abs(number) > FLOAT32_MAX:
                        raise ValueOutOfRangeError(f"{number} is outside FLOAT32 range")
                    number = _to_float32(number)
                object.__setattr__(self, "payload", number)
            case _:
                assert_never(kind)

    @staticmethod
    def string(text: str) -> "Value":
        return Value(Kind.STRING, text)

    @staticmethod
    def datetime(text: str) -> "Value":
        return Value(Kind.DATETIME, text)

    @staticmethod
    def base64(text: str) -> "Value":
        return Value(Kind.BASE64, text)

    @staticmethod
    def int32(number: int) -> "Value":
        return Value(Kind.INT32, number)

    @staticmethod
    def uint32(number: int) -> "Value":
        return Value(Kind.UINT32, number)

    @staticmethod
    def int64(number: int) -> "Value":
        return Value(Kind.INT64, number)

    @staticmethod
    def uint64(number: int) -> "Value":
        return Value(Kind.UINT64, number)

    @staticmethod
    def byte(number: int) -> "Value":
        return Value(Kind.BYTE, number)

    @staticmethod
    def boolean(flag: bool) -> "Value":
        return Value(Kind.BOOL, flag)

    @staticmethod
    def float32(number: float) -> "Value":
        return Value(Kind.FLOAT32, number)

    @staticmethod
    def float64(number: float) -> "Value":
        return Value(Kind.FLOAT64, number)

    @staticmethod
    def default_for(kind: Kind) -> "Value":
        return Value(kind, kind.default())

    def as_str(self) -> str:
        """Return the string payload, raising if the kind is not string-like."""
        if not self.kind.is_string:
            raise TypeError(f"{self.kind.name} value has no string payload")
        assert isinstance(self.payload, str)
        return self.payload

    def as_int(self) -> int:
        """Return the integer payload, raising if the kind is not an integer kind."""
        if not self.kind.is_integer:
            raise TypeError(f"{self.kind.name} value has no integer payload")
        assert isinstance(self.payload, int)
        return self.payload

    def as_float(self) -> float:
        if not self.kind.is_float:
            raise TypeError(f"{self.kind.name} value has no float payload")
        assert isinstance(self.payload, float)
        return self.payload

    def as_bool(self) -> bool:
        if self.kind is not Kind.BOOL:
            raise TypeError(f"{self.kind.name} value has no boolean payload")
        assert isinstance(self.payload, bool)
        return self.payload


def make(kind: Kind, raw: Any) -> Value:
    """Convert an untrusted literal into a Value of the given kind.

    Missing (None) or mistyped literals degrade to the kind's default.
    Numbers that do not fit the kind are rejected, never clamped.

    Args:
        kind: Target kind
        raw: Decoded JSON literal, or None when the literal was absent

    Returns:
        Validated Value of the given kind

    Raises:
        ValueOutOfRangeError: If a numeric literal does not fit the kind
    """
    kind = Kind(kind)
    is_number = isinstance(raw, (int, float)) and not isinstance(raw, bool)

    match kind:
        case Kind.STRING | Kind.DATETIME | Kind.BASE64:
            return Value(kind, raw if isinstance(raw, str) else "")
        case Kind.BOOL:
            return Value(kind, raw if isinstance(raw, bool) else False)
        case Kind.INT32 | Kind.UINT32 | Kind.INT64 | Kind.UINT64 | Kind.BYTE:
            if not is_number:
                return Value.default_for(kind)
            if isinstance(raw, float):
                if not math.isfinite(raw):
                    raise ValueOutOfRangeError(f"{raw} is outside {kind.name} range")
                low, high = _INTEGER_RANGES[kind]
                if not low <= raw <= high:
                    raise ValueOutOfRangeError(
                        f"{raw} is outside {kind.name} range [{low}, {high}]"
                    )
                raw = math.trunc(raw)
            return Value(kind, raw)
        case Kind.FLOAT32 | Kind.FLOAT64:
            if not is_number:
                return Value.default_for(kind)
            return Value(kind, raw)
        case _:
            assert_never(kind)


def as_string(value: Value) -> str:
    """Render a value as text for bus payloads and event logging."""
    match value.kind:
        case Kind.STRING | Kind.DATETIME | Kind.BASE64:
            return value.as_str()
        case Kind.BOOL:
            return "true" if value.as_bool() else "false"
        case Kind.INT32 | Kind.UINT32 | Kind.INT64 | Kind.UINT64 | Kind.BYTE:
            return str(value.as_int())
        case Kind.FLOAT32 | Kind.FLOAT64:
            return f"{value.as_float():f}"
        case _:
            assert_never(value.kind)
