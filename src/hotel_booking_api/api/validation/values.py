from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ValueKind(StrEnum):
    ABSENT = "absent"
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(slots=True, frozen=True)
class DynamicValue:
    """A decoded JSON value tagged with its runtime kind.

    Example:
        ```python
        value = DynamicValue.from_payload({"price": 10}, "price")
        assert value.kind is ValueKind.NUMBER
        ```
    """

    kind: ValueKind
    raw: Any = None

    @classmethod
    def of(cls, raw: Any) -> "DynamicValue":
        # bool is checked before numbers because it subclasses int.
        if raw is None:
            return cls(ValueKind.NULL)
        if isinstance(raw, bool):
            return cls(ValueKind.BOOLEAN, raw)
        if isinstance(raw, (int, float)):
            return cls(ValueKind.NUMBER, raw)
        if isinstance(raw, str):
            return cls(ValueKind.STRING, raw)
        if isinstance(raw, (list, tuple)):
            return cls(ValueKind.ARRAY, raw)
        if isinstance(raw, Mapping):
            return cls(ValueKind.OBJECT, raw)
        raise TypeError(f"unsupported JSON value type: {type(raw).__name__}")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], key: str) -> "DynamicValue":
        if key not in payload:
            return cls(ValueKind.ABSENT)
        return cls.of(payload[key])

    @property
    def is_present(self) -> bool:
        return self.kind not in (ValueKind.ABSENT, ValueKind.NULL)

    def measure(self) -> int | float | None:
        """Size used by bound rules: length for text and collections, value for numbers."""
        if self.kind in (ValueKind.STRING, ValueKind.ARRAY, ValueKind.OBJECT):
            return len(self.raw)
        if self.kind is ValueKind.NUMBER:
            return self.raw
        return None
