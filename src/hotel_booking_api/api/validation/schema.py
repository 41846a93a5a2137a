from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from hotel_booking_api.api.validation.rules import (
    FieldRule,
    InvalidRuleDeclarationError,
    coerce_rules,
)


@dataclass(slots=True, frozen=True)
class FieldSchema:
    name: str
    rules: tuple[FieldRule, ...]

    @property
    def display_name(self) -> str:
        return self.name[:1].lower() + self.name[1:]


class RequestSchema:
    """Ordered, immutable set of field rules for one request body shape.

    Rules can be given as `FieldRule` sequences or as tag strings. Declaration
    errors surface when the schema is built, typically at import time.

    Example:
        ```python
        schema = RequestSchema({"email": "required,string,notEmpty,lt=256"})
        ```
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, str | Iterable[FieldRule]]) -> None:
        if not fields:
            raise InvalidRuleDeclarationError("schema must declare at least one field")
        declared: list[FieldSchema] = []
        for name, rules in fields.items():
            if not isinstance(name, str) or not name:
                raise InvalidRuleDeclarationError("field names must be non-empty strings")
            coerced = coerce_rules(rules)
            if not coerced:
                raise InvalidRuleDeclarationError(f"field '{name}' declares no rules")
            declared.append(FieldSchema(name=name, rules=coerced))
        self._fields = tuple(declared)

    def __iter__(self) -> Iterator[FieldSchema]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)
