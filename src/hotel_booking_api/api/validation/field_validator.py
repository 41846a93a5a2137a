import re
from collections.abc import Callable, Mapping
from typing import Any

from hotel_booking_api.api.validation.rules import FieldRule, RuleKind
from hotel_booking_api.api.validation.schema import RequestSchema
from hotel_booking_api.api.validation.values import DynamicValue, ValueKind

_UUID4_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


def _is_required(value: DynamicValue, rule: FieldRule) -> bool:
    return value.is_present


def _is_string(value: DynamicValue, rule: FieldRule) -> bool:
    return value.kind is ValueKind.STRING


def _is_integer(value: DynamicValue, rule: FieldRule) -> bool:
    if value.kind is not ValueKind.NUMBER:
        return False
    if isinstance(value.raw, int):
        return True
    return value.raw.is_integer()


def _is_not_empty(value: DynamicValue, rule: FieldRule) -> bool:
    return value.kind is ValueKind.STRING and value.raw.strip() != ""


def _is_positive(value: DynamicValue, rule: FieldRule) -> bool:
    return value.kind is ValueKind.NUMBER and value.raw >= 0


def _is_less_than(value: DynamicValue, rule: FieldRule) -> bool:
    size = value.measure()
    return size is not None and size < rule.param


def _is_greater_than_or_equal(value: DynamicValue, rule: FieldRule) -> bool:
    size = value.measure()
    return size is not None and size >= rule.param


def _is_uuid4(value: DynamicValue, rule: FieldRule) -> bool:
    return value.kind is ValueKind.STRING and bool(_UUID4_PATTERN.fullmatch(value.raw))


_CHECKS: dict[RuleKind, Callable[[DynamicValue, FieldRule], bool]] = {
    RuleKind.REQUIRED: _is_required,
    RuleKind.STRING: _is_string,
    RuleKind.INTEGER: _is_integer,
    RuleKind.NOT_EMPTY: _is_not_empty,
    RuleKind.POSITIVE: _is_positive,
    RuleKind.LESS_THAN: _is_less_than,
    RuleKind.GREATER_THAN_OR_EQUAL: _is_greater_than_or_equal,
    RuleKind.UUID4: _is_uuid4,
}


class FieldValidator:
    """Validate loosely-typed JSON objects against a `RequestSchema`.

    Each field is checked rule by rule in declaration order and reports only
    its first violation, so a missing required field never also reports type
    errors. Messages keep the schema's field order.

    Example:
        ```python
        validator = FieldValidator()
        errors = validator.validate({"email": ""}, schema)
        # ["email must not be empty"]
        ```
    """

    def validate(self, payload: Mapping[str, Any], schema: RequestSchema) -> list[str]:
        """Return one message per invalid field; an empty list means valid."""
        messages: list[str] = []
        for field in schema:
            value = DynamicValue.from_payload(payload, field.name)
            violated = self._first_violation(value, field.rules)
            if violated is not None:
                messages.append(violated.message(field.display_name))
        return messages

    @staticmethod
    def _first_violation(
        value: DynamicValue,
        rules: tuple[FieldRule, ...],
    ) -> FieldRule | None:
        for rule in rules:
            if not _CHECKS[rule.kind](value, rule):
                return rule
        return None
