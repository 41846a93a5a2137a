from hotel_booking_api.api.validation.field_validator import FieldValidator
from hotel_booking_api.api.validation.rules import (
    INTEGER,
    NOT_EMPTY,
    POSITIVE,
    REQUIRED,
    STRING,
    UUID4,
    FieldRule,
    InvalidRuleDeclarationError,
    RuleKind,
    greater_than_or_equal,
    less_than,
    parse_rules,
)
from hotel_booking_api.api.validation.schema import FieldSchema, RequestSchema
from hotel_booking_api.api.validation.values import DynamicValue, ValueKind

__all__ = [
    "INTEGER",
    "NOT_EMPTY",
    "POSITIVE",
    "REQUIRED",
    "STRING",
    "UUID4",
    "DynamicValue",
    "FieldRule",
    "FieldSchema",
    "FieldValidator",
    "InvalidRuleDeclarationError",
    "RequestSchema",
    "RuleKind",
    "ValueKind",
    "greater_than_or_equal",
    "less_than",
    "parse_rules",
]
