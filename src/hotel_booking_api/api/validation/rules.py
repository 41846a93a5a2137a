from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum


class InvalidRuleDeclarationError(ValueError):
    """Raised when a validation rule or schema is declared incorrectly."""

    pass


class RuleKind(StrEnum):
    REQUIRED = "required"
    STRING = "string"
    INTEGER = "integer"
    NOT_EMPTY = "notEmpty"
    POSITIVE = "positive"
    LESS_THAN = "lt"
    GREATER_THAN_OR_EQUAL = "gte"
    UUID4 = "uuid4"


PARAMETRIZED_RULES = frozenset({RuleKind.LESS_THAN, RuleKind.GREATER_THAN_OR_EQUAL})

MESSAGE_TEMPLATES: dict[RuleKind, str] = {
    RuleKind.REQUIRED: "{field} is required",
    RuleKind.STRING: "{field} must be string",
    RuleKind.INTEGER: "{field} must be integer",
    RuleKind.NOT_EMPTY: "{field} must not be empty",
    RuleKind.POSITIVE: "{field} must be positive",
    RuleKind.LESS_THAN: "{field} must be less than {param}",
    RuleKind.GREATER_THAN_OR_EQUAL: "{field} must be greater than or equal to {param}",
    RuleKind.UUID4: "{field} must be uuidv4",
}


@dataclass(slots=True, frozen=True)
class FieldRule:
    """One check applied to a request field, optionally parametrized."""

    kind: RuleKind
    param: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, RuleKind):
            raise InvalidRuleDeclarationError(f"unknown rule kind: {self.kind!r}")
        if self.kind in PARAMETRIZED_RULES:
            if isinstance(self.param, bool) or not isinstance(self.param, int):
                raise InvalidRuleDeclarationError(
                    f"rule '{self.kind}' requires an integer parameter"
                )
        elif self.param is not None:
            raise InvalidRuleDeclarationError(f"rule '{self.kind}' does not take a parameter")

    def message(self, field_name: str) -> str:
        return MESSAGE_TEMPLATES[self.kind].format(field=field_name, param=self.param)

    def __str__(self) -> str:
        if self.param is None:
            return self.kind.value
        return f"{self.kind.value}={self.param}"

    @classmethod
    def parse(cls, token: str) -> "FieldRule":
        """Build a rule from its tag form, e.g. `required` or `lt=256`."""
        name, separator, raw_param = token.strip().partition("=")
        try:
            kind = RuleKind(name)
        except ValueError:
            raise InvalidRuleDeclarationError(f"unknown rule: {token!r}") from None
        if not separator:
            return cls(kind)
        try:
            param = int(raw_param)
        except ValueError:
            raise InvalidRuleDeclarationError(
                f"rule '{name}' parameter must be an integer, got {raw_param!r}"
            ) from None
        return cls(kind, param)


def parse_rules(tags: str) -> tuple[FieldRule, ...]:
    """Parse a comma-separated tag list such as `required,string,lt=256`."""
    return tuple(FieldRule.parse(token) for token in tags.split(","))


def coerce_rules(rules: str | Iterable[FieldRule]) -> tuple[FieldRule, ...]:
    if isinstance(rules, str):
        return parse_rules(rules)
    coerced = tuple(rules)
    for rule in coerced:
        if not isinstance(rule, FieldRule):
            raise InvalidRuleDeclarationError(f"expected FieldRule, got {rule!r}")
    return coerced


REQUIRED = FieldRule(RuleKind.REQUIRED)
STRING = FieldRule(RuleKind.STRING)
INTEGER = FieldRule(RuleKind.INTEGER)
NOT_EMPTY = FieldRule(RuleKind.NOT_EMPTY)
POSITIVE = FieldRule(RuleKind.POSITIVE)
UUID4 = FieldRule(RuleKind.UUID4)


def less_than(limit: int) -> FieldRule:
    return FieldRule(RuleKind.LESS_THAN, limit)


def greater_than_or_equal(limit: int) -> FieldRule:
    return FieldRule(RuleKind.GREATER_THAN_OR_EQUAL, limit)
