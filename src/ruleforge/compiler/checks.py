"""Leaf check validators.

Each check is compiled once into a frozen validator object holding its
pre-parsed constraint (a number, a millisecond timestamp or a compiled
pattern). Checks assume the enclosing container has already verified the
value's kind; a value of another kind is left for the container to report.

- equal: value equality (millisecond precision for dates)
- min/max/less/more: numeric bounds, or length bounds for strings and arrays
- range: inclusive numeric range
- pattern: regular expression search
- before/after/begin/end/between: date boundaries
"""

import operator
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ruleforge.compiler.registry import RuleCompilers, message_of
from ruleforge.errors import SchemaError, ValidationError
from ruleforge.rules.types import (
    BetweenRule,
    DateRelationRule,
    EqualRule,
    PatternRule,
    RangeRule,
    Rule,
    ValueRule,
)
from ruleforge.values import format_date, is_number, kind_of, parse_pattern, to_timestamp


def _reject(message: str | None, default: str) -> None:
    raise ValidationError(message or default)


# =============================================================================
# Equal
# =============================================================================


@dataclass(frozen=True)
class EqualValidator:
    """Rejects values of the container's kind that differ from ``expected``.

    For dates ``expected`` is a millisecond timestamp.
    """

    container: str
    expected: Any
    display: str
    message: str | None = None

    def __call__(self, value: Any) -> None:
        if kind_of(value) != self.container:
            return
        if self.container == "date":
            matched = to_timestamp(value) == self.expected
        else:
            matched = value == self.expected
        if not matched:
            _reject(self.message, f"value must be equal to {self.display}")


@RuleCompilers.register("equal")
def compile_equal(rule: EqualRule, parent: Rule | None) -> EqualValidator:
    container = parent.kind if parent is not None else ""
    invalid = SchemaError(f'Invalid "equal" rule: "value" property must be a valid {container}')

    if container == "date":
        if kind_of(rule.value) not in ("date", "string"):
            raise invalid
        expected = to_timestamp(rule.value)
        if expected is None:
            raise invalid
        display = format_date(rule.value)
    else:
        if kind_of(rule.value) != container:
            raise invalid
        if container == "number" and not is_number(rule.value):
            raise invalid
        expected = rule.value
        display = str(rule.value)

    return EqualValidator(
        container=container,
        expected=expected,
        display=display,
        message=message_of(rule),
    )


# =============================================================================
# Numeric and Length Bounds
# =============================================================================


# kind -> (violation test, wording)
_BOUNDS: dict[str, tuple[Callable[[Any, Any], bool], str]] = {
    "min": (operator.lt, "must be greater or equal to"),
    "max": (operator.gt, "must be less or equal to"),
    "less": (operator.ge, "must be less than"),
    "more": (operator.le, "must be greater than"),
}

_SUBJECTS = {
    "number": "value",
    "string": "string length",
    "array": "array length",
}


@dataclass(frozen=True)
class BoundValidator:
    """Compares a number, or the length of a string or array, to a limit."""

    kind: str
    container: str
    limit: float
    message: str | None = None

    def __call__(self, value: Any) -> None:
        if kind_of(value) != self.container:
            return

        violates, wording = _BOUNDS[self.kind]
        if self.container == "number":
            failed = not is_number(value) or violates(value, self.limit)
        else:
            failed = violates(len(value), self.limit)

        if failed:
            _reject(self.message, f"{_SUBJECTS[self.container]} {wording} {self.limit}")


@RuleCompilers.register("min", "max", "less", "more")
def compile_bound(rule: ValueRule, parent: Rule | None) -> BoundValidator:
    if not is_number(rule.value):
        raise SchemaError(f'Invalid "{rule.kind}" rule: "value" property must be a valid number')
    container = parent.kind if parent is not None else ""
    if container not in _SUBJECTS:
        raise SchemaError(
            f'Invalid "{rule.kind}" rule: only applies to number, string or array values'
        )
    return BoundValidator(
        kind=rule.kind,
        container=container,
        limit=rule.value,
        message=message_of(rule),
    )


# =============================================================================
# Range
# =============================================================================


@dataclass(frozen=True)
class RangeValidator:
    low: float
    high: float
    message: str | None = None

    def __call__(self, value: Any) -> None:
        if kind_of(value) != "number":
            return
        if not is_number(value) or value < self.low or value > self.high:
            _reject(self.message, f"value must be between {self.low} and {self.high}")


@RuleCompilers.register("range")
def compile_range(rule: RangeRule, parent: Rule | None) -> RangeValidator:
    if not is_number(rule.min):
        raise SchemaError('Invalid "range" rule: "min" property must be a valid number')
    if not is_number(rule.max):
        raise SchemaError('Invalid "range" rule: "max" property must be a valid number')
    if rule.min >= rule.max:
        raise SchemaError('Invalid "range" rule: "min" property must be less than "max" property')
    return RangeValidator(low=rule.min, high=rule.max, message=message_of(rule))


# =============================================================================
# Pattern
# =============================================================================

_PATTERN_ERROR = 'Invalid "pattern" rule: must provide a valid /pattern/flags string'


@dataclass(frozen=True)
class PatternValidator:
    expression: re.Pattern
    literal: str
    message: str | None = None

    def __call__(self, value: Any) -> None:
        if not isinstance(value, str):
            return
        if self.expression.search(value) is None:
            _reject(self.message, f"string must match expression: {self.literal}")


@RuleCompilers.register("pattern")
def compile_pattern(rule: PatternRule, parent: Rule | None) -> PatternValidator:
    if not isinstance(rule.regex, str):
        raise SchemaError(_PATTERN_ERROR)
    try:
        expression = parse_pattern(rule.regex)
    except ValueError as e:
        raise SchemaError(f"{_PATTERN_ERROR}: {e}") from e
    return PatternValidator(expression=expression, literal=rule.regex, message=message_of(rule))


# =============================================================================
# Date Boundaries
# =============================================================================


# kind -> (violation test, wording)
_DATE_BOUNDS: dict[str, tuple[Callable[[int, int], bool], str]] = {
    "before": (operator.ge, "date must be earlier than"),
    "after": (operator.le, "date must be later than"),
    "begin": (operator.lt, "date must be later than or equal to"),
    "end": (operator.gt, "date must be earlier than or equal to"),
}


def _boundary(rule: Rule, field_name: str, value: Any) -> int:
    """Resolve a date boundary to a timestamp, or raise SchemaError."""
    timestamp = None
    if kind_of(value) in ("date", "string"):
        timestamp = to_timestamp(value)
    if timestamp is None:
        raise SchemaError(
            f'Invalid "{rule.kind}" rule: "{field_name}" property must be a valid date'
        )
    return timestamp


@dataclass(frozen=True)
class DateBoundValidator:
    kind: str
    boundary: int
    display: str
    message: str | None = None

    def __call__(self, value: Any) -> None:
        if kind_of(value) != "date":
            return
        violates, wording = _DATE_BOUNDS[self.kind]
        if violates(to_timestamp(value), self.boundary):
            _reject(self.message, f"{wording} {self.display}")


@RuleCompilers.register("before", "after", "begin", "end")
def compile_date_bound(rule: DateRelationRule, parent: Rule | None) -> DateBoundValidator:
    return DateBoundValidator(
        kind=rule.kind,
        boundary=_boundary(rule, "value", rule.value),
        display=format_date(rule.value),
        message=message_of(rule),
    )


@dataclass(frozen=True)
class BetweenValidator:
    begin: int
    end: int
    display: str
    message: str | None = None

    def __call__(self, value: Any) -> None:
        if kind_of(value) != "date":
            return
        timestamp = to_timestamp(value)
        if timestamp < self.begin or timestamp > self.end:
            _reject(self.message, f"date must be between {self.display}")


@RuleCompilers.register("between")
def compile_between(rule: BetweenRule, parent: Rule | None) -> BetweenValidator:
    begin = _boundary(rule, "begin", rule.begin)
    end = _boundary(rule, "end", rule.end)
    if begin >= end:
        raise SchemaError('Invalid "between" rule: "begin" property must be earlier than "end" property')
    return BetweenValidator(
        begin=begin,
        end=end,
        display=f"{format_date(rule.begin)} and {format_date(rule.end)}",
        message=message_of(rule),
    )
