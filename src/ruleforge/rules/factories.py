"""Factory functions for building rule trees.

These only construct descriptors; every structural check happens when the
tree is compiled.

Example:
    from ruleforge import rules as r

    person = r.object(
        r.prop("name", r.required(r.string(r.min(1)))),
        r.prop("age", r.number(r.range(0, 150))),
    )
"""

import re
from typing import Any

from ruleforge.rules.types import (
    AfterRule,
    AnyRule,
    ArrayRule,
    BeforeRule,
    BeginRule,
    BetweenRule,
    BooleanRule,
    DateRule,
    EndRule,
    EqualRule,
    ItemRule,
    LessRule,
    MaxRule,
    MinRule,
    MismatchRule,
    MoreRule,
    NumberRule,
    ObjectRule,
    PatternRule,
    PropRule,
    RangeRule,
    RequiredRule,
    Rule,
    StringRule,
    UnionRule,
)
from ruleforge.values import pattern_to_literal


# =============================================================================
# Check Rules
# =============================================================================


def equal(value: Any, message: str | None = None) -> EqualRule:
    """Value must equal ``value``. Used inside string, number, boolean and date."""
    return EqualRule(value=value, message=message)


def min(value: float, message: str | None = None) -> MinRule:
    """Inclusive lower bound of a number, or of a string/array length."""
    return MinRule(value=value, message=message)


def max(value: float, message: str | None = None) -> MaxRule:
    """Inclusive upper bound of a number, or of a string/array length."""
    return MaxRule(value=value, message=message)


def less(value: float, message: str | None = None) -> LessRule:
    """Exclusive upper bound of a number."""
    return LessRule(value=value, message=message)


def more(value: float, message: str | None = None) -> MoreRule:
    """Exclusive lower bound of a number."""
    return MoreRule(value=value, message=message)


def range(min: float, max: float, message: str | None = None) -> RangeRule:
    """Inclusive numeric range."""
    return RangeRule(min=min, max=max, message=message)


def pattern(regex: str | re.Pattern, message: str | None = None) -> PatternRule:
    """String must match ``regex``, given as ``/body/flags`` or a compiled pattern.

    Raises:
        ValueError: If a compiled pattern uses flags a literal cannot carry
    """
    if isinstance(regex, re.Pattern):
        regex = pattern_to_literal(regex)
    return PatternRule(regex=regex, message=message)


def before(value: Any, message: str | None = None) -> BeforeRule:
    return BeforeRule(value=value, message=message)


def after(value: Any, message: str | None = None) -> AfterRule:
    return AfterRule(value=value, message=message)


def begin(value: Any, message: str | None = None) -> BeginRule:
    return BeginRule(value=value, message=message)


def end(value: Any, message: str | None = None) -> EndRule:
    return EndRule(value=value, message=message)


def between(begin: Any, end: Any, message: str | None = None) -> BetweenRule:
    """Inclusive date range."""
    return BetweenRule(begin=begin, end=end, message=message)


def mismatch(message: str | None = None) -> MismatchRule:
    """Custom message for a container's type mismatch."""
    return MismatchRule(message=message)


# =============================================================================
# Composite Rules
# =============================================================================


def any(*rules: Rule) -> AnyRule:
    """Passes when at least one of the check rules passes."""
    return AnyRule(rules=rules)


def union(*rules: Rule) -> UnionRule:
    """Passes when the value matches one of several primitive types."""
    return UnionRule(rules=rules)


def object(*rules: Rule) -> ObjectRule:
    return ObjectRule(rules=rules)


def string(*rules: Rule) -> StringRule:
    return StringRule(rules=rules)


def number(*rules: Rule) -> NumberRule:
    return NumberRule(rules=rules)


def boolean(*rules: Rule) -> BooleanRule:
    return BooleanRule(rules=rules)


def date(*rules: Rule) -> DateRule:
    return DateRule(rules=rules)


def array(*rules: Rule) -> ArrayRule:
    return ArrayRule(rules=rules)


def prop(name: str | int, *rules: Rule) -> PropRule:
    """Apply a sub-rule to ``input[name]``. Only valid inside ``object``."""
    return PropRule(name=name, rules=rules)


def item(*rules: Rule) -> ItemRule:
    """Apply a sub-rule to every array element. Only valid inside ``array``."""
    return ItemRule(rules=rules)


def required(*args: Rule | str | None, message: str | None = None) -> RequiredRule:
    """Value must not be None; optionally validated by a sub-rule.

    A trailing string argument is taken as the message, so both
    ``required(string(), "name is required")`` and ``required("missing")``
    work. None arguments stand for "no sub-rule" and are dropped.
    """
    rules = [arg for arg in args if arg is not None]
    if rules and isinstance(rules[-1], str):
        message = rules.pop()
    return RequiredRule(rules=tuple(rules), message=message)
