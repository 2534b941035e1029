"""Rule descriptor types.

A rule tree is plain, immutable data. Every rule kind has its own frozen
dataclass; the compiler dispatches on the ``kind`` class attribute.

Leaf rules (checks):
- equal, min, max, less, more, range, pattern
- before, after, begin, end, between
- mismatch (only carries the type-mismatch message)

Composite rules:
- any, union (alternation)
- object, string, number, boolean, date, array (primitive containers)
- required, prop, item (structural binders)
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class Rule:
    """Base class for all rule descriptors."""

    kind: ClassVar[str] = ""


# -----------------------------------------------------------------------------
# Check Rules
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class CheckRule(Rule):
    """A leaf constraint. ``message`` overrides the default failure text."""

    message: str | None = field(default=None, kw_only=True)


@dataclass(frozen=True)
class MismatchRule(CheckRule):
    """Custom message used when the container's own type check fails."""

    kind: ClassVar[str] = "mismatch"


@dataclass(frozen=True)
class EqualRule(CheckRule):
    kind: ClassVar[str] = "equal"
    value: Any = None


@dataclass(frozen=True)
class ValueRule(CheckRule):
    """Numeric bound, applied to numbers or to string/array lengths."""

    value: Any = None


@dataclass(frozen=True)
class MinRule(ValueRule):
    kind: ClassVar[str] = "min"


@dataclass(frozen=True)
class MaxRule(ValueRule):
    kind: ClassVar[str] = "max"


@dataclass(frozen=True)
class LessRule(ValueRule):
    kind: ClassVar[str] = "less"


@dataclass(frozen=True)
class MoreRule(ValueRule):
    kind: ClassVar[str] = "more"


@dataclass(frozen=True)
class RangeRule(CheckRule):
    kind: ClassVar[str] = "range"
    min: Any = None
    max: Any = None


@dataclass(frozen=True)
class DateRelationRule(CheckRule):
    """Date boundary given as a date, a datetime or a date string."""

    value: Any = None


@dataclass(frozen=True)
class BeforeRule(DateRelationRule):
    kind: ClassVar[str] = "before"


@dataclass(frozen=True)
class AfterRule(DateRelationRule):
    kind: ClassVar[str] = "after"


@dataclass(frozen=True)
class BeginRule(DateRelationRule):
    kind: ClassVar[str] = "begin"


@dataclass(frozen=True)
class EndRule(DateRelationRule):
    kind: ClassVar[str] = "end"


@dataclass(frozen=True)
class BetweenRule(CheckRule):
    kind: ClassVar[str] = "between"
    begin: Any = None
    end: Any = None


@dataclass(frozen=True)
class PatternRule(CheckRule):
    """Regular expression carried as a ``/body/flags`` literal."""

    kind: ClassVar[str] = "pattern"
    regex: Any = None


# -----------------------------------------------------------------------------
# Composite Rules
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class CompositeRule(Rule):
    """A rule holding an ordered tuple of child rules."""

    rules: tuple[Any, ...] = ()


@dataclass(frozen=True)
class AnyRule(CompositeRule):
    kind: ClassVar[str] = "any"


@dataclass(frozen=True)
class UnionRule(CompositeRule):
    kind: ClassVar[str] = "union"


@dataclass(frozen=True)
class PrimitiveRule(CompositeRule):
    """Container rule: a type check followed by AND-combined child checks."""
    pass


@dataclass(frozen=True)
class ObjectRule(PrimitiveRule):
    kind: ClassVar[str] = "object"


@dataclass(frozen=True)
class StringRule(PrimitiveRule):
    kind: ClassVar[str] = "string"


@dataclass(frozen=True)
class NumberRule(PrimitiveRule):
    kind: ClassVar[str] = "number"


@dataclass(frozen=True)
class BooleanRule(PrimitiveRule):
    kind: ClassVar[str] = "boolean"


@dataclass(frozen=True)
class DateRule(PrimitiveRule):
    kind: ClassVar[str] = "date"


@dataclass(frozen=True)
class ArrayRule(PrimitiveRule):
    kind: ClassVar[str] = "array"


@dataclass(frozen=True)
class RequiredRule(CompositeRule):
    """Marks a value as mandatory; wraps at most one sub-rule."""

    kind: ClassVar[str] = "required"
    message: str | None = None


@dataclass(frozen=True)
class PropRule(CompositeRule):
    """Binds one sub-rule to an object key."""

    kind: ClassVar[str] = "prop"
    name: Any = None


@dataclass(frozen=True)
class ItemRule(CompositeRule):
    """Binds one sub-rule to every element of an array."""

    kind: ClassVar[str] = "item"


RULE_TYPES: dict[str, type[Rule]] = {
    rule_type.kind: rule_type
    for rule_type in (
        MismatchRule,
        EqualRule,
        MinRule,
        MaxRule,
        LessRule,
        MoreRule,
        RangeRule,
        BeforeRule,
        AfterRule,
        BeginRule,
        EndRule,
        BetweenRule,
        PatternRule,
        AnyRule,
        UnionRule,
        ObjectRule,
        StringRule,
        NumberRule,
        BooleanRule,
        DateRule,
        ArrayRule,
        RequiredRule,
        PropRule,
        ItemRule,
    )
}
