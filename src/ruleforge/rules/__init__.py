"""Rule descriptors and the factory functions that build them."""

from ruleforge.rules.factories import (
    after,
    any,
    array,
    before,
    begin,
    between,
    boolean,
    date,
    end,
    equal,
    item,
    less,
    max,
    min,
    mismatch,
    more,
    number,
    object,
    pattern,
    prop,
    range,
    required,
    string,
    union,
)
from ruleforge.rules.types import (
    RULE_TYPES,
    AfterRule,
    AnyRule,
    ArrayRule,
    BeforeRule,
    BeginRule,
    BetweenRule,
    BooleanRule,
    CheckRule,
    CompositeRule,
    DateRelationRule,
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
    PrimitiveRule,
    PropRule,
    RangeRule,
    RequiredRule,
    Rule,
    StringRule,
    UnionRule,
    ValueRule,
)

__all__ = [
    # Factories
    "after",
    "any",
    "array",
    "before",
    "begin",
    "between",
    "boolean",
    "date",
    "end",
    "equal",
    "item",
    "less",
    "max",
    "min",
    "mismatch",
    "more",
    "number",
    "object",
    "pattern",
    "prop",
    "range",
    "required",
    "string",
    "union",
    # Types
    "RULE_TYPES",
    "AfterRule",
    "AnyRule",
    "ArrayRule",
    "BeforeRule",
    "BeginRule",
    "BetweenRule",
    "BooleanRule",
    "CheckRule",
    "CompositeRule",
    "DateRelationRule",
    "DateRule",
    "EndRule",
    "EqualRule",
    "ItemRule",
    "LessRule",
    "MaxRule",
    "MinRule",
    "MismatchRule",
    "MoreRule",
    "NumberRule",
    "ObjectRule",
    "PatternRule",
    "PrimitiveRule",
    "PropRule",
    "RangeRule",
    "RequiredRule",
    "Rule",
    "StringRule",
    "UnionRule",
    "ValueRule",
]
