"""Ruleforge: declarative data validation.

Build a rule tree with the factory functions, compile it once, then
validate any number of values:

    from ruleforge import compile_rule, rules as r

    validate = compile_rule(
        r.object(
            r.prop("name", r.required(r.string(r.min(1)))),
            r.prop("tags", r.array(r.item(r.string()), r.max(5))),
        )
    )
    validate({"name": "thor", "tags": ["admin"]})

Two error types cross the boundary:
- SchemaError: the rule tree is malformed (raised by compile_rule / Schema)
- ValidationError: a value failed validation (raised by the validator)
"""

from ruleforge import rules
from ruleforge.compiler import RuleCompilers, Validator, compile_rule
from ruleforge.errors import (
    Location,
    RuleforgeError,
    SchemaError,
    SchemaLocation,
    ValidationError,
)
from ruleforge.rules import (
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
from ruleforge.schema import Schema
from ruleforge.serialization import rule_from_dict, rule_to_dict

__all__ = [
    # Compiler
    "RuleCompilers",
    "Schema",
    "Validator",
    "compile_rule",
    # Errors
    "Location",
    "RuleforgeError",
    "SchemaError",
    "SchemaLocation",
    "ValidationError",
    # Serialization
    "rule_from_dict",
    "rule_to_dict",
    # Rules
    "rules",
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
]
