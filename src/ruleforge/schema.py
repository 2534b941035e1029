"""Schema: a rule tree paired with its compiled validator."""

import json
from typing import Any

from ruleforge.compiler import compile_rule
from ruleforge.errors import ValidationError
from ruleforge.rules.types import Rule
from ruleforge.serialization import rule_to_dict


class Schema:
    """Compiles a rule tree once and validates values against it.

    Usage:
        schema = Schema(object(prop("name", required(string(min(1))))))
        schema.validate({"name": "thor"})
        schema.is_valid({"name": ""})  # False
        print(schema)                  # rule tree as JSON

    Raises:
        SchemaError: From the constructor, if the rule tree is malformed
    """

    def __init__(self, rule: Rule):
        self.rule = rule
        self._validator = compile_rule(rule)

    def validate(self, value: Any) -> None:
        """Raise ValidationError if ``value`` does not satisfy the rule tree."""
        self._validator(value)

    __call__ = validate

    def is_valid(self, value: Any) -> bool:
        try:
            self._validator(value)
        except ValidationError:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        return rule_to_dict(self.rule)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"Schema({self.rule.kind!r})"
