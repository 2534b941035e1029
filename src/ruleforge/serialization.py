"""Convert rule trees to and from plain dictionaries.

The dictionary form is what rule files contain:

    {"kind": "object", "rules": [
        {"kind": "prop", "name": "age", "rules": [
            {"kind": "number", "rules": [{"kind": "min", "value": 0}]}
        ]}
    ]}

Documents are checked against ``schemas/rule.schema.json`` before any rule
is built. Dates are written as ISO strings; the compiler parses them back.
"""

import dataclasses
import json
from collections.abc import Mapping
from datetime import date, datetime
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaError

from ruleforge.errors import SchemaError, SchemaLocation
from ruleforge.rules.types import RULE_TYPES, CompositeRule, Rule

_SCHEMAS_DIR = Path(__file__).parent / "schemas"

# JSON Schema type name -> wording used in error messages
_TYPE_NAMES = {
    "array": "a list",
    "string": "a string",
    "integer": "an integer",
    "object": "an object",
}


def rule_to_dict(rule: Rule) -> dict[str, Any]:
    """Convert a rule tree to a JSON-compatible dictionary."""
    data: dict[str, Any] = {"kind": rule.kind}
    for field in dataclasses.fields(rule):
        value = getattr(rule, field.name)
        if field.name == "rules":
            data["rules"] = [rule_to_dict(child) for child in value]
        elif field.name == "message" and value is None:
            continue
        elif isinstance(value, (date, datetime)):
            data[field.name] = value.isoformat()
        else:
            data[field.name] = value
    return data


def rule_from_dict(data: Any) -> Rule:
    """Build a rule tree from its dictionary form.

    Raises:
        SchemaError: If the document does not match the rule file schema.
            The error path points at the offending node.
    """
    validator = _rule_validator()
    errors = sorted(validator.iter_errors(data), key=lambda e: e.path)
    if errors:
        raise _to_schema_error(data, errors[0])
    return _build(data)


@lru_cache(maxsize=1)
def _rule_validator() -> Draft202012Validator:
    with (_SCHEMAS_DIR / "rule.schema.json").open() as fh:
        schema = json.load(fh)
    return Draft202012Validator(schema)


def _build(data: Mapping[str, Any]) -> Rule:
    rule_type = RULE_TYPES[data["kind"]]
    params = {key: value for key, value in data.items() if key != "kind"}
    if issubclass(rule_type, CompositeRule):
        params["rules"] = tuple(_build(child) for child in params.get("rules", ()))
    return rule_type(**params)


def _to_schema_error(document: Any, error: JsonSchemaError) -> SchemaError:
    """Translate a jsonschema error into a SchemaError with a rule path."""
    steps = list(error.absolute_path)
    node = document
    locations: list[SchemaLocation] = []

    # Descend through "rules" arrays; whatever is left names a field of node
    while len(steps) >= 2 and steps[0] == "rules" and isinstance(steps[1], int):
        locations.append(SchemaLocation(str(node.get("kind")), index=steps[1] + 1))
        node = node["rules"][steps[1]]
        steps = steps[2:]

    return SchemaError(_describe(node, steps, error), tuple(locations))


def _describe(node: Any, steps: list[Any], error: JsonSchemaError) -> str:
    if error.validator == "type" and not steps:
        return f"Invalid rule: cannot be '{type(node).__name__}'"
    if error.validator == "enum" and steps == ["kind"]:
        return f"Unexpected rule: '{error.instance}'"
    if error.validator == "required":
        return 'Invalid rule: "kind" property is required'

    kind = node.get("kind") if isinstance(node, Mapping) else None
    if error.validator == "additionalProperties":
        known = error.schema.get("properties", {})
        unknown = sorted(str(key) for key in node if key not in known)
        return f'Invalid "{kind}" rule: unknown properties {", ".join(unknown)}'
    if error.validator == "type" and len(steps) == 1:
        expected = error.validator_value
        if isinstance(expected, str):
            expected = [expected]
        wording = " or ".join(_TYPE_NAMES.get(name, name) for name in expected if name != "null")
        return f'Invalid "{kind}" rule: "{steps[0]}" property must be {wording}'
    return f'Invalid "{kind}" rule: {error.message}'
