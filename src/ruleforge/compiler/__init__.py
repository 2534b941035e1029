"""Rule tree compiler.

Turns a rule tree into a tree of frozen validator objects:
- checks: leaf constraints (equal, bounds, range, pattern, dates)
- alternation: any, union
- binders: prop, item, required
- containers: object, string, number, boolean, date, array

Importing this package registers every rule compiler.
"""

from ruleforge.compiler import alternation, binders, checks, containers  # noqa: F401
from ruleforge.compiler.compiler import compile_rule
from ruleforge.compiler.registry import RuleCompilers, Validator, compile_node

__all__ = [
    "RuleCompilers",
    "Validator",
    "compile_node",
    "compile_rule",
]
