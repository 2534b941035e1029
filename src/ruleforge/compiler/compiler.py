"""Compile entry point for rule trees."""

import logging

from ruleforge.compiler.grammar import BINDABLE_KINDS
from ruleforge.compiler.registry import Validator, compile_node
from ruleforge.rules.types import Rule

logger = logging.getLogger(__name__)


def compile_rule(rule: Rule) -> Validator:
    """Compile a rule tree into a reusable validator.

    The root must be ``required``, a primitive container or ``union``.
    Every structural problem in the tree is reported here, never during
    validation.

    Args:
        rule: Root of the rule tree

    Returns:
        A validator; call it with one value. It returns None on success and
        raises ValidationError otherwise.

    Raises:
        SchemaError: If the rule tree is malformed

    Example:
        >>> validate = compile_rule(number(range(10, 100)))
        >>> validate(50)
        >>> validate(101)  # Raises ValidationError
    """
    validator = compile_node(rule, BINDABLE_KINDS)
    logger.debug("Compiled %r rule tree", rule.kind)
    return validator
