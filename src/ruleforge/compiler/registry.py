"""Rule compiler registry and the recursive dispatch entry point.

Each rule kind registers exactly one compiler function. A compiler receives
the rule and its enclosing rule (some checks behave differently under
``string`` than under ``number``) and returns a Validator.
"""

from collections.abc import Callable, Collection, Sequence
from typing import Any, Protocol

from ruleforge.errors import SchemaError
from ruleforge.rules.types import MismatchRule, Rule


class Validator(Protocol):
    """A compiled rule. Returns None on success, raises ValidationError otherwise."""

    def __call__(self, value: Any) -> None:
        ...


RuleCompiler = Callable[[Any, Rule | None], Validator]


class RuleCompilers:
    """Registry mapping rule kinds to their compiler functions.

    Example:
        @RuleCompilers.register("min")
        def compile_min(rule, parent):
            ...

        validator = RuleCompilers.get("min")(rule, parent)
    """

    _compilers: dict[str, RuleCompiler] = {}

    @classmethod
    def register(cls, *kinds: str) -> Callable[[RuleCompiler], RuleCompiler]:
        """Decorator registering a compiler for one or more rule kinds."""

        def decorator(compiler: RuleCompiler) -> RuleCompiler:
            for kind in kinds:
                if kind in cls._compilers:
                    raise ValueError(f"Rule kind '{kind}' is already registered")
                cls._compilers[kind] = compiler
            return compiler

        return decorator

    @classmethod
    def get(cls, kind: str) -> RuleCompiler:
        """Get the compiler for a rule kind.

        Raises:
            SchemaError: If no compiler handles this kind
        """
        if kind not in cls._compilers:
            raise SchemaError(f"Unexpected rule: '{kind}'")
        return cls._compilers[kind]

    @classmethod
    def is_registered(cls, kind: str) -> bool:
        return kind in cls._compilers

    @classmethod
    def list_registered(cls) -> list[str]:
        return sorted(cls._compilers)


# =============================================================================
# Dispatch
# =============================================================================


def compile_node(
    rule: Any,
    allowed: Collection[str],
    parent: Rule | None = None,
) -> Validator:
    """Compile one rule that sits at a position accepting ``allowed`` kinds.

    Raises:
        SchemaError: If the rule is not a rule, is out of place, or is malformed
    """
    if not isinstance(rule, Rule) or not rule.kind:
        raise SchemaError(f"Invalid rule: cannot be '{type(rule).__name__}'")
    if rule.kind not in allowed:
        raise SchemaError(f"Unexpected rule: '{rule.kind}'")
    return RuleCompilers.get(rule.kind)(rule, parent)


def children_of(rule: Rule) -> Sequence[Any]:
    """Return the child rules of a composite rule as a sequence."""
    children = getattr(rule, "rules", ())
    if children is None:
        return ()
    if not isinstance(children, (list, tuple)):
        raise SchemaError(f'Invalid "{rule.kind}" rule: "rules" property must be a list')
    return children


def compile_children(
    owner: str,
    children: Sequence[Any],
    allowed: Collection[str],
    parent: Rule | None,
) -> tuple[list[Validator], str | None]:
    """Compile the children of a container or ``any`` rule in order.

    A single ``mismatch`` child is pulled out rather than compiled; its
    message is returned alongside the validators.

    Args:
        owner: Kind reported in the error path for a failing child
        children: Child rules in declaration order
        allowed: Kinds legal at this position
        parent: Container the checks apply to

    Returns:
        Tuple of (validators, mismatch message or None)
    """
    validators: list[Validator] = []
    mismatch_message: str | None = None
    seen_mismatch = False

    for index, child in enumerate(children, start=1):
        try:
            if isinstance(child, MismatchRule):
                if "mismatch" not in allowed:
                    raise SchemaError("Unexpected rule: 'mismatch'")
                if seen_mismatch:
                    raise SchemaError('Duplicate "mismatch" rule: only one is allowed')
                seen_mismatch = True
                mismatch_message = message_of(child)
            else:
                validators.append(compile_node(child, allowed, parent))
        except SchemaError as e:
            raise e.within(owner, index=index) from e

    return validators, mismatch_message


def message_of(rule: Rule) -> str | None:
    """Return a rule's override message, checking its type."""
    message = getattr(rule, "message", None)
    if message is None or message == "":
        return None
    if not isinstance(message, str):
        raise SchemaError(f'Invalid "{rule.kind}" rule: "message" property must be a string')
    return message
