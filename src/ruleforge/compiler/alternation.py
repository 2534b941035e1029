"""Alternation validators: ``any`` and ``union``.

Both try every alternative before failing and aggregate the failures into
one message. ``any`` alternates check rules inside one container; ``union``
alternates whole containers of different kinds.
"""

from dataclasses import dataclass
from typing import Any

from ruleforge.compiler.grammar import ANY_CHILD_KINDS, VALUE_KINDS
from ruleforge.compiler.registry import (
    RuleCompilers,
    Validator,
    children_of,
    compile_children,
    compile_node,
    message_of,
)
from ruleforge.errors import SchemaError, ValidationError
from ruleforge.rules.types import AnyRule, MismatchRule, Rule, UnionRule
from ruleforge.values import kind_of, parse_date


# =============================================================================
# Any
# =============================================================================


@dataclass(frozen=True)
class AnyValidator:
    """Passes as soon as one alternative passes."""

    alternatives: tuple[Validator, ...]

    def __call__(self, value: Any) -> None:
        failures: list[str] = []
        for alternative in self.alternatives:
            try:
                alternative(value)
                return
            except ValidationError as e:
                failures.append(e.message)

        listing = ", ".join(f"{number}. {failure}" for number, failure in enumerate(failures, 1))
        raise ValidationError(f"not eligible: ({listing})")


@RuleCompilers.register("any")
def compile_any(rule: AnyRule, parent: Rule | None) -> AnyValidator:
    container = parent.kind if parent is not None else ""
    if container not in ANY_CHILD_KINDS:
        raise SchemaError(
            'Invalid "any" rule: only applies inside string, number, boolean or date rules'
        )

    alternatives, _ = compile_children(
        "any", children_of(rule), ANY_CHILD_KINDS[container], parent
    )
    if len(alternatives) < 2:
        raise SchemaError('Invalid "any" rule: at least provide two sub rules')
    return AnyValidator(alternatives=tuple(alternatives))


# =============================================================================
# Union
# =============================================================================


@dataclass(frozen=True)
class UnionValidator:
    """Dispatches the value to the branch declared for its kind.

    A string that parses as a date is also offered to the ``date`` branch.

    Attributes:
        branches: (kind, validator) pairs in declaration order
        mismatch_message: Override for "no branch accepts this kind"
    """

    branches: tuple[tuple[str, Validator], ...]
    mismatch_message: str | None = None

    @property
    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.branches]

    def __call__(self, value: Any) -> None:
        if value is None:
            return

        actual = kind_of(value)
        candidates = [
            validator
            for kind, validator in self.branches
            if kind == actual
            or (kind == "date" and actual == "string" and parse_date(value) is not None)
        ]

        if not candidates:
            raise ValidationError(
                self.mismatch_message
                or f"unexpected type: expected one of '{', '.join(self.kinds)}' "
                f"but found '{actual}'"
            )

        failures: list[ValidationError] = []
        for validator in candidates:
            try:
                validator(value)
                return
            except ValidationError as e:
                failures.append(e)

        if len(failures) == 1:
            raise failures[0]
        listing = "; ".join(
            f"R{number}. {failure.message}" for number, failure in enumerate(failures, 1)
        )
        raise ValidationError(f"no rule matched: [{listing}]")


@RuleCompilers.register("union")
def compile_union(rule: UnionRule, parent: Rule | None) -> UnionValidator:
    branches: dict[str, Validator] = {}
    mismatch_message: str | None = None
    seen_mismatch = False

    for index, child in enumerate(children_of(rule), start=1):
        try:
            if isinstance(child, MismatchRule):
                if seen_mismatch:
                    raise SchemaError('Duplicate "mismatch" rule: only one is allowed')
                seen_mismatch = True
                mismatch_message = message_of(child)
                continue

            validator = compile_node(child, VALUE_KINDS, rule)
            if child.kind in branches:
                raise SchemaError(f"Duplicate type: '{child.kind}' is declared more than once")
            branches[child.kind] = validator
        except SchemaError as e:
            raise e.within("union", index=index) from e

    if len(branches) < 2:
        raise SchemaError('Invalid "union" rule: at least provide two different types')

    return UnionValidator(branches=tuple(branches.items()), mismatch_message=mismatch_message)
