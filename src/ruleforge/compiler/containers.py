"""Primitive-type containers: object, string, number, boolean, date, array.

A container first checks the value's kind, then runs its children in
declaration order. Absent values (None) are skipped; use ``required`` to
make a value mandatory.
"""

from dataclasses import dataclass
from typing import Any, NoReturn

from ruleforge.compiler.grammar import CONTAINER_CHILD_KINDS
from ruleforge.compiler.registry import (
    RuleCompilers,
    Validator,
    children_of,
    compile_children,
)
from ruleforge.errors import ValidationError
from ruleforge.rules.types import PrimitiveRule, Rule
from ruleforge.values import is_finite_number, kind_of, parse_date


@dataclass(frozen=True)
class ContainerValidator:
    """Type check followed by AND-combined child checks.

    Attributes:
        kind: The primitive kind this container accepts
        checks: Child validators in declaration order
        mismatch_message: Override for the type mismatch message
    """

    kind: str
    checks: tuple[Validator, ...] = ()
    mismatch_message: str | None = None

    def __call__(self, value: Any) -> None:
        if value is None:
            return

        actual = kind_of(value)
        if self.kind == "date" and actual == "string":
            coerced = parse_date(value)
            if coerced is None:
                self._mismatch(actual)
            value = coerced
        elif actual != self.kind:
            self._mismatch(actual)
        elif actual == "number" and not is_finite_number(value):
            self._mismatch("invalid number")

        for check in self.checks:
            check(value)

    def _mismatch(self, actual: str) -> NoReturn:
        raise ValidationError(
            self.mismatch_message
            or f"unexpected type: require '{self.kind}' but found '{actual}'"
        )


@RuleCompilers.register(*CONTAINER_CHILD_KINDS)
def compile_container(rule: PrimitiveRule, parent: Rule | None) -> ContainerValidator:
    checks, mismatch_message = compile_children(
        rule.kind, children_of(rule), CONTAINER_CHILD_KINDS[rule.kind], rule
    )
    return ContainerValidator(
        kind=rule.kind,
        checks=tuple(checks),
        mismatch_message=mismatch_message,
    )
