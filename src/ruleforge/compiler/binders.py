"""Structural binders: ``prop``, ``item`` and ``required``.

``prop`` and ``item`` connect a sub-rule to a location inside an object or
array and add that location to any error raised below them. ``required``
turns an absent value into an error.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ruleforge.compiler.grammar import BINDABLE_KINDS, WRAPPABLE_KINDS
from ruleforge.compiler.registry import (
    RuleCompilers,
    Validator,
    children_of,
    compile_node,
    message_of,
)
from ruleforge.errors import Location, SchemaError, ValidationError
from ruleforge.rules.types import ItemRule, PropRule, RequiredRule, Rule


def _single_child(rule: Rule) -> Any:
    children = children_of(rule)
    if len(children) != 1 or not isinstance(children[0], Rule):
        raise SchemaError(f'Invalid "{rule.kind}" rule: must provide exactly one sub rule')
    return children[0]


# =============================================================================
# Prop
# =============================================================================


@dataclass(frozen=True)
class PropValidator:
    name: str | int
    inner: Validator

    def __call__(self, value: Any) -> None:
        if not isinstance(value, Mapping):
            return
        try:
            self.inner(value.get(self.name))
        except ValidationError as e:
            raise e.at(Location("property", self.name)) from e


@RuleCompilers.register("prop")
def compile_prop(rule: PropRule, parent: Rule | None) -> PropValidator:
    child = _single_child(rule)

    name = rule.name
    if isinstance(name, bool) or not isinstance(name, (str, int)) or name == "":
        raise SchemaError('Invalid "prop" rule: "name" must be a valid key or index')

    try:
        inner = compile_node(child, BINDABLE_KINDS, rule)
    except SchemaError as e:
        raise e.within("prop", name=name) from e
    return PropValidator(name=name, inner=inner)


# =============================================================================
# Item
# =============================================================================


@dataclass(frozen=True)
class ItemValidator:
    """Applies ``inner`` to every element; stops at the first failure."""

    inner: Validator

    def __call__(self, value: Any) -> None:
        if not isinstance(value, (list, tuple)):
            return
        for index, element in enumerate(value):
            try:
                self.inner(element)
            except ValidationError as e:
                raise e.at(Location("item", index)) from e


@RuleCompilers.register("item")
def compile_item(rule: ItemRule, parent: Rule | None) -> ItemValidator:
    child = _single_child(rule)
    try:
        inner = compile_node(child, BINDABLE_KINDS, rule)
    except SchemaError as e:
        raise e.within("item") from e
    return ItemValidator(inner=inner)


# =============================================================================
# Required
# =============================================================================


@dataclass(frozen=True)
class RequiredValidator:
    inner: Validator | None = None
    message: str | None = None

    def __call__(self, value: Any) -> None:
        if value is None:
            raise ValidationError(self.message or "value is required")
        if self.inner is not None:
            self.inner(value)


@RuleCompilers.register("required")
def compile_required(rule: RequiredRule, parent: Rule | None) -> RequiredValidator:
    children = children_of(rule)
    if len(children) > 1:
        raise SchemaError('Invalid "required" rule: accepts at most one sub rule')

    inner = None
    if children:
        try:
            inner = compile_node(children[0], WRAPPABLE_KINDS, rule)
        except SchemaError as e:
            raise e.within("required") from e
    return RequiredValidator(inner=inner, message=message_of(rule))
