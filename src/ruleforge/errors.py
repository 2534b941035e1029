"""Exception types for the ruleforge engine.

Two kinds of failure cross the public boundary:
- SchemaError: the rule tree itself is malformed (raised while compiling)
- ValidationError: an input value failed an active constraint (raised while validating)

Both carry a structured path so callers can inspect where the failure
happened without parsing the rendered message.
"""

from dataclasses import dataclass


class RuleforgeError(Exception):
    """Base class for all ruleforge errors."""
    pass


# =============================================================================
# Schema Errors (build time)
# =============================================================================


@dataclass(frozen=True)
class SchemaLocation:
    """One step of the breadcrumb trail through a malformed rule tree.

    Attributes:
        kind: Kind of the rule that contains the failing child
        index: 1-based position of the failing child, if known
        name: Property name for "prop" rules
    """

    kind: str
    index: int | None = None
    name: str | int | None = None

    def describe(self) -> str:
        if self.name is not None:
            return f'Invalid "{self.kind}" rule of "{self.name}":'
        if self.index is not None:
            return f'Invalid "{self.kind}" rule (sub rule {self.index}):'
        return f'Invalid "{self.kind}" rule:'


class SchemaError(RuleforgeError):
    """The rule tree is malformed and cannot be compiled.

    Attributes:
        reason: The terminal cause reported by the innermost rule
        path: Locations from the root rule down to the failing rule
    """

    def __init__(self, reason: str, path: tuple[SchemaLocation, ...] = ()):
        self.reason = reason
        self.path = tuple(path)
        super().__init__(self.render())

    def within(
        self,
        kind: str,
        index: int | None = None,
        name: str | int | None = None,
    ) -> "SchemaError":
        """Return a copy of this error nested one level deeper."""
        return SchemaError(self.reason, (SchemaLocation(kind, index, name), *self.path))

    def render(self) -> str:
        steps = [location.describe() for location in self.path]
        steps.append(self.reason)
        return "\n    > ".join(steps)

    @property
    def message(self) -> str:
        return self.render()


# =============================================================================
# Validation Errors (run time)
# =============================================================================


@dataclass(frozen=True)
class Location:
    """Where inside the input a nested failure happened.

    Attributes:
        kind: "property" for object keys, "item" for array elements
        key: The property name or the element index
    """

    kind: str
    key: str | int

    def describe(self) -> str:
        if self.kind == "item":
            return f"Invalid item [{self.key}]: "
        return f'Invalid property "{self.key}": '


class ValidationError(RuleforgeError):
    """An input value failed validation.

    Attributes:
        reason: Message produced by the failing constraint
        path: Locations from the outermost value down to the failing one
    """

    def __init__(self, reason: str, path: tuple[Location, ...] = ()):
        self.reason = reason
        self.path = tuple(path)
        super().__init__(self.render())

    def at(self, location: Location) -> "ValidationError":
        """Return a copy of this error located one level further out."""
        return ValidationError(self.reason, (location, *self.path))

    def render(self) -> str:
        return "".join(location.describe() for location in self.path) + self.reason

    @property
    def message(self) -> str:
        return self.render()
