"""Which rule kinds may appear at which position of a rule tree."""

# Primitive container kinds
VALUE_KINDS: frozenset[str] = frozenset(
    {"object", "string", "number", "boolean", "date", "array"}
)

# Allowed under "required"
WRAPPABLE_KINDS: frozenset[str] = VALUE_KINDS | {"union"}

# Allowed at the root, under "prop" and under "item"
BINDABLE_KINDS: frozenset[str] = WRAPPABLE_KINDS | {"required"}

CONTAINER_CHILD_KINDS: dict[str, frozenset[str]] = {
    "object": frozenset({"prop", "mismatch"}),
    "array": frozenset({"min", "max", "item", "mismatch"}),
    "string": frozenset({"equal", "min", "max", "pattern", "any", "mismatch"}),
    "number": frozenset(
        {"equal", "min", "max", "less", "more", "range", "any", "mismatch"}
    ),
    "boolean": frozenset({"equal", "any", "mismatch"}),
    "date": frozenset(
        {"equal", "begin", "end", "before", "after", "between", "any", "mismatch"}
    ),
}

# Allowed under "any", keyed by the kind of the enclosing container
ANY_CHILD_KINDS: dict[str, frozenset[str]] = {
    "string": frozenset({"equal", "min", "max", "pattern"}),
    "number": frozenset({"equal", "min", "max", "less", "more", "range"}),
    "boolean": frozenset({"equal"}),
    "date": frozenset({"equal", "begin", "end", "before", "after", "between"}),
}
