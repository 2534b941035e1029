"""Tests for compile-time schema errors.

Every structural problem in a rule tree must surface from compile_rule,
with a breadcrumb path to the failing rule.
"""

import pytest

from ruleforge import SchemaError, SchemaLocation, compile_rule
from ruleforge import rules as r
from ruleforge.compiler import RuleCompilers
from ruleforge.rules.types import ItemRule, ObjectRule, PropRule


def schema_error(rule) -> SchemaError:
    """Compile the rule and return the SchemaError it raises."""
    with pytest.raises(SchemaError) as exc_info:
        compile_rule(rule)
    return exc_info.value


# =============================================================================
# Root
# =============================================================================


class TestRoot:
    def test_none(self):
        assert schema_error(None).message == "Invalid rule: cannot be 'NoneType'"

    def test_not_a_rule(self):
        assert schema_error({"kind": "string"}).message == "Invalid rule: cannot be 'dict'"

    @pytest.mark.parametrize(
        "rule",
        [r.min(1), r.mismatch("x"), r.prop("a", r.string()), r.item(r.string())],
        ids=["min", "mismatch", "prop", "item"],
    )
    def test_root_must_be_a_value_rule(self, rule):
        assert schema_error(rule).message == f"Unexpected rule: '{rule.kind}'"

    @pytest.mark.parametrize(
        "rule",
        [r.required(), r.string(), r.union(r.string(), r.number()), r.object()],
        ids=["required", "string", "union", "object"],
    )
    def test_valid_roots(self, rule):
        assert callable(compile_rule(rule))


# =============================================================================
# Check Rule Parameters
# =============================================================================


class TestCheckParameters:
    @pytest.mark.parametrize("value", ["10", None, True, float("nan")])
    def test_bound_value_must_be_a_number(self, value):
        error = schema_error(r.number(r.min(value)))
        assert error.reason == 'Invalid "min" rule: "value" property must be a valid number'
        assert error.path == (SchemaLocation("number", index=1),)

    def test_rendered_breadcrumb(self):
        error = schema_error(r.number(r.max("x")))
        assert str(error) == (
            'Invalid "number" rule (sub rule 1):\n'
            '    > Invalid "max" rule: "value" property must be a valid number'
        )

    def test_range_order(self):
        error = schema_error(r.number(r.range(5, 5)))
        assert error.reason == 'Invalid "range" rule: "min" property must be less than "max" property'

    def test_range_values(self):
        assert "min" in schema_error(r.number(r.range("a", 3))).reason
        assert "max" in schema_error(r.number(r.range(1, None))).reason

    @pytest.mark.parametrize("regex", ["abc", "/(/", "/a/x", "//", 42])
    def test_bad_pattern(self, regex):
        error = schema_error(r.string(r.pattern(regex)))
        assert error.reason.startswith('Invalid "pattern" rule')

    def test_between_order(self):
        error = schema_error(r.date(r.between("2020-01-01", "2019-01-01")))
        assert error.reason == 'Invalid "between" rule: "begin" property must be earlier than "end" property'

    def test_between_values(self):
        error = schema_error(r.date(r.between("nope", "2020-01-01")))
        assert error.reason == 'Invalid "between" rule: "begin" property must be a valid date'

    @pytest.mark.parametrize("value", ["not a date", 20200101, None])
    def test_date_boundary(self, value):
        error = schema_error(r.date(r.before(value)))
        assert error.reason == 'Invalid "before" rule: "value" property must be a valid date'

    @pytest.mark.parametrize(
        "container, value",
        [
            (r.number, "3"),
            (r.number, True),
            (r.string, 3),
            (r.boolean, 1),
            (r.date, "bogus"),
        ],
    )
    def test_equal_value_must_match_container(self, container, value):
        error = schema_error(container(r.equal(value)))
        assert error.reason.startswith('Invalid "equal" rule: "value" property must be a valid')

    def test_message_must_be_a_string(self):
        error = schema_error(r.number(r.min(1, message=5)))
        assert error.reason == 'Invalid "min" rule: "message" property must be a string'


# =============================================================================
# Grammar
# =============================================================================


class TestGrammar:
    def test_object_only_accepts_props(self):
        error = schema_error(r.object(r.min(1)))
        assert error.reason == "Unexpected rule: 'min'"
        assert error.path == (SchemaLocation("object", index=1),)

    def test_array_does_not_accept_props(self):
        error = schema_error(r.array(r.prop("a", r.string())))
        assert error.reason == "Unexpected rule: 'prop'"

    def test_pattern_only_in_strings(self):
        assert schema_error(r.number(r.pattern("/a/"))).reason == "Unexpected rule: 'pattern'"

    def test_date_checks_only_in_dates(self):
        assert schema_error(r.string(r.before("2020-01-01"))).reason == "Unexpected rule: 'before'"

    def test_duplicate_mismatch(self):
        error = schema_error(r.number(r.mismatch("a"), r.mismatch("b")))
        assert error.reason == 'Duplicate "mismatch" rule: only one is allowed'
        assert error.path == (SchemaLocation("number", index=2),)

    def test_non_list_children(self):
        error = schema_error(ObjectRule(rules="abc"))
        assert error.reason == 'Invalid "object" rule: "rules" property must be a list'


# =============================================================================
# Alternation
# =============================================================================


class TestAlternation:
    def test_any_needs_two_children(self):
        error = schema_error(r.number(r.any(r.min(1))))
        assert str(error) == (
            'Invalid "number" rule (sub rule 1):\n'
            '    > Invalid "any" rule: at least provide two sub rules'
        )

    def test_any_children_follow_container_grammar(self):
        error = schema_error(r.string(r.any(r.min(1), r.less(3))))
        assert error.reason == "Unexpected rule: 'less'"
        assert error.path == (
            SchemaLocation("string", index=1),
            SchemaLocation("any", index=2),
        )

    def test_any_not_allowed_in_object(self):
        error = schema_error(r.object(r.any(r.min(1), r.max(2))))
        assert error.reason == "Unexpected rule: 'any'"

    def test_any_cannot_nest(self):
        error = schema_error(r.number(r.any(r.min(1), r.any(r.max(3), r.max(4)))))
        assert error.reason == "Unexpected rule: 'any'"

    def test_union_needs_two_kinds(self):
        error = schema_error(r.union(r.string()))
        assert error.message == 'Invalid "union" rule: at least provide two different types'

    def test_union_duplicate_kind(self):
        error = schema_error(r.union(r.string(), r.string(r.max(3))))
        assert error.reason == "Duplicate type: 'string' is declared more than once"
        assert error.path == (SchemaLocation("union", index=2),)

    def test_union_rejects_binders(self):
        error = schema_error(r.union(r.string(), r.number(), r.required()))
        assert error.reason == "Unexpected rule: 'required'"
        assert error.path == (SchemaLocation("union", index=3),)

    def test_union_mismatch_does_not_count_as_a_kind(self):
        error = schema_error(r.union(r.string(), r.mismatch("nope")))
        assert "two different types" in error.reason

    def test_union_child_errors_are_nested(self):
        error = schema_error(r.union(r.string(), r.number(r.min("x"))))
        assert error.path == (
            SchemaLocation("union", index=2),
            SchemaLocation("number", index=1),
        )


# =============================================================================
# Binders
# =============================================================================


class TestBinders:
    def test_prop_without_sub_rule(self):
        error = schema_error(r.object(r.prop("a")))
        assert error.reason == 'Invalid "prop" rule: must provide exactly one sub rule'

    def test_prop_with_two_sub_rules(self):
        error = schema_error(r.object(PropRule(name="a", rules=(r.string(), r.number()))))
        assert error.reason == 'Invalid "prop" rule: must provide exactly one sub rule'

    @pytest.mark.parametrize("name", ["", None, True, 1.5])
    def test_prop_name(self, name):
        error = schema_error(r.object(r.prop(name, r.string())))
        assert error.reason == 'Invalid "prop" rule: "name" must be a valid key or index'

    def test_prop_index_name_is_allowed(self):
        compile_rule(r.object(r.prop(0, r.string())))

    def test_item_arity(self):
        assert "exactly one" in schema_error(r.array(r.item())).reason
        assert "exactly one" in schema_error(r.array(ItemRule(rules=(r.string(), r.number())))).reason

    def test_required_arity(self):
        error = schema_error(r.required(r.string(), r.number()))
        assert error.reason == 'Invalid "required" rule: accepts at most one sub rule'

    def test_required_cannot_nest(self):
        error = schema_error(r.required(r.required()))
        assert error.reason == "Unexpected rule: 'required'"
        assert error.path == (SchemaLocation("required"),)

    def test_full_breadcrumb(self):
        rule = r.object(
            r.prop("name", r.string()),
            r.prop("age", r.number(r.min("x"))),
        )
        error = schema_error(rule)
        assert error.path == (
            SchemaLocation("object", index=2),
            SchemaLocation("prop", name="age"),
            SchemaLocation("number", index=1),
        )
        assert str(error) == (
            'Invalid "object" rule (sub rule 2):\n'
            '    > Invalid "prop" rule of "age":\n'
            '    > Invalid "number" rule (sub rule 1):\n'
            '    > Invalid "min" rule: "value" property must be a valid number'
        )

    def test_item_errors_are_nested(self):
        error = schema_error(r.array(r.item(r.string(r.min(None)))))
        assert error.path == (
            SchemaLocation("array", index=1),
            SchemaLocation("item"),
            SchemaLocation("string", index=1),
        )


# =============================================================================
# Registry
# =============================================================================


class TestRegistry:
    def test_every_compilable_kind_is_registered(self):
        assert RuleCompilers.list_registered() == sorted(
            [
                "after", "any", "array", "before", "begin", "between", "boolean",
                "date", "end", "equal", "item", "less", "max", "min", "more",
                "number", "object", "pattern", "prop", "range", "required",
                "string", "union",
            ]
        )

    def test_mismatch_is_not_compiled_on_its_own(self):
        assert not RuleCompilers.is_registered("mismatch")

    def test_duplicate_registration_is_rejected(self):
        with pytest.raises(ValueError):
            RuleCompilers.register("min")(lambda rule, parent: None)

    def test_compile_never_validates(self):
        validate = compile_rule(r.required(r.number(r.min(1))))
        assert callable(validate)
