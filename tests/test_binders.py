"""Tests for the prop, item and required binders."""

import pytest

from ruleforge import Location, ValidationError, compile_rule
from ruleforge import rules as r


def rejection(validator, value) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        validator(value)
    return exc_info.value


# =============================================================================
# Prop
# =============================================================================


class TestProp:
    def test_wraps_inner_message(self):
        validate = compile_rule(r.object(r.prop("name", r.required(r.string(r.min(1))))))
        error = rejection(validate, {"name": ""})
        assert error.message == 'Invalid property "name": string length must be greater or equal to 1'
        assert error.reason == "string length must be greater or equal to 1"
        assert error.path == (Location("property", "name"),)

    def test_missing_key_is_absent(self):
        validate = compile_rule(r.object(r.prop("name", r.string())))
        validate({})
        validate({"name": None})

    def test_missing_required_key(self):
        validate = compile_rule(r.object(r.prop("name", r.required())))
        assert rejection(validate, {}).message == 'Invalid property "name": value is required'

    def test_integer_key(self):
        validate = compile_rule(r.object(r.prop(0, r.string())))
        validate({0: "zero"})
        error = rejection(validate, {0: 5})
        assert error.message == (
            "Invalid property \"0\": unexpected type: require 'string' but found 'number'"
        )

    def test_properties_checked_in_order(self):
        validate = compile_rule(
            r.object(
                r.prop("a", r.required()),
                r.prop("b", r.required()),
            )
        )
        assert rejection(validate, {}).path == (Location("property", "a"),)
        assert rejection(validate, {"a": 1}).path == (Location("property", "b"),)


# =============================================================================
# Item
# =============================================================================


class TestItem:
    def test_every_element_is_checked(self):
        validate = compile_rule(r.array(r.item(r.number(r.max(5)))))
        validate([1, 2, 5])
        validate([])

    def test_stops_at_first_bad_element(self):
        validate = compile_rule(r.array(r.item(r.number(r.max(5)))))
        error = rejection(validate, [1, 9, 10])
        assert error.message == "Invalid item [1]: value must be less or equal to 5"
        assert error.path == (Location("item", 1),)

    def test_tuples_are_arrays(self):
        validate = compile_rule(r.array(r.item(r.required(r.string()))))
        validate(("a", "b"))
        assert rejection(validate, ("a", None)).message == "Invalid item [1]: value is required"

    def test_nested_paths(self):
        validate = compile_rule(
            r.object(r.prop("tags", r.array(r.item(r.required(r.string())))))
        )
        error = rejection(validate, {"tags": ["a", None]})
        assert error.message == 'Invalid property "tags": Invalid item [1]: value is required'
        assert error.path == (Location("property", "tags"), Location("item", 1))
        assert error.reason == "value is required"

    def test_array_of_objects(self):
        validate = compile_rule(
            r.array(r.item(r.required(r.object(r.prop("id", r.required(r.number()))))))
        )
        validate([{"id": 1}, {"id": 2}])
        error = rejection(validate, [{"id": 1}, {"id": "2"}])
        assert error.message == (
            "Invalid item [1]: Invalid property \"id\": "
            "unexpected type: require 'number' but found 'string'"
        )


# =============================================================================
# Required
# =============================================================================


class TestRequired:
    def test_none_is_rejected(self):
        validate = compile_rule(r.required())
        assert rejection(validate, None).message == "value is required"

    @pytest.mark.parametrize("value", [0, "", False, [], {}])
    def test_falsy_values_are_present(self, value):
        compile_rule(r.required())(value)

    def test_message_only(self):
        rule = r.required("name is needed")
        assert rule.rules == ()
        assert rejection(compile_rule(rule), None).message == "name is needed"

    def test_none_means_no_sub_rule(self):
        rule = r.required(None)
        assert rule.rules == ()
        compile_rule(rule)(5)
        assert rejection(compile_rule(r.required(None, "needed")), None).message == "needed"

    def test_trailing_message(self):
        validate = compile_rule(r.required(r.string(), "name is needed"))
        assert rejection(validate, None).message == "name is needed"

    def test_keyword_message(self):
        validate = compile_rule(r.required(r.string(), message="name is needed"))
        assert rejection(validate, None).message == "name is needed"

    def test_delegates_to_sub_rule(self):
        validate = compile_rule(r.required(r.number()))
        validate(1)
        error = rejection(validate, "x")
        assert error.message == "unexpected type: require 'number' but found 'string'"
