"""
Tests for the built-in rule kinds.

Each rule is exercised on its own through Rule.check / BaseValidator.validate,
including the boundary values of every bound.
"""
from decimal import Decimal

import pytest

from recordguard.validators import (
    ErrorCode,
    absence,
    custom,
    exclusion,
    format_of,
    inclusion,
    is_blank,
    length_exact,
    length_maximum,
    length_minimum,
    length_range,
    numericality,
    presence,
    uniqueness,
)
from recordguard.validators.length_validator import value_length
from recordguard.validators.numericality_validator import parse_number


def codes(validator, record, attribute="value"):
    return [e.code for e in validator.validate(record, attribute)]


# ── Presence / absence ──

@pytest.mark.parametrize("value", [None, "", "   ", "\n\t", [], {}, (), False])
def test_presence_fails_for_blank_values(value):
    errors = presence().validate({"value": value}, "value")
    assert [e.message for e in errors] == ["can't be blank"]
    assert errors[0].code == ErrorCode.BLANK


@pytest.mark.parametrize("value", ["x", " a ", 0, 0.0, True, [None], {"k": 1}])
def test_presence_passes_for_non_blank_values(value):
    assert presence().validate({"value": value}, "value") == []


def test_presence_treats_missing_attribute_as_blank():
    assert codes(presence(), {}) == [ErrorCode.BLANK]


def test_is_blank_numbers_are_never_blank():
    assert not is_blank(0)
    assert not is_blank(Decimal("0"))


def test_absence():
    assert codes(absence(), {"value": "spam"}) == [ErrorCode.PRESENT]
    assert absence().validate({"value": ""}, "value") == []
    assert absence().validate({}, "value") == []


# ── Length ──

def test_length_minimum_boundary_passes():
    rule = length_minimum(2)
    assert rule.validate({"value": "Al"}, "value") == []
    assert codes(rule, {"value": "A"}) == [ErrorCode.TOO_SHORT]


def test_length_minimum_message_carries_count():
    [error] = length_minimum(2).validate({"value": "A"}, "value")
    assert error.message == "is too short (minimum is 2 characters)"
    assert error.options == {"count": 2}


def test_length_maximum_boundary():
    rule = length_maximum(3)
    assert rule.validate({"value": "abc"}, "value") == []
    [error] = rule.validate({"value": "abcd"}, "value")
    assert error.code == ErrorCode.TOO_LONG
    assert error.message == "is too long (maximum is 3 characters)"


def test_length_exact():
    rule = length_exact(4)
    assert rule.validate({"value": "1234"}, "value") == []
    [error] = rule.validate({"value": "123"}, "value")
    assert error.code == ErrorCode.WRONG_LENGTH
    assert error.message == "is the wrong length (should be 4 characters)"
    assert codes(rule, {"value": "12345"}) == [ErrorCode.WRONG_LENGTH]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a", [ErrorCode.TOO_SHORT]),
        ("ab", []),
        ("abcd", []),
        ("abcde", []),
        ("abcdef", [ErrorCode.TOO_LONG]),
    ],
)
def test_length_range_both_boundaries_pass(value, expected):
    assert codes(length_range(2, 5), {"value": value}) == expected


def test_length_measures_collections_and_scalars():
    assert value_length(None) == 0
    assert value_length(["a", "b"]) == 2
    assert value_length(12345) == 5


def test_length_missing_value_counts_as_zero():
    assert codes(length_minimum(1), {}) == [ErrorCode.TOO_SHORT]
    assert length_maximum(3).validate({}, "value") == []


@pytest.mark.parametrize(
    "build",
    [
        lambda: length_minimum(-1),
        lambda: length_maximum(2.5),
        lambda: length_exact(True),
        lambda: length_range(5, 2),
    ],
)
def test_length_rejects_bad_bounds(build):
    with pytest.raises(ValueError):
        build()


def test_allow_nil_and_allow_blank():
    nil_ok = length_minimum(3, allow_nil=True)
    assert nil_ok.validate({"value": None}, "value") == []
    assert codes(nil_ok, {"value": ""}) == [ErrorCode.TOO_SHORT]

    blank_ok = length_minimum(3, allow_blank=True)
    assert blank_ok.validate({"value": ""}, "value") == []
    assert blank_ok.validate({"value": None}, "value") == []
    assert codes(blank_ok, {"value": "ab"}) == [ErrorCode.TOO_SHORT]


def test_message_override_interpolates_placeholders():
    rule = length_minimum(3, message="needs {count}+ chars, got '{value}'")
    [error] = rule.validate({"value": "ab"}, "value")
    assert error.message == "needs 3+ chars, got 'ab'"
    assert error.code == ErrorCode.TOO_SHORT


def test_message_override_only_fills_plain_placeholders():
    rule = length_minimum(3, message="got {value.__class__} {0} {} } {count}")
    [error] = rule.validate({"value": "ab"}, "value")
    assert error.message == "got {value.__class__} {0} {} } 3"


def test_record_value_is_not_expanded_as_a_template():
    rule = length_maximum(5, message="got '{value}' ({count})")
    [error] = rule.validate({"value": "{count} {value.__class__}"}, "value")
    assert error.message == "got '{count} {value.__class__}' (5)"


def test_custom_message_with_braces():
    [error] = custom(lambda r: False, "must not contain {} or }").validate({}, "tags")
    assert error.message == "must not contain {} or }"


# ── Uniqueness ──

def test_uniqueness_fails_when_collaborator_reports_existing(taken_emails):
    rule = uniqueness(taken_emails)
    [error] = rule.validate({"email": "taken@example.com"}, "email")
    assert error.code == ErrorCode.TAKEN
    assert error.message == "has already been taken"


def test_uniqueness_passes_for_other_values(taken_emails):
    assert uniqueness(taken_emails).validate({"email": "new@example.com"}, "email") == []


def test_uniqueness_passes_attribute_and_value_to_collaborator():
    calls = []

    def exists_elsewhere(attribute, value):
        calls.append((attribute, value))
        return False

    uniqueness(exists_elsewhere).validate({"login": "bob"}, "login")
    assert calls == [("login", "bob")]


def test_uniqueness_case_insensitive_lowercases_lookup(taken_emails):
    rule = uniqueness(taken_emails, case_sensitive=False)
    assert [e.code for e in rule.validate({"email": "Taken@Example.COM"}, "email")] == [ErrorCode.TAKEN]
    assert uniqueness(taken_emails).validate({"email": "Taken@Example.COM"}, "email") == []


def test_uniqueness_requires_callable():
    with pytest.raises(TypeError):
        uniqueness("not callable")


# ── Custom ──

def test_custom_predicate_failure_uses_caller_message():
    rule = custom(lambda r: r.get("age", 0) >= 18, "must be at least 18")
    [error] = rule.validate({"age": 16}, "age")
    assert error.message == "must be at least 18"
    assert error.code == ErrorCode.INVALID
    assert rule.validate({"age": 30}, "age") == []


def test_custom_code_is_kept():
    rule = custom(lambda r: False, "is not allowed", code="forbidden")
    [error] = rule.validate({}, "role")
    assert error.code == "forbidden"


def test_custom_predicate_sees_whole_record():
    rule = custom(
        lambda r: r.get("password") == r.get("password_confirmation"),
        "doesn't match Password",
    )
    assert rule.validate({"password": "a", "password_confirmation": "a"}, "password_confirmation") == []
    assert len(rule.validate({"password": "a", "password_confirmation": "b"}, "password_confirmation")) == 1


def test_custom_requires_message():
    with pytest.raises(ValueError):
        custom(lambda r: True, "")


# ── Format ──

EMAIL = r"\A[^@\s]+@[^@\s]+\Z"


def test_format_with():
    rule = format_of(with_=EMAIL)
    assert rule.validate({"email": "a@b.c"}, "email") == []
    [error] = rule.validate({"email": "nope"}, "email")
    assert error.message == "is invalid"


def test_format_without():
    rule = format_of(without=r"\d")
    assert rule.validate({"name": "Alice"}, "name") == []
    assert [e.code for e in rule.validate({"name": "Al1ce"}, "name")] == [ErrorCode.INVALID]


def test_format_needs_exactly_one_pattern():
    with pytest.raises(ValueError):
        format_of()
    with pytest.raises(ValueError):
        format_of(with_="a", without="b")


# ── Inclusion / exclusion ──

def test_inclusion():
    rule = inclusion({"small", "medium", "large"})
    assert rule.validate({"size": "small"}, "size") == []
    [error] = rule.validate({"size": "huge"}, "size")
    assert error.code == ErrorCode.INCLUSION
    assert error.message == "is not included in the list"


def test_inclusion_unhashable_value_is_not_included():
    assert codes(inclusion({"a", "b"}), {"value": ["a"]}) == [ErrorCode.INCLUSION]


def test_inclusion_accepts_ranges():
    assert inclusion(range(1, 11)).validate({"value": 10}, "value") == []
    assert codes(inclusion(range(1, 11)), {"value": 11}) == [ErrorCode.INCLUSION]


def test_exclusion():
    rule = exclusion(["www", "us", "ca"])
    [error] = rule.validate({"subdomain": "www"}, "subdomain")
    assert error.message == "is reserved"
    assert rule.validate({"subdomain": "shop"}, "subdomain") == []


def test_inclusion_rejects_string_collection():
    with pytest.raises(ValueError):
        inclusion("abc")


# ── Numericality ──

@pytest.mark.parametrize("value", [1, -3, 2.5, "42", " 1.5 ", "-0.5", "1e3", Decimal("7.25")])
def test_numericality_accepts_numbers(value):
    assert numericality().validate({"value": value}, "value") == []


@pytest.mark.parametrize("value", [None, "", "abc", "1.2.3", True, float("nan"), float("inf"), [1]])
def test_numericality_rejects_non_numbers(value):
    [error] = numericality().validate({"value": value}, "value")
    assert error.code == ErrorCode.NOT_A_NUMBER
    assert error.message == "is not a number"


def test_numericality_only_integer():
    rule = numericality(only_integer=True)
    assert rule.validate({"value": 3}, "value") == []
    assert rule.validate({"value": "-12"}, "value") == []
    assert codes(rule, {"value": "1.5"}) == [ErrorCode.NOT_AN_INTEGER]
    assert codes(rule, {"value": 1.0}) == [ErrorCode.NOT_AN_INTEGER]


def test_numericality_comparisons_report_every_failure():
    rule = numericality(greater_than=10, other_than=5)
    errors = rule.validate({"value": 5}, "value")
    assert [e.message for e in errors] == ["must be greater than 10", "must be other than 5"]


@pytest.mark.parametrize(
    "options, value, expected",
    [
        ({"greater_than_or_equal_to": 18}, 18, []),
        ({"greater_than_or_equal_to": 18}, 17, [ErrorCode.GREATER_THAN_OR_EQUAL_TO]),
        ({"less_than": 100}, 100, [ErrorCode.LESS_THAN]),
        ({"less_than_or_equal_to": 100}, "100", []),
        ({"equal_to": 3}, 3.0, []),
        ({"equal_to": 3}, 4, [ErrorCode.EQUAL_TO]),
    ],
)
def test_numericality_comparison_boundaries(options, value, expected):
    assert codes(numericality(**options), {"value": value}) == expected


def test_numericality_callable_bound_reads_record():
    rule = numericality(less_than_or_equal_to=lambda r: r["stock"])
    assert rule.validate({"value": 3, "stock": 5}, "value") == []
    [error] = rule.validate({"value": 6, "stock": 5}, "value")
    assert error.message == "must be less than or equal to 5"


def test_numericality_odd_even():
    assert codes(numericality(odd=True), {"value": 4}) == [ErrorCode.ODD]
    assert numericality(odd=True).validate({"value": -3}, "value") == []
    assert codes(numericality(even=True), {"value": 3}) == [ErrorCode.EVEN]
    assert codes(numericality(even=True), {"value": 2.5}) == [ErrorCode.NOT_AN_INTEGER]


def test_numericality_rejects_bad_options():
    with pytest.raises(ValueError):
        numericality(bigger_than=3)
    with pytest.raises(ValueError):
        numericality(greater_than="lots")
    with pytest.raises(ValueError):
        numericality(odd=True, even=True)


def test_parse_number():
    assert parse_number("10") == Decimal("10")
    assert parse_number(0.1) == Decimal("0.1")
    assert parse_number(False) is None
