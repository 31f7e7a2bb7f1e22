"""Tests for option validation."""

import pytest

from utils import OptionsError, options_filter

RULES = {"a": "required", "b": "required"}


def test_missing_required_option_names_it():
    with pytest.raises(OptionsError, match="`b` is missing"):
        options_filter({"a": 1}, RULES)


def test_unknown_option_names_it():
    with pytest.raises(OptionsError, match="invalid option\\(s\\): `c`"):
        options_filter({"a": 1, "b": 2, "c": 3}, RULES)


def test_all_unknown_options_are_listed():
    with pytest.raises(OptionsError) as info:
        options_filter({"a": 1, "b": 2, "c": 3, "d": 4}, RULES)
    assert "`c`, `d`" in str(info.value)


def test_invalid_rule_is_rejected():
    with pytest.raises(OptionsError, match="invalid rule `default`"):
        options_filter({"a": 1}, {"a": "default"})


def test_accessor_returns_values_and_guards_unknown_keys():
    get = options_filter({"a": 1, "b": 2}, RULES)
    assert get("a") == 1
    assert get("b") == 2
    with pytest.raises(OptionsError, match="retrieve invalid option: `c`"):
        get("c")


def test_caller_options_are_not_mutated():
    opts = {"a": 1, "b": 2}
    options_filter(opts, RULES)
    assert opts == {"a": 1, "b": 2}


def test_options_error_is_a_value_error():
    with pytest.raises(ValueError):
        options_filter({}, {"a": "required"})


def test_empty_rules_accept_no_options():
    get = options_filter({}, {})
    with pytest.raises(OptionsError):
        get("anything")
