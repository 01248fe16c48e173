"""
Unit tests for api/contracts/rules.py

Rules return an error message or None and never raise on a typed value.
"""

from datetime import datetime, timezone

import pytest

from api.contracts.rules import (
    AtLeastOneOf,
    DateOrder,
    Email,
    KnownKeys,
    ListSize,
    Matches,
    Max,
    MaxLength,
    Min,
    MinLength,
    NotEmpty,
    Url,
    ValuesOfType,
    rule_name,
)


class TestNotEmpty:

    @pytest.mark.parametrize("value", ["", "   ", [], {}])
    def test_empty_values_fail(self, value):
        assert NotEmpty().check(value) == "must not be empty"

    @pytest.mark.parametrize("value", ["Budget", ["a"], {"k": 1}])
    def test_non_empty_values_pass(self, value):
        assert NotEmpty().check(value) is None


class TestLengthAndBounds:

    def test_max_length_boundary(self):
        assert MaxLength(5).check("abcde") is None
        assert "at most 5" in MaxLength(5).check("abcdef")

    def test_min_length_boundary(self):
        assert MinLength(2).check("ab") is None
        assert "at least 2" in MinLength(2).check("a")

    def test_min_max(self):
        assert Min(1).check(1) is None
        assert Min(1).check(0) is not None
        assert Max(12).check(12) is None
        assert Max(12).check(13) is not None

    def test_list_size(self):
        rule = ListSize(min=1, max=3)
        assert rule.check(["a"]) is None
        assert "at least 1" in rule.check([])
        assert "at most 3" in rule.check(["a", "b", "c", "d"])


class TestFormats:

    @pytest.mark.parametrize("value", ["chair@board.org", "a.b+c@example.co.uk"])
    def test_email_valid(self, value):
        assert Email().check(value) is None

    @pytest.mark.parametrize("value", ["chair", "chair@board", "a b@example.com", "@example.com"])
    def test_email_invalid(self, value):
        assert Email().check(value) is not None

    def test_url(self):
        assert Url().check("https://meet.example.com/abc") is None
        assert Url().check("ftp://example.com") is not None
        assert Url().check("example.com") is not None

    def test_matches_names_its_rule(self):
        rule = Matches(pattern=r"Q[1-4]", rule="quarter", message="must be Q1-Q4")
        assert rule.check("Q2") is None
        assert rule.check("Q5") == "must be Q1-Q4"
        assert rule_name(rule) == "quarter"
        assert rule_name(NotEmpty()) == "not_empty"


class TestMappingRules:

    def test_known_keys(self):
        rule = KnownKeys(keys=frozenset({"meetings.view", "meetings.edit"}))
        assert rule.check({"meetings.view": True}) is None
        assert "meetings.fly" in rule.check({"meetings.fly": True, "meetings.view": False})

    def test_values_of_type(self):
        rule = ValuesOfType(value_type=bool)
        assert rule.check({"a": True, "b": False}) is None
        assert "b" in rule.check({"a": True, "b": "yes"})

    def test_describe_is_json_safe(self):
        assert KnownKeys(keys=frozenset({"b", "a"})).describe() == {"rule": "unknown_key", "keys": ["a", "b"]}
        assert ValuesOfType(value_type=bool).describe() == {"rule": "value_type", "value_type": "bool"}
        assert MaxLength(50).describe() == {"rule": "max_length", "limit": 50}


class TestCrossFieldChecks:

    def test_at_least_one_of(self):
        check = AtLeastOneOf(fields=("data", "storageKey"))
        assert check.label == "data|storageKey"
        assert check.check({}) == "Either data or storageKey must be provided"
        assert check.check({"data": {}}) is None
        assert check.check({"storageKey": "x"}) is None

    def test_date_order(self):
        check = DateOrder(start="startDate", end="endDate")
        early = datetime(2025, 1, 1, tzinfo=timezone.utc)
        late = datetime(2025, 3, 31, tzinfo=timezone.utc)
        assert check.check({"startDate": early, "endDate": late}) is None
        assert check.check({"startDate": early, "endDate": early}) is None
        assert check.check({"startDate": late, "endDate": early}) == "endDate must not be before startDate"

    def test_date_order_skips_when_one_side_absent(self):
        check = DateOrder(start="startDate", end="endDate")
        assert check.check({"endDate": datetime(2025, 1, 1)}) is None

    def test_date_order_mixed_timezones(self):
        check = DateOrder(start="startDate", end="endDate")
        message = check.check({
            "startDate": datetime(2025, 1, 1),
            "endDate": datetime(2025, 2, 1, tzinfo=timezone.utc),
        })
        assert "timezone" in message

    def test_keep_on_partial_flags(self):
        assert DateOrder().keep_on_partial is True
        assert AtLeastOneOf(fields=("a", "b")).keep_on_partial is False
