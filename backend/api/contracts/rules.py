"""
Field rules - small composable constraint objects.

A FieldSpec carries an ordered tuple of rules. Each rule inspects an
already type-checked value and returns an error message, or None when the
value passes. Rules never raise for bad input and never mutate the value.

    FieldSpec(
        name="title",
        kind=FieldKind.TEXT,
        required=True,
        rules=(NotEmpty(), MaxLength(500)),
    )
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional
from urllib.parse import urlparse


@dataclass(frozen=True)
class Rule:
    """Base class. Subclasses set `name` and implement check()."""

    name = "rule"

    def check(self, value: Any) -> Optional[str]:
        raise NotImplementedError

    def describe(self) -> Dict[str, Any]:
        """JSON-safe description for contract introspection."""
        params = {
            k: (sorted(v) if isinstance(v, frozenset) else v)
            for k, v in self.__dict__.items()
        }
        return {"rule": self.name, **params}


@dataclass(frozen=True)
class NotEmpty(Rule):
    """Rejects empty strings (whitespace-only counts), lists and dicts."""

    name = "not_empty"

    def check(self, value):
        if isinstance(value, str) and value.strip() == "":
            return "must not be empty"
        if isinstance(value, (list, dict)) and len(value) == 0:
            return "must not be empty"
        return None


@dataclass(frozen=True)
class MaxLength(Rule):
    limit: int

    name = "max_length"

    def check(self, value):
        if len(value) > self.limit:
            return f"must be at most {self.limit} characters"
        return None


@dataclass(frozen=True)
class MinLength(Rule):
    limit: int

    name = "min_length"

    def check(self, value):
        if len(value) < self.limit:
            return f"must be at least {self.limit} characters"
        return None


@dataclass(frozen=True)
class Min(Rule):
    bound: float

    name = "min"

    def check(self, value):
        if value < self.bound:
            return f"must be >= {self.bound}"
        return None


@dataclass(frozen=True)
class Max(Rule):
    bound: float

    name = "max"

    def check(self, value):
        if value > self.bound:
            return f"must be <= {self.bound}"
        return None


@dataclass(frozen=True)
class ListSize(Rule):
    min: Optional[int] = None
    max: Optional[int] = None

    name = "list_size"

    def check(self, value):
        size = len(value)
        if self.min is not None and size < self.min:
            return f"must contain at least {self.min} item(s), got {size}"
        if self.max is not None and size > self.max:
            return f"must contain at most {self.max} item(s), got {size}"
        return None


@dataclass(frozen=True)
class Matches(Rule):
    """Regex full-match on text. `rule` names the violation."""

    pattern: str
    rule: str = "pattern"
    message: str = "has an invalid format"

    name = "pattern"

    def check(self, value):
        if re.fullmatch(self.pattern, value) is None:
            return self.message
        return None

    def describe(self):
        return {"rule": self.rule, "pattern": self.pattern}


# Deliberately loose: local@domain.tld, no whitespace.
_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


@dataclass(frozen=True)
class Email(Rule):
    name = "email"

    def check(self, value):
        if _EMAIL_RE.fullmatch(value) is None:
            return "must be a valid email address"
        return None


@dataclass(frozen=True)
class Url(Rule):
    """http(s) URL with a host."""

    name = "url"

    def check(self, value):
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return "must be an http(s) URL"
        return None


@dataclass(frozen=True)
class KnownKeys(Rule):
    """Every key of a mapping must belong to a fixed set."""

    keys: FrozenSet[str] = field(default_factory=frozenset)

    name = "unknown_key"

    def check(self, value):
        unknown = sorted(k for k in value if k not in self.keys)
        if unknown:
            return f"unknown key(s): {', '.join(unknown)}"
        return None


@dataclass(frozen=True)
class ValuesOfType(Rule):
    """Every value of a mapping must be an instance of `value_type`."""

    value_type: type = object

    name = "value_type"

    def check(self, value):
        bad = sorted(k for k, v in value.items() if not isinstance(v, self.value_type))
        if bad:
            return f"values must be {self.value_type.__name__}: {', '.join(bad)}"
        return None

    def describe(self):
        return {"rule": self.name, "value_type": self.value_type.__name__}


def rule_name(rule: Rule) -> str:
    """Violation rule name (Matches carries its own)."""
    if isinstance(rule, Matches):
        return rule.rule
    return rule.name


# =============================================================================
# Cross-field checks
# =============================================================================
# Run after every field has been validated, against the normalized value.
# They only see fields that passed their own rules, so a check never
# reports on top of a field-level violation for the same input.


@dataclass(frozen=True)
class CrossFieldCheck:
    name = "cross_field"

    # Whether partial() carries the check into derived update contracts.
    keep_on_partial = False

    @property
    def label(self) -> str:
        raise NotImplementedError

    @property
    def involved(self) -> tuple:
        """Fields the check reads; it is skipped if any of them failed."""
        raise NotImplementedError

    def check(self, value: Dict[str, Any]) -> Optional[str]:
        raise NotImplementedError

    def describe(self) -> Dict[str, Any]:
        return {"rule": self.name, "field": self.label}


@dataclass(frozen=True)
class AtLeastOneOf(CrossFieldCheck):
    """At least one of several optional fields must be present."""

    fields: tuple = ()

    name = "at_least_one_of"

    @property
    def label(self) -> str:
        return "|".join(self.fields)

    @property
    def involved(self):
        return tuple(self.fields)

    def check(self, value):
        if any(value.get(f) is not None for f in self.fields):
            return None
        return f"Either {' or '.join(self.fields)} must be provided"


@dataclass(frozen=True)
class DateOrder(CrossFieldCheck):
    """`end` must not precede `start` when both are present."""

    start: str = "startDate"
    end: str = "endDate"

    name = "date_order"
    keep_on_partial = True

    @property
    def label(self) -> str:
        return self.end

    @property
    def involved(self):
        return (self.start, self.end)

    def check(self, value):
        start, end = value.get(self.start), value.get(self.end)
        if start is None or end is None:
            return None
        try:
            if end < start:
                return f"{self.end} must not be before {self.start}"
        except TypeError:
            # naive vs aware datetimes
            return f"{self.start} and {self.end} must both carry a timezone or neither"
        return None
