"""Ordered rule tables for query classification.

A rule table is plain data: an ordered tuple of (pattern, value) rules plus a
combination policy. Precedence is the tuple order, so tests can inspect it
directly instead of reverse-engineering nested conditionals.

Policies:
- FIRST_MATCH: evaluation stops at the first rule whose pattern matches
- ACCUMULATE: every matching rule contributes its value, in table order
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from backend.app.models.common import RuleCombination

T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """Pattern paired with a value (or a function of the match)."""

    pattern: re.Pattern[str]
    value: T | Callable[[re.Match[str]], T]

    @classmethod
    def of(cls, pattern: str, value: T | Callable[[re.Match[str]], T]) -> "Rule[T]":
        """Build a rule from an unanchored, case-insensitive pattern."""
        return cls(pattern=re.compile(pattern, re.IGNORECASE), value=value)

    def match(self, text: str) -> re.Match[str] | None:
        return self.pattern.search(text)

    def resolve(self, match: re.Match[str]) -> T:
        """Value for a successful match."""
        if callable(self.value):
            return self.value(match)
        return self.value


@dataclass(frozen=True)
class RuleTable(Generic[T]):
    """Ordered rules evaluated under an explicit combination policy."""

    name: str
    rules: tuple[Rule[T], ...]
    combination: RuleCombination

    def evaluate(self, text: str) -> list[T]:
        """Evaluate rules top-to-bottom against text.

        Args:
            text: Text to match (callers pass the lower-cased query)

        Returns:
            Values of matching rules in table order; at most one value
            under FIRST_MATCH, possibly none under either policy
        """
        results: list[T] = []
        for rule in self.rules:
            match = rule.match(text)
            if match is None:
                continue
            results.append(rule.resolve(match))
            if self.combination is RuleCombination.first_match:
                break
        return results

    def first(self, text: str, default: T) -> T:
        """First matching value, or default when nothing matches."""
        values = self.evaluate(text)
        return values[0] if values else default
