# allocura/planner/rules.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class Rule(Generic[T]):
    """One branch of an ordered if/elif chain.

    ``when=None`` marks the terminal default and always matches.
    """

    name: str
    outcome: T
    when: Optional[Predicate] = None

    def matches(self, subject: Any) -> bool:
        return self.when is None or bool(self.when(subject))


def first_match(rules: Sequence[Rule[T]], subject: Any) -> Rule[T]:
    """Return the first rule matching ``subject``. The chain must end in a default."""
    if not rules or rules[-1].when is not None:
        raise ValueError("rule chain must end with a default rule (when=None)")
    for rule in rules:
        if rule.matches(subject):
            return rule
    # unreachable: the default always matches
    return rules[-1]


def field_in(field: str, *values: str) -> Predicate:
    def _check(subject: Any) -> bool:
        return getattr(subject, field, None) in values

    return _check
