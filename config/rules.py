"""Match rules for the item matching system."""

from abc import ABC, abstractmethod
from typing import AbstractSet, FrozenSet, Iterable, List
from dataclasses import dataclass, field
import regex as re

from config.models import ItemRecord

class ItemRule(ABC):
    """Base class for item selection rules."""

    @abstractmethod
    def matches(self, item: ItemRecord) -> bool:
        """
        Determine if an item should be selected.

        Args:
            item: Item to test

        Returns:
            bool: Whether the item satisfies the rule
        """
        pass

class NamePatternRule(ItemRule):
    """Select items whose name contains a match for a regex pattern."""

    def __init__(self, pattern: 're.Pattern'):
        self.pattern = pattern

    def matches(self, item: ItemRecord) -> bool:
        # concurrent=True lets other worker threads run during the search
        return self.pattern.search(item.display_name, concurrent=True) is not None

    def __repr__(self):
        return f"NamePatternRule({self.pattern.pattern!r})"

class IdSetRule(ItemRule):
    """Select items whose id is one of a fixed set."""

    def __init__(self, ids: Iterable[int]):
        self.ids: FrozenSet[int] = frozenset(ids)

    def matches(self, item: ItemRecord) -> bool:
        return item.id in self.ids

    def __repr__(self):
        return f"IdSetRule({len(self.ids)} ids)"

@dataclass
class MatchRules:
    """Rules combined with OR semantics."""

    include_rules: List[ItemRule] = field(default_factory=list)

    @classmethod
    def from_predicates(
        cls,
        patterns: Iterable['re.Pattern'],
        target_ids: AbstractSet[int]
    ) -> 'MatchRules':
        """
        Build rules from compiled patterns and target ids.

        Args:
            patterns: Compiled name patterns
            target_ids: Ids to select explicitly

        Returns:
            MatchRules: One rule per pattern plus one id rule if any ids
        """
        rules: List[ItemRule] = [NamePatternRule(p) for p in patterns]
        if target_ids:
            rules.append(IdSetRule(target_ids))
        return cls(include_rules=rules)

    @property
    def is_empty(self) -> bool:
        return not self.include_rules

    def matches(self, item: ItemRecord) -> bool:
        """
        Determine if an item satisfies any rule.

        An empty rule list selects nothing.
        """
        return any(rule.matches(item) for rule in self.include_rules)
