"""Ordered combination of exclusion rules."""

from typing import Sequence, Tuple

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Excludes a path as soon as one of its member rules does.

    Members are consulted in the order given. PathFilter puts the bare-name rules
    first so that default-ignored entries never reach the glob matcher.

    Attributes:
        rules (Tuple[BaseExclusionRules, ...]): The member rules, in evaluation order.

    Example:
        >>> from dirconcat.exclusion_rules.glob_rules import GlobExclusionRules
        >>> from dirconcat.exclusion_rules.name_rules import NameExclusionRules
        >>> composite = CompositeExclusionRules([NameExclusionRules([".git"]), GlobExclusionRules(["vendor/*"])])
        >>> composite.exclude(".git")
        True
        >>> composite.exclude("vendor/lib")
        True
        >>> composite.exclude("src/main.go")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """
        Raises:
            ValueError: If no rules are given.
            TypeError: If a member is not a BaseExclusionRules instance.
        """
        if not rules:
            raise ValueError("CompositeExclusionRules needs at least one rule")

        invalid = [type(rule).__name__ for rule in rules if not isinstance(rule, BaseExclusionRules)]
        if invalid:
            raise TypeError(f"Not exclusion rules: {', '.join(invalid)}")

        self.rules: Tuple[BaseExclusionRules, ...] = tuple(rules)

    def exclude(self, path: str) -> bool:
        for rule in self.rules:
            if rule.exclude(path):
                return True
        return False
