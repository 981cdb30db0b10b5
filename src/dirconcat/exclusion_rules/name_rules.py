"""Exclusion rules matching the final path segment against a set of names."""

import posixpath
from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules


class NameExclusionRules(BaseExclusionRules):
    """Exclude entries whose bare name equals one of the configured names.

    Comparison is case-insensitive and exact: ``.GIT`` matches ``.git`` but
    ``.github`` does not. Only the final segment of the path is considered, so the
    rule applies at every depth of the tree.

    Attributes:
        names (FrozenSet[str]): The lower-cased names to exclude.

    Example:
        >>> rules = NameExclusionRules([".git", ".vscode"])
        >>> rules.exclude(".Git")
        True
        >>> rules.exclude("pkg/.vscode")
        True
        >>> rules.exclude(".github")
        False
    """

    def __init__(self, names: Iterable[str]):
        self.names: FrozenSet[str] = frozenset(name.lower() for name in names)

    def exclude(self, path: str) -> bool:
        return posixpath.basename(path).lower() in self.names
