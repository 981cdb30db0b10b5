"""Interface shared by every rule that can remove a path from the output."""

from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    A predicate over root-relative paths.

    Traversal code asks a rule about each entry before visiting it. When the entry
    is a directory and the rule says yes, nothing below it is visited either.

    Example:
        >>> from dirconcat.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules([".git"])
        >>> rules.exclude("src/.GIT")
        True
        >>> rules.exclude("src/main.go")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Args:
            path (str): Root-relative path with ``/`` separators and no leading ``./``.

        Returns:
            bool: True to leave the entry (and any subtree) out.
        """
        ...
