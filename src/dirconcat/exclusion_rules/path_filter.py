"""Filter configuration and the combined path filter used during traversal."""

from dataclasses import dataclass
from typing import Tuple

from .composite_rules import CompositeExclusionRules
from .glob_rules import GlobExclusionRules, GlobInclusionRules
from .name_rules import NameExclusionRules

# Version-control metadata and editor settings directories
DEFAULT_IGNORES: Tuple[str, ...] = (".git", ".vscode")


@dataclass(frozen=True)
class FilterConfig:
    """Immutable description of which paths end up in the output.

    Attributes:
        default_ignores: Bare names ignored at any depth (case-insensitive).
        include_globs: Patterns matched against base names; empty selects every file.
        exclude_globs: Patterns matched against root-relative paths; empty excludes nothing.
        include_all: Disable ``default_ignores``. Include and exclude globs still apply.
    """

    default_ignores: Tuple[str, ...] = DEFAULT_IGNORES
    include_globs: Tuple[str, ...] = ()
    exclude_globs: Tuple[str, ...] = ()
    include_all: bool = False


class PathFilter:
    """Decides, per traversed entry, whether it is pruned, skipped or selected.

    Callers apply the predicates in a fixed order: default-ignore first, then
    exclude, both of which prune whole subtrees when they match a directory, and
    finally include, which only ever selects individual files. ``is_pruned`` bundles
    the first two checks in that order.

    Attributes:
        config (FilterConfig): The configuration this filter was built from.

    Example:
        >>> path_filter = PathFilter(FilterConfig(include_globs=("*.go",), exclude_globs=("vendor/*",)))
        >>> path_filter.is_default_ignored(".git")
        True
        >>> path_filter.is_excluded("vendor/junk.go")
        True
        >>> path_filter.is_included("cmd/main.go")
        True
        >>> path_filter.is_included("README.txt")
        False
    """

    def __init__(self, config: FilterConfig = FilterConfig()) -> None:
        self.config = config
        self._ignore_rules = NameExclusionRules(() if config.include_all else config.default_ignores)
        self._exclude_rules = GlobExclusionRules(config.exclude_globs)
        self._include_rules = GlobInclusionRules(config.include_globs)
        self._prune_rules = CompositeExclusionRules([self._ignore_rules, self._exclude_rules])

    def is_default_ignored(self, name: str) -> bool:
        """True if the bare name is a default-ignored name and ``include_all`` is off."""
        return self._ignore_rules.exclude(name)

    def is_excluded(self, relative_path: str) -> bool:
        """True if any exclude pattern matches the full root-relative path."""
        return self._exclude_rules.exclude(relative_path)

    def is_included(self, relative_path: str) -> bool:
        """True if no include patterns are configured or one matches the base name."""
        return self._include_rules.include(relative_path)

    def is_pruned(self, relative_path: str) -> bool:
        """True if the entry is default-ignored or excluded.

        For directories this means the entire subtree is skipped.
        """
        return self._prune_rules.exclude(relative_path)
