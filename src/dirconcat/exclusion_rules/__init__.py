"""Exclusion and inclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .glob_rules import GlobExclusionRules, GlobInclusionRules, GlobPattern
from .name_rules import NameExclusionRules
from .path_filter import DEFAULT_IGNORES, FilterConfig, PathFilter

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DEFAULT_IGNORES",
    "FilterConfig",
    "GlobExclusionRules",
    "GlobInclusionRules",
    "GlobPattern",
    "NameExclusionRules",
    "PathFilter",
]
