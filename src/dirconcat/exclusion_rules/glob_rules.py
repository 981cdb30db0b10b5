"""Include and exclude rules using shell-style glob patterns.

Patterns follow classic shell wildcard syntax where ``/`` is an ordinary
separator character:

- ``*`` matches any run of characters except ``/``
- ``?`` matches any single character except ``/``
- ``[abc]``, ``[a-z]``, ``[^a-z]`` and ``[!a-z]`` are character classes
- ``\\`` escapes the following character

A pattern must match the whole string. Malformed patterns (an unterminated
character class, an empty class, a reversed range or a trailing backslash) never
match anything.
"""

import posixpath
import re
from typing import Iterable, Optional, Tuple

from pathspec import PathSpec
from pathspec.pattern import RegexPattern

from .base_rules import BaseExclusionRules


class GlobPattern(RegexPattern):
    """A pathspec pattern implementing shell-style glob matching.

    Unlike ``GitWildMatchPattern``, a pattern without a slash is not matched at
    every depth and never matches the descendants of a matching directory: the
    pattern is compared against the complete string it is given.

    Example:
        >>> GlobPattern("vendor/*").match_file("vendor/junk.go") is not None
        True
        >>> GlobPattern("vendor/*").match_file("vendor/lib/junk.go") is None
        True
        >>> GlobPattern("[a-").include is None
        True
    """

    __slots__ = ()

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[Optional[str], Optional[bool]]:
        """Convert a glob pattern into an anchored regular expression.

        Args:
            pattern: The glob pattern.

        Returns:
            A ``(regex, include)`` tuple. Malformed patterns return ``(None, None)``,
            which pathspec treats as a null pattern that matches nothing.
        """
        parts = []
        i, n = 0, len(pattern)
        while i < n:
            char = pattern[i]
            i += 1
            if char == "*":
                parts.append("[^/]*")
            elif char == "?":
                parts.append("[^/]")
            elif char == "\\":
                if i >= n:
                    return None, None
                parts.append(re.escape(pattern[i]))
                i += 1
            elif char == "[":
                char_class, i = cls._translate_class(pattern, i)
                if char_class is None:
                    return None, None
                parts.append(char_class)
            else:
                parts.append(re.escape(char))
        parts.append(r"\Z")
        return "".join(parts), True

    @staticmethod
    def _translate_class(pattern: str, start: int) -> Tuple[Optional[str], int]:
        """Translate the character class whose body begins at ``start``.

        Returns:
            The regex for the class and the index just past its closing ``]``, or
            ``(None, start)`` if the class is malformed.
        """
        i, n = start, len(pattern)
        negate = i < n and pattern[i] in "^!"
        if negate:
            i += 1

        items = []
        while True:
            if i >= n:
                return None, start
            if pattern[i] == "]":
                if not items:
                    return None, start
                i += 1
                break

            low, i = _class_char(pattern, i)
            if low is None:
                return None, start
            if i + 1 < n and pattern[i] == "-" and pattern[i + 1] != "]":
                high, i = _class_char(pattern, i + 1)
                if high is None or high < low:
                    return None, start
                items.append(f"{re.escape(low)}-{re.escape(high)}")
            else:
                items.append(re.escape(low))

        body = "".join(items)
        if negate:
            return f"[^/{body}]", i
        return f"[{body}]", i


def _class_char(pattern: str, i: int) -> Tuple[Optional[str], int]:
    if pattern[i] == "\\":
        if i + 1 >= len(pattern):
            return None, i
        return pattern[i + 1], i + 2
    return pattern[i], i + 1


def _compile(patterns: Iterable[str]) -> PathSpec:
    return PathSpec.from_lines(GlobPattern, [pattern for pattern in patterns if pattern])


class GlobExclusionRules(BaseExclusionRules):
    """Exclude entries whose root-relative path matches any glob pattern.

    Patterns are matched against the full relative path, so ``vendor/*`` excludes
    the direct children of the top-level ``vendor`` directory (and, because
    excluded directories are pruned, everything below them) while ``*.log`` only
    matches log files directly in the root.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GlobExclusionRules(["vendor/*", "*.log"])
        >>> rules.exclude("vendor/junk.go")
        True
        >>> rules.exclude("debug.log")
        True
        >>> rules.exclude("logs/debug.log")
        False
        >>> GlobExclusionRules([]).exclude("anything")
        False
    """

    def __init__(self, patterns: Iterable[str]):
        self.spec = _compile(patterns)

    def exclude(self, path: str) -> bool:
        return bool(self.spec.match_file(path))


class GlobInclusionRules:
    """Select files whose base name matches any glob pattern.

    An empty pattern set selects everything. Matching uses the final path segment
    only, so ``*.go`` selects Go files anywhere in the tree.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GlobInclusionRules(["*.go", "*.md"])
        >>> rules.include("cmd/concat/main.go")
        True
        >>> rules.include("notes.txt")
        False
        >>> GlobInclusionRules([]).include("notes.txt")
        True
    """

    def __init__(self, patterns: Iterable[str]):
        self.spec = _compile(patterns)

    def include(self, path: str) -> bool:
        if not self.spec.patterns:
            return True
        return bool(self.spec.match_file(posixpath.basename(path)))
