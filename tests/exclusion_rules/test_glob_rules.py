"""Tests for shell-style glob include/exclude rules."""

import pytest

from dirconcat.exclusion_rules.glob_rules import GlobExclusionRules, GlobInclusionRules, GlobPattern


def matches(pattern, path):
    return GlobPattern(pattern).match_file(path) is not None


class TestGlobPattern:
    @pytest.mark.parametrize(
        "pattern,path",
        [
            ("*.go", "main.go"),
            ("vendor/*", "vendor/junk.go"),
            ("?.txt", "a.txt"),
            ("[abc].txt", "b.txt"),
            ("[a-c].txt", "c.txt"),
            ("[^a-c].txt", "d.txt"),
            ("[!a-c].txt", "d.txt"),
            ("\\*.txt", "*.txt"),
            ("*", ".hidden"),
            ("a[\\]]b", "a]b"),
        ],
    )
    def test_matches(self, pattern, path):
        assert matches(pattern, path)

    @pytest.mark.parametrize(
        "pattern,path",
        [
            ("*.go", "cmd/main.go"),
            ("vendor/*", "vendor/lib/junk.go"),
            ("vendor/*", "vendor"),
            ("?.txt", "ab.txt"),
            ("a?b", "a/b"),
            ("[^a-c].txt", "b.txt"),
            ("[!x]", "/"),
            ("*.go", "main.golang"),
            ("\\*.txt", "a.txt"),
        ],
    )
    def test_does_not_match(self, pattern, path):
        assert not matches(pattern, path)

    def test_star_does_not_cross_separator(self):
        assert not matches("src*", "src/main.go")
        assert matches("src/*/*.go", "src/pkg/main.go")

    def test_regex_metacharacters_are_literal(self):
        assert matches("a+b(1).txt", "a+b(1).txt")
        assert not matches("a.b", "axb")

    @pytest.mark.parametrize("pattern", ["[abc", "[]", "[^]", "abc\\", "[z-a]", "[a-"])
    def test_malformed_patterns_never_match(self, pattern):
        glob = GlobPattern(pattern)
        assert glob.include is None
        assert glob.match_file(pattern) is None
        assert glob.match_file("abc") is None


class TestGlobExclusionRules:
    def test_matches_full_relative_path(self):
        rules = GlobExclusionRules(["vendor/*"])
        assert rules.exclude("vendor/junk.go")
        assert not rules.exclude("junk.go")
        assert not rules.exclude("src/vendor/junk.go")

    def test_pattern_without_slash_only_matches_top_level(self):
        rules = GlobExclusionRules(["*.log"])
        assert rules.exclude("server.log")
        assert not rules.exclude("logs/server.log")

    def test_empty_rules_exclude_nothing(self):
        rules = GlobExclusionRules([])
        assert not rules.exclude("anything")
        assert not rules.exclude("deep/nested/file.txt")

    def test_any_pattern_matches(self):
        rules = GlobExclusionRules(["*.log", "build"])
        assert rules.exclude("build")
        assert rules.exclude("debug.log")
        assert not rules.exclude("main.go")

    def test_malformed_pattern_is_ignored(self):
        rules = GlobExclusionRules(["[abc", "*.log"])
        assert rules.exclude("debug.log")
        assert not rules.exclude("[abc")

    def test_empty_strings_are_dropped(self):
        rules = GlobExclusionRules(["", "*.log"])
        assert len(rules.spec.patterns) == 1


class TestGlobInclusionRules:
    def test_empty_rules_include_everything(self):
        rules = GlobInclusionRules([])
        assert rules.include("anyfile.txt")
        assert rules.include("deep/nested/file.bin")

    def test_matches_base_name_only(self):
        rules = GlobInclusionRules(["*.go", "*.md"])
        assert rules.include("keep.go")
        assert rules.include("keep.md")
        assert rules.include("cmd/concat/main.go")
        assert not rules.include("skip.txt")

    def test_directory_part_is_ignored(self):
        rules = GlobInclusionRules(["cmd/*.go"])
        assert not rules.include("cmd/main.go")

    def test_only_malformed_patterns_include_nothing(self):
        rules = GlobInclusionRules(["[abc"])
        assert not rules.include("a")
