"""Tests for the combined path filter."""

import pytest

from dirconcat.exclusion_rules.path_filter import DEFAULT_IGNORES, FilterConfig, PathFilter


@pytest.mark.parametrize("name", DEFAULT_IGNORES)
def test_default_ignores_case_insensitive(name):
    path_filter = PathFilter(FilterConfig())
    assert path_filter.is_default_ignored(name)
    assert path_filter.is_default_ignored(name.upper())


@pytest.mark.parametrize("name", DEFAULT_IGNORES)
def test_include_all_disables_default_ignores(name):
    path_filter = PathFilter(FilterConfig(include_all=True))
    assert not path_filter.is_default_ignored(name)
    assert not path_filter.is_default_ignored(name.upper())


def test_include_all_keeps_globs():
    path_filter = PathFilter(FilterConfig(include_all=True, include_globs=("*.go",), exclude_globs=("vendor/*",)))
    assert path_filter.is_excluded("vendor/junk.go")
    assert not path_filter.is_included("notes.txt")


def test_include_and_exclude_globs():
    path_filter = PathFilter(FilterConfig(include_globs=("*.go", "*.md"), exclude_globs=("vendor/*",)))

    # Exclude wins over include
    assert path_filter.is_excluded("vendor/junk.go")
    assert path_filter.is_included("vendor/junk.go")
    assert path_filter.is_pruned("vendor/junk.go")

    assert path_filter.is_included("keep.go") and not path_filter.is_pruned("keep.go")
    assert path_filter.is_included("keep.md") and not path_filter.is_pruned("keep.md")
    assert not path_filter.is_included("skip.txt")


def test_empty_include_set_includes_everything():
    path_filter = PathFilter(FilterConfig())
    assert path_filter.is_included("anyfile.txt")
    assert not path_filter.is_excluded("anyfile.txt")


def test_is_pruned_combines_ignore_and_exclude():
    path_filter = PathFilter(FilterConfig(exclude_globs=("build",)))
    assert path_filter.is_pruned(".git")
    assert path_filter.is_pruned("pkg/.vscode")
    assert path_filter.is_pruned("build")
    assert not path_filter.is_pruned("pkg/build")


def test_custom_default_ignores():
    path_filter = PathFilter(FilterConfig(default_ignores=("node_modules",)))
    assert path_filter.is_default_ignored("Node_Modules")
    assert not path_filter.is_default_ignored(".git")


def test_filter_config_is_immutable():
    config = FilterConfig()
    with pytest.raises(AttributeError):
        config.include_all = True
