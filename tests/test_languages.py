"""Tests for code fence language detection."""

import pytest

from dirconcat.languages import LANGUAGE_LABELS, detect_language


@pytest.mark.parametrize(
    "path,label",
    [
        ("main.go", "go"),
        ("cmd/concat/main.go", "go"),
        ("config.yml", "yaml"),
        ("config.yaml", "yaml"),
        ("package.json", "json"),
        ("README.md", "markdown"),
        ("build.sh", "bash"),
        ("setup.ps1", "powershell"),
        ("pyproject.toml", "toml"),
        ("module.py", "python"),
    ],
)
def test_known_extensions(path, label):
    assert detect_language(path) == label


def test_extension_case_insensitive():
    assert detect_language("MAIN.GO") == "go"


@pytest.mark.parametrize("path", ["notes.txt", "Makefile", "archive.tar.gz", ".gitignore", ""])
def test_unknown_extensions_have_no_label(path):
    assert detect_language(path) == ""


def test_labels_are_fence_safe():
    for label in LANGUAGE_LABELS.values():
        assert label and "`" not in label and not any(char.isspace() for char in label)
