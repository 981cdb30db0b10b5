"""Test configuration and fixtures for dirconcat."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def simple_tree(tmp_path):
    """Create the smallest tree with both a file and a subdirectory.

    Layout::

        a.txt          "hello\\n"
        b_dir/c.txt    "world\\n"
    """
    (tmp_path / "a.txt").write_text("hello\n")
    (tmp_path / "b_dir").mkdir()
    (tmp_path / "b_dir" / "c.txt").write_text("world\n")
    return tmp_path
