"""Tests for the BinaryAction enum."""

import pytest

from dirconcat.file_system_tree.binary_action import BinaryAction


def test_values():
    assert BinaryAction.SKIP.value == "skip"
    assert BinaryAction.HEXDUMP.value == "hexdump"
    assert len(BinaryAction) == 2


@pytest.mark.parametrize("value,expected", [("skip", BinaryAction.SKIP), ("hexdump", BinaryAction.HEXDUMP)])
def test_lookup_by_value(value, expected):
    assert BinaryAction(value) is expected


def test_compares_equal_to_string():
    assert BinaryAction.SKIP == "skip"


def test_invalid_value():
    with pytest.raises(ValueError):
        BinaryAction("raise")
