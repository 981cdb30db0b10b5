"""Tests for dirconcat exceptions."""

import pytest

from dirconcat.exceptions import DirectoryListingError, OutputWriteError


def test_directory_listing_error():
    reason = PermissionError("Permission denied")
    error = DirectoryListingError("/srv/project", reason)

    assert str(error) == "Failed to list directory '/srv/project': Permission denied"
    assert error.directory == "/srv/project"
    assert error.reason is reason
    assert isinstance(error, OSError)


def test_directory_listing_error_accepts_path(tmp_path):
    error = DirectoryListingError(tmp_path, OSError("boom"))
    assert error.directory == str(tmp_path)


def test_output_write_error():
    reason = OSError("No space left on device")
    error = OutputWriteError("overview.md", reason)

    assert str(error) == "Failed to write output 'overview.md': No space left on device"
    assert error.destination == "overview.md"
    assert error.reason is reason


def test_errors_can_be_caught_as_oserror():
    with pytest.raises(OSError):
        raise OutputWriteError("<fd 1>", OSError("EIO"))
