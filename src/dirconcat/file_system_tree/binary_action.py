"""Binary action enum for handling binary files during content emission."""

from enum import Enum


class BinaryAction(str, Enum):
    """Action to take when a selected file is classified as binary.

    Values:
        SKIP: Write the ``[skipped binary file]`` placeholder instead of the content (default)
        HEXDUMP: Write a canonical hex dump of the whole file
    """

    SKIP = "skip"
    HEXDUMP = "hexdump"
