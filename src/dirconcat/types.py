from enum import Enum
from os import PathLike
from typing import Any, Protocol, Union


# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileKind(str, Enum):
    """Classification of a file's content as determined by sniffing.

    Attributes:
        BINARY: The sampled bytes contain NUL bytes or are not valid UTF-8.
        TEXT: The sampled bytes are valid UTF-8 without NUL bytes.
    """

    BINARY = "binary"
    TEXT = "text"


class OutputSink(Protocol):
    """Anything that accepts ordered writes of raw bytes (files, BytesIO, SafeWriter)."""

    def write(self, data: bytes) -> Any: ...
