"""Directory listing primitive shared by the tree renderer and the content emitter."""

import os
from typing import List

from dirconcat.types import PathType


def list_directory(path: PathType) -> List[str]:
    """List the entry names of a directory in lexical order.

    This is the only place traversal order is decided. Callers never regroup or
    reorder the result (no directories-first ordering), so the tree listing and the
    file contents section visit entries in the same order.

    Args:
        path: Directory to list.

    Returns:
        Entry names, sorted by code point.

    Raises:
        OSError: If the directory cannot be listed.
    """
    return sorted(os.listdir(path))
