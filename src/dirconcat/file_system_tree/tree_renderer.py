"""Recursive tree rendering with per-subtree directory and file counts.

The renderer walks the directory in a single depth-first pass and emits one line
per visible entry, in the style of the Unix ``tree`` command::

    ├── a.txt
    └── b_dir
        └── c.txt

Nothing is materialized: each recursive call renders its subtree and returns the
counts for it, which the parent adds to its own.
"""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from anytree.render import AbstractStyle, ContStyle

from dirconcat.exceptions import DirectoryListingError
from dirconcat.exclusion_rules.path_filter import PathFilter
from dirconcat.file_system_tree.listing import list_directory
from dirconcat.types import PathType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeCounts:
    """Number of directories and files rendered in a (sub)tree.

    Example:
        >>> TreeCounts(directories=1) + TreeCounts(files=2)
        TreeCounts(directories=1, files=2)
        >>> TreeCounts(1, 2).summary()
        '1 directories, 2 files'
    """

    directories: int = 0
    files: int = 0

    def __add__(self, other: "TreeCounts") -> "TreeCounts":
        return TreeCounts(self.directories + other.directories, self.files + other.files)

    def summary(self) -> str:
        return f"{self.directories} directories, {self.files} files"


class TreeRenderer:
    """Renders a filtered directory hierarchy as connector-prefixed lines.

    Entries are hidden (no line, no count) when they are the output file, when they
    cannot be stat'ed, or when the path filter prunes them. Include patterns are
    never consulted: the tree shows what exists, filtered only by ignore and exclude
    rules.

    The connector of an entry depends on its position in the raw directory listing,
    before filtering. An entry followed only by hidden siblings therefore keeps the
    ``├── `` connector.

    Attributes:
        root_path (Path): The directory whose children are rendered.
        path_filter (PathFilter): Filter deciding which entries are pruned.
        output_path (Optional[Path]): Output file to hide from the tree, if any.
        style (AbstractStyle): anytree render style providing the connector glyphs.

    Example:
        >>> renderer = TreeRenderer("project", PathFilter())  # doctest: +SKIP
        >>> lines = []  # doctest: +SKIP
        >>> renderer.render(lines.append)  # doctest: +SKIP
        TreeCounts(directories=1, files=2)
    """

    def __init__(
        self,
        root_path: PathType,
        path_filter: PathFilter,
        output_path: Optional[PathType] = None,
        style: Optional[AbstractStyle] = None,
    ) -> None:
        self.root_path = Path(root_path)
        self.path_filter = path_filter
        self.output_path = Path(output_path) if output_path is not None else None
        self.style = style if style is not None else ContStyle()

    def render(self, write: Callable[[str], None]) -> TreeCounts:
        """Render the root's children, passing each line (without newline) to ``write``.

        The root itself is not rendered; callers print their own marker for it.

        Args:
            write: Callback receiving each rendered line in order.

        Returns:
            The number of directories and files rendered, excluding the root.

        Raises:
            DirectoryListingError: If the root directory cannot be listed.
        """
        try:
            names = list_directory(self.root_path)
        except OSError as e:
            raise DirectoryListingError(self.root_path, e) from e

        counts = TreeCounts()
        for i, name in enumerate(names):
            counts += self._render_node(self.root_path / name, name, "", i == len(names) - 1, write)
        return counts

    def render_lines(self) -> Tuple[List[str], TreeCounts]:
        """Render into a list of lines.

        Returns:
            The rendered lines and the counts.
        """
        lines: List[str] = []
        counts = self.render(lines.append)
        return lines, counts

    def _render_node(
        self, path: Path, relative_path: str, prefix: str, is_last: bool, write: Callable[[str], None]
    ) -> TreeCounts:
        if self.path_filter.is_pruned(relative_path):
            return TreeCounts()
        if self.output_path is not None and path == self.output_path:
            return TreeCounts()

        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            logger.debug("Hiding '%s' from the tree: %s", relative_path, e)
            return TreeCounts()

        connector = self.style.end if is_last else self.style.cont
        write(f"{prefix}{connector}{path.name}")

        if not stat.S_ISDIR(mode):
            return TreeCounts(files=1)

        counts = TreeCounts(directories=1)
        try:
            names = list_directory(path)
        except OSError as e:
            # Only this subtree is lost; the directory line above stays.
            logger.debug("Cannot list '%s': %s", relative_path, e)
            return counts

        child_prefix = prefix + (self.style.empty if is_last else self.style.vertical)
        for i, name in enumerate(names):
            counts += self._render_node(path / name, f"{relative_path}/{name}", child_prefix, i == len(names) - 1, write)
        return counts
