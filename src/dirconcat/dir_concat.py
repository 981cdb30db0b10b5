"""Directory to Markdown overview generation.

This module assembles the complete overview document from its sections, writing
each one to an output sink as soon as it is produced:

1. ``# Project Summary & Goal`` (optional)
2. ``# Project Context`` (optional, from external commands)
3. ``# Directory Structure`` with the tree and the ``N directories, M files`` line
4. ``# File Contents`` with one block per selected file
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from anytree.render import AbstractStyle

from dirconcat.context import CommandRunner, run_command, stream_context
from dirconcat.exclusion_rules.path_filter import FilterConfig, PathFilter
from dirconcat.file_content_emitter import FileContentEmitter
from dirconcat.file_system_tree.binary_action import BinaryAction
from dirconcat.file_system_tree.tree_renderer import TreeCounts, TreeRenderer
from dirconcat.languages import detect_language
from dirconcat.types import OutputSink, PathType

logger = logging.getLogger(__name__)


class DirConcat:
    """Writes the Markdown overview of a directory to an output sink.

    Sections are written in document order and never buffered, so a fatal error
    part way through leaves the sections already written in the sink. Every
    configuration value is fixed at construction time.

    Attributes:
        directory (Path): Resolved root directory.
        path_filter (PathFilter): Filter shared by the tree and the contents.
        output_path (Optional[Path]): Resolved output file, skipped during traversal.
        goal (Optional[str]): Text for the goal section, or None to omit it.
        with_context (bool): Whether to write the project context section.

    Example:
        >>> concat = DirConcat("src", goal="Flatten the sources")  # doctest: +SKIP
        >>> with open("overview.md", "wb") as sink:  # doctest: +SKIP
        ...     counts = concat.write(sink)
        >>> counts.summary()  # doctest: +SKIP
        '3 directories, 12 files'
    """

    def __init__(
        self,
        directory: PathType,
        *,
        filter_config: FilterConfig = FilterConfig(),
        binary_action: BinaryAction = BinaryAction.SKIP,
        output_path: Optional[PathType] = None,
        goal: Optional[str] = None,
        with_context: bool = False,
        tree_style: Optional[AbstractStyle] = None,
        language_lookup: Optional[Callable[[str], str]] = detect_language,
        command_runner: CommandRunner = run_command,
    ):
        """Initialize the overview generator.

        Args:
            directory: Directory to process. Can be any path-like object.
            filter_config: Ignore, include and exclude configuration.
            binary_action: What to write for binary files.
            output_path: Output file to leave out of the tree and the contents.
            goal: Goal text for the summary section. None or empty omits the section.
            with_context: Whether to run the context commands.
            tree_style: anytree render style for the tree connectors. Defaults to ContStyle.
            language_lookup: Maps file names to code fence labels.
            command_runner: Executes context commands.

        Raises:
            ValueError: If directory is not an existing directory.
        """
        self.directory = Path(directory).resolve()
        if not self.directory.is_dir():
            raise ValueError(f"'{directory}' is not a valid directory")

        self.path_filter = PathFilter(filter_config)
        self.output_path = Path(output_path).resolve() if output_path is not None else None
        self.goal = goal
        self.with_context = with_context
        self._command_runner = command_runner

        self._tree_renderer = TreeRenderer(
            self.directory, self.path_filter, output_path=self.output_path, style=tree_style
        )
        self._content_emitter = FileContentEmitter(
            self.directory,
            self.path_filter,
            binary_action=binary_action,
            language_lookup=language_lookup,
            output_path=self.output_path,
        )

    def write_goal(self, sink: OutputSink) -> None:
        """Write the goal section if a goal was given."""
        if not self.goal:
            return
        sink.write(
            (
                "# Project Summary & Goal\n"
                f"- **Goal:** {self.goal}\n"
                f"- **Project:** {self.directory.name}\n"
                "---\n"
            ).encode("utf-8")
        )

    def write_context(self, sink: OutputSink) -> None:
        """Write the project context section if it was requested."""
        if not self.with_context:
            return
        for piece in stream_context(self.directory, runner=self._command_runner):
            sink.write(piece.encode("utf-8"))

    def write_tree(self, sink: OutputSink) -> TreeCounts:
        """Write the directory structure section and return the counts.

        Raises:
            DirectoryListingError: If the root directory cannot be listed.
        """
        sink.write(b"# Directory Structure\n.\n")
        counts = self._tree_renderer.render(
            lambda line: sink.write((line + "\n").encode("utf-8", errors="surrogateescape"))
        )
        sink.write(f"\n{counts.summary()}\n".encode("utf-8"))
        logger.debug("Rendered %s", counts.summary())
        return counts

    def write_contents(self, sink: OutputSink) -> None:
        """Write the file contents section.

        Raises:
            DirectoryListingError: If any visited directory cannot be listed.
        """
        sink.write(b"# File Contents\n")
        self._content_emitter.emit(sink)

    def write(self, sink: OutputSink) -> TreeCounts:
        """Write the complete overview.

        Returns:
            The directory and file counts of the rendered tree.

        Raises:
            DirectoryListingError: If a directory listing fails fatally.
            OSError: If the sink fails to write.
        """
        self.write_goal(sink)
        self.write_context(sink)
        counts = self.write_tree(sink)
        self.write_contents(sink)
        return counts
