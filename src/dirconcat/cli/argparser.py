"""Command-line argument parsing for dirconcat.

This module defines the command-line interface for dirconcat,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from dirconcat import __version__
from dirconcat.exclusion_rules.path_filter import FilterConfig
from dirconcat.file_system_tree.binary_action import BinaryAction

# Value of -o/--output that selects standard output
STDOUT_MARKER = "-"


class GlobListAction(argparse.Action):
    """Collect comma-separated glob patterns across repeated options.

    ``--include "*.go,*.md" --include "*.toml"`` yields ``["*.go", "*.md", "*.toml"]``,
    preserving the order patterns appear on the command line. Empty items are
    dropped.
    """

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        patterns: List[str] = list(getattr(namespace, self.dest, None) or [])
        if values is not None:
            patterns.extend(pattern for pattern in str(values).split(",") if pattern)
        setattr(namespace, self.dest, patterns)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirconcat's options.
    """
    description = """
    dirconcat: Concatenate files in a directory tree into a single Markdown overview.

    The tool walks the given directory, writes a tree-like view of every file and
    subdirectory, and then appends the contents of every included file. Binary files
    are skipped or rendered as hex dumps. Version-control metadata (.git) and editor
    settings (.vscode) are ignored unless --all is given.
    """

    epilog = """
    Examples:
      dirconcat .
      dirconcat -o project_OVERVIEW.md .
      dirconcat --include-binaries ./my_project
      dirconcat --all --verbose --output overview.md .
      dirconcat --include "*.go,*.md" --exclude "vendor/*" .
      dirconcat --goal "Add streaming support" --with-context .
      dirconcat -o - . | less
    """

    parser = argparse.ArgumentParser(
        prog="dirconcat",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirconcat {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to process. All paths in the output are relative to this directory.",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help=(
            "Output file (default: <directory>/<directory name>_OVERVIEW.md). "
            f"Use '{STDOUT_MARKER}' to write to stdout."
        ),
    )
    parser.add_argument(
        "--include-binaries",
        action="store_true",
        help="Include binary files as hex dumps instead of a placeholder.",
    )
    parser.add_argument(
        "--all",
        dest="include_all",
        action="store_true",
        help="Do not ignore version-control and editor directories (.git, .vscode).",
    )
    parser.add_argument(
        "--include",
        dest="include_globs",
        metavar="GLOBS",
        action=GlobListAction,
        help=(
            "Comma-separated glob patterns matched against file names, e.g. \"*.go,*.md\". "
            "Only matching files are included. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "--exclude",
        dest="exclude_globs",
        metavar="GLOBS",
        action=GlobListAction,
        help=(
            "Comma-separated glob patterns matched against paths relative to the directory, "
            "e.g. \"*.log,vendor/*\". Matching directories are skipped entirely. "
            "Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "--goal",
        metavar="TEXT",
        help="Project goal to include in a summary section at the top of the overview.",
    )
    parser.add_argument(
        "--with-context",
        action="store_true",
        help="Include git status, recent commits and make test/build output.",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Draw the tree with ASCII characters instead of box-drawing characters.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr while scanning.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if not args.directory.is_dir():
        raise ValueError(f"'{args.directory}' is not a valid directory")


def build_filter_config(args: argparse.Namespace) -> FilterConfig:
    """Build the immutable filter configuration from parsed arguments."""
    return FilterConfig(
        include_globs=tuple(args.include_globs or ()),
        exclude_globs=tuple(args.exclude_globs or ()),
        include_all=args.include_all,
    )


def resolve_binary_action(args: argparse.Namespace) -> BinaryAction:
    return BinaryAction.HEXDUMP if args.include_binaries else BinaryAction.SKIP


def resolve_output_path(args: argparse.Namespace) -> Optional[Path]:
    """Resolve the output file, or None when writing to stdout.

    The default output lives inside the processed directory and is named after it.
    """
    if args.output == STDOUT_MARKER:
        return None
    if args.output:
        return Path(args.output).resolve()
    directory = args.directory.resolve()
    return directory / f"{directory.name}_OVERVIEW.md"
