"""Command-line interface for dirconcat.

This module provides the command-line entry point that turns a directory into a
single Markdown overview file. It handles argument parsing, logging setup, output
creation and signal management for graceful interruption handling.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including unreadable directories and
       output write failures)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Write <dir>/<dir name>_OVERVIEW.md
    $ dirconcat /path/to/dir

    # Only Go and Markdown files, skipping vendored code, to stdout
    $ dirconcat --include "*.go,*.md" --exclude "vendor/*" -o - /path/to/dir
"""

import logging
import sys
from typing import Union

from anytree.render import AsciiStyle, ContStyle

from dirconcat.cli.argparser import (
    build_filter_config,
    create_parser,
    resolve_binary_action,
    resolve_output_path,
    validate_args,
)
from dirconcat.cli.safe_writer import SafeWriter
from dirconcat.cli.signal_handler import setup_signal_handling, signal_handler
from dirconcat.dir_concat import DirConcat

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, otherwise warnings only."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Main entry point for the dirconcat command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        # argparse exits with 2 for usage errors and 0 for --version
        args = parser.parse_args()
        validate_args(args)
        configure_logging(args.verbose)

        output_path = resolve_output_path(args)
        concat = DirConcat(
            args.directory,
            filter_config=build_filter_config(args),
            binary_action=resolve_binary_action(args),
            output_path=output_path,
            goal=args.goal,
            with_context=args.with_context,
            tree_style=AsciiStyle() if args.ascii else ContStyle(),
        )

        destination: Union[int, str] = str(output_path) if output_path is not None else sys.stdout.fileno()
        with SafeWriter(destination) as safe_writer:
            try:
                counts = concat.write(safe_writer)
                logger.info("Wrote %s", counts.summary())
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

        if output_path is not None and not signal_handler.interrupted():
            print(f"Created {output_path}")

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
