"""Project context sections built from the output of external commands."""

import logging
import subprocess
from typing import Callable, Iterator, Sequence, Tuple

from dirconcat.types import PathType

logger = logging.getLogger(__name__)

# (section heading, command line) pairs, in output order
CONTEXT_COMMANDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("## Git Status", ("git", "status")),
    ("## Recent Commits", ("git", "log", "-n", "3", "--oneline")),
    ("## Test Commands", ("make", "test")),
    ("## Build Commands", ("make", "build")),
)

CommandRunner = Callable[[Sequence[str], PathType], str]


def run_command(command: Sequence[str], cwd: PathType) -> str:
    """Run a command and return its combined stdout and stderr.

    A command that cannot be started or exits with a non-zero status is reported
    inline instead of raising, so a missing ``git`` or ``make`` never aborts the
    overview.

    Args:
        command: Program and arguments.
        cwd: Working directory for the command.

    Returns:
        The command output followed by a newline, or a ``(failed to run ...)`` note.
    """
    logger.debug("Running %s in %s", " ".join(command), cwd)
    try:
        completed = subprocess.run(
            list(command), cwd=cwd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, check=True
        )
    except (OSError, subprocess.CalledProcessError) as e:
        return f"(failed to run {command[0]}: {e})\n"
    return completed.stdout.decode("utf-8", errors="replace") + "\n"


def stream_context(
    cwd: PathType,
    commands: Sequence[Tuple[str, Sequence[str]]] = CONTEXT_COMMANDS,
    runner: CommandRunner = run_command,
) -> Iterator[str]:
    """Yield the ``# Project Context`` section, one piece at a time.

    Args:
        cwd: Directory the commands run in.
        commands: Heading and command line for each subsection.
        runner: Callable executing a command and returning its text.

    Yields:
        Markdown text for the header, each subsection and the closing rule.
    """
    yield "# Project Context\n"
    for heading, command in commands:
        yield f"{heading}\n"
        yield runner(command, cwd)
        yield "\n"
    yield "---\n"
