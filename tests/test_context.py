"""Tests for the project context section."""

import shutil

import pytest

from dirconcat.context import CONTEXT_COMMANDS, run_command, stream_context


def fake_runner(command, cwd):
    return f"ran {' '.join(command)}\n"


def test_context_section_layout(tmp_path):
    output = "".join(stream_context(tmp_path, runner=fake_runner))

    assert output == (
        "# Project Context\n"
        "## Git Status\nran git status\n\n"
        "## Recent Commits\nran git log -n 3 --oneline\n\n"
        "## Test Commands\nran make test\n\n"
        "## Build Commands\nran make build\n\n"
        "---\n"
    )


def test_commands_run_in_directory(tmp_path):
    calls = []

    def recording_runner(command, cwd):
        calls.append((tuple(command), cwd))
        return "\n"

    list(stream_context(tmp_path, runner=recording_runner))

    assert calls == [(command, tmp_path) for _, command in CONTEXT_COMMANDS]


def test_custom_commands(tmp_path):
    output = "".join(stream_context(tmp_path, commands=[("## Listing", ("ls",))], runner=fake_runner))

    assert output == "# Project Context\n## Listing\nran ls\n\n---\n"


def test_run_command_missing_program(tmp_path):
    output = run_command(["dirconcat-no-such-program"], tmp_path)

    assert output.startswith("(failed to run dirconcat-no-such-program: ")
    assert output.endswith(")\n")


@pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")
def test_run_command_captures_stdout_and_stderr(tmp_path):
    output = run_command(["sh", "-c", "echo out; echo err >&2"], tmp_path)

    assert output == "out\nerr\n\n"


@pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")
def test_run_command_nonzero_exit_reported(tmp_path):
    output = run_command(["sh", "-c", "exit 3"], tmp_path)

    assert output.startswith("(failed to run sh: ")


@pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")
def test_run_command_uses_cwd(tmp_path):
    (tmp_path / "marker.txt").write_text("")

    assert "marker.txt" in run_command(["sh", "-c", "ls"], tmp_path)


def test_failed_command_does_not_stop_section(tmp_path):
    commands = [("## Missing", ("dirconcat-no-such-program",)), ("## Echo", ("echo", "hi"))]

    output = "".join(stream_context(tmp_path, commands=commands))

    assert "## Missing\n(failed to run dirconcat-no-such-program" in output
    assert "## Echo\n" in output
    assert output.endswith("---\n")
