"""Developer task runner: ``python scripts.py <task>``."""

import subprocess
import sys

TASKS = {
    "test": [["pytest"]],
    "cli-tests": [["pytest", "--run-cli-tests", "tests/integration"]],
    "lint": [["flake8", "src", "tests"]],
    "typecheck": [["mypy", "src"]],
    "format": [["black", "src", "tests"]],
    "coverage": [["pytest", "--cov=dirconcat", "--cov-report=xml", "tests/"]],
    "check": [["black", "--check", "src", "tests"], ["flake8", "src", "tests"], ["mypy", "src"], ["pytest"]],
}


def run(task):
    for command in TASKS[task]:
        subprocess.run(command, check=True)


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        sys.exit(f"usage: python scripts.py {{{','.join(TASKS)}}}")
    run(sys.argv[1])
