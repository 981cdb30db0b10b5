"""Markdown code fence labels derived from file extensions."""

from pathlib import Path
from typing import Dict

from dirconcat.types import PathType

LANGUAGE_LABELS: Dict[str, str] = {
    ".go": "go",
    ".yml": "yaml",
    ".yaml": "yaml",
    ".json": "json",
    ".md": "markdown",
    ".sh": "bash",
    ".ps1": "powershell",
    ".toml": "toml",
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".rs": "rust",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".java": "java",
    ".rb": "ruby",
    ".html": "html",
    ".css": "css",
    ".sql": "sql",
    ".xml": "xml",
}


def detect_language(path: PathType) -> str:
    """Return the code fence label for a file, or an empty string if unknown.

    Example:
        >>> detect_language("cmd/concat/main.go")
        'go'
        >>> detect_language("CONFIG.YML")
        'yaml'
        >>> detect_language("unknown.xyz")
        ''
    """
    return LANGUAGE_LABELS.get(Path(path).suffix.lower(), "")
