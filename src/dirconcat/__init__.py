"""Directory to Markdown concatenation utilities.

This package walks a directory tree and writes a single Markdown overview: a
tree listing of the directory followed by the contents of every included file,
suitable for handing a whole project to an LLM in one document.
"""

from importlib.metadata import PackageNotFoundError, version

# Read from the installed distribution metadata
try:
    __version__ = version("dirconcat")
except PackageNotFoundError:
    __version__ = "unknown"
