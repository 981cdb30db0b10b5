"""File content emitter with streaming support.

This module walks the filtered directory tree and streams every selected file into
the output as a Markdown block::

    -----
    File Path: cmd/concat/main.go

    ```go
    <raw file bytes>
    ```
    -----

Text files are copied byte for byte. Binary files are replaced by a placeholder or
rendered as a hex dump, depending on the configured BinaryAction.
"""

import logging
import os
import stat
from dataclasses import dataclass
from itertools import chain
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional

from .exceptions import DirectoryListingError
from .exclusion_rules.path_filter import PathFilter
from .file_system_tree.binary_action import BinaryAction
from .file_system_tree.binary_detector import SNIFF_SIZE, classify_bytes
from .file_system_tree.listing import list_directory
from .io.hex_dumper import hex_dump
from .languages import detect_language
from .types import FileKind, OutputSink, PathType

logger = logging.getLogger(__name__)

SEPARATOR = b"-----\n"
BINARY_PLACEHOLDER = b"[skipped binary file]\n"
FENCE = b"```"


def _encode(text: str) -> bytes:
    # Names that are not valid UTF-8 round-trip to their original bytes
    return text.encode("utf-8", errors="surrogateescape")


@dataclass(frozen=True)
class FileInfo:
    """A file selected for output.

    Attributes:
        path: Absolute path to the file.
        relative_path: Root-relative path with ``/`` separators, used in headers.
    """

    path: Path
    relative_path: str


class FileContentEmitter:
    """Streams selected files as Markdown blocks while holding only one chunk in memory.

    The walk is pre-order with siblings in listing order. For every entry the
    output file itself is skipped, pruned entries (default-ignored or excluded) are
    skipped together with their whole subtree, and files not matched by the include
    patterns are skipped. Symbolic links are never descended into.

    Each selected file is opened once: the first SNIFF_SIZE bytes classify it, and
    the same handle then streams the rest of the file.

    Failure policy:
        - A file that cannot be opened or sampled is skipped silently.
        - A read error after the block header was written ends the block early.
        - A directory that cannot be listed raises DirectoryListingError.

    Attributes:
        root_path (Path): The directory being walked.
        path_filter (PathFilter): Filter deciding which entries are pruned or selected.
        binary_action (BinaryAction): What to write for binary files.
        language_lookup (Optional[Callable[[str], str]]): Maps a file name to a fence
            label. None disables code fences entirely.
        output_path (Optional[Path]): Output file to leave out of the walk, if any.
        chunk_size (int): Read size used when streaming file content.

    Example:
        >>> emitter = FileContentEmitter("project", PathFilter())  # doctest: +SKIP
        >>> for chunk in emitter.stream_contents():  # doctest: +SKIP
        ...     sys.stdout.buffer.write(chunk)
    """

    def __init__(
        self,
        root_path: PathType,
        path_filter: PathFilter,
        binary_action: BinaryAction = BinaryAction.SKIP,
        language_lookup: Optional[Callable[[str], str]] = detect_language,
        output_path: Optional[PathType] = None,
        chunk_size: int = 65536,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self.root_path = Path(root_path)
        self.path_filter = path_filter
        self.binary_action = binary_action
        self.language_lookup = language_lookup
        self.output_path = Path(output_path) if output_path is not None else None
        self.chunk_size = chunk_size

    def iterate_files(self) -> Iterator[FileInfo]:
        """Yield every file selected for output, in pre-order.

        A root whose own name is default-ignored (e.g. ``.git``) yields
        nothing unless ``include_all`` is set.

        Raises:
            DirectoryListingError: If any visited directory cannot be listed.
        """
        root_name = self.root_path.resolve().name
        if self.path_filter.is_default_ignored(root_name):
            logger.debug("Pruning root '%s'", root_name)
            return
        yield from self._walk(self.root_path, "")

    def _walk(self, directory: Path, relative_dir: str) -> Iterator[FileInfo]:
        try:
            names = list_directory(directory)
        except OSError as e:
            raise DirectoryListingError(directory, e) from e

        for name in names:
            path = directory / name
            relative_path = f"{relative_dir}/{name}" if relative_dir else name

            if self.output_path is not None and path == self.output_path:
                continue
            if self.path_filter.is_pruned(relative_path):
                logger.debug("Pruning '%s'", relative_path)
                continue

            try:
                mode = os.lstat(path).st_mode
            except OSError as e:
                logger.debug("Skipping '%s': %s", relative_path, e)
                continue

            if stat.S_ISDIR(mode):
                yield from self._walk(path, relative_path)
            elif self.path_filter.is_included(relative_path):
                yield FileInfo(path=path, relative_path=relative_path)

    def stream_contents(self) -> Iterator[bytes]:
        """Stream the blocks of all selected files.

        Yields:
            Chunks of the output, in order.

        Raises:
            DirectoryListingError: If any visited directory cannot be listed.
        """
        for file_info in self.iterate_files():
            yield from self._yield_file_block(file_info)

    def emit(self, sink: OutputSink) -> None:
        """Write the blocks of all selected files to ``sink``.

        Raises:
            DirectoryListingError: If any visited directory cannot be listed.
            OSError: If the sink fails to write.
        """
        for chunk in self.stream_contents():
            sink.write(chunk)

    def _yield_file_block(self, file_info: FileInfo) -> Iterator[bytes]:
        try:
            file = open(file_info.path, "rb")
        except OSError as e:
            logger.debug("Skipping unreadable file '%s': %s", file_info.relative_path, e)
            return

        with file:
            try:
                sample = file.read(SNIFF_SIZE)
            except OSError as e:
                logger.debug("Skipping unreadable file '%s': %s", file_info.relative_path, e)
                return

            kind = classify_bytes(sample)
            logger.debug("Processing '%s' (%s)", file_info.relative_path, kind.value)

            yield b"\n" + SEPARATOR + b"File Path: " + _encode(file_info.relative_path) + b"\n\n"

            if kind is FileKind.BINARY:
                if self.binary_action is BinaryAction.HEXDUMP:
                    for lines in hex_dump(chain((sample,), self._read_rest(file, file_info))):
                        yield lines.encode("ascii")
                else:
                    yield BINARY_PLACEHOLDER
            else:
                yield from self._yield_text(file, sample, file_info)

            yield SEPARATOR

    def _yield_text(self, file: BinaryIO, sample: bytes, file_info: FileInfo) -> Iterator[bytes]:
        label = self.language_lookup(file_info.path.name) if self.language_lookup is not None else ""
        if label:
            yield FENCE + _encode(label) + b"\n"

        last_chunk = b""
        for chunk in chain((sample,), self._read_rest(file, file_info)):
            if chunk:
                last_chunk = chunk
                yield chunk

        # The closing fence and separator must start on their own line
        if last_chunk and not last_chunk.endswith(b"\n"):
            yield b"\n"
        if label:
            yield FENCE + b"\n"

    def _read_rest(self, file: BinaryIO, file_info: FileInfo) -> Iterator[bytes]:
        while True:
            try:
                chunk = file.read(self.chunk_size)
            except OSError as e:
                logger.warning("Failed to read '%s', output truncated: %s", file_info.relative_path, e)
                return
            if not chunk:
                return
            yield chunk
