"""Byte sink for the CLI that stops writing once the process is interrupted.

Output goes straight to a file descriptor with os.write, so nothing is buffered
in Python and a reader closing the pipe is noticed on the very next write.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dirconcat.cli.signal_handler import signal_handler
from dirconcat.exceptions import OutputWriteError


class SafeWriter:
    """Signal-aware output sink writing raw bytes to a file or file descriptor.

    The writer checks for SIGPIPE and SIGINT before every write and converts a
    broken pipe into BrokenPipeError. Any other write failure is fatal and raised as
    OutputWriteError.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, Path]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to create or truncate.

        Raises:
            OutputWriteError: If the output file cannot be created.
            TypeError: If file is neither an int nor path-like.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            try:
                self._file_obj = path.open("wb")
            except OSError as e:
                raise OutputWriteError(str(path), e) from e
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    @property
    def destination(self) -> str:
        """Human-readable name of the output."""
        if isinstance(self.file, int):
            return f"<fd {self.file}>"
        return str(self.file)

    def write(self, data: Union[bytes, str]) -> None:
        """Safely write data with signal checking.

        Args:
            data: Bytes to write. Strings are encoded as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            OutputWriteError: If any other I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.sigpipe_received.is_set() or signal_handler.sigint_received.is_set():
            raise BrokenPipeError()

        if isinstance(data, str):
            data = data.encode("utf-8")

        view = memoryview(data)
        try:
            # os.write may accept only part of the buffer
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise OutputWriteError(self.destination, e) from e

    def close(self) -> None:
        """Release the output file, if this writer opened one.

        A broken pipe during close is ignored. Descriptors passed in by the caller
        are left open.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close resources, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
