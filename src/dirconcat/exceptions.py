from dirconcat.types import PathType


class DirectoryListingError(OSError):
    """
    Exception raised when a directory listing fails where the failure is fatal.

    Listing failures are fatal for the root directory of the tree and for every
    directory visited while emitting file contents. Unreadable subdirectories in
    the tree listing are tolerated and never raise this exception.

    Attributes:
        directory (str): Path of the directory that could not be listed.
        reason (OSError): The underlying error reported by the operating system.

    Example:
        >>> error = DirectoryListingError("/srv/project", PermissionError("Permission denied"))
        >>> str(error)
        "Failed to list directory '/srv/project': Permission denied"
    """

    def __init__(self, directory: PathType, reason: OSError) -> None:
        self.directory = str(directory)
        self.reason = reason
        super().__init__(f"Failed to list directory '{self.directory}': {reason}")


class OutputWriteError(OSError):
    """
    Exception raised when the output sink cannot be created or written.

    Attributes:
        destination (str): The output file path or file descriptor description.
        reason (OSError): The underlying error reported by the operating system.

    Example:
        >>> error = OutputWriteError("overview.md", OSError("No space left on device"))
        >>> str(error)
        "Failed to write output 'overview.md': No space left on device"
    """

    def __init__(self, destination: str, reason: OSError) -> None:
        self.destination = destination
        self.reason = reason
        super().__init__(f"Failed to write output '{destination}': {reason}")
