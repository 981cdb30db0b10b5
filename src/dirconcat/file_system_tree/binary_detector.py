"""Binary file detection by content sniffing.

A file is classified from a bounded sample of its first bytes. The sample is binary
if it contains a NUL byte or is not valid UTF-8. Only the sample is inspected: a
file that turns binary after the first ``SNIFF_SIZE`` bytes is still reported as
text, and a multi-byte character cut by the sample boundary makes the sample
invalid, so such a file is reported as binary. Both are accepted limitations of
the heuristic.
"""

from dirconcat.types import FileKind, PathType

# Number of leading bytes inspected when classifying a file
SNIFF_SIZE = 8000


def classify_bytes(sample: bytes) -> FileKind:
    """Classify a byte sample as binary or text.

    Args:
        sample: The bytes to inspect.

    Returns:
        FileKind.BINARY if the sample contains NUL or is not valid UTF-8, else FileKind.TEXT.

    Example:
        >>> classify_bytes(b"hello\\n")
        <FileKind.TEXT: 'text'>
        >>> classify_bytes(b"\\x00\\x01\\x02")
        <FileKind.BINARY: 'binary'>
        >>> classify_bytes(b"\\xff\\xfe")
        <FileKind.BINARY: 'binary'>
        >>> classify_bytes("é".encode("utf-8")[:1])
        <FileKind.BINARY: 'binary'>
    """
    if b"\0" in sample:
        return FileKind.BINARY

    try:
        sample.decode("utf-8")
    except UnicodeDecodeError:
        return FileKind.BINARY
    return FileKind.TEXT


def classify_file(file_path: PathType, sample_size: int = SNIFF_SIZE) -> FileKind:
    """Classify a file by sniffing its first ``sample_size`` bytes.

    Empty files are text.

    Args:
        file_path: Path to the file to analyze.
        sample_size: Number of bytes to read. Defaults to SNIFF_SIZE.

    Returns:
        FileKind.BINARY or FileKind.TEXT.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "rb") as file:
        sample = file.read(sample_size)
    return classify_bytes(sample)


def is_binary_file(file_path: PathType, sample_size: int = SNIFF_SIZE) -> bool:
    """Return True if the file's sampled content classifies as binary.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return classify_file(file_path, sample_size) is FileKind.BINARY
