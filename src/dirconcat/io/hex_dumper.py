"""Streaming canonical hex dump formatter."""

from typing import Iterable, Iterator

BYTES_PER_LINE = 16


def format_hex_line(offset: int, data: bytes) -> str:
    """Format up to 16 bytes as one canonical hex dump line.

    The line holds the offset, two groups of eight hex byte pairs and an ASCII
    gutter in which non-printable bytes appear as ``.``. Short lines are padded so
    the gutter stays aligned.

    Example:
        >>> format_hex_line(0, bytes(range(1, 17)))
        '00000000  01 02 03 04 05 06 07 08  09 0a 0b 0c 0d 0e 0f 10  |................|\\n'
        >>> format_hex_line(16, b"Hi!")
        '00000010  48 69 21                                          |Hi!|\\n'
    """
    pairs = [f"{byte:02x}" for byte in data] + ["  "] * (BYTES_PER_LINE - len(data))
    gutter = "".join(chr(byte) if 0x20 <= byte <= 0x7E else "." for byte in data)
    return f"{offset:08x}  {' '.join(pairs[:8])}  {' '.join(pairs[8:])}  |{gutter}|\n"


class HexDumper:
    """Incremental hex dumper producing continuous offsets across fed chunks.

    Data may be fed in chunks of any size. Complete 16-byte lines are returned as
    soon as they are available; the remainder is held until more data arrives or
    the dumper is closed.

    Example:
        >>> dumper = HexDumper()
        >>> dumper.feed(b"0123456789")
        ''
        >>> dumper.feed(b"abcdefghij")
        '00000000  30 31 32 33 34 35 36 37  38 39 61 62 63 64 65 66  |0123456789abcdef|\\n'
        >>> dumper.close()
        '00000010  67 68 69 6a                                       |ghij|\\n'
    """

    def __init__(self) -> None:
        self._offset = 0
        self._pending = b""

    def feed(self, data: bytes) -> str:
        """Add data and return every complete line it produces."""
        buffer = self._pending + data
        lines = []
        end = len(buffer) - len(buffer) % BYTES_PER_LINE
        for start in range(0, end, BYTES_PER_LINE):
            lines.append(format_hex_line(self._offset, buffer[start : start + BYTES_PER_LINE]))  # noqa: E203
            self._offset += BYTES_PER_LINE
        self._pending = buffer[end:]
        return "".join(lines)

    def close(self) -> str:
        """Flush the final partial line, if any."""
        if not self._pending:
            return ""
        line = format_hex_line(self._offset, self._pending)
        self._offset += len(self._pending)
        self._pending = b""
        return line


def hex_dump(chunks: Iterable[bytes]) -> Iterator[str]:
    """Yield the hex dump of a stream of byte chunks, line groups at a time."""
    dumper = HexDumper()
    for chunk in chunks:
        lines = dumper.feed(chunk)
        if lines:
            yield lines
    tail = dumper.close()
    if tail:
        yield tail
