"""Slice worker: decode one file range into lines and terminator markers."""

import re
from collections.abc import Buffer, Iterator

from large_file_reader.errors import DecodeError
from large_file_reader.partition.types import FileRange
from large_file_reader.reader.counter import LineCounter
from large_file_reader.reader.types import FileSlice

_TERMINATOR_RE = re.compile(rb"[\n\r]")


def iter_windows(source: Buffer, file_range: FileRange, buffer_size: int) -> Iterator[bytes]:
    """
    Yield the bytes of a range in windows of at most ``buffer_size`` bytes.

    A buffer_size of 0 yields the whole range as one window. Zero-size
    ranges yield nothing.
    """
    if file_range.size <= 0:
        return
    window = buffer_size or file_range.size
    stop = file_range.end + 1
    for offset in range(file_range.start, stop, window):
        yield source[offset : min(offset + window, stop)]


def decode_line(raw: bytes | bytearray, encoding: str, file_range: FileRange) -> str:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(
            f"Cannot decode {len(raw)} bytes as {encoding}: {exc.reason}",
            file_range,
        ) from exc


def read_slice(
    source: Buffer,
    file_range: FileRange,
    encoding: str,
    buffer_size: int,
    counter: LineCounter | None = None,
) -> FileSlice:
    """
    Read one range and split it into lines.

    Every LF or CR byte closes the pending line and is recorded as its own
    marker entry, so the entries concatenate back to the exact range text.
    Bytes after the last terminator form a final line with no marker.
    """
    lines: list[str] = []
    pending = bytearray()

    def flush() -> None:
        lines.append(decode_line(pending, encoding, file_range))
        pending.clear()
        if counter is not None:
            counter.increment()

    for window in iter_windows(source, file_range, buffer_size):
        position = 0
        for match in _TERMINATOR_RE.finditer(window):
            pending += window[position : match.start()]
            flush()
            lines.append(chr(window[match.start()]))
            position = match.end()
        pending += window[position:]

    if pending:
        flush()

    return FileSlice(file_range.start, file_range.size, tuple(lines))
