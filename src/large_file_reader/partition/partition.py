"""Line-aligned range partitioning of the input file."""

from pathlib import Path
from typing import BinaryIO

from large_file_reader.errors import InvalidInputError, PartitionError
from large_file_reader.partition.types import BUFFER_SIZE, TERMINATORS, FileRange


def find_terminator(handle: BinaryIO, offset: int, last: int, chunk_size: int = BUFFER_SIZE) -> int:
    """
    Return the offset of the first terminator byte at or after ``offset``.

    Scanning stops at ``last`` (the file's final byte), which is returned when
    no terminator is found before it.
    """
    handle.seek(offset)
    position = offset
    while position < last:
        chunk = handle.read(min(chunk_size, last - position))
        if not chunk:
            break
        hits = [idx for idx in (chunk.find(t) for t in TERMINATORS) if idx >= 0]
        if hits:
            return position + min(hits)
        position += len(chunk)
    return last


def compute_ranges(
    input_path: str | Path,
    file_length: int,
    thread_count: int,
    chunk_size: int = BUFFER_SIZE,
) -> list[FileRange]:
    """
    Split the file into contiguous ranges that each end on a line terminator.

    Each range starts near ``file_length / thread_count`` bytes long and is
    extended forward until it ends on an LF or CR byte, or on the last byte
    of the file.

    Args:
        input_path: Path to the input file.
        file_length: Size of the input in bytes.
        thread_count: Target number of ranges.
        chunk_size: Read size used while scanning for a terminator.

    Returns:
        Ranges ordered by start offset, covering ``[0, file_length - 1]``.
    """
    if file_length <= 0:
        raise InvalidInputError("Input file is empty.")
    if thread_count < 1:
        raise InvalidInputError(f"thread_count must be at least 1, got {thread_count}")
    if chunk_size < 1:
        raise InvalidInputError(f"chunk_size must be at least 1, got {chunk_size}")

    # Fewer bytes than threads still needs forward progress.
    nominal_size = max(1, file_length // thread_count)
    last = file_length - 1
    ranges: list[FileRange] = []

    try:
        with open(input_path, "rb") as handle:
            start = 0
            while start <= last:
                end = start + nominal_size - 1
                if end >= last:
                    ranges.append(FileRange(start, last))
                    break
                end = find_terminator(handle, end, last, chunk_size)
                ranges.append(FileRange(start, end))
                start = end + 1
    except OSError as exc:
        raise PartitionError(f"Failed to scan {input_path} for line boundaries: {exc}") from exc

    return ranges
