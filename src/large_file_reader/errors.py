"""Exception hierarchy for large file reading."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from large_file_reader.partition.types import FileRange


class LargeFileReaderError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(LargeFileReaderError, ValueError):
    """Empty or missing input file, or a rejected configuration value."""


class PartitionError(LargeFileReaderError, OSError):
    """I/O failure while scanning the input for line boundaries."""


class SliceError(LargeFileReaderError):
    """Failure scoped to a single file range."""

    def __init__(self, message: str, file_range: FileRange):
        super().__init__(f"{message} (range {file_range})")
        self.file_range = file_range


class DecodeError(SliceError, ValueError):
    """Bytes in a range are not valid for the configured encoding."""


class OutputWriteError(SliceError, OSError):
    """Transformed bytes for a range could not be written."""
