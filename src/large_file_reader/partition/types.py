"""Shared constants and range structures for partitioning."""

from dataclasses import dataclass

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Single-byte line terminators (LF and CR).
TERMINATORS = b"\n\r"


@dataclass(frozen=True, slots=True)
class FileRange:
    """Inclusive byte interval of the input file assigned to one worker."""

    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        return f"{{start={self.start},end={self.end}}}"
