"""Configuration, slice and report structures for slice reading."""

import codecs
import locale
from dataclasses import dataclass, field

from large_file_reader.errors import InvalidInputError
from large_file_reader.partition.types import BUFFER_SIZE, FileRange

# Separator entries placed between content lines in a slice.
TERMINATOR_MARKERS = frozenset({"\n", "\r"})


def default_encoding() -> str:
    """Platform preferred encoding, used when none is configured."""
    return locale.getpreferredencoding(False)


def is_terminator(entry: str) -> bool:
    return entry in TERMINATOR_MARKERS


def is_byte_compatible(encoding: str) -> bool:
    """
    Check that terminators and ASCII text are single bytes equal to their code point.

    Terminators are found by scanning raw bytes and lines are encoded one by
    one, so multi-byte units (UTF-16, UTF-32) and per-call BOMs (utf-8-sig)
    are not usable.
    """
    try:
        return all(ch.encode(encoding) == ch.encode("ascii") for ch in ("\n", "\r", "a"))
    except (LookupError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    """
    Options recognized by LargeFileReader.

    buffer_size bounds how many bytes a worker holds in one read window;
    0 reads each range in a single window.
    """

    thread_count: int = 1
    encoding: str = field(default_factory=default_encoding)
    buffer_size: int = BUFFER_SIZE

    def __post_init__(self) -> None:
        if self.thread_count < 1:
            raise InvalidInputError(f"thread_count must be at least 1, got {self.thread_count}")
        if not self.encoding:
            raise InvalidInputError("encoding must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise InvalidInputError(f"Unknown encoding: {self.encoding}") from exc
        if not is_byte_compatible(self.encoding):
            raise InvalidInputError(
                f"Encoding {self.encoding} must encode LF, CR and ASCII as single identical bytes"
            )
        if self.buffer_size < 0:
            raise InvalidInputError(f"buffer_size must not be negative, got {self.buffer_size}")


@dataclass(frozen=True, slots=True)
class FileSlice:
    """Decoded content of one range: content lines interleaved with terminator markers."""

    start: int
    size: int
    lines: tuple[str, ...]

    @property
    def line_count(self) -> int:
        """Number of content lines (terminator markers excluded)."""
        return sum(1 for entry in self.lines if not is_terminator(entry))


@dataclass(frozen=True, slots=True)
class SliceFailure:
    """A worker error together with the range it belongs to."""

    file_range: FileRange
    error: BaseException

    def __str__(self) -> str:
        return f"{self.file_range}: {self.error}"


@dataclass(slots=True)
class ReadReport:
    """Aggregate statistics produced when every worker has finished."""

    ranges: int = 0
    lines: int = 0
    elapsed: float = 0.0
    failures: list[SliceFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
