"""Listeners that place transformed slices into a memory-mapped output file."""

import logging
import mmap
import os
import threading
from pathlib import Path
from typing import BinaryIO

from large_file_reader.errors import InvalidInputError, OutputWriteError
from large_file_reader.partition.types import FileRange
from large_file_reader.reader.listener import SliceListener
from large_file_reader.reader.types import FileSlice, ReadReport
from large_file_reader.reverser import Reverser, reverse_string

logger = logging.getLogger(__name__)


def mirrored_offset(file_length: int, start: int, size: int) -> int:
    """Output offset of a slice when the whole file is written back to front."""
    return file_length - start - size


def is_same_file(first: str | Path, second: str | Path) -> bool:
    """True when both paths name the same file, following symlinks."""
    first, second = Path(first), Path(second)
    if first.exists() and second.exists():
        return os.path.samefile(first, second)
    return first.resolve() == second.resolve()


class MappedOutputWriter(SliceListener):
    """
    Write each transformed slice to its own region of an output file.

    The output is sized to the input length and memory-mapped in on_start.
    Subclasses choose the destination offset and the byte layout of a slice;
    this base keeps the input layout and transforms lines in place. The
    transform must preserve the encoded length of every line.

    If ``replace_input`` is set, on_end atomically replaces that path with
    the output, but only when every slice succeeded.
    """

    def __init__(
        self,
        output_path: str | Path,
        file_length: int,
        transform: Reverser = reverse_string,
        encoding: str = "utf-8",
        replace_input: str | Path | None = None,
    ):
        self.output_path = Path(output_path)
        self.file_length = file_length
        self.transform = transform
        self.encoding = encoding
        self.replace_input = Path(replace_input) if replace_input is not None else None
        if self.replace_input is not None and is_same_file(self.output_path, self.replace_input):
            raise InvalidInputError(f"Output path must differ from the input: {self.output_path}")

        self._lock = threading.Lock()
        self._handle: BinaryIO | None = None
        self._map: mmap.mmap | None = None
        self.slices_written = 0

    def destination(self, file_slice: FileSlice) -> int:
        return file_slice.start

    def render(self, file_slice: FileSlice) -> bytes:
        return b"".join(self.transform(entry).encode(self.encoding) for entry in file_slice.lines)

    def on_start(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        handle = open(self.output_path, "w+b")  # noqa: SIM115
        try:
            handle.truncate(self.file_length)
            self._map = mmap.mmap(handle.fileno(), self.file_length)
        except BaseException:
            handle.close()
            raise
        self._handle = handle
        logger.debug("Output %s mapped (%d bytes)", self.output_path, self.file_length)

    def on_slice(self, file_slice: FileSlice) -> None:
        file_range = FileRange(file_slice.start, file_slice.start + file_slice.size - 1)
        if file_slice.size == 0:
            return

        try:
            payload = self.render(file_slice)
        except ValueError as exc:
            raise OutputWriteError(f"Cannot encode slice output: {exc}", file_range) from exc
        if len(payload) != file_slice.size:
            raise OutputWriteError(
                f"Transformed slice is {len(payload)} bytes, expected {file_slice.size}",
                file_range,
            )

        offset = self.destination(file_slice)
        if offset < 0 or offset + file_slice.size > self.file_length:
            raise OutputWriteError(f"Destination offset {offset} is outside the output file", file_range)

        with self._lock:
            if self._map is None:
                raise OutputWriteError("Output file is not open", file_range)
            try:
                self._map[offset : offset + file_slice.size] = payload
            except (OSError, ValueError, IndexError) as exc:
                raise OutputWriteError(f"Failed to write slice output: {exc}", file_range) from exc
            self.slices_written += 1

        logger.debug("Slice %s written at offset %d", file_range, offset)

    def on_end(self, report: ReadReport) -> None:
        self.close()

        if self.replace_input is None:
            return
        if not report.ok:
            logger.warning(
                "Keeping %s: %d slices failed, output left at %s",
                self.replace_input,
                len(report.failures),
                self.output_path,
            )
            return
        os.replace(self.output_path, self.replace_input)
        logger.info("Replaced %s with %s", self.replace_input, self.output_path.name)

    def close(self) -> None:
        """Flush the output to disk and release the map and file handle."""
        with self._lock:
            mapped, handle = self._map, self._handle
            self._map = self._handle = None

        try:
            if mapped is not None:
                try:
                    mapped.flush()
                finally:
                    mapped.close()
            if handle is not None:
                handle.flush()
                os.fsync(handle.fileno())
        finally:
            if handle is not None:
                handle.close()


class MirroredOutputWriter(MappedOutputWriter):
    """
    Write the file back to front.

    Slices land at mirrored offsets and their entries are written in reverse
    order, each transformed by the reverser. With a reversing transform the
    output is the input reversed character by character.
    """

    def destination(self, file_slice: FileSlice) -> int:
        return mirrored_offset(self.file_length, file_slice.start, file_slice.size)

    def render(self, file_slice: FileSlice) -> bytes:
        return b"".join(self.transform(entry).encode(self.encoding) for entry in reversed(file_slice.lines))
