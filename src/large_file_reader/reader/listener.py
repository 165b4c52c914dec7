"""Listener interfaces notified while a file is read."""

from collections.abc import Callable, Sequence
from typing import Protocol

from large_file_reader.reader.types import FileSlice, ReadReport

type SliceCallback = Callable[[int, int, Sequence[str]], None]


class ReadFileListener(Protocol):
    """
    Receives lifecycle events from LargeFileReader.

    on_start runs once before any worker starts. on_slice runs once per
    range, concurrently from worker threads. on_end runs once, from the
    barrier's finalize step, after every on_slice call has returned.
    """

    def on_start(self) -> None: ...

    def on_slice(self, file_slice: FileSlice) -> None: ...

    def on_end(self, report: ReadReport) -> None: ...


class SliceListener:
    """Base listener with no-op hooks; subclasses override what they need."""

    def on_start(self) -> None:
        pass

    def on_slice(self, file_slice: FileSlice) -> None:
        pass

    def on_end(self, report: ReadReport) -> None:
        pass


class CallbackListener(SliceListener):
    """Adapt a plain ``(start, size, lines)`` callback to the listener interface."""

    def __init__(self, callback: SliceCallback):
        self._callback = callback

    def on_slice(self, file_slice: FileSlice) -> None:
        self._callback(file_slice.start, file_slice.size, file_slice.lines)
