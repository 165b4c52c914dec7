"""Parallel slice reading: workers, completion barrier and listeners."""

from large_file_reader.reader.barrier import BarrierState, CompletionBarrier
from large_file_reader.reader.counter import LineCounter
from large_file_reader.reader.listener import CallbackListener, ReadFileListener, SliceListener
from large_file_reader.reader.reader import LargeFileReader, read_file
from large_file_reader.reader.types import (
    FileSlice,
    ReaderConfig,
    ReadReport,
    SliceFailure,
    is_terminator,
)
from large_file_reader.reader.worker import read_slice

__all__ = [
    "BarrierState",
    "CallbackListener",
    "CompletionBarrier",
    "FileSlice",
    "LargeFileReader",
    "LineCounter",
    "ReadFileListener",
    "ReadReport",
    "ReaderConfig",
    "SliceFailure",
    "SliceListener",
    "is_terminator",
    "read_file",
    "read_slice",
]
