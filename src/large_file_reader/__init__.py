"""Large File Reader - Parallel, line-aligned transformation of large text files."""

from large_file_reader.errors import (
    DecodeError,
    InvalidInputError,
    LargeFileReaderError,
    OutputWriteError,
    PartitionError,
)
from large_file_reader.output import MappedOutputWriter, MirroredOutputWriter
from large_file_reader.partition import FileRange, compute_ranges
from large_file_reader.reader import (
    FileSlice,
    LargeFileReader,
    ReaderConfig,
    ReadReport,
    SliceListener,
    read_file,
)
from large_file_reader.reverser import ReverserType, build_reverser

__all__ = [
    "DecodeError",
    "FileRange",
    "FileSlice",
    "InvalidInputError",
    "LargeFileReader",
    "LargeFileReaderError",
    "MappedOutputWriter",
    "MirroredOutputWriter",
    "OutputWriteError",
    "PartitionError",
    "ReadReport",
    "ReaderConfig",
    "ReverserType",
    "SliceListener",
    "build_reverser",
    "compute_ranges",
    "read_file",
]
