"""Output placement listeners."""

from large_file_reader.output.writer import (
    MappedOutputWriter,
    MirroredOutputWriter,
    is_same_file,
    mirrored_offset,
)

__all__ = ["MappedOutputWriter", "MirroredOutputWriter", "is_same_file", "mirrored_offset"]
