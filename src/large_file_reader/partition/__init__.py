"""Range partitioning for parallel slice reading."""

from large_file_reader.partition.partition import compute_ranges, find_terminator
from large_file_reader.partition.types import BUFFER_SIZE, TERMINATORS, FileRange

__all__ = ["BUFFER_SIZE", "TERMINATORS", "FileRange", "compute_ranges", "find_terminator"]
