"""Pluggable per-line transform strategies."""

from large_file_reader.reverser.strategies import (
    Reverser,
    ReverserType,
    build_reverser,
    reverse_string,
    xor_reverse,
)

__all__ = ["Reverser", "ReverserType", "build_reverser", "reverse_string", "xor_reverse"]
