"""Line transform strategies."""

import enum
from collections.abc import Callable

type Reverser = Callable[[str], str]


class ReverserType(enum.StrEnum):
    STRING = "string"
    XOR = "xor"


def reverse_string(line: str) -> str:
    """Reverse a line using slicing."""
    if len(line) <= 1:
        return line
    return line[::-1]


def xor_reverse(line: str) -> str:
    """
    Reverse a line by swapping code points pairwise with XOR.

    Produces the same result as reverse_string without a temporary slot.
    """
    if len(line) <= 1:
        return line
    points = [ord(ch) for ch in line]
    begin, end = 0, len(points) - 1
    while begin < end:
        points[begin] ^= points[end]
        points[end] ^= points[begin]
        points[begin] ^= points[end]
        begin += 1
        end -= 1
    return "".join(map(chr, points))


_REVERSERS: dict[ReverserType, Reverser] = {
    ReverserType.STRING: reverse_string,
    ReverserType.XOR: xor_reverse,
}


def build_reverser(kind: ReverserType | str = ReverserType.STRING) -> Reverser:
    """Return the strategy for ``kind``; unknown kinds use string reversal."""
    try:
        return _REVERSERS[ReverserType(kind)]
    except ValueError:
        return reverse_string
