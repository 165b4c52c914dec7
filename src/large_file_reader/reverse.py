"""High-level file reversal built on LargeFileReader."""

import enum
import logging
from pathlib import Path

from large_file_reader.errors import InvalidInputError
from large_file_reader.output import MappedOutputWriter, MirroredOutputWriter, is_same_file
from large_file_reader.reader import LargeFileReader, ReaderConfig, ReadReport
from large_file_reader.reverser import ReverserType, build_reverser

logger = logging.getLogger(__name__)

# Suffix appended to the input name when no output path is given.
DEFAULT_OUTPUT_SUFFIX = ".reversed"


class Layout(enum.StrEnum):
    MIRROR = "mirror"
    INPLACE = "inplace"


def default_output_path(input_path: str | Path) -> Path:
    path = Path(input_path)
    return path.with_name(path.name + DEFAULT_OUTPUT_SUFFIX)


def reverse_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: ReaderConfig | None = None,
    reverser: ReverserType | str = ReverserType.STRING,
    layout: Layout | str = Layout.MIRROR,
    replace_input: bool = False,
) -> ReadReport:
    """
    Reverse a file line by line into ``output_path``.

    With the mirror layout the line order is reversed as well, so the output
    is the whole input reversed. The inplace layout keeps line order and only
    reverses each line. When ``replace_input`` is set and every slice
    succeeded, the output replaces the input.
    """
    try:
        layout = Layout(layout)
    except ValueError as exc:
        raise InvalidInputError(f"Unknown layout: {layout}") from exc

    config = config or ReaderConfig()
    reader = LargeFileReader(input_path, config)
    output = Path(output_path) if output_path is not None else default_output_path(input_path)
    if is_same_file(output, reader.input_path):
        raise InvalidInputError(f"Output path must differ from the input: {output}")

    writer_class = MirroredOutputWriter if layout is Layout.MIRROR else MappedOutputWriter
    writer = writer_class(
        output,
        reader.file_length,
        transform=build_reverser(reverser),
        encoding=config.encoding,
        replace_input=reader.input_path if replace_input else None,
    )
    reader.set_listener(writer)

    logger.debug("Writing %s layout to %s", layout.value, output)
    return reader.execute()
