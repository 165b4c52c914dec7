"""Command-line interface for large file reversal."""

import argparse
import logging
import sys

from large_file_reader.errors import InvalidInputError, LargeFileReaderError
from large_file_reader.partition import BUFFER_SIZE
from large_file_reader.reader import ReaderConfig
from large_file_reader.reader.types import default_encoding
from large_file_reader.reverse import Layout, reverse_file
from large_file_reader.reverser import ReverserType

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="large-file-reader",
        description="Reverse a large text file in parallel, line-aligned slices.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input text file",
    )

    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Path to the output file (default: INPUT_FILE.reversed)",
    )

    parser.add_argument(
        "--threads",
        type=int,
        default=1,
        help="Number of slices and worker threads (default: 1)",
    )

    parser.add_argument(
        "--encoding",
        default=default_encoding(),
        help="Character encoding of the input (default: platform encoding)",
    )

    parser.add_argument(
        "--buffer-size",
        type=int,
        default=BUFFER_SIZE,
        help="Bytes read per window by each worker, 0 for whole slices (default: 1 MiB)",
    )

    parser.add_argument(
        "--reverser",
        choices=[kind.value for kind in ReverserType],
        default=ReverserType.STRING.value,
        help="Line reversal strategy (default: string)",
    )

    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in Layout],
        default=Layout.MIRROR.value,
        help="mirror reverses the whole file, inplace keeps line order (default: mirror)",
    )

    parser.add_argument(
        "--keep-input",
        action="store_true",
        help="Leave the input file in place instead of replacing it with the output",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        config = ReaderConfig(
            thread_count=args.threads,
            encoding=args.encoding,
            buffer_size=args.buffer_size,
        )
        report = reverse_file(
            args.input_file,
            output_path=args.output,
            config=config,
            reverser=args.reverser,
            layout=args.layout,
            replace_input=not args.keep_input,
        )
    except InvalidInputError as exc:
        parser.error(str(exc))
    except LargeFileReaderError as exc:
        logger.error("%s", exc)
        return 1

    if not report.ok:
        logger.error("%d of %d slices failed", len(report.failures), report.ranges)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
