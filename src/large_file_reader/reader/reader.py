"""Parallel, line-aligned reading of a large file."""

import logging
import mmap
import os
import threading
import time
from concurrent.futures import Future
from pathlib import Path

from large_file_reader.errors import InvalidInputError, PartitionError
from large_file_reader.partition import BUFFER_SIZE, FileRange, compute_ranges
from large_file_reader.reader.barrier import CompletionBarrier
from large_file_reader.reader.counter import LineCounter
from large_file_reader.reader.execution import (
    LFR_EXECUTOR_ENV,
    describe_executor,
    get_executor_class,
)
from large_file_reader.reader.listener import ReadFileListener, SliceListener
from large_file_reader.reader.types import ReaderConfig, ReadReport, SliceFailure
from large_file_reader.reader.worker import read_slice

logger = logging.getLogger(__name__)


class LargeFileReader:
    """
    Read a file in parallel slices and hand each slice to a listener.

    The file is partitioned into line-aligned ranges, one worker per range.
    Each worker decodes its range and calls ``listener.on_slice``. When the
    last worker finishes, a completion barrier logs statistics, releases the
    input file and calls ``listener.on_end`` exactly once.
    """

    def __init__(
        self,
        input_path: str | Path,
        config: ReaderConfig | None = None,
        listener: ReadFileListener | None = None,
    ):
        self.input_path = Path(input_path)
        self.config = config or ReaderConfig()
        self.listener: ReadFileListener = listener or SliceListener()

        if not self.input_path.is_file():
            raise InvalidInputError(f"Input file does not exist: {self.input_path}")
        self.file_length = self.input_path.stat().st_size
        if self.file_length == 0:
            raise InvalidInputError(f"Input file is empty: {self.input_path}")

        self._counter = LineCounter()
        self._failures: list[SliceFailure] = []
        self._failures_lock = threading.Lock()
        self._report: ReadReport | None = None
        self._executed = False

    @property
    def report(self) -> ReadReport | None:
        """Statistics of the finished run, or None before finalize."""
        return self._report

    def set_listener(self, listener: ReadFileListener) -> None:
        self.listener = listener

    def execute(self) -> ReadReport:
        """
        Partition the file, process every range and wait for completion.

        Partitioning errors are raised before any worker starts and before
        ``on_start`` is called. Per-range errors are collected in the
        returned report.
        """
        if self._executed:
            raise RuntimeError("LargeFileReader.execute() can only run once")
        self._executed = True

        start_time = time.perf_counter()
        config = self.config

        executor_class = get_executor_class()
        executor_name = describe_executor(executor_class)
        executor_override = os.environ.get(LFR_EXECUTOR_ENV, "")
        override_info = f", {LFR_EXECUTOR_ENV}={executor_override}" if executor_override else ""
        logger.info(
            "Starting: file=%s, bytes=%d, threads=%d, encoding=%s, executor=%s%s",
            self.input_path.name,
            self.file_length,
            config.thread_count,
            config.encoding,
            executor_name,
            override_info,
        )

        t1_start = time.perf_counter()
        ranges = compute_ranges(
            self.input_path,
            self.file_length,
            config.thread_count,
            chunk_size=config.buffer_size or BUFFER_SIZE,
        )
        logger.info("Partition done: %d ranges in %.2fs", len(ranges), time.perf_counter() - t1_start)

        try:
            handle = open(self.input_path, "rb")  # noqa: SIM115
        except OSError as exc:
            raise PartitionError(f"Failed to open {self.input_path}: {exc}") from exc
        try:
            source = mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ)
        except (OSError, ValueError) as exc:
            handle.close()
            raise PartitionError(f"Failed to map {self.input_path}: {exc}") from exc

        executor = None

        def finalize() -> None:
            with self._failures_lock:
                failures = list(self._failures)
            report = ReadReport(
                ranges=len(ranges),
                lines=self._counter.value,
                elapsed=time.perf_counter() - start_time,
                failures=failures,
            )
            self._report = report
            logger.info(
                "Read done: %d ranges, %d lines in %.2fs",
                report.ranges,
                report.lines,
                report.elapsed,
            )
            for failure in report.failures:
                logger.warning("Slice %s failed: %s", failure.file_range, failure.error)

            try:
                source.close()
                handle.close()
                self.listener.on_end(report)
            finally:
                if executor is not None:
                    executor.shutdown(wait=False)

        barrier = CompletionBarrier(finalize)
        barrier.arm(len(ranges))

        try:
            self.listener.on_start()
        except BaseException:
            source.close()
            handle.close()
            raise

        if executor_class is None:
            for file_range in ranges:
                self._process_range(source, file_range, barrier)
        else:
            with executor_class(max_workers=len(ranges)) as pool:
                executor = pool
                futures = [pool.submit(self._process_range, source, r, barrier) for r in ranges]
            self._raise_finalize_error(futures)

        return self._report

    def _process_range(self, source: mmap.mmap, file_range: FileRange, barrier: CompletionBarrier) -> None:
        """Worker body: read one range, deliver it, then always arrive at the barrier."""
        logger.debug("Slice range = %s", file_range)
        try:
            file_slice = read_slice(
                source,
                file_range,
                self.config.encoding,
                self.config.buffer_size,
                self._counter,
            )
            self.listener.on_slice(file_slice)
        except Exception as exc:
            with self._failures_lock:
                self._failures.append(SliceFailure(file_range, exc))
        finally:
            barrier.arrive()

    @staticmethod
    def _raise_finalize_error(futures: list[Future]) -> None:
        """Surface an error raised by the finalize step from a worker thread."""
        for future in futures:
            exc = future.exception()
            if exc is not None:
                raise exc


def read_file(
    input_path: str | Path,
    listener: ReadFileListener,
    config: ReaderConfig | None = None,
) -> ReadReport:
    """Convenience wrapper: build a LargeFileReader and execute it."""
    return LargeFileReader(input_path, config, listener).execute()
