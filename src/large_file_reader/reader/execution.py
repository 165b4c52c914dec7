"""Execution policy and executor selection utilities."""

import os
import sys
from concurrent.futures import ThreadPoolExecutor

type ExecutorClass = type[ThreadPoolExecutor] | None

# Environment variable to override executor selection.
LFR_EXECUTOR_ENV = "LFR_EXECUTOR"


def get_executor_class() -> ExecutorClass:
    """
    Select the executor that runs slice workers.

    LFR_EXECUTOR="serial" runs every worker in the calling thread, which is
    useful for debugging with breakpoints. Anything else uses threads: workers
    share the input map and the listener, so a process pool cannot be used.
    """
    executor_override = os.environ.get(LFR_EXECUTOR_ENV, "").lower()

    if executor_override == "serial":
        return None
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """
    Convert an executor class into a readable policy name.

    Thread pools are tagged with the interpreter's GIL status, since it decides
    whether slice decoding actually runs in parallel.
    """
    if executor_class is None:
        return "serial"
    gil_check = getattr(sys, "_is_gil_enabled", None)
    if gil_check is not None and not gil_check():
        return "threads (free-threaded)"
    return "threads (GIL)"
