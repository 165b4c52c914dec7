"""Tests for execution-policy helpers."""

import sys
from concurrent.futures import ThreadPoolExecutor

from large_file_reader.reader import execution


def test_executor_override_modes(monkeypatch) -> None:
    monkeypatch.setenv(execution.LFR_EXECUTOR_ENV, "serial")
    assert execution.describe_executor(execution.get_executor_class()) == "serial"

    monkeypatch.setenv(execution.LFR_EXECUTOR_ENV, "threads")
    assert execution.describe_executor(execution.get_executor_class()).startswith("threads")

    monkeypatch.setenv(execution.LFR_EXECUTOR_ENV, "SERIAL")
    assert execution.get_executor_class() is None


def test_executor_default_policy(monkeypatch) -> None:
    monkeypatch.delenv(execution.LFR_EXECUTOR_ENV, raising=False)
    assert execution.get_executor_class() is ThreadPoolExecutor

    monkeypatch.setenv(execution.LFR_EXECUTOR_ENV, "processes")
    assert execution.get_executor_class() is ThreadPoolExecutor


def test_describe_executor_reports_gil_status(monkeypatch) -> None:
    monkeypatch.setattr(sys, "_is_gil_enabled", lambda: True, raising=False)
    assert execution.describe_executor(ThreadPoolExecutor) == "threads (GIL)"

    monkeypatch.setattr(sys, "_is_gil_enabled", lambda: False, raising=False)
    assert execution.describe_executor(ThreadPoolExecutor) == "threads (free-threaded)"
    assert execution.describe_executor(None) == "serial"


def test_describe_executor_without_gil_check(monkeypatch) -> None:
    monkeypatch.delattr(sys, "_is_gil_enabled", raising=False)
    assert execution.describe_executor(ThreadPoolExecutor) == "threads (GIL)"
