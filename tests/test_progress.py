"""Tests for progress delivery and the built-in progress sinks."""

import io
import logging

from rich.console import Console

from suitebench.benchmark.progress import ConsoleProgress, LoggingProgress, notify


def test_notify_without_reporter_is_noop():
    notify(None, "ignored")


def test_notify_delivers_text():
    seen = []
    notify(seen.append, "hello")
    assert seen == ["hello"]


def test_notify_logs_reporter_errors(caplog):
    def reporter(text):
        raise RuntimeError("sink closed")

    with caplog.at_level(logging.ERROR, logger="suitebench.benchmark.progress"):
        notify(reporter, "hello")

    assert "Progress reporter raised" in caplog.text
    assert "sink closed" in caplog.text


def test_logging_progress(caplog):
    log = logging.getLogger("suitebench.test")
    sink = LoggingProgress(log, level=logging.WARNING)

    with caplog.at_level(logging.WARNING, logger="suitebench.test"):
        sink("alpha x 4.00 ops/sec ±0.00% (5 runs sampled)")

    assert caplog.records[-1].getMessage() == "alpha x 4.00 ops/sec ±0.00% (5 runs sampled)"
    assert caplog.records[-1].levelno == logging.WARNING


def test_console_progress_prints_verbatim():
    buffer = io.StringIO()
    sink = ConsoleProgress(Console(file=buffer, width=200, color_system=None))

    sink("[bold]Final results:[/bold]")

    assert buffer.getvalue() == "[bold]Final results:[/bold]\n"
