# topmark:header:start
#
#   project      : DeployReport
#   file         : test_status.py
#   file_relpath : tests/test_status.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Tests for the console progress indicator."""

from __future__ import annotations

import io

from deployreport.status import ConsoleProgress, NullProgress


def _progress() -> tuple[ConsoleProgress, io.StringIO]:
    err = io.StringIO()
    return ConsoleProgress(err=err, enable_color=False), err


def test_status_replaces_pending_line() -> None:
    progress, err = _progress()

    progress.start("Writing command result").success()

    assert err.getvalue() == "  Writing command result...\r✓ Writing command result\n"


def test_first_terminal_call_wins() -> None:
    progress, err = _progress()

    status = progress.start("Writing")
    status.failed("boom")
    status.success()

    assert err.getvalue() == "  Writing...\r✗ boom\n"


def test_warning_breaks_pending_line() -> None:
    progress, err = _progress()

    status = progress.start("Writing")
    progress.warning("no cluster")
    status.warning()

    assert err.getvalue() == "  Writing...\n⚠ no cluster\n⚠ Writing\n"


def test_flush_terminates_pending_line_once() -> None:
    progress, err = _progress()

    progress.start("Writing")
    progress.flush()
    progress.flush()

    assert err.getvalue() == "  Writing...\n"


def test_null_progress_is_silent() -> None:
    progress = NullProgress()

    status = progress.start("Writing")
    progress.warning("w")
    progress.flush()
    status.success()
    status.failed()
