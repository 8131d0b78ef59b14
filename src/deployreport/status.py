# topmark:header:start
#
#   project      : DeployReport
#   file         : status.py
#   file_relpath : src/deployreport/status.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Progress indicator capability.

The pipeline never talks to a terminal status line directly: it receives a
`ProgressIndicator` and calls `flush()` before and after every write phase, so
that a pending (unterminated) status line never interleaves with report output
written to the shared standard output stream.

Implementations:
    - `ConsoleProgress`: pending-line status messages on stderr (Click).
    - `NullProgress`: no-op indicator for library use and non-interactive runs.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

import click

from deployreport.config.logging import get_logger

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger

logger: DeployReportLogger = get_logger(__name__)


class StatusHandle(Protocol):
    """A started status entry. The first terminal call wins; later calls are no-ops."""

    def success(self) -> None:
        """Finish the status as successful."""
        ...

    def warning(self) -> None:
        """Finish the status as completed with warnings."""
        ...

    def failed(self, message: str | None = None) -> None:
        """Finish the status as failed, optionally replacing its message."""
        ...


class ProgressIndicator(Protocol):
    """Minimal interface of a progress indicator used by the pipeline."""

    def start(self, message: str) -> StatusHandle:
        """Start a status entry for a long-running step."""
        ...

    def warning(self, message: str) -> None:
        """Emit a standalone warning line."""
        ...

    def flush(self) -> None:
        """Terminate any pending status line."""
        ...


class _NullStatus:
    def success(self) -> None:
        pass

    def warning(self) -> None:
        pass

    def failed(self, message: str | None = None) -> None:
        pass


class NullProgress:
    """Progress indicator that discards everything."""

    def start(self, message: str) -> StatusHandle:
        logger.debug("status: %s", message)
        return _NullStatus()

    def warning(self, message: str) -> None:
        logger.debug("status warning: %s", message)

    def flush(self) -> None:
        pass


class ConsoleStatus:
    """Status entry rendered by `ConsoleProgress`."""

    def __init__(self, progress: ConsoleProgress, message: str) -> None:
        self._progress = progress
        self.message = message
        self.finished = False

    def success(self) -> None:
        self._finish("✓", "green", self.message)

    def warning(self) -> None:
        self._finish("⚠", "yellow", self.message)

    def failed(self, message: str | None = None) -> None:
        self._finish("✗", "bright_red", message or self.message)

    def _finish(self, symbol: str, fg: str, message: str) -> None:
        if self.finished:
            return
        self.finished = True
        self._progress.finish(self, f"{symbol} {message}", fg)


class ConsoleProgress:
    """Pending-line progress indicator writing to stderr.

    Args:
        err (TextIO | None): Stream for status lines. Defaults to `sys.stderr`.
        enable_color (bool): If True, emit ANSI color codes.
    """

    def __init__(self, *, err: TextIO | None = None, enable_color: bool = True) -> None:
        self.err = err or sys.stderr
        self.enable_color = enable_color
        self._pending: ConsoleStatus | None = None

    def _echo(self, text: str, *, nl: bool = True, fg: str | None = None) -> None:
        if fg is not None and self.enable_color:
            text = click.style(text, fg=fg)
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def start(self, message: str) -> StatusHandle:
        self.flush()
        status = ConsoleStatus(self, message)
        self._echo(f"  {message}...", nl=False)
        self._pending = status
        return status

    def warning(self, message: str) -> None:
        self.flush()
        self._echo(f"⚠ {message}", fg="yellow")

    def flush(self) -> None:
        if self._pending is not None:
            self._echo("")
            self._pending = None

    def finish(self, status: ConsoleStatus, text: str, fg: str) -> None:
        """Render the final line of ``status``, replacing its pending line if possible."""
        if self._pending is status:
            self._echo("\r", nl=False)
            self._pending = None
        else:
            self.flush()
        self._echo(text, fg=fg)
