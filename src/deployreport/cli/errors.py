# topmark:header:start
#
#   project      : DeployReport
#   file         : errors.py
#   file_relpath : src/deployreport/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Exceptions for the DeployReport CLI.

Usage:
    Commands raise these exceptions (or convert pipeline errors with
    `cli_error_from`) to signal errors with standardized exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from deployreport.cli.exit_codes import ExitCode
from deployreport.core.errors import (
    ConfigError,
    DeployReportError,
    InvalidFormatError,
    OutputWriteError,
    PersistenceError,
    RedactionError,
    SerializationError,
)


class DeployReportCliError(click.ClickException):
    """Base class for all DeployReport CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class DeployReportUsageError(DeployReportCliError):
    """Command-line invocation error (invalid flags/args/output format)."""

    exit_code = ExitCode.USAGE_ERROR


class DeployReportDataError(DeployReportCliError):
    """The result document is malformed."""

    exit_code = ExitCode.DATA_ERROR


class DeployReportFileNotFoundError(DeployReportCliError):
    """The result document does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DeployReportPipelineError(DeployReportCliError):
    """Redaction or serialization failure."""

    exit_code = ExitCode.PIPELINE_ERROR


class DeployReportIOError(DeployReportCliError):
    """A report destination could not be written."""

    exit_code = ExitCode.IO_ERROR


class DeployReportStoreError(DeployReportCliError):
    """The result store rejected the command result."""

    exit_code = ExitCode.TEMP_FAIL


class DeployReportConfigError(DeployReportCliError):
    """Malformed or unreadable configuration."""

    exit_code = ExitCode.CONFIG_ERROR


_ERROR_MAP: dict[type[DeployReportError], type[DeployReportCliError]] = {
    InvalidFormatError: DeployReportUsageError,
    RedactionError: DeployReportPipelineError,
    SerializationError: DeployReportPipelineError,
    OutputWriteError: DeployReportIOError,
    PersistenceError: DeployReportStoreError,
    ConfigError: DeployReportConfigError,
}


def cli_error_from(err: DeployReportError) -> DeployReportCliError:
    """Convert a pipeline error into the matching CLI error."""
    for err_type, cli_type in _ERROR_MAP.items():
        if isinstance(err, err_type):
            return cli_type(str(err))
    return DeployReportCliError(str(err))
