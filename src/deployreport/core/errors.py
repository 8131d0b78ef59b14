# topmark:header:start
#
#   project      : DeployReport
#   file         : errors.py
#   file_relpath : src/deployreport/core/errors.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Error taxonomy for the result output pipeline.

These exceptions are Click-free so that the pipeline can be used as a library.
The CLI layer maps them to `ClickException` subclasses with dedicated exit codes
(see [`deployreport.cli.errors`][deployreport.cli.errors]).

Fatal errors:
    - `RedactionError`: the obfuscation pass failed; nothing else runs.
    - `InvalidFormatError`: an unknown format name was requested.
    - `SerializationError`: a structured document could not be encoded.
    - `OutputWriteError`: a destination could not be written.

Deferred errors:
    - `PersistenceError`: the result store write failed; surfaced only when
      rendering and writing succeeded.
"""

from __future__ import annotations


class DeployReportError(Exception):
    """Base class for all DeployReport pipeline errors."""


class RedactionError(DeployReportError):
    """The obfuscation pass could not be applied to a result."""


class InvalidFormatError(DeployReportError):
    """An output format name is not recognized.

    Attributes:
        format_name (str): The offending format name.
    """

    def __init__(self, format_name: str, *, message: str | None = None) -> None:
        self.format_name = format_name
        super().__init__(message or f"invalid format: {format_name}")


class SerializationError(DeployReportError):
    """A value is not representable in the structured encoding."""


class OutputWriteError(DeployReportError):
    """A rendered report could not be written to its destination.

    Attributes:
        destination (str): The destination path (``-`` for standard output).
    """

    def __init__(self, destination: str, cause: OSError | ValueError) -> None:
        self.destination = destination
        super().__init__(f"failed to write output to {destination}: {cause}")


class PersistenceError(DeployReportError):
    """The result store rejected a command result."""


class ConfigError(DeployReportError):
    """Configuration is malformed (wrong value types or unreadable file)."""
