# topmark:header:start
#
#   project      : DeployReport
#   file         : router.py
#   file_relpath : src/deployreport/output/router.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Route rendered reports to their destinations.

An output descriptor has the form ``<format>[=<destination>]``. The destination
``-`` (or no destination) means the injected standard output stream; anything
else is a file path, truncated and written once.

Descriptors are processed in order and the first failure aborts the rest.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence, TextIO

from deployreport.config.logging import get_logger
from deployreport.constants import STDOUT_DESTINATION
from deployreport.core.errors import OutputWriteError
from deployreport.core.formats import ResultFormat

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger
    from deployreport.status import ProgressIndicator

logger: DeployReportLogger = get_logger(__name__)

RenderCallback = Callable[[str], str]


@dataclass(frozen=True)
class OutputDescriptor:
    """Parsed output descriptor.

    Attributes:
        format (str): Requested format name (validated by the renderer).
        path (str | None): Destination path; None or ``-`` means standard output.
    """

    format: str
    path: str | None = None

    def __str__(self) -> str:
        return self.format if self.path is None else f"{self.format}={self.path}"


def parse_output_descriptor(descriptor: str) -> OutputDescriptor:
    """Split ``descriptor`` on its first ``=``.

    Examples:
        ``"yaml=out=1.yaml"`` yields format ``yaml`` and path ``out=1.yaml``.
    """
    fmt, sep, path = descriptor.partition("=")
    return OutputDescriptor(format=fmt, path=path if sep else None)


def output_result(
    path: str | None,
    text: str,
    *,
    stdout: TextIO | None = None,
    progress: ProgressIndicator | None = None,
) -> None:
    """Write ``text`` to a single destination.

    Args:
        path (str | None): File path, or None/``-`` for standard output.
        text (str): Already rendered content.
        stdout (TextIO | None): Standard output stream, never closed here.
        progress (ProgressIndicator | None): Flushed before writing.

    Raises:
        OutputWriteError: If the destination cannot be written.
    """
    if progress is not None:
        progress.flush()

    if path is None or path == STDOUT_DESTINATION:
        out: TextIO = stdout if stdout is not None else sys.stdout
        try:
            out.write(text)
            out.flush()
        except (OSError, ValueError) as e:
            logger.error("Failed to write output to stdout: %s", e)
            raise OutputWriteError(STDOUT_DESTINATION, e) from e
        logger.trace("Wrote %d characters to stdout", len(text))
        return

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except (OSError, ValueError) as e:
        logger.error("Failed to write output to %s: %s", path, e)
        raise OutputWriteError(path, e) from e
    logger.debug("Wrote %d characters to %s", len(text), path)


def output_helper(
    descriptors: Sequence[str],
    render: RenderCallback,
    *,
    stdout: TextIO | None = None,
    progress: ProgressIndicator | None = None,
) -> None:
    """Render and write once per descriptor.

    Args:
        descriptors (Sequence[str]): Output descriptors; empty means ``["text"]``.
        render (RenderCallback): Called with the format name, returns the text.
        stdout (TextIO | None): Standard output stream.
        progress (ProgressIndicator | None): Flushed before every write.

    Raises:
        DeployReportError: The first render or write failure.
    """
    if not descriptors:
        descriptors = [ResultFormat.TEXT.value]
    for raw in descriptors:
        d: OutputDescriptor = parse_output_descriptor(raw)
        logger.debug("Rendering output descriptor %s", d)
        text: str = render(d.format)
        output_result(d.path, text, stdout=stdout, progress=progress)


def output_result_to_all(
    descriptors: Sequence[str],
    text: str,
    *,
    stdout: TextIO | None = None,
    progress: ProgressIndicator | None = None,
) -> None:
    """Write already rendered ``text`` to every destination.

    Each entry is a bare destination path (``-`` for standard output); an
    empty sequence means standard output only.

    Raises:
        OutputWriteError: The first write failure.
    """
    if not descriptors:
        descriptors = [STDOUT_DESTINATION]
    for path in descriptors:
        output_result(path, text, stdout=stdout, progress=progress)
