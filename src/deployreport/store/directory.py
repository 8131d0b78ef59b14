# topmark:header:start
#
#   project      : DeployReport
#   file         : directory.py
#   file_relpath : src/deployreport/store/directory.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Directory-backed result store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from deployreport.config.logging import get_logger
from deployreport.rendering.structured import format_yaml

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger
    from deployreport.result.model import CommandResult

logger: DeployReportLogger = get_logger(__name__)


class DirectoryResultStore:
    """Store each command result as ``<directory>/<id>.yaml``.

    Args:
        directory (Path | str): Target directory, created on first write.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def path_for(self, result_id: str) -> Path:
        """Return the file path used for ``result_id``."""
        if not result_id or "/" in result_id or result_id in (".", ".."):
            raise ValueError(f"invalid result id: {result_id!r}")
        return self.directory / f"{result_id}.yaml"

    def write_command_result(self, cr: CommandResult) -> None:
        """Write the compacted YAML form of ``cr``.

        Raises:
            ValueError: If the result has no usable id.
            OSError: If the directory or file cannot be written.
            SerializationError: If the result cannot be serialized.
        """
        path: Path = self.path_for(cr.id)
        text: str = format_yaml(cr.to_compacted())
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.debug("DirectoryResultStore: wrote %d bytes to %s", len(text), path)
