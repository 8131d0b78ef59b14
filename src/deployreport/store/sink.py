# topmark:header:start
#
#   project      : DeployReport
#   file         : sink.py
#   file_relpath : src/deployreport/store/sink.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Persistence sink: hand a redacted command result to a result store.

Persistence failures are never raised from here. The sink returns the captured
error so that the orchestrator can still render the report and apply its error
precedence rule afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from deployreport.config.logging import get_logger
from deployreport.constants import MISSING_CLUSTER_ID_WARNING
from deployreport.core.errors import PersistenceError
from deployreport.result.model import DeploymentError

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger
    from deployreport.redaction.gate import RedactedCommandResult
    from deployreport.result.model import CommandResult
    from deployreport.status import ProgressIndicator

logger: DeployReportLogger = get_logger(__name__)


class ResultStore(Protocol):
    """Protocol for result stores receiving (redacted) command results."""

    def write_command_result(self, cr: CommandResult) -> None:
        """Persist ``cr``. Implementations may raise on failure."""
        ...


def ensure_cluster_id_warning(cr: CommandResult) -> bool:
    """Append the missing cluster identity warning to ``cr`` if applicable.

    The warning is appended at most once, even when called repeatedly.

    Returns:
        bool: True if the cluster identity is missing.
    """
    if cr.cluster_info.cluster_id:
        return False
    if not any(w.message == MISSING_CLUSTER_ID_WARNING for w in cr.warnings):
        cr.warnings.append(DeploymentError(message=MISSING_CLUSTER_ID_WARNING))
    return True


def persist_command_result(
    redacted: RedactedCommandResult,
    store: ResultStore,
    progress: ProgressIndicator,
) -> PersistenceError | None:
    """Write a redacted command result to ``store``.

    Args:
        redacted (RedactedCommandResult): Result that went through the redaction gate.
        store (ResultStore): Destination store.
        progress (ProgressIndicator): Progress indicator for status reporting.

    Returns:
        PersistenceError | None: The captured store failure, or None on success.
    """
    cr: CommandResult = redacted.result
    status = progress.start("Writing command result")
    try:
        missing_cluster_id: bool = ensure_cluster_id_warning(cr)
        if missing_cluster_id:
            logger.warning("Command result %s has no cluster identity", cr.id)
            progress.warning(MISSING_CLUSTER_ID_WARNING)

        try:
            store.write_command_result(cr)
        except Exception as e:
            logger.error("Failed to write command result %s: %s", cr.id, e)
            err = PersistenceError(f"failed to write result to result store: {e}")
            err.__cause__ = e
            status.failed(f"Failed to write result to result store: {e}")
            return err

        logger.debug("Command result %s written to result store", cr.id)
        if missing_cluster_id:
            status.warning()
        else:
            status.success()
        return None
    finally:
        # No-op when already finished.
        status.failed()
