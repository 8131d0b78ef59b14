# topmark:header:start
#
#   project      : DeployReport
#   file         : gate.py
#   file_relpath : src/deployreport/redaction/gate.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Redaction gate for command results.

Every consumer of a command result (result store, formatters, destinations) must
only ever see redacted content. The gate enforces this structurally: downstream
stages accept a `RedactedCommandResult`, and the only ways to obtain one are:

- `redact_command_result`, which runs the obfuscation policy in place, or
- `RedactedCommandResult.unredacted`, the explicit opt-out used when the caller
  disabled obfuscation.

A failing policy raises `RedactionError`; the orchestrator lets it propagate so
that nothing is persisted, rendered, or written.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol

from deployreport.config.logging import get_logger
from deployreport.core.errors import RedactionError

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger
    from deployreport.result.model import CommandResult

logger: DeployReportLogger = get_logger(__name__)

_GATE_TOKEN: Final[object] = object()


class Obfuscator(Protocol):
    """Obfuscation policy applied to a command result."""

    def obfuscate_result(self, cr: CommandResult) -> None:
        """Replace sensitive content of ``cr`` in place.

        Implementations may raise any exception to signal that the result cannot
        be safely redacted.
        """
        ...


@dataclass(frozen=True)
class RedactedCommandResult:
    """A command result that went through the redaction gate.

    Attributes:
        result (CommandResult): The (mutated in place) command result.
        obfuscated (bool): False when obfuscation was explicitly disabled.
    """

    result: CommandResult
    obfuscated: bool
    token: object

    def __post_init__(self) -> None:
        if self.token is not _GATE_TOKEN:
            raise TypeError(
                "RedactedCommandResult can only be created by redact_command_result() "
                "or RedactedCommandResult.unredacted()"
            )

    @classmethod
    def unredacted(cls, cr: CommandResult) -> RedactedCommandResult:
        """Mark ``cr`` as cleared for output without running any obfuscation.

        Only use this when the caller explicitly disabled obfuscation.
        """
        logger.debug("Obfuscation disabled for command result %s", cr.id)
        return cls(result=cr, obfuscated=False, token=_GATE_TOKEN)


def redact_command_result(cr: CommandResult, obfuscator: Obfuscator) -> RedactedCommandResult:
    """Apply the obfuscation policy to ``cr`` in place.

    Args:
        cr (CommandResult): The command result to redact.
        obfuscator (Obfuscator): The obfuscation policy.

    Returns:
        RedactedCommandResult: Marker wrapping the same, now redacted, record.

    Raises:
        RedactionError: If the policy failed.
    """
    try:
        obfuscator.obfuscate_result(cr)
    except Exception as e:
        logger.error("Failed to obfuscate command result %s: %s", cr.id, e)
        raise RedactionError(f"failed to obfuscate command result: {e}") from e
    logger.debug("Command result %s obfuscated", cr.id)
    return RedactedCommandResult(result=cr, obfuscated=True, token=_GATE_TOKEN)
