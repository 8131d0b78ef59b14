# topmark:header:start
#
#   project      : DeployReport
#   file         : orchestrator.py
#   file_relpath : src/deployreport/pipeline/orchestrator.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""End-to-end output pipeline for command and validate results.

A command result goes through these stages, in order:

1. identity: assign the run id and tag the command-line initiator;
2. redaction: run the obfuscation policy (or the explicit opt-out);
3. persistence: optionally write the redacted result to a result store,
   capturing (not raising) any failure;
4. output: render and write every output descriptor;
5. error resolution: a render/write error wins over a store error.

The progress indicator is flushed before and after the output phase.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, TextIO

from deployreport.config.logging import get_logger
from deployreport.core.errors import DeployReportError
from deployreport.output.router import output_helper, output_result_to_all
from deployreport.redaction.gate import RedactedCommandResult, redact_command_result
from deployreport.rendering.dispatch import format_command_result, format_validate_result
from deployreport.rendering.structured import format_yaml, format_yaml_all
from deployreport.result.model import CommandInitiator
from deployreport.status import NullProgress
from deployreport.store.sink import persist_command_result

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger
    from deployreport.core.errors import PersistenceError
    from deployreport.redaction.gate import Obfuscator
    from deployreport.result.model import CommandResult, ValidateResult
    from deployreport.status import ProgressIndicator
    from deployreport.store.sink import ResultStore

logger: DeployReportLogger = get_logger(__name__)


def resolve_error_precedence(
    render_err: DeployReportError | None,
    store_err: PersistenceError | None,
) -> DeployReportError | None:
    """Pick the error reported for a pipeline run.

    | render_err | store_err | result     |
    |------------|-----------|------------|
    | None       | None      | None       |
    | None       | S         | S          |
    | R          | None      | R          |
    | R          | S         | R          |
    """
    if render_err is not None:
        if store_err is not None:
            logger.debug("Store error superseded by render error: %s", store_err)
        return render_err
    return store_err


def output_command_result(
    cr: CommandResult,
    *,
    result_id: str,
    output: Sequence[str] = (),
    short: bool = False,
    obfuscator: Obfuscator | None = None,
    store: ResultStore | None = None,
    write_to_result_store: bool = False,
    progress: ProgressIndicator | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Redact, persist and output a command result.

    Args:
        cr (CommandResult): The command result. Mutated in place (id, initiator,
            redaction, missing cluster identity warning).
        result_id (str): Run id to assign.
        output (Sequence[str]): Output descriptors; empty means ``["text"]``.
        short (bool): Suppress diff tables in text output.
        obfuscator (Obfuscator | None): Obfuscation policy; None disables
            obfuscation explicitly.
        store (ResultStore | None): Result store; None disables persistence.
        write_to_result_store (bool): Whether persistence is requested.
        progress (ProgressIndicator | None): Progress indicator; defaults to
            a `NullProgress`.
        stdout (TextIO | None): Standard output stream for ``-`` destinations.

    Raises:
        RedactionError: If redaction failed. Nothing has been persisted or written.
        InvalidFormatError: If an output format is not recognized.
        SerializationError: If a structured report cannot be serialized.
        OutputWriteError: If a destination cannot be written.
        PersistenceError: If only the result store write failed.
    """
    progress = progress if progress is not None else NullProgress()

    cr.id = result_id
    cr.command.initiator = CommandInitiator.COMMAND_LINE
    logger.debug("Outputting command result %s", cr.id)

    redacted: RedactedCommandResult
    if obfuscator is None:
        redacted = RedactedCommandResult.unredacted(cr)
    else:
        redacted = redact_command_result(cr, obfuscator)

    store_err: PersistenceError | None = None
    if write_to_result_store and store is not None:
        store_err = persist_command_result(redacted, store, progress)
    elif write_to_result_store:
        logger.debug("Result store write requested but no result store configured")

    progress.flush()
    render_err: DeployReportError | None = None
    try:
        output_helper(
            output,
            lambda fmt: format_command_result(redacted.result, fmt, short),
            stdout=stdout,
            progress=progress,
        )
    except DeployReportError as e:
        logger.debug("Output of command result %s failed: %s", cr.id, e)
        render_err = e
    progress.flush()

    err: DeployReportError | None = resolve_error_precedence(render_err, store_err)
    if err is not None:
        raise err


def output_validate_result(
    vr: ValidateResult,
    *,
    result_id: str,
    output: Sequence[str] = (),
    progress: ProgressIndicator | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Output a validate result.

    Raises:
        InvalidFormatError: If an output format is not recognized.
        SerializationError: If a structured report cannot be serialized.
        OutputWriteError: If a destination cannot be written.
    """
    progress = progress if progress is not None else NullProgress()

    vr.id = result_id
    logger.debug("Outputting validate result %s", vr.id)

    progress.flush()
    try:
        output_helper(
            output,
            lambda fmt: format_validate_result(vr, fmt),
            stdout=stdout,
            progress=progress,
        )
    finally:
        progress.flush()


def output_yaml_result(
    output: Sequence[str],
    obj: object,
    multi_doc: bool,
    *,
    progress: ProgressIndicator | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Write an arbitrary object as YAML to every destination.

    Args:
        output (Sequence[str]): Destination paths; empty means standard output.
        obj (object): Object to serialize; a list when ``multi_doc`` is set.
        multi_doc (bool): Emit one YAML document per list item.
        progress (ProgressIndicator | None): Flushed before every write.
        stdout (TextIO | None): Standard output stream.

    Raises:
        SerializationError: If ``obj`` cannot be serialized, or is not a list
            while ``multi_doc`` is set.
        OutputWriteError: If a destination cannot be written.
    """
    text: str = format_yaml_all(obj) if multi_doc else format_yaml(obj)
    output_result_to_all(output, text, stdout=stdout, progress=progress)
