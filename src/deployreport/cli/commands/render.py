# topmark:header:start
#
#   project      : DeployReport
#   file         : render.py
#   file_relpath : src/deployreport/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""DeployReport `render` command.

Loads a command result document, runs it through the output pipeline
(redaction, optional result store write, rendering) and writes the report to
every requested destination.

Exit status:
    - ``0`` when the report was written and the result has no errors;
    - ``1`` when the report was written but the result carries errors;
    - a sysexits-style code for pipeline failures (see `ExitCode`).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from deployreport.cli.cmd_common import (
    build_output_config,
    load_result_document,
    make_progress,
    new_result_id,
)
from deployreport.cli.errors import DeployReportDataError, DeployReportUsageError, cli_error_from
from deployreport.cli.exit_codes import ExitCode
from deployreport.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_output_options,
    is_explicit,
)
from deployreport.config.logging import get_logger
from deployreport.core.errors import DeployReportError
from deployreport.pipeline.orchestrator import output_command_result
from deployreport.redaction.secrets import SecretsObfuscator
from deployreport.result.model import CommandResult
from deployreport.store.directory import DirectoryResultStore

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger
    from deployreport.config.model import OutputConfig
    from deployreport.redaction.gate import Obfuscator
    from deployreport.store.sink import ResultStore

logger: DeployReportLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render a command result (YAML, '-' for stdin) to one or more destinations.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("result_file", metavar="RESULT_FILE", type=str)
@common_output_options
@click.option(
    "--short-output/--no-short-output",
    "short_output",
    default=False,
    help="Omit per-object diff tables from text reports.",
)
@click.option(
    "--no-obfuscate",
    "no_obfuscate",
    is_flag=True,
    default=False,
    help="Disable obfuscation of Secret values.",
)
@click.option(
    "--write-result-store/--no-write-result-store",
    "write_result_store",
    default=False,
    help="Write the (redacted) result to the result store.",
)
@click.option(
    "--result-store-dir",
    "result_store_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory of the result store.",
)
@click.option(
    "--result-id",
    "result_id",
    default=None,
    help="Id assigned to the result. Defaults to a fresh UUID.",
)
@common_config_options
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    result_file: str,
    output: tuple[str, ...],
    short_output: bool,
    no_obfuscate: bool,
    write_result_store: bool,
    result_store_dir: str | None,
    result_id: str | None,
    config_file: str | None,
) -> None:
    """Render a command result."""
    overrides: dict[str, Any] = {}
    if output:
        overrides["output"] = list(output)
    for name, value in (
        ("short_output", short_output),
        ("no_obfuscate", no_obfuscate),
        ("write_result_store", write_result_store),
    ):
        if is_explicit(ctx, name):
            overrides[name] = value
    if result_store_dir is not None:
        overrides["result_store_dir"] = Path(result_store_dir)

    config: OutputConfig = build_output_config(ctx, config_file=config_file, overrides=overrides)

    if config.write_result_store and config.result_store_dir is None:
        raise DeployReportUsageError(
            "--write-result-store requires a result store directory (--result-store-dir)"
        )

    data: dict[str, Any] = load_result_document(result_file)
    try:
        cr: CommandResult = CommandResult.from_dict(data)
    except (TypeError, ValueError) as e:
        raise DeployReportDataError(f"invalid command result in {result_file}: {e}") from e

    obfuscator: Obfuscator | None = None if config.no_obfuscate else SecretsObfuscator()
    store: ResultStore | None = (
        DirectoryResultStore(config.result_store_dir)
        if config.result_store_dir is not None
        else None
    )

    try:
        output_command_result(
            cr,
            result_id=result_id or new_result_id(),
            output=config.output,
            short=config.short_output,
            obfuscator=obfuscator,
            store=store,
            write_to_result_store=config.write_result_store,
            progress=make_progress(ctx, config),
        )
    except DeployReportError as e:
        raise cli_error_from(e) from e

    if cr.errors:
        logger.info("Command result %s has %d error(s)", cr.id, len(cr.errors))
        ctx.exit(ExitCode.FAILURE)
