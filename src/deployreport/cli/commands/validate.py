# topmark:header:start
#
#   project      : DeployReport
#   file         : validate.py
#   file_relpath : src/deployreport/cli/commands/validate.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""DeployReport `validate` command.

Renders a validate result and exits with ``FAILURE`` if the validated
deployment is not ready or has errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from deployreport.cli.cmd_common import (
    build_output_config,
    load_result_document,
    make_progress,
    new_result_id,
)
from deployreport.cli.errors import DeployReportDataError, cli_error_from
from deployreport.cli.exit_codes import ExitCode
from deployreport.cli.options import CONTEXT_SETTINGS, common_config_options, common_output_options
from deployreport.core.errors import DeployReportError
from deployreport.pipeline.orchestrator import output_validate_result
from deployreport.result.model import ValidateResult

if TYPE_CHECKING:
    from deployreport.config.model import OutputConfig


@click.command(
    name="validate",
    help="Render a validate result (YAML, '-' for stdin) to one or more destinations.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("result_file", metavar="RESULT_FILE", type=str)
@common_output_options
@click.option(
    "--result-id",
    "result_id",
    default=None,
    help="Id assigned to the result. Defaults to a fresh UUID.",
)
@common_config_options
@click.pass_context
def validate_command(
    ctx: click.Context,
    *,
    result_file: str,
    output: tuple[str, ...],
    result_id: str | None,
    config_file: str | None,
) -> None:
    """Render a validate result."""
    overrides: dict[str, Any] = {"output": list(output)} if output else {}
    config: OutputConfig = build_output_config(ctx, config_file=config_file, overrides=overrides)

    data: dict[str, Any] = load_result_document(result_file)
    try:
        vr: ValidateResult = ValidateResult.from_dict(data)
    except (TypeError, ValueError) as e:
        raise DeployReportDataError(f"invalid validate result in {result_file}: {e}") from e

    try:
        output_validate_result(
            vr,
            result_id=result_id or new_result_id(),
            output=config.output,
            progress=make_progress(ctx, config),
        )
    except DeployReportError as e:
        raise cli_error_from(e) from e

    if not vr.ready or vr.errors:
        ctx.exit(ExitCode.FAILURE)
