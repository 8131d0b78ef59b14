# topmark:header:start
#
#   project      : DeployReport
#   file         : main.py
#   file_relpath : src/deployreport/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""DeployReport CLI entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deployreport.cli.commands.config import config_command
from deployreport.cli.commands.render import render_command
from deployreport.cli.commands.validate import validate_command
from deployreport.cli.commands.version import version_command
from deployreport.cli.console import ClickConsole
from deployreport.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from deployreport.config.logging import get_logger, resolve_env_log_level, setup_logging
from deployreport.config.model import ColorMode

if TYPE_CHECKING:
    from deployreport.cli.console import ConsoleLike
    from deployreport.config.logging import DeployReportLogger

logger: DeployReportLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    explicit_mode: ColorMode | None = (
        ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else None)
    )
    ctx.obj["color_mode"] = explicit_mode
    enable_color: bool = resolve_color_mode(color_mode_override=explicit_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="DeployReport: render deployment command results to text and YAML reports.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the DeployReport CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'deployreport render RESULT_FILE' to render a command result.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(validate_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
