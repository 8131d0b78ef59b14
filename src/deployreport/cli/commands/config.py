# topmark:header:start
#
#   project      : DeployReport
#   file         : config.py
#   file_relpath : src/deployreport/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""DeployReport `config` command group.

  * ``deployreport config dump``: show the effective merged configuration as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deployreport.cli.cmd_common import build_output_config, get_console
from deployreport.cli.options import CONTEXT_SETTINGS, common_config_options
from deployreport.config.loaders import to_toml
from deployreport.config.logging import get_logger

if TYPE_CHECKING:
    from deployreport.cli.console import ConsoleLike
    from deployreport.config.logging import DeployReportLogger
    from deployreport.config.model import OutputConfig

logger: DeployReportLogger = get_logger(__name__)


@click.group(
    name="config",
    help="Inspect DeployReport configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""
    # No-op: behavior is provided by subcommands only.


@click.command(
    name="dump",
    help=(
        "Dump the effective configuration as TOML, after merging pyproject.toml, "
        "deployreport.toml and --config FILE."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@click.pass_context
def config_dump_command(ctx: click.Context, *, config_file: str | None) -> None:
    """Dump the effective configuration as TOML."""
    console: ConsoleLike = get_console(ctx)
    config: OutputConfig = build_output_config(ctx, config_file=config_file, overrides={})
    for path in config.config_files:
        logger.info("Config file: %s", path)
    console.print(to_toml(config), nl=False)


config_command.add_command(config_dump_command)
