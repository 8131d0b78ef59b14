# topmark:header:start
#
#   project      : DeployReport
#   file         : version.py
#   file_relpath : src/deployreport/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""DeployReport `version` command.

Prints the current DeployReport version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deployreport.cli.cmd_common import get_console, get_effective_verbosity
from deployreport.constants import DEPLOYREPORT_VERSION
from deployreport.core.formats import ResultFormat, is_machine_format
from deployreport.rendering.structured import format_yaml

if TYPE_CHECKING:
    from deployreport.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DeployReport.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in ResultFormat]),
    default=ResultFormat.TEXT.value,
    help=f"Output format ({', '.join(f.value for f in ResultFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: str) -> None:
    """Show the current version of DeployReport."""
    console: ConsoleLike = get_console(ctx)
    fmt = ResultFormat(output_format)

    if is_machine_format(fmt):
        console.print(format_yaml({"version": DEPLOYREPORT_VERSION}), nl=False)
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("DeployReport version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DEPLOYREPORT_VERSION, bold=True)}")
    else:
        console.print(console.styled(DEPLOYREPORT_VERSION, bold=True))
