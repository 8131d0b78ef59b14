# topmark:header:start
#
#   project      : DeployReport
#   file         : options.py
#   file_relpath : src/deployreport/cli/options.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, output) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from deployreport.cli.errors import DeployReportUsageError
from deployreport.config.model import ColorMode

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, else the ``-v`` count.

    Raises:
        DeployReportUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DeployReportUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )
    if quiet_count > 0:
        return -1
    return verbose_count


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. Explicit mode: ``ALWAYS`` → True, ``NEVER`` → False.
        2. Environment: ``FORCE_COLOR`` (set and not ``"0"``) → True,
           ``NO_COLOR`` (set) → False.
        3. Auto: whether stderr (the status stream) is a TTY.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        try:
            stream_isatty = sys.stderr.isatty()
        except (AttributeError, ValueError, OSError):
            stream_isatty = False
    return stream_isatty


def is_explicit(ctx: click.Context, name: str) -> bool:
    """Return True if parameter ``name`` was given on the command line or via env."""
    source: ParameterSource | None = ctx.get_parameter_source(name)
    return source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress progress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the repeatable ``-o/--output`` descriptor option."""
    f = click.option(
        "-o",
        "--output",
        "output",
        multiple=True,
        metavar="FORMAT[=PATH]",
        help=(
            "Output format and destination. Can be repeated. FORMAT is 'text' or 'yaml'; "
            "PATH '-' (the default) means stdout. Defaults to 'text'."
        ),
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config FILE`` option."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="Read configuration from FILE (overrides pyproject.toml and deployreport.toml).",
    )(f)
    return f
