# topmark:header:start
#
#   project      : DeployReport
#   file         : cmd_common.py
#   file_relpath : src/deployreport/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Helpers shared by DeployReport CLI commands."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

import click
import yaml

from deployreport.cli.errors import (
    DeployReportDataError,
    DeployReportFileNotFoundError,
    cli_error_from,
)
from deployreport.cli.options import resolve_color_mode
from deployreport.config.loaders import load_merged
from deployreport.config.logging import get_logger
from deployreport.config.model import ColorMode, OutputConfig
from deployreport.constants import STDOUT_DESTINATION
from deployreport.core.errors import ConfigError
from deployreport.status import ConsoleProgress, NullProgress

if TYPE_CHECKING:
    from deployreport.cli.console import ConsoleLike
    from deployreport.config.logging import DeployReportLogger
    from deployreport.status import ProgressIndicator

logger: DeployReportLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the root group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the verbosity level resolved by the root group (0 if unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def new_result_id() -> str:
    """Return a fresh result id."""
    return str(uuid.uuid4())


def build_output_config(
    ctx: click.Context,
    *,
    config_file: str | None,
    overrides: Mapping[str, Any],
) -> OutputConfig:
    """Resolve the effective output config for a command.

    Args:
        ctx (click.Context): Current Click context.
        config_file (str | None): Explicit ``--config`` file.
        overrides (Mapping[str, Any]): Explicitly given CLI values, by field name.

    Returns:
        OutputConfig: Defaults, config files and CLI overrides merged in order.

    Raises:
        DeployReportConfigError: If a config file is malformed.
    """
    try:
        config: OutputConfig = load_merged(
            config_file=Path(config_file) if config_file is not None else None
        )
    except ConfigError as e:
        raise cli_error_from(e) from e

    cli_layer = OutputConfig()
    for name, value in overrides.items():
        cli_layer.set_value(name, value)
    ctx.ensure_object(dict)
    color_mode: ColorMode | None = ctx.obj.get("color_mode")
    if color_mode is not None:
        cli_layer.set_value("color", color_mode)
    config.merge_with(cli_layer)
    logger.debug("Effective config after CLI overrides: %s", config)
    return config


def make_progress(ctx: click.Context, config: OutputConfig) -> ProgressIndicator:
    """Create the progress indicator for a command.

    Quiet mode (``-q``) disables progress output entirely.
    """
    if get_effective_verbosity(ctx) < 0:
        return NullProgress()
    enable_color: bool = resolve_color_mode(color_mode_override=config.color)
    return ConsoleProgress(err=click.get_text_stream("stderr"), enable_color=enable_color)


def load_result_document(result_file: str) -> dict[str, Any]:
    """Load a YAML result document from ``result_file`` (``-`` for stdin).

    Raises:
        DeployReportFileNotFoundError: If the file does not exist.
        DeployReportDataError: If the file cannot be read or is not a YAML mapping.
    """
    try:
        if result_file == STDOUT_DESTINATION:
            data: Any = yaml.safe_load(click.get_text_stream("stdin"))
        else:
            with open(result_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise DeployReportFileNotFoundError(f"result file not found: {result_file}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DeployReportDataError(f"cannot read result file {result_file}: {e}") from e
    except yaml.YAMLError as e:
        raise DeployReportDataError(f"invalid YAML in {result_file}: {e}") from e

    if not isinstance(data, dict):
        raise DeployReportDataError(f"result document in {result_file} is not a mapping")
    logger.debug("Loaded result document from %s", result_file)
    return data
