# topmark:header:start
#
#   project      : DeployReport
#   file         : dispatch.py
#   file_relpath : src/deployreport/rendering/dispatch.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Map a requested format name to a formatter.

Unknown names raise `InvalidFormatError`; they are never silently ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deployreport.core.errors import InvalidFormatError
from deployreport.core.formats import ResultFormat
from deployreport.rendering.structured import (
    format_command_result_yaml,
    format_validate_result_yaml,
)
from deployreport.rendering.text import format_command_result_text, format_validate_result_text

if TYPE_CHECKING:
    from deployreport.result.model import CommandResult, ValidateResult


def format_command_result(cr: CommandResult, format_name: str, short: bool) -> str:
    """Render a command result in the named format.

    Args:
        cr (CommandResult): The (redacted) command result.
        format_name (str): ``text`` or ``yaml``.
        short (bool): Suppress diff tables in text output.

    Returns:
        str: The rendered report.

    Raises:
        InvalidFormatError: If ``format_name`` is not recognized.
    """
    fmt = ResultFormat.parse(format_name)
    if fmt is ResultFormat.TEXT:
        return format_command_result_text(cr, short)
    if fmt is ResultFormat.YAML:
        return format_command_result_yaml(cr)
    raise InvalidFormatError(format_name)


def format_validate_result(vr: ValidateResult, format_name: str) -> str:
    """Render a validate result in the named format.

    Raises:
        InvalidFormatError: If ``format_name`` is not recognized.
    """
    fmt = ResultFormat.parse(format_name)
    if fmt is ResultFormat.TEXT:
        return format_validate_result_text(vr)
    if fmt is ResultFormat.YAML:
        return format_validate_result_yaml(vr)
    raise InvalidFormatError(
        format_name, message=f"invalid validation result format: {format_name}"
    )
