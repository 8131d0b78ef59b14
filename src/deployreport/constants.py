# topmark:header:start
#
#   project      : DeployReport
#   file         : constants.py
#   file_relpath : src/deployreport/constants.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""DeployReport Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    DEPLOYREPORT_VERSION: str = get_version("deployreport")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    DEPLOYREPORT_VERSION = "0.0.0"

# Configuration file names looked up in the working directory:
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
DEPLOYREPORT_TOML_NAME: Final[str] = "deployreport.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "deployreport"

# Destination sentinel for the standard output stream.
STDOUT_DESTINATION: Final[str] = "-"

# Maximum display width of the value column in diff and validation tables.
DIFF_COLUMN_MAX_WIDTH: Final[int] = 60

# Replacement text for redacted secret values.
OBFUSCATED_VALUE: Final[str] = "***** (obfuscated)"

MISSING_CLUSTER_ID_WARNING: Final[str] = (
    "failed to determine cluster ID due to missing get/list permissions for the "
    "kube-system namespace. This might result in follow up issues in regard to "
    "cluster differentiation stored command results"
)
