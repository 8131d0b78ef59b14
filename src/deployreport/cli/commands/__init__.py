# topmark:header:start
#
#   project      : DeployReport
#   file         : __init__.py
#   file_relpath : src/deployreport/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Click subcommands of the DeployReport CLI."""

from __future__ import annotations
