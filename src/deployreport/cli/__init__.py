# topmark:header:start
#
#   project      : DeployReport
#   file         : __init__.py
#   file_relpath : src/deployreport/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""DeployReport command-line interface (Click)."""

from __future__ import annotations
