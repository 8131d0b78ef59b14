# topmark:header:start
#
#   project      : DeployReport
#   file         : __init__.py
#   file_relpath : src/deployreport/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Click-free shared primitives: error taxonomy and format vocabulary."""

from __future__ import annotations
