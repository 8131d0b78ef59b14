# topmark:header:start
#
#   project      : DeployReport
#   file         : __init__.py
#   file_relpath : src/deployreport/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""DeployReport package.

DeployReport turns the structured result of a deployment or validation run into
human-readable and machine-readable reports. Results are redacted once, optionally
persisted to a result store, and fanned out to one or more output destinations.
"""

from __future__ import annotations
