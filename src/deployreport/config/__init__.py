# topmark:header:start
#
#   project      : DeployReport
#   file         : __init__.py
#   file_relpath : src/deployreport/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Configuration loading and logging setup."""

from __future__ import annotations
