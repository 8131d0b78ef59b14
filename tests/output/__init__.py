# topmark:header:start
#
#   project      : DeployReport
#   file         : __init__.py
#   file_relpath : tests/output/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end
