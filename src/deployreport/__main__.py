# topmark:header:start
#
#   project      : DeployReport
#   file         : __main__.py
#   file_relpath : src/deployreport/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Module entry point for running DeployReport via ``python -m deployreport``.

Examples:
    Render a command result::

        python -m deployreport render result.yaml -o text -o yaml=result.out.yaml
"""

from __future__ import annotations

from deployreport.cli.main import cli

if __name__ == "__main__":
    cli()
