# topmark:header:start
#
#   project      : DeployReport
#   file         : formats.py
#   file_relpath : src/deployreport/core/formats.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Shared output format definitions used across DeployReport frontends.

This module centralizes the `ResultFormat` enum so the dispatcher, the output
router and the CLI agree on the same format vocabulary without introducing
`Click` or console dependencies.
"""

from __future__ import annotations

from enum import Enum


class ResultFormat(str, Enum):
    """Output format for rendered results.

    Attributes:
        TEXT: Human-friendly text report.
        YAML: A single YAML document (machine-readable).
    """

    TEXT = "text"
    YAML = "yaml"

    @classmethod
    def parse(cls, name: str) -> ResultFormat | None:
        """Return the format named ``name`` or None if unknown.

        Matching is exact: format names are case-sensitive in output descriptors.
        """
        for member in cls:
            if member.value == name:
                return member
        return None


def is_machine_format(fmt: ResultFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt is ResultFormat.YAML
