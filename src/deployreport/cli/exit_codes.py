# topmark:header:start
#
#   project      : DeployReport
#   file         : exit_codes.py
#   file_relpath : src/deployreport/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Exit codes for the DeployReport CLI.

DeployReport aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently. `FAILURE` (1) is reserved for a successfully
reported result that itself carries deployment errors (or, for validation, is
not ready).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DeployReport CLI.

    Attributes:
        SUCCESS: The report was written and the result has no errors.
        FAILURE: The report was written, but the result carries errors.
        USAGE_ERROR: Invalid flags/arguments or output format. Mirrors BSD
            ``EX_USAGE (64)``.
        DATA_ERROR: The result document is malformed. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The result document does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: Redaction or serialization failure. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: A report destination could not be written. Mirrors BSD
            ``EX_IOERR (74)``.
        TEMP_FAIL: The result store write failed (the report itself was
            written). Mirrors BSD ``EX_TEMPFAIL (75)``.
        CONFIG_ERROR: Malformed or unreadable configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    TEMP_FAIL = 75  # EX_TEMPFAIL
    CONFIG_ERROR = 78  # EX_CONFIG
