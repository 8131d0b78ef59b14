# topmark:header:start
#
#   project      : DeployReport
#   file         : secrets.py
#   file_relpath : src/deployreport/redaction/secrets.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Default obfuscation policy: hide Secret values in diffs."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from deployreport.config.logging import get_logger
from deployreport.constants import OBFUSCATED_VALUE

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger
    from deployreport.result.model import CommandResult, ObjectRef

logger: DeployReportLogger = get_logger(__name__)

# Matches `data`, `data.key`, `data["key"]`, `stringData...`
SECRET_DATA_PATH_RE: Final[re.Pattern[str]] = re.compile(r"^(data|stringData)($|\.|\[)")


def is_secret(ref: ObjectRef) -> bool:
    """Return True for core-group Secret objects."""
    return ref.kind == "Secret" and ref.group == ""


class SecretsObfuscator:
    """Replace the diffs of Secret ``data``/``stringData`` changes with a placeholder."""

    def obfuscate_result(self, cr: CommandResult) -> None:
        """Obfuscate secret values of ``cr`` in place.

        Raises:
            ValueError: If a Secret change carries a non-string diff.
        """
        n = 0
        for o in cr.objects:
            if not is_secret(o.ref):
                continue
            for c in o.changes:
                if not SECRET_DATA_PATH_RE.match(c.json_path):
                    continue
                if not isinstance(c.unified_diff, str):
                    raise ValueError(f"cannot obfuscate change {c.json_path} of {o.ref}")
                c.unified_diff = OBFUSCATED_VALUE
                n += 1
        logger.trace("Obfuscated %d secret change(s)", n)
