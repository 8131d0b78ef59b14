# topmark:header:start
#
#   project      : DeployReport
#   file         : __init__.py
#   file_relpath : src/deployreport/result/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Result records and their classification."""

from __future__ import annotations

from deployreport.result.classify import ObjectBuckets, classify_objects
from deployreport.result.model import (
    Change,
    ClusterInfo,
    CommandInfo,
    CommandInitiator,
    CommandResult,
    DeploymentError,
    ObjectRef,
    ResultObject,
    ValidateResult,
    ValidateResultEntry,
)

__all__ = [
    "Change",
    "ClusterInfo",
    "CommandInfo",
    "CommandInitiator",
    "CommandResult",
    "DeploymentError",
    "ObjectBuckets",
    "ObjectRef",
    "ResultObject",
    "ValidateResult",
    "ValidateResultEntry",
    "classify_objects",
]
