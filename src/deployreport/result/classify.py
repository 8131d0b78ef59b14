# topmark:header:start
#
#   project      : DeployReport
#   file         : classify.py
#   file_relpath : src/deployreport/result/classify.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Partition result objects into display buckets.

Each bucket is decided by its own predicate, so the buckets overlap: an object
that is both changed and an applied hook appears in both lists. Within a bucket
objects keep the relative order of the input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from deployreport.result.model import ObjectRef, ResultObject


@dataclass
class ObjectBuckets:
    """Object references grouped by category, in input order."""

    new: list[ObjectRef] = field(default_factory=lambda: [])
    changed: list[ObjectRef] = field(default_factory=lambda: [])
    deleted: list[ObjectRef] = field(default_factory=lambda: [])
    orphan: list[ObjectRef] = field(default_factory=lambda: [])
    applied_hooks: list[ObjectRef] = field(default_factory=lambda: [])


# Bucket attribute name -> membership predicate.
BUCKET_PREDICATES: Final[dict[str, Callable[[ResultObject], bool]]] = {
    "new": lambda o: o.new,
    "changed": lambda o: o.changed,
    "deleted": lambda o: o.deleted,
    "orphan": lambda o: o.orphan,
    "applied_hooks": lambda o: o.hook,
}


def classify_objects(objects: Iterable[ResultObject]) -> ObjectBuckets:
    """Classify result objects into overlapping category buckets.

    Args:
        objects (Iterable[ResultObject]): Objects of a command result, in run order.

    Returns:
        ObjectBuckets: One ordered list of references per category.
    """
    buckets = ObjectBuckets()
    for o in objects:
        for name, predicate in BUCKET_PREDICATES.items():
            if predicate(o):
                getattr(buckets, name).append(o.ref)
    return buckets
