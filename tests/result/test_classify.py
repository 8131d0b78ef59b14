# topmark:header:start
#
#   project      : DeployReport
#   file         : test_classify.py
#   file_relpath : tests/result/test_classify.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Tests for `classify_objects`: independent, overlapping, order-preserving buckets."""

from __future__ import annotations

from deployreport.result.classify import classify_objects
from deployreport.result.model import Change, ObjectRef, ResultObject
from tests.conftest import make_command_result


def _ref(name: str) -> ObjectRef:
    return ObjectRef(kind="ConfigMap", name=name, namespace="ns")


def test_every_bucket_gets_its_object() -> None:
    """Each section of the sample result lands in exactly the expected bucket."""
    cr = make_command_result()
    buckets = classify_objects(cr.objects)

    assert [str(r) for r in buckets.new] == ["ns/Deployment/web"]
    assert [str(r) for r in buckets.changed] == ["ns/ConfigMap/cfg", "ns/Secret/creds"]
    assert [str(r) for r in buckets.deleted] == ["ns/Service/old"]
    assert [str(r) for r in buckets.orphan] == ["ns/ConfigMap/leftover"]
    assert [str(r) for r in buckets.applied_hooks] == ["ns/Job/migrate"]


def test_changed_membership_follows_changes_list() -> None:
    """An object is changed iff its changes list is non-empty, regardless of other flags."""
    objects = [
        ResultObject(ref=_ref("a"), new=True),
        ResultObject(ref=_ref("b"), new=True, changes=[Change(json_path="x", unified_diff="d")]),
        ResultObject(ref=_ref("c"), changes=[]),
    ]
    buckets = classify_objects(objects)

    assert buckets.changed == [_ref("b")]
    assert buckets.new == [_ref("a"), _ref("b")]


def test_buckets_overlap_for_multi_flag_objects() -> None:
    """A changed hook appears in both the changed and the applied hooks buckets."""
    o = ResultObject(
        ref=_ref("hook"),
        hook=True,
        orphan=True,
        changes=[Change(json_path="spec", unified_diff="-a\n+b")],
    )
    buckets = classify_objects([o])

    assert buckets.changed == [o.ref]
    assert buckets.applied_hooks == [o.ref]
    assert buckets.orphan == [o.ref]
    assert buckets.new == []
    assert buckets.deleted == []


def test_bucket_order_is_input_order() -> None:
    """Buckets keep the relative order of the input objects."""
    objects = [ResultObject(ref=_ref(n), deleted=True) for n in ("z", "a", "m")]
    buckets = classify_objects(objects)

    assert [r.name for r in buckets.deleted] == ["z", "a", "m"]


def test_empty_input_yields_empty_buckets() -> None:
    buckets = classify_objects([])

    assert not (
        buckets.new or buckets.changed or buckets.deleted or buckets.orphan or buckets.applied_hooks
    )
