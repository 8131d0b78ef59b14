# topmark:header:start
#
#   project      : DeployReport
#   file         : test_structured.py
#   file_relpath : tests/rendering/test_structured.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Tests for YAML serialization of results and arbitrary payloads."""

from __future__ import annotations

import math
from pathlib import Path

import pytest
import yaml

from deployreport.core.errors import SerializationError
from deployreport.core.formats import ResultFormat
from deployreport.redaction.gate import redact_command_result
from deployreport.redaction.secrets import SecretsObfuscator
from deployreport.rendering.structured import (
    format_command_result_yaml,
    format_validate_result_yaml,
    format_yaml,
    format_yaml_all,
    normalize_payload,
)
from deployreport.result.model import CommandResult, ValidateResult
from tests.conftest import make_command_result, parametrize


def test_command_result_round_trip_after_redaction() -> None:
    """Parsing the YAML report of a redacted result yields the redacted record."""
    cr = make_command_result(with_errors=True)
    cr.id = "run-1"
    redacted = redact_command_result(cr, SecretsObfuscator())

    doc = yaml.safe_load(format_command_result_yaml(redacted.result))

    assert CommandResult.from_dict(doc) == redacted.result


def test_command_result_yaml_is_compacted_and_ordered() -> None:
    cr = make_command_result()
    cr.id = "run-1"

    text = format_command_result_yaml(cr)
    doc = yaml.safe_load(text)

    assert list(doc) == ["id", "command", "clusterInfo", "objects", "warnings"]
    assert doc["command"] == {"command": "deploy", "dryRun": True}
    assert doc["objects"][4] == {
        "ref": {"version": "v1", "kind": "ConfigMap", "name": "leftover", "namespace": "ns"},
        "orphan": True,
    }


def test_validate_result_yaml_keeps_all_fields() -> None:
    doc = yaml.safe_load(format_validate_result_yaml(ValidateResult(id="v1")))

    assert doc == {"id": "v1", "ready": False, "warnings": [], "errors": [], "results": []}


def test_unicode_is_written_verbatim() -> None:
    assert "漢字" in format_yaml({"message": "漢字"})


@parametrize(
    "payload, expected",
    [
        ({"p": Path("a/b")}, {"p": "a/b"}),
        ({"f": ResultFormat.YAML}, {"f": "yaml"}),
        ((1, 2), [1, 2]),
        ({1: "x"}, {"1": "x"}),
        (1.5, 1.5),
    ],
)
def test_normalize_payload_conversions(payload: object, expected: object) -> None:
    assert normalize_payload(payload) == expected


@parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_numbers_are_rejected(value: float) -> None:
    with pytest.raises(SerializationError, match="non-finite"):
        format_yaml({"replicas": value})


def test_cyclic_structures_are_rejected() -> None:
    data: dict[str, object] = {"a": 1}
    data["self"] = data

    with pytest.raises(SerializationError, match="cyclic"):
        format_yaml(data)


def test_shared_non_cyclic_values_are_allowed() -> None:
    shared = {"k": "v"}

    assert yaml.safe_load(format_yaml({"a": shared, "b": shared})) == {"a": shared, "b": shared}


def test_unsupported_types_are_rejected() -> None:
    with pytest.raises(SerializationError, match="unsupported value"):
        format_yaml({"obj": object()})


def test_multi_document_stream() -> None:
    text = format_yaml_all([{"a": 1}, {"b": 2}])

    assert list(yaml.safe_load_all(text)) == [{"a": 1}, {"b": 2}]


def test_multi_document_requires_a_list() -> None:
    with pytest.raises(SerializationError, match="object is not a list"):
        format_yaml_all({"a": 1})
