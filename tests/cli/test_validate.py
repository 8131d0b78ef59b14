# topmark:header:start
#
#   project      : DeployReport
#   file         : test_validate.py
#   file_relpath : tests/cli/test_validate.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""CLI tests: `validate` command outputs and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from deployreport.rendering.structured import format_yaml
from deployreport.result.model import (
    DeploymentError,
    ObjectRef,
    ValidateResult,
    ValidateResultEntry,
)
from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, assert_USAGE_ERROR, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

POD = ObjectRef(version="v1", kind="Pod", name="web-0", namespace="ns")


def _write_validate_result(tmp_path: Path, **kwargs: Any) -> None:
    vr = ValidateResult(
        results=[ValidateResultEntry(ref=POD, annotation="readiness", message="pod is ready")],
        **kwargs,
    )
    (tmp_path / "validate.yaml").write_text(format_yaml(vr.to_dict()), encoding="utf-8")


@mark_cli
def test_validate_ready_result_succeeds(tmp_path: Path) -> None:
    _write_validate_result(tmp_path, ready=True)

    result = run_cli_in(tmp_path, ["--no-color", "validate", "validate.yaml"])

    assert_SUCCESS(result)
    assert result.stdout.startswith("Results:\n")
    assert "pod is ready" in result.stdout


@mark_cli
def test_validate_not_ready_exits_with_failure(tmp_path: Path) -> None:
    _write_validate_result(tmp_path, ready=False)

    result = run_cli_in(tmp_path, ["validate", "validate.yaml"])

    assert_FAILURE(result)


@mark_cli
def test_validate_errors_exit_with_failure(tmp_path: Path) -> None:
    _write_validate_result(
        tmp_path, ready=True, errors=[DeploymentError(ref=POD, message="crash loop")]
    )

    result = run_cli_in(tmp_path, ["validate", "validate.yaml"])

    assert_FAILURE(result)
    assert "Validation Errors:" in result.stdout
    assert "ns/Pod/web-0: crash loop" in result.stdout


@mark_cli
def test_validate_yaml_output_carries_result_id(tmp_path: Path) -> None:
    _write_validate_result(tmp_path, ready=True)

    result = run_cli_in(
        tmp_path, ["validate", "validate.yaml", "-o", "yaml=out.yaml", "--result-id", "v-1"]
    )

    assert_SUCCESS(result)
    assert result.stdout == ""
    doc = yaml.safe_load((tmp_path / "out.yaml").read_text(encoding="utf-8"))
    assert doc["id"] == "v-1"
    assert doc["ready"] is True


@mark_cli
def test_validate_invalid_format_is_a_usage_error(tmp_path: Path) -> None:
    _write_validate_result(tmp_path, ready=True)

    result = run_cli_in(tmp_path, ["validate", "validate.yaml", "-o", "xml"])

    assert_USAGE_ERROR(result)
    assert "invalid validation result format: xml" in result.stderr
