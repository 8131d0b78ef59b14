# topmark:header:start
#
#   project      : DeployReport
#   file         : test_text.py
#   file_relpath : tests/rendering/test_text.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Tests for the text report formatters."""

from __future__ import annotations

from deployreport.rendering.text import format_command_result_text, format_validate_result_text
from deployreport.result.model import (
    Change,
    CommandResult,
    DeploymentError,
    ObjectRef,
    ResultObject,
    ValidateResult,
    ValidateResultEntry,
)
from tests.conftest import make_command_result

SECTION_HEADERS = [
    "New objects:",
    "Changed objects:",
    "Deleted objects:",
    "Applied hooks:",
    "Orphan objects:",
    "Warnings:",
    "Errors:",
]


def test_sections_appear_in_fixed_order() -> None:
    text = format_command_result_text(make_command_result(with_errors=True))

    positions = [text.index(f"{h}\n") for h in SECTION_HEADERS]

    assert positions == sorted(positions)


def test_empty_sections_are_omitted() -> None:
    cr = CommandResult(objects=[ResultObject(ref=ObjectRef(kind="Pod", name="p"), deleted=True)])

    assert format_command_result_text(cr) == "Deleted objects:\n  Pod/p\n"


def test_empty_result_renders_empty_report() -> None:
    assert format_command_result_text(CommandResult()) == ""


def test_short_output_suppresses_diff_tables_only() -> None:
    cr = make_command_result()

    full = format_command_result_text(cr, short=False)
    short = format_command_result_text(cr, short=True)

    assert "Diff for object ns/ConfigMap/cfg" in full
    assert "Diff for object" not in short
    assert "+------" not in short
    assert "\n\nChanged objects:\n  ns/ConfigMap/cfg\n  ns/Secret/creds\n" in short


def test_changed_section_lists_exactly_objects_with_changes() -> None:
    cr = CommandResult(
        objects=[
            ResultObject(ref=ObjectRef(kind="A", name="a"), new=True),
            ResultObject(
                ref=ObjectRef(kind="B", name="b"),
                changes=[Change(json_path="x", unified_diff="-1\n+2")],
            ),
        ]
    )

    text = format_command_result_text(cr, short=True)

    assert text == "New objects:\n  A/a\n\nChanged objects:\n  B/b\n"


def test_diff_block_layout() -> None:
    cr = CommandResult(
        objects=[
            ResultObject(
                ref=ObjectRef(kind="B", name="b"),
                changes=[Change(json_path="x", unified_diff="-1\n+2")],
            ),
        ]
    )

    assert format_command_result_text(cr) == (
        "Changed objects:\n"
        "  B/b\n"
        "\n"
        "Diff for object B/b\n"
        "+------+------+\n"
        "| Path | Diff |\n"
        "+------+------+\n"
        "| x    | -1   |\n"
        "|      | +2   |\n"
        "+------+------+\n"
    )


def test_diff_blocks_follow_record_order() -> None:
    cr = make_command_result()
    text = format_command_result_text(cr)

    assert text.index("Diff for object ns/ConfigMap/cfg") < text.index(
        "Diff for object ns/Secret/creds"
    )


def test_messages_without_object_have_no_prefix() -> None:
    cr = CommandResult(
        warnings=[DeploymentError(message="cluster-wide warning")],
        errors=[
            DeploymentError(ref=ObjectRef(kind="Pod", name="p", namespace="ns"), message="boom")
        ],
    )

    assert format_command_result_text(cr) == (
        "Warnings:\n  cluster-wide warning\n\nErrors:\n  ns/Pod/p: boom\n"
    )


def test_validate_result_text() -> None:
    vr = ValidateResult(
        warnings=[DeploymentError(message="slow rollout")],
        errors=[DeploymentError(message="not ready")],
        results=[ValidateResultEntry(ref=ObjectRef(kind="Pod", name="p"), message="CrashLoop")],
    )

    text = format_validate_result_text(vr)

    assert text.startswith("Validation Warnings:\n  slow rollout\n")
    assert "\n\nValidation Errors:\n  not ready\n" in text
    assert "\n\nResults:\n" in text
    assert "| Object | Message   |" in text
    assert "| Pod/p  | CrashLoop |" in text


def test_validate_result_text_without_warnings() -> None:
    vr = ValidateResult(errors=[DeploymentError(message="not ready")])

    assert format_validate_result_text(vr) == "Validation Errors:\n  not ready\n"


def test_first_section_has_no_leading_blank_line() -> None:
    text = format_command_result_text(make_command_result())

    assert text.startswith("New objects:\n  ns/Deployment/web\n")
    assert "\n\nChanged objects:\n" in text
    assert not text.startswith("\n")
