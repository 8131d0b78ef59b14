# topmark:header:start
#
#   project      : DeployReport
#   file         : text.py
#   file_relpath : src/deployreport/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Human-readable text reports for command and validation results.

Command result sections are emitted in a fixed order, each only when its source
list is non-empty. Every section after the first emitted one is preceded by
one blank line:

    New objects, Changed objects (+ per-object diff tables unless ``short``),
    Deleted objects, Applied hooks, Orphan objects, Warnings, Errors.

Diff tables follow the original record order, not the bucket order, so that the
report reads in the same order as the run.

These helpers are pure: they build and return strings and never print.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from deployreport.rendering.table import render_diff_table, render_validation_table
from deployreport.result.classify import classify_objects

if TYPE_CHECKING:
    from collections.abc import Sequence

    from deployreport.result.model import (
        Change,
        CommandResult,
        DeploymentError,
        ObjectRef,
        ValidateResult,
    )


def pretty_object_refs(buf: StringIO, refs: Sequence[ObjectRef]) -> None:
    """Write one indented line per object reference."""
    for ref in refs:
        buf.write(f"  {ref}\n")


def pretty_errors(buf: StringIO, errors: Sequence[DeploymentError]) -> None:
    """Write one indented line per warning/error, prefixed by its object when set."""
    for e in errors:
        ref_s = str(e.ref)
        prefix = f"{ref_s}: " if ref_s else ""
        buf.write(f"  {prefix}{e.message}\n")


def write_section_header(buf: StringIO, header: str) -> None:
    """Write a section header, separated from earlier output by one blank line."""
    if buf.tell() != 0:
        buf.write("\n")
    buf.write(f"{header}:\n")


def pretty_changes(buf: StringIO, ref: ObjectRef, changes: Sequence[Change]) -> None:
    """Write the diff block of one changed object."""
    buf.write(f"Diff for object {ref}\n")
    buf.write(render_diff_table(changes))


def format_command_result_text(cr: CommandResult, short: bool = False) -> str:
    """Render a command result as a text report.

    Args:
        cr (CommandResult): The (redacted) command result.
        short (bool): If True, list changed objects without their diff tables.

    Returns:
        str: The report text; empty when the result has nothing to report.
    """
    buf = StringIO()
    buckets = classify_objects(cr.objects)

    if buckets.new:
        write_section_header(buf, "New objects")
        pretty_object_refs(buf, buckets.new)

    if buckets.changed:
        write_section_header(buf, "Changed objects")
        pretty_object_refs(buf, buckets.changed)

        if not short:
            # One blank line before each diff block, in original record order.
            for o in cr.objects:
                if not o.changed:
                    continue
                buf.write("\n")
                pretty_changes(buf, o.ref, o.changes)

    if buckets.deleted:
        write_section_header(buf, "Deleted objects")
        pretty_object_refs(buf, buckets.deleted)

    if buckets.applied_hooks:
        write_section_header(buf, "Applied hooks")
        pretty_object_refs(buf, buckets.applied_hooks)

    if buckets.orphan:
        write_section_header(buf, "Orphan objects")
        pretty_object_refs(buf, buckets.orphan)

    if cr.warnings:
        write_section_header(buf, "Warnings")
        pretty_errors(buf, cr.warnings)

    if cr.errors:
        write_section_header(buf, "Errors")
        pretty_errors(buf, cr.errors)

    return buf.getvalue()


def format_validate_result_text(vr: ValidateResult) -> str:
    """Render a validate result as a text report.

    Sections: ``Validation Warnings``, ``Validation Errors``, ``Results``. Every
    section after the first emitted one is preceded by a blank line.
    """
    buf = StringIO()

    if vr.warnings:
        write_section_header(buf, "Validation Warnings")
        pretty_errors(buf, vr.warnings)

    if vr.errors:
        write_section_header(buf, "Validation Errors")
        pretty_errors(buf, vr.errors)

    if vr.results:
        write_section_header(buf, "Results")
        buf.write(render_validation_table(vr.results))

    return buf.getvalue()
