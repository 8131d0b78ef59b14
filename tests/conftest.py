# topmark:header:start
#
#   project      : DeployReport
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Pytest configuration for the DeployReport test suite.

This file sets up global fixtures, customizes the logging configuration for test
runs, and provides small builders and test doubles shared across test packages:

- `make_command_result`: a command result touching every report section.
- `RecordingProgress`: a progress indicator that records every call.
- `RecordingStore` / `FailingStore`: result stores for persistence tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from deployreport.config import logging
from deployreport.result.model import (
    Change,
    ClusterInfo,
    CommandInfo,
    CommandResult,
    DeploymentError,
    ObjectRef,
    ResultObject,
)

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_deployreport_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so detailed output is captured on failures."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an isolated working directory (no stray config files).

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


# --- Builders -----------------------------------------------------------------

DEPLOYMENT = ObjectRef(group="apps", version="v1", kind="Deployment", name="web", namespace="ns")
CONFIGMAP = ObjectRef(version="v1", kind="ConfigMap", name="cfg", namespace="ns")
SECRET = ObjectRef(version="v1", kind="Secret", name="creds", namespace="ns")
SERVICE = ObjectRef(version="v1", kind="Service", name="old", namespace="ns")
ORPHAN = ObjectRef(version="v1", kind="ConfigMap", name="leftover", namespace="ns")
HOOK_JOB = ObjectRef(group="batch", version="v1", kind="Job", name="migrate", namespace="ns")


def make_command_result(
    *,
    cluster_id: str = "cluster-1",
    with_errors: bool = False,
) -> CommandResult:
    """Return a command result with one object in each report section.

    Objects:
        - ``ns/Deployment/web``: new.
        - ``ns/ConfigMap/cfg``: changed (one diff).
        - ``ns/Secret/creds``: changed (secret data diff).
        - ``ns/Service/old``: deleted.
        - ``ns/ConfigMap/leftover``: orphan.
        - ``ns/Job/migrate``: applied hook.
    """
    return CommandResult(
        command=CommandInfo(command="deploy", dry_run=True),
        cluster_info=ClusterInfo(cluster_id=cluster_id),
        objects=[
            ResultObject(ref=DEPLOYMENT, new=True),
            ResultObject(
                ref=CONFIGMAP,
                changes=[Change(json_path="data.key", unified_diff="-old\n+new")],
            ),
            ResultObject(
                ref=SECRET,
                changes=[Change(json_path="data.password", unified_diff="-hunter1\n+hunter2")],
            ),
            ResultObject(ref=SERVICE, deleted=True),
            ResultObject(ref=ORPHAN, orphan=True),
            ResultObject(ref=HOOK_JOB, hook=True),
        ],
        warnings=[DeploymentError(ref=CONFIGMAP, message="field is deprecated")],
        errors=[DeploymentError(ref=DEPLOYMENT, message="apply failed")] if with_errors else [],
    )


# --- Test doubles -------------------------------------------------------------


class RecordingStatus:
    """Status handle recording how it was finished."""

    def __init__(self, events: list[tuple[str, str]], message: str) -> None:
        self.events = events
        self.message = message
        self.outcome: str | None = None

    def _finish(self, outcome: str, message: str | None = None) -> None:
        if self.outcome is None:
            self.outcome = outcome
            self.events.append((outcome, message or self.message))

    def success(self) -> None:
        self._finish("success")

    def warning(self) -> None:
        self._finish("warning")

    def failed(self, message: str | None = None) -> None:
        self._finish("failed", message)


class RecordingProgress:
    """Progress indicator recording every call as ``(event, message)``."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []
        self.statuses: list[RecordingStatus] = []

    def start(self, message: str) -> RecordingStatus:
        self.events.append(("start", message))
        status = RecordingStatus(self.events, message)
        self.statuses.append(status)
        return status

    def warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def flush(self) -> None:
        self.events.append(("flush", ""))

    @property
    def flush_count(self) -> int:
        return sum(1 for event, _ in self.events if event == "flush")


class RecordingStore:
    """Result store keeping a YAML-ready snapshot of every written result."""

    def __init__(self) -> None:
        self.written: list[dict[str, Any]] = []

    def write_command_result(self, cr: CommandResult) -> None:
        self.written.append(cr.to_compacted())


class FailingStore:
    """Result store that always fails."""

    def __init__(self, message: str = "store unavailable") -> None:
        self.message = message
        self.calls = 0

    def write_command_result(self, cr: CommandResult) -> None:
        self.calls += 1
        raise RuntimeError(self.message)
