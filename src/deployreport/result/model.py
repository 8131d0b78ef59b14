# topmark:header:start
#
#   project      : DeployReport
#   file         : model.py
#   file_relpath : src/deployreport/result/model.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Result records produced by a deployment or validation run.

The records in this module are plain, mutable dataclasses. A `CommandResult` is
owned by exactly one pipeline invocation: the redaction gate and the orchestrator
mutate it in place, and nothing else may touch it while the pipeline runs.

Serialized form:
    Records serialize to plain mappings with camelCase keys (`to_dict()`), and
    parse back with `from_dict()`. `CommandResult.to_compacted()` additionally
    drops default values (empty strings, ``False`` flags, empty lists) so that
    structured reports stay small; `from_dict()` restores the defaults, so
    ``CommandResult.from_dict(cr.to_compacted()) == cr`` holds for every record.

Malformed input raises `ValueError` (or `TypeError` for wrong value types) from
`from_dict()`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, cast

# --- Parsing helpers ----------------------------------------------------------


def _get_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _get_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be a boolean, got {type(value).__name__}")
    return value


def _get_list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list, got {type(value).__name__}")
    return cast("list[Any]", value)


def _get_mapping(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return cast("Mapping[str, Any]", value)


def _as_mapping(value: object, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(value).__name__}")
    return cast("Mapping[str, Any]", value)


def compact(value: Any) -> Any:
    """Recursively drop default-valued mapping entries.

    Mapping entries whose value is ``None``, ``""``, ``False``, an empty list or
    an empty mapping (after compaction) are removed. List items are compacted
    but never removed, so list lengths and ordering are preserved.

    Args:
        value (Any): A value produced by one of the `to_dict()` methods.

    Returns:
        Any: The compacted value.
    """
    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        for k, v in cast("Mapping[str, Any]", value).items():
            cv = compact(v)
            if cv is None or cv is False or cv == "" or cv == [] or cv == {}:
                continue
            out[k] = cv
        return out
    if isinstance(value, list):
        return [compact(v) for v in cast("list[Any]", value)]
    return value


# --- Object identity ----------------------------------------------------------


@dataclass(frozen=True)
class ObjectRef:
    """Identity of a Kubernetes-style object.

    Attributes:
        group (str): API group (empty for the core group).
        version (str): API version.
        kind (str): Object kind (e.g. ``Deployment``).
        name (str): Object name.
        namespace (str): Namespace; empty for cluster-scoped objects.
    """

    group: str = ""
    version: str = ""
    kind: str = ""
    name: str = ""
    namespace: str = ""

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.namespace}/{self.kind}/{self.name}"
        if self.kind or self.name:
            return f"{self.kind}/{self.name}"
        return ""

    def is_empty(self) -> bool:
        """Return True when no identity field is set."""
        return not (self.group or self.version or self.kind or self.name or self.namespace)

    def to_dict(self) -> dict[str, Any]:
        return {
            "group": self.group,
            "version": self.version,
            "kind": self.kind,
            "name": self.name,
            "namespace": self.namespace,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ObjectRef:
        return cls(
            group=_get_str(data, "group"),
            version=_get_str(data, "version"),
            kind=_get_str(data, "kind"),
            name=_get_str(data, "name"),
            namespace=_get_str(data, "namespace"),
        )


@dataclass
class Change:
    """A single structural change of an object.

    Attributes:
        json_path (str): Path expression of the changed field (e.g. ``spec.replicas``).
        unified_diff (str): Unified diff text of the change.
    """

    json_path: str = ""
    unified_diff: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"jsonPath": self.json_path, "unifiedDiff": self.unified_diff}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Change:
        return cls(
            json_path=_get_str(data, "jsonPath"),
            unified_diff=_get_str(data, "unifiedDiff"),
        )


@dataclass
class ResultObject:
    """Per-object record of a run.

    The flags are independent: an object may be both changed and an applied
    hook, or new and orphaned. An object counts as "changed" exactly when its
    `changes` list is non-empty.
    """

    ref: ObjectRef = field(default_factory=ObjectRef)
    new: bool = False
    deleted: bool = False
    orphan: bool = False
    hook: bool = False
    changes: list[Change] = field(default_factory=lambda: [])

    @property
    def changed(self) -> bool:
        """Return True when the object carries at least one change."""
        return len(self.changes) != 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "ref": self.ref.to_dict(),
            "new": self.new,
            "deleted": self.deleted,
            "orphan": self.orphan,
            "hook": self.hook,
            "changes": [c.to_dict() for c in self.changes],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResultObject:
        return cls(
            ref=ObjectRef.from_dict(_get_mapping(data, "ref")),
            new=_get_bool(data, "new"),
            deleted=_get_bool(data, "deleted"),
            orphan=_get_bool(data, "orphan"),
            hook=_get_bool(data, "hook"),
            changes=[
                Change.from_dict(_as_mapping(c, "change")) for c in _get_list(data, "changes")
            ],
        )


@dataclass
class DeploymentError:
    """A warning or error, optionally attached to an object.

    Attributes:
        ref (ObjectRef): Object the message refers to; may be empty.
        message (str): Message text.
    """

    ref: ObjectRef = field(default_factory=ObjectRef)
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"ref": self.ref.to_dict(), "message": self.message}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeploymentError:
        return cls(
            ref=ObjectRef.from_dict(_get_mapping(data, "ref")),
            message=_get_str(data, "message"),
        )


def _errors_from(data: Mapping[str, Any], key: str) -> list[DeploymentError]:
    return [DeploymentError.from_dict(_as_mapping(e, key)) for e in _get_list(data, key)]


# --- Command results ----------------------------------------------------------


class CommandInitiator(str, Enum):
    """Who started the command that produced a result."""

    COMMAND_LINE = "CommandLine"
    WEBUI = "Webui"
    KLUCTL_DEPLOYMENT = "KluctlDeployment"


@dataclass
class ClusterInfo:
    """Identity of the target cluster.

    An empty `cluster_id` means the identity could not be determined (usually
    because of missing read permissions on the ``kube-system`` namespace).
    """

    cluster_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"clusterId": self.cluster_id}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClusterInfo:
        return cls(cluster_id=_get_str(data, "clusterId"))


@dataclass
class CommandInfo:
    """Description of the command invocation that produced a result."""

    initiator: CommandInitiator | None = None
    command: str = ""
    start_time: str = ""
    end_time: str = ""
    dry_run: bool = False
    no_wait: bool = False
    prune: bool = False
    force_apply: bool = False
    replace_on_error: bool = False
    abort_on_error: bool = False
    include_tags: list[str] = field(default_factory=lambda: [])
    exclude_tags: list[str] = field(default_factory=lambda: [])

    def to_dict(self) -> dict[str, Any]:
        return {
            "initiator": self.initiator.value if self.initiator else None,
            "command": self.command,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "dryRun": self.dry_run,
            "noWait": self.no_wait,
            "prune": self.prune,
            "forceApply": self.force_apply,
            "replaceOnError": self.replace_on_error,
            "abortOnError": self.abort_on_error,
            "includeTags": list(self.include_tags),
            "excludeTags": list(self.exclude_tags),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CommandInfo:
        initiator_s = _get_str(data, "initiator")
        try:
            initiator = CommandInitiator(initiator_s) if initiator_s else None
        except ValueError as e:
            raise ValueError(f"unknown command initiator: {initiator_s!r}") from e
        return cls(
            initiator=initiator,
            command=_get_str(data, "command"),
            start_time=_get_str(data, "startTime"),
            end_time=_get_str(data, "endTime"),
            dry_run=_get_bool(data, "dryRun"),
            no_wait=_get_bool(data, "noWait"),
            prune=_get_bool(data, "prune"),
            force_apply=_get_bool(data, "forceApply"),
            replace_on_error=_get_bool(data, "replaceOnError"),
            abort_on_error=_get_bool(data, "abortOnError"),
            include_tags=[str(t) for t in _get_list(data, "includeTags")],
            exclude_tags=[str(t) for t in _get_list(data, "excludeTags")],
        )


@dataclass
class CommandResult:
    """Structured output of one deployment run.

    Attributes:
        id (str): Result identity (assigned by the orchestrator).
        command (CommandInfo): Invocation details, including the initiator tag.
        cluster_info (ClusterInfo): Target cluster identity.
        objects (list[ResultObject]): Objects touched by the run, in run order.
        warnings (list[DeploymentError]): Ordered warnings.
        errors (list[DeploymentError]): Ordered errors.
    """

    id: str = ""
    command: CommandInfo = field(default_factory=CommandInfo)
    cluster_info: ClusterInfo = field(default_factory=ClusterInfo)
    objects: list[ResultObject] = field(default_factory=lambda: [])
    warnings: list[DeploymentError] = field(default_factory=lambda: [])
    errors: list[DeploymentError] = field(default_factory=lambda: [])

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "command": self.command.to_dict(),
            "clusterInfo": self.cluster_info.to_dict(),
            "objects": [o.to_dict() for o in self.objects],
            "warnings": [w.to_dict() for w in self.warnings],
            "errors": [e.to_dict() for e in self.errors],
        }

    def to_compacted(self) -> dict[str, Any]:
        """Return the compacted mapping used for structured reports and storage."""
        return cast("dict[str, Any]", compact(self.to_dict()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CommandResult:
        data = _as_mapping(data, "command result")
        return cls(
            id=_get_str(data, "id"),
            command=CommandInfo.from_dict(_get_mapping(data, "command")),
            cluster_info=ClusterInfo.from_dict(_get_mapping(data, "clusterInfo")),
            objects=[
                ResultObject.from_dict(_as_mapping(o, "object")) for o in _get_list(data, "objects")
            ],
            warnings=_errors_from(data, "warnings"),
            errors=_errors_from(data, "errors"),
        )


# --- Validate results ---------------------------------------------------------


@dataclass
class ValidateResultEntry:
    """One validation finding for an object."""

    ref: ObjectRef = field(default_factory=ObjectRef)
    annotation: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "ref": self.ref.to_dict(),
            "annotation": self.annotation,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidateResultEntry:
        return cls(
            ref=ObjectRef.from_dict(_get_mapping(data, "ref")),
            annotation=_get_str(data, "annotation"),
            message=_get_str(data, "message"),
        )


@dataclass
class ValidateResult:
    """Structured output of one validation run."""

    id: str = ""
    ready: bool = False
    warnings: list[DeploymentError] = field(default_factory=lambda: [])
    errors: list[DeploymentError] = field(default_factory=lambda: [])
    results: list[ValidateResultEntry] = field(default_factory=lambda: [])

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "ready": self.ready,
            "warnings": [w.to_dict() for w in self.warnings],
            "errors": [e.to_dict() for e in self.errors],
            "results": [r.to_dict() for r in self.results],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidateResult:
        data = _as_mapping(data, "validate result")
        return cls(
            id=_get_str(data, "id"),
            ready=_get_bool(data, "ready"),
            warnings=_errors_from(data, "warnings"),
            errors=_errors_from(data, "errors"),
            results=[
                ValidateResultEntry.from_dict(_as_mapping(r, "validation result"))
                for r in _get_list(data, "results")
            ],
        )
