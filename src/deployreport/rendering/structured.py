# topmark:header:start
#
#   project      : DeployReport
#   file         : structured.py
#   file_relpath : src/deployreport/rendering/structured.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""YAML serialization of result records.

This module is intentionally console- and Click-free: it takes records (or any
payload object) and produces serialized strings.

Responsibilities:
- Normalize payloads into plain YAML-safe structures (`normalize_payload`).
- Reject values that have no faithful YAML representation (non-finite floats,
  cyclic structures, unsupported types) with `SerializationError`.
- Serialize single documents (`format_yaml`) and document streams
  (`format_yaml_all`).

Command results are serialized in their compacted form
(`CommandResult.to_compacted()`); loading the document back with
``yaml.safe_load`` and `CommandResult.from_dict` reconstructs an equal record.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import yaml

from deployreport.config.logging import get_logger
from deployreport.core.errors import SerializationError

if TYPE_CHECKING:
    from deployreport.result.model import CommandResult, ValidateResult

logger = get_logger(__name__)

_SCALARS = (str, int, bool, type(None))


def normalize_payload(obj: object, *, _path: str = "$", _active: set[int] | None = None) -> object:
    """Normalize a payload into YAML-safe structures.

    Conversions:
      - Path -> str
      - Enum -> Enum.value
      - object with callable .to_dict() -> normalize(.to_dict())
      - Mapping -> dict[str, normalized value]
      - list/tuple/set/frozenset -> list[normalized item]

    Args:
        obj (object): The payload to normalize.

    Returns:
        object: The YAML-safe representation of ``obj``.

    Raises:
        SerializationError: If a float is not finite, a container contains itself,
            or a value has an unsupported type.
    """
    active: set[int] = _active if _active is not None else set()

    if isinstance(obj, Enum):
        return normalize_payload(obj.value, _path=_path, _active=active)

    if isinstance(obj, _SCALARS):
        return obj

    if isinstance(obj, float):
        if not math.isfinite(obj):
            raise SerializationError(f"non-finite number at {_path}: {obj!r}")
        return obj

    if isinstance(obj, Path):
        return str(obj)

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict(), _path=_path, _active=active)

    if isinstance(obj, (Mapping, list, tuple, set, frozenset)):
        key = id(obj)
        if key in active:
            raise SerializationError(f"cyclic structure at {_path}")
        active.add(key)
        try:
            if isinstance(obj, Mapping):
                mapping = cast("Mapping[object, object]", obj)
                return {
                    str(k): normalize_payload(v, _path=f"{_path}.{k}", _active=active)
                    for k, v in mapping.items()
                }
            seq = cast("Iterable[object]", obj)
            return [
                normalize_payload(v, _path=f"{_path}[{i}]", _active=active)
                for i, v in enumerate(seq)
            ]
        finally:
            active.discard(key)

    raise SerializationError(f"unsupported value at {_path}: {type(obj).__name__}")


def format_yaml(obj: object) -> str:
    """Serialize ``obj`` as a single YAML document.

    Raises:
        SerializationError: If ``obj`` cannot be represented in YAML.
    """
    data = normalize_payload(obj)
    try:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    except yaml.YAMLError as e:
        raise SerializationError(f"failed to serialize YAML: {e}") from e


def format_yaml_all(objs: object) -> str:
    """Serialize a list of objects as a multi-document YAML stream.

    Raises:
        SerializationError: If ``objs`` is not a list or an item cannot be represented.
    """
    if not isinstance(objs, (list, tuple)):
        raise SerializationError("object is not a list")
    docs = [normalize_payload(o) for o in cast("Iterable[object]", objs)]
    try:
        return yaml.safe_dump_all(
            docs, sort_keys=False, allow_unicode=True, default_flow_style=False
        )
    except yaml.YAMLError as e:
        raise SerializationError(f"failed to serialize YAML: {e}") from e


def format_command_result_yaml(cr: CommandResult) -> str:
    """Serialize the compacted view of a command result."""
    logger.trace("Serializing command result %s as YAML", cr.id)
    return format_yaml(cr.to_compacted())


def format_validate_result_yaml(vr: ValidateResult) -> str:
    """Serialize a validate result."""
    logger.trace("Serializing validate result %s as YAML", vr.id)
    return format_yaml(vr.to_dict())
