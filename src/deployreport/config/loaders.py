# topmark:header:start
#
#   project      : DeployReport
#   file         : loaders.py
#   file_relpath : src/deployreport/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""TOML configuration loading.

Resolution order (later wins):

1. built-in defaults;
2. ``[tool.deployreport]`` in ``pyproject.toml`` of the working directory;
3. ``deployreport.toml`` of the working directory;
4. an explicit ``--config FILE``;
5. CLI flags (applied by the CLI on top of the result of `load_merged`).

Unknown keys are logged and ignored. Values of the wrong type raise
`ConfigError`, as do unreadable or malformed explicit config files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Mapping

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from deployreport.config.logging import get_logger
from deployreport.config.model import ColorMode, OutputConfig
from deployreport.constants import (
    DEPLOYREPORT_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from deployreport.core.errors import ConfigError

if TYPE_CHECKING:
    from deployreport.config.logging import DeployReportLogger

logger: DeployReportLogger = get_logger(__name__)


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"expected bool for '{key}', got {type(value).__name__}: {value!r}")
    return value


def _as_str_list(key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"expected list of strings for '{key}', got {value!r}")
    return [str(v) for v in value]


def _as_path(key: str, value: Any) -> Path:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"expected non-empty string for '{key}', got {value!r}")
    return Path(value)


def _as_color(key: str, value: Any) -> ColorMode:
    try:
        return ColorMode(value)
    except ValueError as e:
        allowed = ", ".join(m.value for m in ColorMode)
        raise ConfigError(f"invalid value for '{key}': {value!r} (allowed: {allowed})") from e


_FIELD_PARSERS: dict[str, Callable[[str, Any], Any]] = {
    "output": _as_str_list,
    "short_output": _as_bool,
    "no_obfuscate": _as_bool,
    "write_result_store": _as_bool,
    "result_store_dir": _as_path,
    "color": _as_color,
}


def config_from_toml_dict(data: Mapping[str, Any], *, source: Path | None = None) -> OutputConfig:
    """Build a config layer from a parsed TOML table.

    Relative ``result_store_dir`` values are resolved against the directory of
    ``source`` when given.

    Raises:
        ConfigError: If a known key carries a value of the wrong type.
    """
    draft = OutputConfig()
    for key, value in data.items():
        parse = _FIELD_PARSERS.get(key)
        if parse is None:
            logger.warning("Ignoring unknown config key '%s' in %s", key, source or "<config>")
            continue
        parsed = parse(key, value)
        if key == "result_store_dir" and source is not None and not parsed.is_absolute():
            parsed = source.parent / parsed
        draft.set_value(key, parsed)
    if source is not None:
        draft.config_files.append(source)
    logger.trace("Config layer from %s: %s", source, draft)
    return draft


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML in {path}: {e}") from e


def config_from_toml_file(path: Path) -> OutputConfig:
    """Load a config layer from ``path``.

    For ``pyproject.toml`` only the ``[tool.deployreport]`` table is used; a
    missing table yields an empty layer.
    """
    logger.debug("Loading config from %s", path)
    data: dict[str, Any] = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        tool = data.get("tool", {})
        section = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
        if not isinstance(section, dict):
            raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] in {path} is not a table")
        if not section:
            logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
            return OutputConfig()
        data = section
    return config_from_toml_dict(data, source=path)


def load_merged(*, cwd: Path | None = None, config_file: Path | None = None) -> OutputConfig:
    """Resolve the effective config from defaults and config files.

    Args:
        cwd (Path | None): Directory searched for ``pyproject.toml`` and
            ``deployreport.toml``. Defaults to the current working directory.
        config_file (Path | None): Explicit config file with the highest
            file precedence.

    Returns:
        OutputConfig: The merged draft, without CLI overrides.
    """
    base: Path = cwd if cwd is not None else Path.cwd()
    merged = OutputConfig()
    for name in (PYPROJECT_TOML_NAME, DEPLOYREPORT_TOML_NAME):
        candidate: Path = base / name
        if candidate.is_file():
            merged.merge_with(config_from_toml_file(candidate))
    if config_file is not None:
        merged.merge_with(config_from_toml_file(config_file))
    logger.debug("Effective config: %s", merged)
    return merged


def to_toml(config: OutputConfig) -> str:
    """Render ``config`` as a TOML document."""
    doc = tomlkit.document()
    for key, value in config.to_toml_dict().items():
        doc.add(key, value)
    return tomlkit.dumps(doc)
