# topmark:header:start
#
#   project      : DeployReport
#   file         : model.py
#   file_relpath : src/deployreport/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Output configuration model.

`OutputConfig` is a mutable draft: layers (defaults, config files, CLI flags) are
applied in order with `merge_with()`, later layers winning for every field they
set explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when the status stream is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass
class OutputConfig:
    """Effective output settings.

    Attributes:
        output (list[str]): Output descriptors (``<format>[=<destination>]``).
        short_output (bool): Suppress diff tables in text reports.
        no_obfuscate (bool): Disable secret obfuscation.
        write_result_store (bool): Persist command results to the result store.
        result_store_dir (Path | None): Directory of the result store.
        color (ColorMode): Color mode for status and log output.
        config_files (list[Path]): Files that contributed to this config.
    """

    output: list[str] = field(default_factory=lambda: [])
    short_output: bool = False
    no_obfuscate: bool = False
    write_result_store: bool = False
    result_store_dir: Path | None = None
    color: ColorMode = ColorMode.AUTO
    config_files: list[Path] = field(default_factory=lambda: [])

    # Fields explicitly set by the layer this draft was loaded from.
    explicit: set[str] = field(default_factory=lambda: set(), repr=False, compare=False)

    def set_value(self, name: str, value: Any) -> OutputConfig:
        """Set field ``name`` and mark it as explicitly provided."""
        setattr(self, name, value)
        self.explicit.add(name)
        return self

    def merge_with(self, other: OutputConfig) -> OutputConfig:
        """Overlay the explicitly set fields of ``other`` onto this draft.

        Args:
            other (OutputConfig): Higher-precedence layer.

        Returns:
            OutputConfig: ``self``, for chaining.
        """
        for name in other.explicit:
            setattr(self, name, getattr(other, name))
            self.explicit.add(name)
        self.config_files.extend(other.config_files)
        return self

    def to_toml_dict(self) -> dict[str, Any]:
        """Convert this config into a TOML-serializable dict.

        Unset optional values are omitted since TOML has no null.
        """
        toml_dict: dict[str, Any] = {
            "output": list(self.output),
            "short_output": self.short_output,
            "no_obfuscate": self.no_obfuscate,
            "write_result_store": self.write_result_store,
            "color": self.color.value,
        }
        if self.result_store_dir is not None:
            toml_dict["result_store_dir"] = str(self.result_store_dir)
        return toml_dict
