# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from kube_version import TIE_BREAKS

ORDERS = ("preferred-first", "preferred-last")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the ``[tool.kube-version]`` table.

    Attributes:
        source: pyproject.toml the settings came from, None for defaults
        order: "preferred-first" or "preferred-last"
        tie_break: "none" or "group"
    """

    source: Optional[Path] = None
    order: str = "preferred-first"
    tie_break: str = "none"

    @property
    def most_preferred_first(self) -> bool:
        return self.order == "preferred-first"

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "CLIConfig":
        """Load configuration from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or holds invalid settings
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(pyproject_path)

        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        source: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a setting has an unknown value
        """
        tool_config = pyproject.get("tool", {}).get("kube-version", {})
        if not isinstance(tool_config, dict):
            raise ConfigError("[tool.kube-version] must be a table")

        order = tool_config.get("order", "preferred-first")
        if order not in ORDERS:
            raise ConfigError(
                f"Invalid order {order!r} in [tool.kube-version], expected one of: {', '.join(ORDERS)}"
            )

        tie_break = tool_config.get("tie-break", "none")
        if tie_break not in TIE_BREAKS:
            raise ConfigError(
                f"Invalid tie-break {tie_break!r} in [tool.kube-version], "
                f"expected one of: {', '.join(TIE_BREAKS)}"
            )

        return cls(source=source, order=order, tie_break=tie_break)


def find_pyproject(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest pyproject.toml, searching upward.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to pyproject.toml, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration for the project directory.

    Args:
        project_dir: Directory to start looking from (defaults to cwd)

    Returns:
        CLIConfig instance; defaults when no pyproject.toml is found

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    pyproject_path = find_pyproject(project_dir)

    if pyproject_path is None:
        return CLIConfig()

    return CLIConfig.from_pyproject(pyproject_path)
