# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def configured_project(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml configures kube-version."""
    project_dir = tmp_path / "configured_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "manifests"
version = "1.0.0"

[tool.kube-version]
order = "preferred-last"
tie-break = "group"
"""
    )
    return project_dir


@pytest.fixture
def plain_project(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml has no kube-version table."""
    project_dir = tmp_path / "plain_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text('[project]\nname = "plain"\n')
    return project_dir
