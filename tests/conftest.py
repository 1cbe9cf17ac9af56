"""Shared test fixtures for the wildcard test suite."""

from __future__ import annotations

from typing import Any

import pytest


# === Collections ===


@pytest.fixture
def route_names() -> set[str]:
    """A set of dotted route names."""
    return {"api.users", "api.orders", "admin.users", "admin.audit", "health"}


@pytest.fixture
def route_table() -> dict[str, Any]:
    """A mapping of route names to handler ids, one entry mapped to None."""
    return {
        "api.users": 1,
        "api.orders": 2,
        "admin.users": 3,
        "admin.audit": None,
        "health": 5,
    }


# === YAML files ===


@pytest.fixture
def filter_yaml(tmp_path: Any) -> str:
    """Write a sample filter YAML file and return its path."""
    content = """
rules:
  - patterns: ["*.tmp", "~*"]
    effect: exclude
    description: scratch files
  - patterns: ["*.py", "*.md"]
    effect: include
default_effect: exclude
"""
    yaml_file = tmp_path / "filter.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)


@pytest.fixture
def config_yaml(tmp_path: Any) -> str:
    """Write a sample configuration file with a nested filter section."""
    content = """
app:
  name: sync
filter:
  case_sensitive: true
  default_effect: include
  rules:
    - patterns: ["*.LOG"]
      effect: exclude
"""
    yaml_file = tmp_path / "wildcard.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)
