"""Pytest configuration for ffexpr tests.

Sets up sys.path so that `import ffexpr` works when running pytest from the
project root without installing the package.
"""

import os
import sys

import pytest

# Add project root to sys.path so `ffexpr` is importable
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from ffexpr.schema.registry import FilterRegistry, reset_registry  # noqa: E402
from ffexpr.schema.yaml_loader import load_builtin_catalog  # noqa: E402


@pytest.fixture
def catalog_registry():
    """A fresh registry holding the packaged catalogue."""
    registry = FilterRegistry()
    load_builtin_catalog(registry)
    return registry


@pytest.fixture
def clean_global_registry(monkeypatch, tmp_path):
    """Reset the process-wide registry and point the config at an empty location."""
    monkeypatch.setenv("FFEXPR_CONFIG", str(tmp_path / "missing.yaml"))
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def media_file(tmp_path):
    """An existing file to reference from file-taking options."""
    path = tmp_path / "cover.png"
    path.write_bytes(b"fake image data")
    return path
