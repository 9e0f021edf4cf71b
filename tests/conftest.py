"""
Pytest configuration and shared fixtures for dot_env tests.

This module provides fixtures and configuration that are shared across all tests.
"""
import pytest

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def memory_backend():
    """Fixture providing an empty in-memory environment backend."""
    from dot_env.backend import MemoryEnvironmentBackend

    return MemoryEnvironmentBackend()


@pytest.fixture
def env(memory_backend):
    """Fixture providing an Env bound to the in-memory backend with override off."""
    from dot_env import Env, OverrideConfig

    return Env(backend=memory_backend, override_config=OverrideConfig(default=False))


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Fixture switching the working directory to an empty temp directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_env(workdir):
    """Fixture returning a helper that writes a file into the working directory."""
    def _write(content: str, filename: str = ".env") -> Path:
        path = workdir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_override_default(monkeypatch):
    """Automatically clear the override default so DOT_ENV_OVERRIDE_SYSTEM is re-read."""
    from dot_env.config import reset_override_config

    monkeypatch.delenv("DOT_ENV_OVERRIDE_SYSTEM", raising=False)
    reset_override_config()
    yield
    reset_override_config()
