"""Environment backend abstraction layer."""

from .interface import EnvironmentBackend
from .process import ProcessEnvironmentBackend
from .memory import MemoryEnvironmentBackend
from .factory import create_environment_backend

__all__ = [
    "EnvironmentBackend",
    "ProcessEnvironmentBackend",
    "MemoryEnvironmentBackend",
    "create_environment_backend",
]
