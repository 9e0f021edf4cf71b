"""dot_env - load `.env` files into the process environment"""
__version__ = "0.1.0a0"

from typing import Any, Optional

from .backend import (
    EnvironmentBackend,
    ProcessEnvironmentBackend,
    MemoryEnvironmentBackend,
    create_environment_backend,
)
from .config import (
    OverrideConfig,
    default_override,
    set_default_override,
    reset_override_config,
)
from .exceptions import DotEnvError, MissingEnvironmentVariableError
from .env import Env
from .locator import find_env_file
from .parser import ParsedLine, parse_line, parse_env_file, parse_env_text

__all__ = [
    # Core
    "Env",
    "load_env",
    "get",
    "require",
    "get_native",
    "get_little_endian",
    "get_big_endian",
    "get_default_env",
    "reset_default_env",
    # Backends
    "EnvironmentBackend",
    "ProcessEnvironmentBackend",
    "MemoryEnvironmentBackend",
    "create_environment_backend",
    # Configuration
    "OverrideConfig",
    "default_override",
    "set_default_override",
    "reset_override_config",
    # Errors
    "DotEnvError",
    "MissingEnvironmentVariableError",
    # Parsing helpers
    "ParsedLine",
    "parse_line",
    "parse_env_file",
    "parse_env_text",
    "find_env_file",
]


# Shared instance behind the module-level convenience functions.
# For isolated stores (or tests), create Env() directly.
_default_env = Env()


def get_default_env() -> Env:
    """Return the shared Env instance."""
    return _default_env


def reset_default_env(backend: Optional[EnvironmentBackend] = None) -> Env:
    """Replace the shared Env with a fresh one (useful for testing)."""
    global _default_env
    _default_env = Env(backend=backend)
    return _default_env


def load_env(filename: str = ".env", override_system: Optional[bool] = None) -> bool:
    """Load *filename* from the working directory into the shared Env."""
    return _default_env.load(filename, override_system)


def get(key: str) -> Optional[str]:
    return _default_env.get(key)


def require(key: str) -> str:
    return _default_env.require(key)


def get_native(key: str, dtype: Any = int):
    return _default_env.get_native(key, dtype)


def get_little_endian(key: str, dtype: Any = int):
    return _default_env.get_little_endian(key, dtype)


def get_big_endian(key: str, dtype: Any = int):
    return _default_env.get_big_endian(key, dtype)
