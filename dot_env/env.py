"""Env: load `.env` files into a local store and the process environment.

Each ``Env`` keeps its own store of parsed variables and injects them into an
``EnvironmentBackend`` (the real process environment by default). Lookups go
to the local store first, then to the backend.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from .backend import EnvironmentBackend, ProcessEnvironmentBackend
from .codec import decode
from .config import OverrideConfig, get_override_config
from .exceptions import MissingEnvironmentVariableError
from .locator import find_env_file
from .parser import ParsedLine, iter_env_file, log_invalid_line

logger = logging.getLogger(__name__)


class Env:
    """Environment variable manager.

    Example:
        >>> env = Env()
        >>> env.load()            # reads ./.env if present
        True
        >>> env.require("DATABASE_URL")
        'postgres://...'
        >>> env.get_native("WORKERS", np.int32)
        np.int32(4)
    """

    def __init__(
        self,
        backend: Optional[EnvironmentBackend] = None,
        override_config: Optional[OverrideConfig] = None,
    ):
        """Initialize with an empty store.

        Args:
            backend: Environment to inject into and fall back to
                (default: the real process environment).
            override_config: Source of the default override policy
                (default: the package-wide config).
        """
        self.backend = backend if backend is not None else ProcessEnvironmentBackend()
        self._override_config = override_config
        self._vars: Dict[str, str] = {}

    @property
    def override_config(self) -> OverrideConfig:
        if self._override_config is not None:
            return self._override_config
        return get_override_config()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(
        self,
        filename: str = ".env",
        override_system: Optional[bool] = None,
        directory: str | os.PathLike[str] | None = None,
    ) -> bool:
        """Load variables from *filename* in the working directory.

        Every valid line is stored locally. It is also injected into the
        backend unless the backend already holds a non-empty value and the
        override policy says not to replace it.

        Args:
            filename: Name of the file to look for (default: ".env").
            override_system: Replace variables already set in the backend.
                None uses the configured default.
            directory: Directory to search instead of the working directory.

        Returns:
            True if the file was found, False otherwise. A file that is found
            but cannot be read still returns True with nothing loaded.
        """
        path = find_env_file(filename, directory)
        if path is None:
            logger.debug(f"Env file not found: {filename}")
            return False

        override = self.override_config.resolve(override_system)
        self._load_path(path, override)
        return True

    def _load_path(self, path: Path, override: bool) -> None:
        loaded = 0
        try:
            for parsed in iter_env_file(path):
                if not parsed.valid:
                    log_invalid_line(path, parsed)
                    continue
                self._store(parsed)
                self._inject(parsed.key, parsed.value, override)
                loaded += 1
        except OSError as e:
            logger.error(f"Failed to open env file: {path} ({e})")
            return
        logger.info(f"Loaded {loaded} variables from {path}")

    def _store(self, parsed: ParsedLine) -> None:
        entry = parsed.to_entry()
        if entry.key in self._vars:
            logger.warning(f"Duplicate env key: {entry.key}, overwriting.")
        self._vars[entry.key] = entry.value

    def _inject(self, key: str, value: str, override: bool) -> None:
        if self.backend.exists(key) and not override:
            logger.debug(f"Keeping existing environment value for {key}")
            return
        self.backend.set(key, value)
        logger.debug(f"Injected {key} into environment")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, key: str) -> Optional[str]:
        """Return the value of *key*.

        The local store wins over the backend. An empty backend value counts
        as missing.
        """
        if key in self._vars:
            return self._vars[key]
        value = self.backend.lookup(key)
        if value:
            return value
        return None

    def require(self, key: str) -> str:
        """Return the value of *key* or raise.

        Raises:
            MissingEnvironmentVariableError: If *key* is missing or empty.
        """
        value = self.get(key)
        if value is None:
            raise MissingEnvironmentVariableError(key)
        return value

    def get_native(self, key: str, dtype: Any = int) -> Optional[np.generic]:
        """Parse *key* as *dtype* in native byte order."""
        return decode(self.get(key), dtype, "native")

    def get_little_endian(self, key: str, dtype: Any = int) -> Optional[np.generic]:
        """Parse *key* as *dtype* and lay it out little-endian.

        On a big-endian host the bytes of the parsed value are reversed.
        """
        return decode(self.get(key), dtype, "little")

    def get_big_endian(self, key: str, dtype: Any = int) -> Optional[np.generic]:
        """Parse *key* as *dtype* and lay it out big-endian.

        On a little-endian host the bytes of the parsed value are reversed.
        """
        return decode(self.get(key), dtype, "big")

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the locally loaded variables."""
        return dict(self._vars)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"Env(loaded={len(self._vars)}, backend={type(self.backend).__name__})"
