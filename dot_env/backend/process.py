"""Backend bound to the real process environment (``os.environ``)."""

import os
from typing import Optional

from .interface import EnvironmentBackend


class ProcessEnvironmentBackend(EnvironmentBackend):
    """Reads and writes ``os.environ``.

    Writes go through ``os.environ`` so they reach ``putenv`` and are
    inherited by child processes. Key case handling follows the platform
    (case-insensitive on Windows).
    """

    def lookup(self, name: str) -> Optional[str]:
        if not name:
            return None
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value
