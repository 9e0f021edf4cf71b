"""Environment backend interface definitions."""

from abc import ABC, abstractmethod
from typing import Optional


class EnvironmentBackend(ABC):
    """Abstract access to a process-style environment.

    Implementations only need to read and write single variables; nothing in
    dot_env ever deletes a variable through a backend.
    """

    @abstractmethod
    def lookup(self, name: str) -> Optional[str]:
        """Look up a variable.

        Args:
            name: Variable name

        Returns:
            The raw value (possibly an empty string) or None if unset
        """
        pass

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Create or overwrite a variable.

        Args:
            name: Variable name
            value: Value to store
        """
        pass

    def exists(self, name: str) -> bool:
        """Return True if *name* is set to a non-empty value.

        An empty string is treated the same as an unset variable, both when
        deciding whether to inject at load time and when reading back.
        """
        return bool(self.lookup(name))
