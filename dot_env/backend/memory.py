"""In-memory environment backend.

Useful for tests and for embedding dot_env where the real process environment
must not be touched.
"""

from typing import Dict, Iterator, Optional, Tuple

from ..utils.strings import equals_case_insensitive
from .interface import EnvironmentBackend


class MemoryEnvironmentBackend(EnvironmentBackend):
    """Dict-backed environment.

    With ``case_insensitive=True`` names are matched the way the Windows
    environment block matches them: an existing entry whose name differs only
    in ASCII case is read and overwritten in place, keeping its original
    spelling.
    """

    def __init__(
        self,
        initial: Optional[Dict[str, str]] = None,
        case_insensitive: bool = False,
    ):
        """Initialize backend.

        Args:
            initial: Starting variables (copied, not referenced)
            case_insensitive: Match names ignoring ASCII case
        """
        self._vars: Dict[str, str] = dict(initial) if initial else {}
        self.case_insensitive = case_insensitive

    def _resolve(self, name: str) -> Optional[str]:
        if name in self._vars:
            return name
        if self.case_insensitive:
            for existing in self._vars:
                if equals_case_insensitive(existing, name):
                    return existing
        return None

    def lookup(self, name: str) -> Optional[str]:
        resolved = self._resolve(name)
        if resolved is None:
            return None
        return self._vars[resolved]

    def set(self, name: str, value: str) -> None:
        resolved = self._resolve(name)
        self._vars[resolved if resolved is not None else name] = value

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over stored (name, value) pairs."""
        return iter(list(self._vars.items()))

    def __len__(self) -> int:
        return len(self._vars)
