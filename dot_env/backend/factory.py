"""Environment backend factory functions."""

from .interface import EnvironmentBackend
from .memory import MemoryEnvironmentBackend
from .process import ProcessEnvironmentBackend


def create_environment_backend(backend_type: str = "process", **kwargs) -> EnvironmentBackend:
    """Factory function to create an environment backend.

    Args:
        backend_type: Backend type ("process", "memory")
        **kwargs: Additional backend-specific parameters

    Returns:
        EnvironmentBackend instance

    Examples:
        >>> # Real process environment (default)
        >>> backend = create_environment_backend()

        >>> # Isolated in-memory environment with Windows-style name matching
        >>> backend = create_environment_backend("memory", initial={"PATH": "/bin"}, case_insensitive=True)
    """
    backend_type_lower = backend_type.lower()

    if backend_type_lower == "process":
        if kwargs:
            raise TypeError(f"Process backend takes no options, got: {sorted(kwargs)}")
        return ProcessEnvironmentBackend()

    elif backend_type_lower == "memory":
        return MemoryEnvironmentBackend(**kwargs)

    else:
        raise ValueError(f"Unknown environment backend type: {backend_type}. Supported types: process, memory")
