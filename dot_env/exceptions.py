"""Exceptions raised by dot_env.

Missing files, keys and unparseable numbers are reported as ``None`` / ``False``
rather than exceptions. Only an explicit ``require`` fails fast.
"""


class DotEnvError(Exception):
    """Base class for dot_env errors."""


class MissingEnvironmentVariableError(DotEnvError, KeyError):
    """Raised by ``require`` when a variable is absent (or empty) everywhere."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key
        return f"Required environment variable missing: {self.key}"
