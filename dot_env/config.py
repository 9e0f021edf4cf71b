"""
Default override policy configuration.

Decides whether values from a `.env` file replace variables that are already
set in the process environment when a load call does not say so explicitly.
The default is read from ``DOT_ENV_OVERRIDE_SYSTEM`` the first time it is
needed and can be pinned in code with ``set_default_override``.
"""
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

OVERRIDE_ENV_VAR = "DOT_ENV_OVERRIDE_SYSTEM"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class OverrideConfig:
    """Holds the package-wide default override policy.

    No global state inside - each instance is independent. The module keeps
    one shared instance for the convenience functions below.
    """

    def __init__(self, default: Optional[bool] = None):
        """Initialize config.

        Args:
            default: Pinned default. None means "read from the environment
                on first use".
        """
        self._default = default

    def _read_from_environment(self) -> bool:
        raw = os.getenv(OVERRIDE_ENV_VAR, "")
        enabled = raw.strip().lower() in _TRUE_VALUES
        logger.debug(f"{OVERRIDE_ENV_VAR}={raw!r} -> default override {enabled}")
        return enabled

    @property
    def default(self) -> bool:
        """Default override policy (off unless configured)."""
        if self._default is None:
            self._default = self._read_from_environment()
        return self._default

    @default.setter
    def default(self, value: bool) -> None:
        self._default = bool(value)

    def resolve(self, override_system: Optional[bool]) -> bool:
        """Resolve a per-call override value against the default."""
        if override_system is not None:
            return bool(override_system)
        return self.default


_global_override_config = OverrideConfig()


def get_override_config() -> OverrideConfig:
    """Return the shared OverrideConfig instance."""
    return _global_override_config


def default_override() -> bool:
    """Return the current default override policy."""
    return _global_override_config.default


def set_default_override(enabled: bool) -> None:
    """Pin the default override policy, ignoring ``DOT_ENV_OVERRIDE_SYSTEM``."""
    _global_override_config.default = enabled


def resolve_override(override_system: Optional[bool] = None) -> bool:
    """Resolve an explicit per-call value, falling back to the default."""
    return _global_override_config.resolve(override_system)


def reset_override_config() -> None:
    """Reset global override config (useful for testing).

    The next lookup re-reads ``DOT_ENV_OVERRIDE_SYSTEM``.
    """
    global _global_override_config
    _global_override_config = OverrideConfig()
