"""Library configuration: Platform selection, PathConfig, and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from refpath._logging import configure_logging, get_logger
from refpath.platform import PathPolicy, Platform, policy_for

__all__ = [
    'PathConfig',
    'Platform',
    'default_policy',
    'get_config',
    'init',
]

logger = get_logger(__name__)


@dataclass(frozen=True)
class PathConfig:
    """Configuration for refpath.

    Attributes:
        platform: Whose path rules the factories apply when no policy is passed.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    platform: Platform = Platform.POSIX
    log_level: str | None = None

    @property
    def policy(self) -> PathPolicy:
        return policy_for(self.platform)


# Global configuration (set by init())
_config: PathConfig | None = None


def _detect_platform() -> Platform:
    """Detect the platform from the environment.

    Priority:
    1. REFPATH_PLATFORM environment variable ("posix" or "windows")
    2. The host operating system
    """
    env_platform = os.environ.get('REFPATH_PLATFORM', '').lower()
    if env_platform == 'posix':
        return Platform.POSIX
    if env_platform == 'windows':
        return Platform.WINDOWS
    if env_platform:
        logger.warning('unknown_platform_override', value=env_platform, variable='REFPATH_PLATFORM')

    return Platform.WINDOWS if os.name == 'nt' else Platform.POSIX


def init(
    platform: Platform | str | None = None,
    log_level: str | None = None,
) -> PathConfig:
    """Initialize refpath with explicit configuration.

    Args:
        platform: Path rules to apply by default. Auto-detected if None.
        log_level: Logging level. None = logging is not configured.

    Returns:
        The active PathConfig.

    Example:
        ```python
        import refpath

        refpath.init(platform='windows', log_level='DEBUG')
        refpath.AbsolutePath.create('C:\\data\\')
        # Ok(AbsoluteDirectoryPath('C:\\data\\'))
        ```
    """
    global _config

    resolved = Platform(platform) if platform is not None else _detect_platform()

    if log_level is not None:
        configure_logging(log_level)

    _config = PathConfig(platform=resolved, log_level=log_level)
    logger.debug('refpath_initialized', platform=resolved.value, log_level=log_level)
    return _config


def get_config() -> PathConfig:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def default_policy() -> PathPolicy:
    """The policy factories fall back to when called with ``policy=None``."""
    return get_config().policy


def _reset() -> None:
    """Forget the active configuration (used by tests)."""
    global _config
    _config = None
