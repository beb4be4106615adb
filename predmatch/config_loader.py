# Path: predmatch/config_loader.py
"""
Configuration Loader for predmatch

Loads configuration from a .env file and environment variables.
Singleton pattern ensures consistent configuration across all components.

Nothing here is required: every key has a default, so the matcher
works out of the box with no .env file at all.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from predmatch.constants import (
    DEFAULT_FAILURE_MESSAGE,
    ENV_PREFIX,
    TRUTHY_ENV_VALUES,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_LOG_CONSOLE: bool = False

# Matcher Defaults
DEFAULT_STRICT_SPECS: bool = False
DEFAULT_DIAGNOSTICS: bool = False


class ConfigLoader:
    """
    Singleton configuration loader for predmatch.

    Loads configuration from environment variables with type
    conversion and sensible defaults.

    Example:
        config = ConfigLoader()
        strict = config.get('strict_specs')  # Returns bool
        log_dir = config.get('log_dir')      # Returns Path or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        next to the package (if any) on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # predmatch/config_loader.py -> .env is in the project root
        project_root = Path(__file__).resolve().parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env(f'{ENV_PREFIX}ENVIRONMENT', 'development'),
            'debug': self._get_bool(f'{ENV_PREFIX}DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path(f'{ENV_PREFIX}LOG_DIR'),
            'log_level': self._get_env(f'{ENV_PREFIX}LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool(f'{ENV_PREFIX}LOG_CONSOLE', DEFAULT_LOG_CONSOLE),

            # ================================================================
            # MATCHER CONFIGURATION
            # ================================================================
            'strict_specs': self._get_bool(
                f'{ENV_PREFIX}STRICT_SPECS', DEFAULT_STRICT_SPECS
            ),
            'diagnostics': self._get_bool(
                f'{ENV_PREFIX}DIAGNOSTICS', DEFAULT_DIAGNOSTICS
            ),
            'failure_message': self._get_env(
                f'{ENV_PREFIX}FAILURE_MESSAGE', DEFAULT_FAILURE_MESSAGE
            ),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name

        Returns:
            Path object, or None when unset or empty
        """
        value = os.getenv(key)

        if not value:
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable (empty counts as unset)."""
        return os.getenv(key) or default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if not value:
            return default
        return value.lower() in TRUTHY_ENV_VALUES

    def __repr__(self) -> str:
        """String representation showing the matcher settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"strict_specs={self._config.get('strict_specs')})"
        )


__all__ = ['ConfigLoader']
