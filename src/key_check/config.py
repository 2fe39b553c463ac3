"""
Configuration access for the key checker.
Wraps an explicit environment mapping so checks never read process state directly.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values, find_dotenv

logger = logging.getLogger(__name__)


class KeyCheckError(Exception):
    """Base exception for the key checker."""


class ConfigurationError(KeyCheckError, ValueError):
    """Raised when a configuration source cannot be used."""


@dataclass(frozen=True)
class EnvironmentConfig:
    """Read-only view over environment variables."""

    environ: Mapping[str, str] = field(default_factory=dict)
    env_file: Optional[Path] = None

    @classmethod
    def from_env(
        cls,
        env_file: Optional[Union[str, Path]] = None,
        override: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "EnvironmentConfig":
        """
        Build configuration from the process environment and a local .env file.

        Args:
            env_file: Path to a settings file. When omitted, a .env file is
                searched for from the current directory upward.
            override: Let values from the file replace real environment values
            environ: Base environment, defaults to a copy of os.environ

        Returns:
            EnvironmentConfig over the merged values

        Raises:
            ConfigurationError: If an explicitly given env_file does not exist
        """
        base = dict(os.environ if environ is None else environ)

        if env_file is not None:
            path = Path(env_file)
            if not path.is_file():
                raise ConfigurationError(f"Settings file not found: {path}")
        else:
            found = find_dotenv(usecwd=True)
            path = Path(found) if found else None

        file_values: Dict[str, str] = {}
        if path is not None:
            logger.debug(f"Loading settings from {path}")
            try:
                loaded = dotenv_values(path)
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e

            # Keys declared without a value come back as None
            file_values = {
                key: value for key, value in loaded.items() if value is not None
            }
        else:
            logger.debug("No .env file found, using process environment only")

        if override:
            merged = {**base, **file_values}
        else:
            merged = {**file_values, **base}

        return cls(environ=merged, env_file=path)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a variable by name."""
        return self.environ.get(name, default)

    def is_set(self, name: str) -> bool:
        """Check whether a variable is present and non-empty."""
        return bool(self.environ.get(name))
