"""
Diagnostic checker for the Gemini API key configuration.
"""

from key_check.checker import (
    GEMINI_API_KEY,
    KeyCheckResult,
    check_key,
    format_report,
    preview_key,
    run_check,
)
from key_check.config import ConfigurationError, EnvironmentConfig, KeyCheckError

__version__ = "1.0.0"

__all__ = [
    "GEMINI_API_KEY",
    "KeyCheckResult",
    "check_key",
    "format_report",
    "preview_key",
    "run_check",
    "ConfigurationError",
    "EnvironmentConfig",
    "KeyCheckError",
]
