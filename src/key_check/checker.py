"""
API key presence check with a redacted preview of the configured value.
"""

import sys
import logging
from dataclasses import dataclass
from typing import List, Optional, TextIO

from key_check.config import EnvironmentConfig

logger = logging.getLogger(__name__)

GEMINI_API_KEY = "GEMINI_API_KEY"

PREVIEW_HEAD = 10
PREVIEW_TAIL = 5
PREVIEW_SEPARATOR = "..."
# Shorter values would overlap head and tail and expose the whole key
MIN_PREVIEW_LENGTH = PREVIEW_HEAD + PREVIEW_TAIL

RULE = "=" * 42


@dataclass(frozen=True)
class KeyCheckResult:
    """Outcome of a single key check. Never holds the raw value."""

    name: str
    is_set: bool
    length: int = 0
    preview: Optional[str] = None

    @property
    def is_short(self) -> bool:
        return self.is_set and self.length < MIN_PREVIEW_LENGTH


def preview_key(value: str) -> str:
    """
    Build a redacted preview of a secret value.

    Values of at least 15 characters show the first 10 and last 5
    characters. Shorter values are fully masked.

    Args:
        value: The secret value

    Returns:
        Preview string safe to print
    """
    if len(value) < MIN_PREVIEW_LENGTH:
        return "*" * len(value)

    return value[:PREVIEW_HEAD] + PREVIEW_SEPARATOR + value[len(value) - PREVIEW_TAIL :]


def check_key(config: EnvironmentConfig, name: str = GEMINI_API_KEY) -> KeyCheckResult:
    """
    Look up a key and summarize it.

    An empty value is treated the same as an unset one.
    """
    if not config.is_set(name):
        logger.info(f"{name} is not configured")
        return KeyCheckResult(name=name, is_set=False)

    value = config.get(name)
    result = KeyCheckResult(
        name=name, is_set=True, length=len(value), preview=preview_key(value)
    )
    logger.info(f"{name} is configured ({result.length} characters)")
    if result.is_short:
        logger.warning(
            f"{name} is only {result.length} characters, preview fully masked"
        )

    return result


def format_report(result: KeyCheckResult) -> List[str]:
    """Render a check result as console lines."""
    if result.name == GEMINI_API_KEY:
        header = "Checking Gemini API Key configuration..."
    else:
        header = f"Checking {result.name} configuration..."

    lines = [header, RULE]

    if result.is_set:
        lines.extend(
            [
                f"✅ {result.name} is set!",
                f"   Key length: {result.length} characters",
                f"   Key preview: {result.preview}",
            ]
        )
        if result.is_short:
            lines.append(
                f"   ⚠️  Key is shorter than expected "
                f"({MIN_PREVIEW_LENGTH}+ characters), please double-check it"
            )
        lines.extend(["", "✅ Configuration looks good!"])
    else:
        lines.extend(
            [
                f"❌ {result.name} is NOT set!",
                "",
                "Please add the following to your .env file:",
                f"{result.name}=your_api_key_here",
                "",
                "Then restart your server.",
            ]
        )

    lines.extend(["", RULE])
    return lines


def run_check(
    config: EnvironmentConfig,
    name: str = GEMINI_API_KEY,
    stream: Optional[TextIO] = None,
) -> KeyCheckResult:
    """Check a key and print the report."""
    if stream is None:
        stream = sys.stdout

    result = check_key(config, name)
    for line in format_report(result):
        print(line, file=stream)

    return result
