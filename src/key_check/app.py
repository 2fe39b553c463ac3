"""
Command-line entry point for the key checker.
Exits 0 whether or not the key is configured; the report is informational.
"""

import sys
import argparse
import logging
import traceback
from typing import List, Optional

from key_check.checker import GEMINI_API_KEY, run_check
from key_check.config import EnvironmentConfig, KeyCheckError
from key_check.logging_config import VALID_LOG_LEVELS, setup_logging

logger = logging.getLogger(__name__)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Check that the Gemini API key is configured"
    )

    parser.add_argument(
        "--env-file",
        help="Path to a .env settings file (default: search from current directory)",
        default=None,
    )

    parser.add_argument(
        "--name",
        help=f"Environment variable to check (default: {GEMINI_API_KEY})",
        default=GEMINI_API_KEY,
    )

    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")

    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        help="Logging level",
        default=None,
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the checker."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging("DEBUG" if args.verbose else args.log_level)

        config = EnvironmentConfig.from_env(env_file=args.env_file)
        run_check(config, name=args.name)

        sys.exit(0)

    except KeyboardInterrupt:
        logger.info("Check interrupted by user")
        sys.exit(0)
    except KeyCheckError as e:
        logger.error(f"Key check failed: {str(e)}")
        if args.verbose:
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
