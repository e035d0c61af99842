"""Logging setup and console messages for the topteam CLI."""

import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to stderr so rankings on stdout stay clean."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def print_section(title: str, width: int = 70) -> None:
    """Print a title between two rules."""
    rule = "=" * width
    print(f"{rule}\n{title}\n{rule}")


def print_error(message: str) -> None:
    print(f"✗ {message}", file=sys.stderr)


def print_info(message: str) -> None:
    print(f"ℹ  {message}", file=sys.stderr)
