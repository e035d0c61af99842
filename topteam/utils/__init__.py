"""Shared utilities for topteam."""

from .logging import setup_logging, print_section, print_error, print_info
from .constants import (
    WIN_POINTS,
    DRAW_POINTS,
    LOSS_POINTS,
    VALID_POINTS,
    RESULT_SEPARATOR,
    DEFAULT_TOP_N,
)

__all__ = [
    "setup_logging",
    "print_section",
    "print_error",
    "print_info",
    "WIN_POINTS",
    "DRAW_POINTS",
    "LOSS_POINTS",
    "VALID_POINTS",
    "RESULT_SEPARATOR",
    "DEFAULT_TOP_N",
]
