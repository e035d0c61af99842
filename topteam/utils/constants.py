"""Shared constants for topteam models."""

# League points per match outcome
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

VALID_POINTS = frozenset({WIN_POINTS, DRAW_POINTS, LOSS_POINTS})

# Separator between the two "<team> <score>" segments of a result line
RESULT_SEPARATOR = ", "

# Entries shown per match day by the CLI
DEFAULT_TOP_N = 3
