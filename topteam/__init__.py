"""
Topteam: match-day standings for round-robin leagues.

This package provides:
- Parsing of one-line match results ("Team A 3, Team B 1")
- Per-team records of points earned per match
- An incremental standings engine that detects completed match days
- Deterministic rankings and league tables at each match day
"""

__version__ = "0.1.0"
