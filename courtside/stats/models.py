"""Data models for the stats blueprint."""

from __future__ import annotations

from typing import Any, Optional, TypedDict


class Rival(TypedDict):
    """Head-to-head record against one opponent name."""

    name: str
    played: int
    won: int
    lost: int
    win_rate: int


class Stats(TypedDict):
    """Aggregate performance statistics for an owner."""

    total: int
    wins: int
    losses: int
    win_rate: int
    streak: int
    streak_type: str
    is_win_streak: Optional[bool]
    recent_form: list[str]
    rivals: list[Rival]
    total_spent: str
    avg_cost: str


class Dashboard(TypedDict):
    """Stats plus the most recent matches for the home screen."""

    stats: Stats
    recent_matches: list[dict[str, Any]]
