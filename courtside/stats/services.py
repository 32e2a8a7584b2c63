"""Statistics over a user's match history."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from flask import current_app

from courtside.core.constants import RECENT_FORM_LENGTH, RECENT_MATCHES_LIMIT
from courtside.errors import StorageError
from courtside.match.services import MatchService
from courtside.utils import format_money

from .models import Dashboard, Rival, Stats

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client

    from courtside.match.models import Match


def _percentage(part: int, whole: int) -> int:
    """Whole-number percentage, rounding halves up."""
    if whole <= 0:
        return 0
    return int(math.floor(100 * part / whole + 0.5))


def _result_marker(match: Match) -> str:
    return "W" if match.get("userWon") else "L"


class StatsService:
    """Service for calculating match statistics.

    The aggregation itself is a pure function of the match list it is given,
    which must already be sorted newest first (date, then creation time).
    """

    @staticmethod
    def default_stats() -> Stats:
        """Return the statistics of an empty history."""
        return {
            "total": 0,
            "wins": 0,
            "losses": 0,
            "win_rate": 0,
            "streak": 0,
            "streak_type": "N/A",
            "is_win_streak": None,
            "recent_form": [],
            "rivals": [],
            "total_spent": format_money(0),
            "avg_cost": format_money(0),
        }

    @staticmethod
    def _calculate_streak(matches: Sequence[Match]) -> tuple[int, str]:
        """Calculate the current streak from the most recent match backwards."""
        if not matches:
            return 0, "N/A"

        last_won = bool(matches[0].get("userWon"))
        streak_type = "W" if last_won else "L"
        current_streak = 0
        for m in matches:
            if bool(m.get("userWon")) == last_won:
                current_streak += 1
            else:
                break
        return current_streak, streak_type

    @staticmethod
    def _recent_form(matches: Sequence[Match], length: int) -> list[str]:
        """Outcomes of the last ``length`` matches, oldest first."""
        return [_result_marker(m) for m in reversed(matches[:length])]

    @staticmethod
    def _rivals(matches: Sequence[Match]) -> list[Rival]:
        """Tally matches per opponent display name, most played first."""
        tallies: dict[str, dict[str, int]] = {}
        for m in matches:
            name = m.get("player2") or "Unknown"
            tally = tallies.setdefault(name, {"played": 0, "won": 0})
            tally["played"] += 1
            if m.get("userWon"):
                tally["won"] += 1

        rivals: list[Rival] = [
            {
                "name": name,
                "played": t["played"],
                "won": t["won"],
                "lost": t["played"] - t["won"],
                "win_rate": _percentage(t["won"], t["played"]),
            }
            for name, t in tallies.items()
        ]
        rivals.sort(key=lambda r: r["played"], reverse=True)
        return rivals

    @staticmethod
    def aggregate(
        matches: Sequence[Match], form_length: int = RECENT_FORM_LENGTH
    ) -> Stats:
        """Calculate aggregate performance statistics from a match history."""
        total = len(matches)
        wins = sum(1 for m in matches if m.get("userWon"))
        losses = total - wins

        streak, streak_type = StatsService._calculate_streak(matches)

        total_spent = sum(float(m.get("totalCost") or 0.0) for m in matches)
        avg_cost = total_spent / total if total else 0.0

        return {
            "total": total,
            "wins": wins,
            "losses": losses,
            "win_rate": _percentage(wins, total),
            "streak": streak,
            "streak_type": streak_type,
            "is_win_streak": streak_type == "W" if total else None,
            "recent_form": StatsService._recent_form(matches, form_length),
            "rivals": StatsService._rivals(matches),
            "total_spent": format_money(total_spent),
            "avg_cost": format_money(avg_cost),
        }

    @staticmethod
    def get_rival_record(matches: Sequence[Match], name: str) -> Rival | None:
        """Return the head-to-head record against one opponent name."""
        for rival in StatsService._rivals(matches):
            if rival["name"] == name:
                return rival
        return None

    @staticmethod
    def _fetch_history(db: Client, owner_id: str) -> list[Match] | None:
        try:
            return MatchService.get_owner_matches(db, owner_id)
        except StorageError as e:
            current_app.logger.error(f"Error fetching matches for stats: {e}")
            return None

    @staticmethod
    def get_detailed_stats(db: Client, owner_id: str) -> Stats:
        """Fetch and aggregate the owner's history; empty stats if unavailable."""
        matches = StatsService._fetch_history(db, owner_id)
        if matches is None:
            return StatsService.default_stats()
        return StatsService.aggregate(
            matches, current_app.config.get("RECENT_FORM_LENGTH", RECENT_FORM_LENGTH)
        )

    @staticmethod
    def get_dashboard(db: Client, owner_id: str) -> Dashboard:
        """Fetch stats and the latest matches for the home screen."""
        matches = StatsService._fetch_history(db, owner_id)
        if matches is None:
            return {"stats": StatsService.default_stats(), "recent_matches": []}

        recent: list[dict[str, Any]] = [dict(m) for m in matches[:RECENT_MATCHES_LIMIT]]
        return {
            "stats": StatsService.aggregate(
                matches,
                current_app.config.get("RECENT_FORM_LENGTH", RECENT_FORM_LENGTH),
            ),
            "recent_matches": recent,
        }
