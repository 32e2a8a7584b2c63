"""Tests for StatsService."""

from __future__ import annotations

import datetime
import random
import unittest
from typing import Any
from unittest.mock import patch

from courtside.errors import StorageError
from courtside.stats.services import StatsService
from tests.conftest import FirestoreTestCase


def _match(user_won: bool, opponent: str = "Bob", cost: float = 0.0, **extra: Any) -> dict[str, Any]:
    return {"userWon": user_won, "player2": opponent, "totalCost": cost, **extra}


class AggregateTestCase(unittest.TestCase):
    def test_empty_history_yields_default_stats(self) -> None:
        stats = StatsService.aggregate([])
        self.assertEqual(stats, StatsService.default_stats())
        self.assertEqual(stats["win_rate"], 0)
        self.assertEqual(stats["streak"], 0)
        self.assertIsNone(stats["is_win_streak"])
        self.assertEqual(stats["total_spent"], "0.00")
        self.assertEqual(stats["avg_cost"], "0.00")

    def test_counts_and_win_rate(self) -> None:
        matches = [_match(True), _match(False), _match(True)]
        stats = StatsService.aggregate(matches)
        self.assertEqual(stats["total"], 3)
        self.assertEqual(stats["wins"], 2)
        self.assertEqual(stats["losses"], 1)
        self.assertEqual(stats["win_rate"], 67)

    def test_win_rate_rounds_halves_up(self) -> None:
        matches = [_match(True)] + [_match(False)] * 7
        self.assertEqual(StatsService.aggregate(matches)["win_rate"], 13)

    def test_win_rate_bounds(self) -> None:
        for wins in range(0, 6):
            matches = [_match(True)] * wins + [_match(False)] * (5 - wins)
            with self.subTest(wins=wins):
                rate = StatsService.aggregate(matches)["win_rate"]
                self.assertGreaterEqual(rate, 0)
                self.assertLessEqual(rate, 100)
                self.assertEqual(rate, round(100 * wins / 5))

    def test_loss_streak(self) -> None:
        matches = [_match(False), _match(False), _match(False), _match(True)]
        stats = StatsService.aggregate(matches)
        self.assertEqual(stats["streak"], 3)
        self.assertEqual(stats["streak_type"], "L")
        self.assertFalse(stats["is_win_streak"])

    def test_streak_scans_full_history(self) -> None:
        matches = [_match(True)] * 7 + [_match(False)]
        stats = StatsService.aggregate(matches)
        self.assertEqual(stats["streak"], 7)
        self.assertEqual(stats["streak_type"], "W")
        self.assertEqual(len(stats["recent_form"]), 5)

    def test_recent_form_is_chronological(self) -> None:
        # Newest first: L, W, W, L, W, L
        outcomes = [False, True, True, False, True, False]
        stats = StatsService.aggregate([_match(o) for o in outcomes])
        self.assertEqual(stats["recent_form"], ["W", "L", "W", "W", "L"])

    def test_recent_form_length_is_configurable(self) -> None:
        stats = StatsService.aggregate([_match(True), _match(False)], form_length=1)
        self.assertEqual(stats["recent_form"], ["W"])

    def test_rivals_sorted_by_played(self) -> None:
        matches = [_match(True, "Bob")] * 3 + [
            _match(True, "Alice"),
            _match(False, "Alice"),
            _match(False, "Alice"),
            _match(True, "Alice"),
            _match(False, "Alice"),
        ]
        rivals = StatsService.aggregate(matches)["rivals"]
        self.assertEqual([r["name"] for r in rivals], ["Alice", "Bob"])
        self.assertEqual(
            rivals[0], {"name": "Alice", "played": 5, "won": 2, "lost": 3, "win_rate": 40}
        )
        self.assertEqual(rivals[1]["played"], 3)
        self.assertEqual(rivals[1]["won"], 3)

    def test_rival_tallies_do_not_depend_on_order(self) -> None:
        matches = (
            [_match(True, "Bob")] * 3
            + [_match(False, "Alice")] * 5
            + [_match(True, "Carol")] * 1
        )
        expected = StatsService.aggregate(matches)["rivals"]
        shuffled = list(matches)
        random.Random(7).shuffle(shuffled)
        self.assertEqual(StatsService.aggregate(shuffled)["rivals"], expected)

    def test_economy(self) -> None:
        matches = [_match(True, cost=20), _match(False, cost=15.5), _match(True)]
        stats = StatsService.aggregate(matches)
        self.assertEqual(stats["total_spent"], "35.50")
        self.assertEqual(stats["avg_cost"], "11.83")

    def test_aggregate_is_deterministic(self) -> None:
        matches = [_match(i % 3 == 0, f"P{i % 4}", cost=i) for i in range(12)]
        self.assertEqual(StatsService.aggregate(matches), StatsService.aggregate(matches))

    def test_get_rival_record(self) -> None:
        matches = [_match(True, "Bob"), _match(False, "Bob"), _match(True, "Eve")]
        self.assertEqual(StatsService.get_rival_record(matches, "Bob")["played"], 2)
        self.assertIsNone(StatsService.get_rival_record(matches, "Nobody"))


class StatsFetchTestCase(FirestoreTestCase):
    def _add_match(self, owner: str, date: str, user_won: bool, created_minute: int) -> None:
        self.db.collection("matches").add(
            {
                "ownerId": owner,
                "date": date,
                "userWon": user_won,
                "player2": "Bob",
                "totalCost": 10.0,
                "createdAt": datetime.datetime(
                    2024, 1, 1, 12, created_minute, tzinfo=datetime.timezone.utc
                ),
            }
        )

    def test_detailed_stats_are_owner_scoped_and_sorted(self) -> None:
        self._add_match("me", "2024-03-01", False, 0)
        self._add_match("me", "2024-03-05", True, 0)
        self._add_match("me", "2024-03-05", False, 30)
        self._add_match("someone_else", "2024-03-09", True, 0)

        stats = StatsService.get_detailed_stats(self.db, "me")
        self.assertEqual(stats["total"], 3)
        self.assertEqual(stats["wins"], 1)
        # Newest is the later-created match on 2024-03-05 (a loss).
        self.assertEqual(stats["streak"], 1)
        self.assertEqual(stats["streak_type"], "L")
        self.assertEqual(stats["recent_form"], ["L", "W", "L"])
        self.assertEqual(stats["total_spent"], "30.00")

    def test_dashboard_returns_recent_matches(self) -> None:
        for day in range(1, 8):
            self._add_match("me", f"2024-04-0{day}", day % 2 == 0, 0)

        dashboard = StatsService.get_dashboard(self.db, "me")
        self.assertEqual(dashboard["stats"]["total"], 7)
        self.assertEqual(len(dashboard["recent_matches"]), 5)
        self.assertEqual(dashboard["recent_matches"][0]["date"], "2024-04-07")

    @patch("courtside.stats.services.MatchService.get_owner_matches")
    def test_storage_failure_falls_back_to_defaults(self, mock_get: Any) -> None:
        mock_get.side_effect = StorageError()

        self.assertEqual(
            StatsService.get_detailed_stats(self.db, "me"), StatsService.default_stats()
        )
        dashboard = StatsService.get_dashboard(self.db, "me")
        self.assertEqual(dashboard["stats"], StatsService.default_stats())
        self.assertEqual(dashboard["recent_matches"], [])


if __name__ == "__main__":
    unittest.main()
