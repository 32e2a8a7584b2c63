"""Tests for set normalisation, match outcome and score warnings."""

from __future__ import annotations

import unittest

from courtside.match.scoring import (
    did_user_win,
    normalize_sets,
    score_warnings,
    validate_sets,
)


class DidUserWinTestCase(unittest.TestCase):
    def test_majority_of_sets_wins(self) -> None:
        sets = [{"s1": 6, "s2": 4}, {"s1": 3, "s2": 6}, {"s1": 6, "s2": 2}]
        self.assertTrue(did_user_win(sets))

    def test_majority_of_sets_lost(self) -> None:
        sets = [{"s1": 4, "s2": 6}, {"s1": 6, "s2": 3}, {"s1": 2, "s2": 6}]
        self.assertFalse(did_user_win(sets))

    def test_equal_split_is_not_a_win(self) -> None:
        sets = [{"s1": 6, "s2": 4}, {"s1": 4, "s2": 6}]
        self.assertFalse(did_user_win(sets))

    def test_drawn_sets_count_for_nobody(self) -> None:
        sets = [{"s1": 6, "s2": 6}, {"s1": 6, "s2": 4}]
        self.assertTrue(did_user_win(sets))

    def test_non_numeric_scores_count_as_zero(self) -> None:
        sets = [{"s1": "abc", "s2": "3"}, {"s1": "6", "s2": ""}]
        # 0-3 lost, 6-0 won: one set each.
        self.assertFalse(did_user_win(sets))
        self.assertTrue(did_user_win([{"s1": "6", "s2": None}]))


class NormalizeSetsTestCase(unittest.TestCase):
    def test_scores_become_integers(self) -> None:
        sets = normalize_sets([{"s1": "6", "s2": " 4 ", "tieBreak": False}])
        self.assertEqual(sets, [{"s1": 6, "s2": 4, "tieBreak": False}])

    def test_bad_scores_become_zero(self) -> None:
        sets = normalize_sets([{"s1": "x", "s2": "-3"}])
        self.assertEqual(sets, [{"s1": 0, "s2": 0, "tieBreak": False}])

    def test_empty_input_yields_one_empty_set(self) -> None:
        self.assertEqual(normalize_sets([]), [{"s1": 0, "s2": 0, "tieBreak": False}])
        self.assertEqual(normalize_sets(None), [{"s1": 0, "s2": 0, "tieBreak": False}])

    def test_tie_break_flag_is_kept(self) -> None:
        sets = normalize_sets([{"s1": 7, "s2": 6, "tieBreak": True}])
        self.assertTrue(sets[0]["tieBreak"])


class ScoreWarningsTestCase(unittest.TestCase):
    def test_standard_six_love_has_no_warning(self) -> None:
        self.assertEqual(validate_sets([{"s1": 6, "s2": 0}]), "")

    def test_common_results_have_no_warning(self) -> None:
        for s1, s2 in [(6, 4), (4, 6), (7, 5), (7, 6), (6, 3), (7, 0)]:
            with self.subTest(score=(s1, s2)):
                self.assertEqual(score_warnings([{"s1": s1, "s2": s2}]), [])

    def test_high_score_suggests_tie_break(self) -> None:
        warning = validate_sets([{"s1": 9, "s2": 7}])
        self.assertIn("high score", warning)
        self.assertIn("tie-break", warning)

    def test_six_without_two_game_lead_is_flagged(self) -> None:
        self.assertIn("unusual", validate_sets([{"s1": 6, "s2": 5}]))
        self.assertIn("unusual", validate_sets([{"s1": 6, "s2": 6}]))

    def test_seven_with_wide_margin_is_flagged(self) -> None:
        self.assertIn("unusual", validate_sets([{"s1": 7, "s2": 3}]))

    def test_tie_break_needs_two_point_margin(self) -> None:
        warning = validate_sets([{"s1": 8, "s2": 7, "tieBreak": True}])
        self.assertIn("2-point margin", warning)

    def test_tie_break_score_too_low(self) -> None:
        warning = validate_sets([{"s1": 5, "s2": 3, "tieBreak": True}])
        self.assertIn("too low", warning)

    def test_valid_tie_break(self) -> None:
        self.assertEqual(validate_sets([{"s1": 10, "s2": 8, "tieBreak": True}]), "")

    def test_partial_entry_is_ignored(self) -> None:
        self.assertEqual(score_warnings([{"s1": "9", "s2": ""}]), [])
        self.assertEqual(score_warnings([{"s1": "9", "s2": "x"}]), [])

    def test_decimal_entries_are_checked_like_saved_scores(self) -> None:
        for sets in ([{"s1": 9.0, "s2": 7.0}], [{"s1": "9.0", "s2": "7"}]):
            with self.subTest(sets=sets):
                self.assertEqual(normalize_sets(sets)[0]["s1"], 9)
                self.assertTrue(did_user_win(sets))
                warnings = score_warnings(sets)
                self.assertEqual(len(warnings), 1)
                self.assertIn("high score", warnings[0])

    def test_warnings_name_the_set(self) -> None:
        warnings = score_warnings([{"s1": 6, "s2": 2}, {"s1": 9, "s2": 7}])
        self.assertEqual(len(warnings), 1)
        self.assertTrue(warnings[0].startswith("Set 2"))

    def test_only_last_warning_is_surfaced(self) -> None:
        sets = [{"s1": 6, "s2": 5}, {"s1": 6, "s2": 1}, {"s1": 9, "s2": 7}]
        warnings = score_warnings(sets)
        self.assertEqual(len(warnings), 2)
        self.assertEqual(validate_sets(sets), warnings[-1])
        self.assertTrue(validate_sets(sets).startswith("Set 3"))


if __name__ == "__main__":
    unittest.main()
