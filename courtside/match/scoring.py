"""Set normalisation, match outcome and score sanity checks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from courtside.utils import is_numeric, parse_int

from .models import Set

TIE_BREAK_MIN_MARGIN = 2
TIE_BREAK_MIN_WINNING_SCORE = 7
STANDARD_SET_GAMES = 6
EXTENDED_SET_GAMES = 7
MIN_SET_MARGIN = 2


def normalize_sets(raw_sets: Iterable[Mapping[str, Any]] | None) -> list[Set]:
    """Coerce entered sets to integer games; there is always at least one set."""
    sets: list[Set] = [
        {
            "s1": parse_int(raw.get("s1")),
            "s2": parse_int(raw.get("s2")),
            "tieBreak": bool(raw.get("tieBreak", False)),
        }
        for raw in raw_sets or []
    ]
    if not sets:
        sets.append({"s1": 0, "s2": 0, "tieBreak": False})
    return sets


def did_user_win(sets: Iterable[Mapping[str, Any]]) -> bool:
    """Return True if player 1 won strictly more sets than player 2."""
    user_sets = opponent_sets = 0
    for set_score in sets:
        s1 = parse_int(set_score.get("s1"))
        s2 = parse_int(set_score.get("s2"))
        if s1 > s2:
            user_sets += 1
        elif s2 > s1:
            opponent_sets += 1
    return user_sets > opponent_sets


def _set_warning(index: int, s1: int, s2: int, tie_break: bool) -> str | None:
    high, low = max(s1, s2), min(s1, s2)
    margin = high - low
    label = f"Set {index}"

    if tie_break:
        if margin < TIE_BREAK_MIN_MARGIN:
            return f"{label}: a tie-break needs a 2-point margin."
        if high < TIE_BREAK_MIN_WINNING_SCORE:
            return f"{label}: score too low for a tie-break (first to 7)."
        return None

    if high == STANDARD_SET_GAMES and margin < MIN_SET_MARGIN:
        return (
            f"{label}: {high}-{low} is unusual, a set at 6 games needs a "
            "2-game lead (7-5) or a tie-break at 7-6."
        )
    if high == EXTENDED_SET_GAMES and margin > MIN_SET_MARGIN and low > 0:
        return f"{label}: {high}-{low} is unusual, a set reaching 7 ends 7-5 or 7-6."
    if high > EXTENDED_SET_GAMES:
        return (
            f"{label}: high score ({high}-{low}). "
            "Mark the set as a tie-break if it was one."
        )
    return None


def score_warnings(sets: Iterable[Mapping[str, Any]]) -> list[str]:
    """Return every advisory warning for the entered sets, in set order.

    Sets where either side is blank or non-numeric are skipped until both
    scores have been entered.
    """
    warnings = []
    for index, set_score in enumerate(sets, start=1):
        raw_s1, raw_s2 = set_score.get("s1"), set_score.get("s2")
        if not (is_numeric(raw_s1) and is_numeric(raw_s2)):
            continue
        warning = _set_warning(
            index,
            parse_int(raw_s1),
            parse_int(raw_s2),
            bool(set_score.get("tieBreak", False)),
        )
        if warning:
            warnings.append(warning)
    return warnings


def validate_sets(sets: Iterable[Mapping[str, Any]]) -> str:
    """Return the warning of the last flagged set, or an empty string."""
    warnings = score_warnings(sets)
    return warnings[-1] if warnings else ""
