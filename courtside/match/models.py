"""Data models for the match blueprint."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any, Optional, TypedDict, Union

from courtside.core.types import FirestoreDocument
from courtside.errors import ValidationError


class Set(TypedDict, total=False):
    """Games won in one set by player 1 (s1) and player 2 (s2)."""

    s1: int
    s2: int
    tieBreak: bool


class Match(FirestoreDocument, total=False):
    """A match document in Firestore."""

    player1: str
    player1Id: str
    player2: str
    player2Id: str
    location: str
    venueId: Optional[str]
    date: str
    sets: list[Set]
    notes: str
    userWon: bool
    durationHours: float
    useLights: bool
    useHeating: bool
    isGuest: bool
    totalCost: float
    ownerId: str


@dataclass
class MatchSubmission:
    """Raw match entry as received from the form.

    Scores, duration and cost may still be free text here; they are parsed
    once when the match record is built.
    """

    player2: str
    player1: Optional[str] = None
    match_date: Optional[Union[str, datetime.date, datetime.datetime]] = None
    location: Optional[str] = None
    sets: list[dict[str, Any]] = field(default_factory=list)
    notes: str = ""
    duration_hours: Any = 0
    use_lights: bool = False
    use_heating: bool = False
    is_guest: bool = False
    total_cost: Any = None

    def validate(self) -> None:
        """Reject submissions that cannot be saved."""
        if not (self.player2 or "").strip():
            raise ValidationError("Please enter an opponent name.")
