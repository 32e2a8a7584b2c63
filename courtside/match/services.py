"""Service layer for match data access and orchestration."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, cast

from flask import current_app

from courtside.core import storage
from courtside.core.constants import (
    DEFAULT_PLAYER1_NAME,
    MATCH_CREATED_AT,
    MATCH_DATE,
    MATCH_OWNER_ID,
    MATCHES_COLLECTION,
)
from courtside.directory.services import DirectoryService
from courtside.errors import NotFoundError
from courtside.utils import normalize_match_date, parse_amount, utc_now

from .costs import compute_cost
from .models import Match, MatchSubmission
from .scoring import did_user_win, normalize_sets

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client

_EPOCH = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


def _created_sort_value(value: Any) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value if value.tzinfo else value.replace(tzinfo=datetime.timezone.utc)
    return _EPOCH


def sort_history(matches: list[Match]) -> list[Match]:
    """Order matches newest first: by date, then by creation time."""
    return sorted(
        matches,
        key=lambda m: (
            m.get(MATCH_DATE) or "",
            _created_sort_value(m.get(MATCH_CREATED_AT)),
        ),
        reverse=True,
    )


def _cost_was_entered(value: Any) -> bool:
    if value is None:
        return False
    return not (isinstance(value, str) and not value.strip())


class MatchService:
    """Service class for match-related operations."""

    @staticmethod
    def _build_match_data(
        db: Client, submission: MatchSubmission, default_player1: str | None
    ) -> dict[str, Any]:
        """Resolve references and derive the stored fields of a match.

        Entities are resolved one after another: player 1, player 2, then the
        venue. A player or venue created here is kept even if the match write
        that follows fails.
        """
        match_date = normalize_match_date(submission.match_date)

        player1_name = (
            (submission.player1 or "").strip()
            or (default_player1 or "").strip()
            or DEFAULT_PLAYER1_NAME
        )
        player1 = DirectoryService.get_or_create_player(db, player1_name)
        player2 = DirectoryService.get_or_create_player(db, submission.player2)

        venue = None
        if (submission.location or "").strip():
            venue = DirectoryService.get_or_create_venue(db, submission.location)

        sets = normalize_sets(submission.sets)
        duration = parse_amount(submission.duration_hours)

        if _cost_was_entered(submission.total_cost):
            total_cost = parse_amount(submission.total_cost)
        else:
            total_cost = compute_cost(
                venue,
                duration,
                submission.use_lights,
                submission.use_heating,
                submission.is_guest,
            )

        return {
            "player1": player1["nickname"],
            "player1Id": player1["id"],
            "player2": player2["nickname"],
            "player2Id": player2["id"],
            "location": venue["name"] if venue else "",
            "venueId": venue["id"] if venue else None,
            "date": match_date,
            "sets": sets,
            "notes": submission.notes or "",
            "userWon": did_user_win(sets),
            "durationHours": duration,
            "useLights": bool(submission.use_lights),
            "useHeating": bool(submission.use_heating),
            "isGuest": bool(submission.is_guest),
            "totalCost": total_cost,
        }

    @staticmethod
    def record_match(
        db: Client,
        submission: MatchSubmission,
        owner_id: str,
        default_player1: str | None = None,
    ) -> Match:
        """Validate, build and persist a new match for the owner."""
        submission.validate()
        match_data = MatchService._build_match_data(db, submission, default_player1)
        match_data[MATCH_OWNER_ID] = owner_id
        match_data[MATCH_CREATED_AT] = utc_now()

        match_id = storage.create_document(db, MATCHES_COLLECTION, match_data)
        current_app.logger.info(
            f"Recorded match {match_id} vs '{match_data['player2']}' for {owner_id}."
        )
        return cast(Match, {"id": match_id, **match_data})

    @staticmethod
    def revise_match(
        db: Client,
        match_id: str,
        submission: MatchSubmission,
        owner_id: str,
        default_player1: str | None = None,
    ) -> Match:
        """Rebuild an existing match from new input, keeping id and createdAt."""
        submission.validate()
        existing = MatchService.get_match(db, match_id, owner_id)

        match_data = MatchService._build_match_data(db, submission, default_player1)
        match_data["updatedAt"] = utc_now()

        storage.update_document(db, MATCHES_COLLECTION, match_id, match_data)
        current_app.logger.info(f"Updated match {match_id} for {owner_id}.")
        return cast(Match, {**existing, **match_data})

    @staticmethod
    def get_match(db: Client, match_id: str, owner_id: str) -> Match:
        """Fetch a match belonging to the owner."""
        data = storage.get_document(db, MATCHES_COLLECTION, match_id)
        if data is None or data.get(MATCH_OWNER_ID) != owner_id:
            raise NotFoundError("Match not found.")
        return cast(Match, data)

    @staticmethod
    def get_owner_matches(db: Client, owner_id: str) -> list[Match]:
        """Fetch the owner's complete match history, newest first."""
        docs = storage.query_documents(
            db, MATCHES_COLLECTION, filters=[(MATCH_OWNER_ID, owner_id)]
        )
        return sort_history(cast(list[Match], docs))

    @staticmethod
    def delete_match(db: Client, match_id: str, owner_id: str) -> None:
        """Delete one of the owner's matches."""
        MatchService.get_match(db, match_id, owner_id)
        storage.delete_document(db, MATCHES_COLLECTION, match_id)
        current_app.logger.info(f"Deleted match {match_id} for {owner_id}.")

    @staticmethod
    def delete_owner_matches(db: Client, owner_id: str) -> int:
        """Delete every match of the owner and return how many were removed."""
        docs = storage.query_documents(
            db, MATCHES_COLLECTION, filters=[(MATCH_OWNER_ID, owner_id)]
        )
        for doc in docs:
            storage.delete_document(db, MATCHES_COLLECTION, doc["id"])
        current_app.logger.info(f"Deleted {len(docs)} matches for {owner_id}.")
        return len(docs)
