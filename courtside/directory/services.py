"""Service layer for the shared player and venue directory."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NamedTuple, cast

from flask import current_app

from courtside.core import storage
from courtside.core.constants import (
    KIND_PLAYER,
    KIND_VENUE,
    PLAYER_NICKNAME,
    PLAYER_PROFILE_FIELDS,
    PLAYERS_COLLECTION,
    VENUE_NAME,
    VENUE_PROFILE_FIELDS,
    VENUE_RATE_FIELDS,
    VENUES_COLLECTION,
)
from courtside.errors import NotFoundError, ValidationError
from courtside.utils import parse_amount, utc_now

from .models import Player, Venue, new_player_data, new_venue_data

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client


class _EntityKind(NamedTuple):
    collection: str
    name_field: str
    label: str
    defaults: Callable[[str, str, Any], dict[str, Any]]


_KINDS = {
    KIND_PLAYER: _EntityKind(
        PLAYERS_COLLECTION, PLAYER_NICKNAME, "Player", new_player_data
    ),
    KIND_VENUE: _EntityKind(VENUES_COLLECTION, VENUE_NAME, "Venue", new_venue_data),
}


def _kind(kind: str) -> _EntityKind:
    try:
        return _KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown directory kind: {kind}") from None


class DirectoryService:
    """Service class for player and venue records.

    Players and venues are shared by every user of the app. They are keyed by
    display name for lookup, but nothing enforces that names are unique: two
    simultaneous first-time resolutions of the same name can both create a
    record. Writes are last-writer-wins.
    """

    @staticmethod
    def find_by_name(db: Client, kind: str, name: str | None) -> dict[str, Any] | None:
        """Return the first record whose name matches exactly, without creating."""
        entity = _kind(kind)
        clean_name = (name or "").strip()
        if not clean_name:
            return None
        docs = storage.query_documents(
            db, entity.collection, filters=[(entity.name_field, clean_name)], limit=1
        )
        return docs[0] if docs else None

    @staticmethod
    def resolve(db: Client, kind: str, name: str | None) -> dict[str, Any]:
        """Return the record whose name matches exactly, creating it if needed."""
        entity = _kind(kind)
        clean_name = (name or "").strip()
        if not clean_name:
            raise ValidationError(f"{entity.label} name is required.")

        existing = DirectoryService.find_by_name(db, kind, clean_name)
        if existing:
            return existing

        data = entity.defaults(clean_name, str(uuid.uuid4()), utc_now())
        doc_id = storage.create_document(db, entity.collection, data)
        current_app.logger.info(
            f"Created {entity.label.lower()} '{clean_name}' ({doc_id})."
        )
        return {"id": doc_id, **data}

    @staticmethod
    def get_or_create_player(db: Client, nickname: str | None) -> Player:
        """Resolve a player by nickname."""
        return cast(Player, DirectoryService.resolve(db, KIND_PLAYER, nickname))

    @staticmethod
    def get_or_create_venue(db: Client, name: str | None) -> Venue:
        """Resolve a venue by name."""
        return cast(Venue, DirectoryService.resolve(db, KIND_VENUE, name))

    @staticmethod
    def get_player(db: Client, player_id: str) -> Player | None:
        """Fetch a single player by id."""
        return cast(
            "Player | None", storage.get_document(db, PLAYERS_COLLECTION, player_id)
        )

    @staticmethod
    def get_venue(db: Client, venue_id: str) -> Venue | None:
        """Fetch a single venue by id."""
        return cast(
            "Venue | None", storage.get_document(db, VENUES_COLLECTION, venue_id)
        )

    @staticmethod
    def list_players(db: Client) -> list[Player]:
        """Fetch all players for the directory and pickers."""
        return cast(
            list[Player],
            storage.query_documents(db, PLAYERS_COLLECTION, order_by=PLAYER_NICKNAME),
        )

    @staticmethod
    def list_venues(db: Client) -> list[Venue]:
        """Fetch all venues for the directory and pickers."""
        return cast(
            list[Venue],
            storage.query_documents(db, VENUES_COLLECTION, order_by=VENUE_NAME),
        )

    @staticmethod
    def get_default_opponent(db: Client) -> Player | None:
        """Return the player flagged as the default opponent, if any."""
        docs = storage.query_documents(
            db, PLAYERS_COLLECTION, filters=[("isDefault", True)], limit=1
        )
        return cast(Player, docs[0]) if docs else None

    @staticmethod
    def get_default_venue(db: Client) -> Venue | None:
        """Return the venue flagged as default, if any."""
        docs = storage.query_documents(
            db, VENUES_COLLECTION, filters=[("isDefault", True)], limit=1
        )
        return cast(Venue, docs[0]) if docs else None

    @staticmethod
    def _clear_other_defaults(db: Client, collection: str, keep_id: str) -> None:
        """Unset isDefault on every other record of the collection."""
        for doc in storage.query_documents(
            db, collection, filters=[("isDefault", True)]
        ):
            if doc["id"] != keep_id:
                storage.update_document(db, collection, doc["id"], {"isDefault": False})

    @staticmethod
    def update_player(db: Client, player_id: str, data: dict[str, Any]) -> None:
        """Merge profile fields into a player, creating the document if absent."""
        payload = {k: v for k, v in data.items() if k in PLAYER_PROFILE_FIELDS}
        if PLAYER_NICKNAME in payload:
            nickname = (payload[PLAYER_NICKNAME] or "").strip()
            if not nickname:
                raise ValidationError("Player name is required.")
            payload[PLAYER_NICKNAME] = nickname
        payload["updatedAt"] = utc_now()

        storage.set_document(db, PLAYERS_COLLECTION, player_id, payload, merge=True)
        if payload.get("isDefault"):
            DirectoryService._clear_other_defaults(db, PLAYERS_COLLECTION, player_id)

    @staticmethod
    def update_venue(db: Client, venue_id: str, data: dict[str, Any]) -> None:
        """Apply an edit to a venue; rate fields are parsed to amounts."""
        if storage.get_document(db, VENUES_COLLECTION, venue_id) is None:
            raise NotFoundError("Venue not found.")

        payload = {k: v for k, v in data.items() if k in VENUE_PROFILE_FIELDS}
        for field in VENUE_RATE_FIELDS:
            if field in payload:
                payload[field] = parse_amount(payload[field])
        if VENUE_NAME in payload:
            name = (payload[VENUE_NAME] or "").strip()
            if not name:
                raise ValidationError("Venue name is required.")
            payload[VENUE_NAME] = name
        payload["updatedAt"] = utc_now()

        storage.update_document(db, VENUES_COLLECTION, venue_id, payload)
        if payload.get("isDefault"):
            DirectoryService._clear_other_defaults(db, VENUES_COLLECTION, venue_id)

    @staticmethod
    def delete_player(db: Client, player_id: str) -> None:
        """Delete a player. Matches keep their name snapshot and id."""
        storage.delete_document(db, PLAYERS_COLLECTION, player_id)

    @staticmethod
    def delete_venue(db: Client, venue_id: str) -> None:
        """Delete a venue. Matches keep their location snapshot and id."""
        storage.delete_document(db, VENUES_COLLECTION, venue_id)
