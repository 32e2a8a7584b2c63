"""Data models for the shared player and venue directory."""

from __future__ import annotations

from typing import Any, Optional, TypedDict

from courtside.core.types import FirestoreDocument


class Player(FirestoreDocument, total=False):
    """A player document in Firestore."""

    uuid: str
    nickname: str
    firstName: Optional[str]
    lastName: Optional[str]
    phoneNumber: Optional[str]
    email: Optional[str]
    city: Optional[str]
    avatar: Optional[str]
    isRegistered: bool
    isDefault: bool


class Coordinates(TypedDict):
    """Geographic position of a venue."""

    lat: Optional[float]
    lng: Optional[float]


class Venue(FirestoreDocument, total=False):
    """A venue document in Firestore."""

    uuid: str
    name: str
    address: str
    phoneNumber: Optional[str]
    website: Optional[str]
    coordinates: Coordinates
    surface: Optional[str]
    description: Optional[str]
    pricePerHour: float
    guestPricePerHour: float
    lightPricePerHour: float
    heatingPricePerHour: float
    isDefault: bool


def new_player_data(nickname: str, uuid: str, created_at: Any) -> dict[str, Any]:
    """Return the defaults for a lazily created player."""
    return {
        "uuid": uuid,
        "nickname": nickname,
        "createdAt": created_at,
        "isRegistered": False,
        "isDefault": False,
        "phoneNumber": None,
        "email": None,
        "firstName": None,
        "lastName": None,
        "city": None,
        "avatar": None,
    }


def new_venue_data(name: str, uuid: str, created_at: Any) -> dict[str, Any]:
    """Return the defaults for a lazily created venue."""
    return {
        "uuid": uuid,
        "name": name,
        "createdAt": created_at,
        "address": "",
        "isDefault": False,
        "phoneNumber": None,
        "website": None,
        "coordinates": {"lat": None, "lng": None},
        "surface": None,
        "description": None,
        "pricePerHour": 0.0,
        "guestPricePerHour": 0.0,
        "lightPricePerHour": 0.0,
        "heatingPricePerHour": 0.0,
    }
