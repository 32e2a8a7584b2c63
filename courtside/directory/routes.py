"""Routes for the directory blueprint."""

from firebase_admin import firestore
from flask import jsonify, request

from courtside.auth.decorators import login_required

from . import bp
from .services import DirectoryService

_TRUE_VALUES = ("1", "true", "y", "yes", "on")


def _submitted_fields():
    """Return the posted fields, with the default flag read as a boolean."""
    data = request.form.to_dict()
    if "isDefault" in data:
        data["isDefault"] = data["isDefault"].strip().lower() in _TRUE_VALUES
    return data


@bp.route("/players")
@login_required
def list_players():
    """List every player, ordered by nickname."""
    db = firestore.client()
    return jsonify({"players": DirectoryService.list_players(db)})


@bp.route("/venues")
@login_required
def list_venues():
    """List every venue, ordered by name."""
    db = firestore.client()
    return jsonify({"venues": DirectoryService.list_venues(db)})


@bp.route("/defaults")
@login_required
def defaults():
    """Return the default opponent and venue used to prefill a new match."""
    db = firestore.client()
    return jsonify(
        {
            "opponent": DirectoryService.get_default_opponent(db),
            "venue": DirectoryService.get_default_venue(db),
        }
    )


@bp.route("/players/<string:player_id>/edit", methods=["POST"])
@login_required
def edit_player(player_id):
    """Update a player's profile fields."""
    db = firestore.client()
    DirectoryService.update_player(db, player_id, _submitted_fields())
    return jsonify({"player": DirectoryService.get_player(db, player_id)})


@bp.route("/venues/<string:venue_id>/edit", methods=["POST"])
@login_required
def edit_venue(venue_id):
    """Update a venue, including its hourly rates."""
    db = firestore.client()
    DirectoryService.update_venue(db, venue_id, _submitted_fields())
    return jsonify({"venue": DirectoryService.get_venue(db, venue_id)})


@bp.route("/players/<string:player_id>/delete", methods=["POST"])
@login_required
def delete_player(player_id):
    """Delete a player; recorded matches keep their name snapshot."""
    db = firestore.client()
    DirectoryService.delete_player(db, player_id)
    return jsonify({"status": "deleted", "id": player_id})


@bp.route("/venues/<string:venue_id>/delete", methods=["POST"])
@login_required
def delete_venue(venue_id):
    """Delete a venue; recorded matches keep their location snapshot."""
    db = firestore.client()
    DirectoryService.delete_venue(db, venue_id)
    return jsonify({"status": "deleted", "id": venue_id})
