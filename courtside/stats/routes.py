from __future__ import annotations

from typing import Any

from firebase_admin import firestore
from flask import jsonify

from courtside.auth.decorators import login_required
from courtside.auth.session import current_user_id
from courtside.errors import NotFoundError
from courtside.match.services import MatchService

from . import bp
from .services import StatsService


@bp.route("/", methods=["GET"])
@login_required
def detailed_stats() -> Any:
    """Endpoint for the full statistics of the signed-in user."""
    db = firestore.client()
    return jsonify(StatsService.get_detailed_stats(db, current_user_id()))


@bp.route("/dashboard", methods=["GET"])
@login_required
def dashboard() -> Any:
    """Endpoint for headline stats and the latest matches."""
    db = firestore.client()
    return jsonify(StatsService.get_dashboard(db, current_user_id()))


@bp.route("/rivals/<path:name>", methods=["GET"])
@login_required
def rival_record(name: str) -> Any:
    """Endpoint for the head-to-head record against one opponent."""
    db = firestore.client()
    matches = MatchService.get_owner_matches(db, current_user_id())
    rival = StatsService.get_rival_record(matches, name)
    if rival is None:
        raise NotFoundError(f"No matches against {name}.")
    return jsonify(rival)
