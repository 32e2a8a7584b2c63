"""Routes for the match blueprint."""

from firebase_admin import firestore
from flask import current_app, jsonify

from courtside.auth.decorators import login_required
from courtside.auth.session import current_nickname, current_user_id
from courtside.core.constants import KIND_VENUE
from courtside.directory.services import DirectoryService
from courtside.utils import parse_amount

from . import bp
from .costs import compute_cost
from .forms import MatchForm
from .scoring import did_user_win, normalize_sets, score_warnings, validate_sets
from .services import MatchService


def _invalid_form(form):
    current_app.logger.warning(f"Invalid match form: {form.errors}")
    return jsonify({"error": "Invalid match data.", "errors": form.errors}), 400


def _score_feedback(sets):
    """Advisory score warnings; these never block saving."""
    return {"warning": validate_sets(sets), "warnings": score_warnings(sets)}


@bp.route("/history")
@login_required
def match_history():
    """List the signed-in user's matches, newest first."""
    db = firestore.client()
    matches = MatchService.get_owner_matches(db, current_user_id())
    return jsonify({"matches": matches})


@bp.route("/create", methods=["POST"])
@login_required
def create_match():
    """Record a new match."""
    db = firestore.client()
    form = MatchForm()
    if not form.validate_on_submit():
        return _invalid_form(form)

    submission = form.to_submission()
    match = MatchService.record_match(
        db, submission, current_user_id(), default_player1=current_nickname()
    )
    return jsonify({"match": match, **_score_feedback(submission.sets)}), 201


@bp.route("/preview", methods=["POST"])
@login_required
def preview_match():
    """Compute the cost, outcome and score warnings without saving anything."""
    db = firestore.client()
    form = MatchForm()
    submission = form.to_submission()

    venue = DirectoryService.find_by_name(db, KIND_VENUE, submission.location)
    total_cost = compute_cost(
        venue,
        submission.duration_hours,
        submission.use_lights,
        submission.use_heating,
        submission.is_guest,
        default=parse_amount(submission.total_cost),
    )
    return jsonify(
        {
            "totalCost": total_cost,
            "userWon": did_user_win(normalize_sets(submission.sets)),
            **_score_feedback(submission.sets),
        }
    )


@bp.route("/clear", methods=["POST"])
@login_required
def clear_matches():
    """Delete every match of the signed-in user."""
    db = firestore.client()
    deleted = MatchService.delete_owner_matches(db, current_user_id())
    return jsonify({"deleted": deleted})


@bp.route("/<string:match_id>")
@login_required
def view_match(match_id):
    """Return a single match."""
    db = firestore.client()
    match = MatchService.get_match(db, match_id, current_user_id())
    return jsonify({"match": match})


@bp.route("/<string:match_id>/edit", methods=["POST"])
@login_required
def edit_match(match_id):
    """Revise an existing match."""
    db = firestore.client()
    form = MatchForm()
    if not form.validate_on_submit():
        return _invalid_form(form)

    submission = form.to_submission()
    match = MatchService.revise_match(
        db,
        match_id,
        submission,
        current_user_id(),
        default_player1=current_nickname(),
    )
    return jsonify({"match": match, **_score_feedback(submission.sets)})


@bp.route("/<string:match_id>/delete", methods=["POST"])
@login_required
def delete_match(match_id):
    """Delete a single match."""
    db = firestore.client()
    MatchService.delete_match(db, match_id, current_user_id())
    return jsonify({"status": "deleted", "id": match_id})
