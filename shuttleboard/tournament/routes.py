"""Routes for the tournament API."""

from __future__ import annotations

from typing import Any

from flask import current_app, jsonify, request

from shuttleboard.core.constants import TOURNAMENT_FORMATS
from shuttleboard.errors import ValidationError

from . import bp
from .forms import RenameForm, TournamentForm, WinnerForm
from .services import TournamentService


@bp.route("/", methods=["GET"])
def list_tournaments() -> Any:
    """List all tournaments."""
    return jsonify(TournamentService.list_tournaments())


@bp.route("/", methods=["POST"])
def create_tournament() -> Any:
    """Create a tournament and its opening round."""
    form = TournamentForm()
    if not form.validate():
        raise ValidationError(form.first_error())

    body = request.get_json(silent=True) or {}
    guests = body.get("guestPlayers") or []
    if not isinstance(guests, list) or not all(isinstance(g, dict) for g in guests):
        raise ValidationError("Guest players must be a list of {name, gender}.")

    tournament = TournamentService.create_tournament(
        {
            "name": form.name.data,
            "format": form.format.data,
            "players": form.players.data or [],
            "guestPlayers": guests,
        }
    )
    current_app.logger.info(f"Tournament created: {tournament['id']}")
    return jsonify(tournament), 201


@bp.route("/summary", methods=["GET"])
def tournament_summary() -> Any:
    """Tournament counts for the dashboard."""
    return jsonify(TournamentService.summary())


@bp.route("/eligible-players", methods=["GET"])
def eligible_players() -> Any:
    """Members who can be selected for the requested format."""
    tournament_format = request.args.get("format", "")
    if tournament_format not in TOURNAMENT_FORMATS:
        raise ValidationError(f"Unknown tournament format: {tournament_format}.")
    return jsonify(TournamentService.eligible_players(tournament_format))


@bp.route("/<string:tournament_id>", methods=["GET"])
def view_tournament(tournament_id: str) -> Any:
    """View a single tournament with its bracket."""
    return jsonify(TournamentService.get_tournament(tournament_id))


@bp.route("/<string:tournament_id>", methods=["PUT"])
def edit_tournament(tournament_id: str) -> Any:
    """Rename an existing tournament."""
    form = RenameForm()
    if not form.validate():
        raise ValidationError(form.first_error())
    return jsonify(TournamentService.rename_tournament(tournament_id, form.name.data))


@bp.route("/<string:tournament_id>", methods=["DELETE"])
def delete_tournament(tournament_id: str) -> Any:
    """Delete a tournament."""
    TournamentService.delete_tournament(tournament_id)
    current_app.logger.info(f"Tournament deleted: {tournament_id}")
    return "", 204


@bp.route("/<string:tournament_id>/winner", methods=["POST"])
def report_winner(tournament_id: str) -> Any:
    """Record the winner of a bracket match."""
    form = WinnerForm()
    if not form.validate():
        raise ValidationError(form.first_error())

    tournament = TournamentService.report_winner(
        tournament_id,
        form.roundIndex.data,
        form.matchIndex.data,
        form.winningTeamId.data,
    )
    return jsonify(tournament)
