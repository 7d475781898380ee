"""Service layer for tournament persistence and orchestration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, cast

from firebase_admin import firestore

from shuttleboard.core.constants import (
    KIND_MEMBER,
    MEMBERS_COLLECTION,
    STATUS_COMPLETED,
    TOURNAMENTS_COLLECTION,
)
from shuttleboard.errors import NotFoundError, ValidationError

from .builder import BracketBuilder
from .progression import BracketEngine

if TYPE_CHECKING:
    from google.cloud.firestore_v1.base_document import DocumentSnapshot
    from google.cloud.firestore_v1.client import Client

    from .models import Bracket, Participant, StoredRound, Tournament


class TournamentService:
    """Handles business logic and data access for tournaments."""

    @staticmethod
    def _to_rounds(bracket: Bracket) -> list[StoredRound]:
        """Wrap each round in a map; Firestore cannot store nested arrays."""
        return [
            {"index": i, "matches": list(round_)} for i, round_ in enumerate(bracket)
        ]

    @staticmethod
    def _from_snapshot(doc: DocumentSnapshot) -> Tournament:
        """Convert a stored tournament document into the API record."""
        data = doc.to_dict() or {}
        rounds = sorted(data.pop("rounds", []), key=lambda r: r.get("index", 0))
        bracket = [r.get("matches", []) for r in rounds]

        tournament = cast("Tournament", data)
        tournament["id"] = doc.id
        tournament["bracket"] = bracket
        tournament["champion"] = BracketEngine.champion(bracket)
        return tournament

    @staticmethod
    def _get_snapshot(db: Client, tournament_id: str) -> Any:
        doc = db.collection(TOURNAMENTS_COLLECTION).document(tournament_id).get()
        if not doc.exists:
            raise NotFoundError("Tournament not found.")
        return doc

    @staticmethod
    def list_members(db: Client | None = None) -> list[Participant]:
        """Fetch every club member as a tournament participant."""
        if db is None:
            db = firestore.client()

        members: list[Participant] = []
        for doc in db.collection(MEMBERS_COLLECTION).stream():
            data = doc.to_dict()
            if not data:
                continue
            members.append(
                {
                    "id": doc.id,
                    "name": data.get("name", "Unknown Member"),
                    "gender": data.get("gender", ""),
                    "kind": KIND_MEMBER,
                }
            )
        members.sort(key=lambda m: m["name"].lower())
        return members

    @staticmethod
    def eligible_players(
        tournament_format: str, db: Client | None = None
    ) -> list[Participant]:
        """List the members who may be selected for a format."""
        members = TournamentService.list_members(db)
        return BracketBuilder.eligible_participants(members, tournament_format)

    @staticmethod
    def create_tournament(
        data: dict[str, Any], db: Client | None = None, rng: Optional[Any] = None
    ) -> Tournament:
        """Build a bracket from the request and store the new tournament.

        Guests listed in the request are entered into the tournament along
        with the selected members.
        """
        if db is None:
            db = firestore.client()

        guests = [
            BracketBuilder.make_guest(g.get("name", ""), g.get("gender", ""))
            for g in data.get("guestPlayers") or []
        ]
        pool = TournamentService.list_members(db) + guests
        selected = list(data.get("players") or []) + [g["id"] for g in guests]

        tournament = BracketBuilder.build(
            data.get("name", ""), data.get("format", ""), pool, selected, rng
        )

        payload = {
            "name": tournament["name"],
            "format": tournament["format"],
            "status": tournament["status"],
            "rounds": TournamentService._to_rounds(tournament["bracket"]),
            "createdAt": firestore.SERVER_TIMESTAMP,
        }
        _, ref = db.collection(TOURNAMENTS_COLLECTION).add(payload)
        logging.info(f"Created tournament {ref.id} ({tournament['format']})")
        return TournamentService._from_snapshot(ref.get())

    @staticmethod
    def list_tournaments(db: Client | None = None) -> list[Tournament]:
        """Fetch all tournaments."""
        if db is None:
            db = firestore.client()
        return [
            TournamentService._from_snapshot(doc)
            for doc in db.collection(TOURNAMENTS_COLLECTION).stream()
            if doc.exists
        ]

    @staticmethod
    def get_tournament(tournament_id: str, db: Client | None = None) -> Tournament:
        """Fetch a single tournament."""
        if db is None:
            db = firestore.client()
        doc = TournamentService._get_snapshot(db, tournament_id)
        return TournamentService._from_snapshot(doc)

    @staticmethod
    def rename_tournament(
        tournament_id: str, name: str, db: Client | None = None
    ) -> Tournament:
        """Change the display name of a tournament."""
        if db is None:
            db = firestore.client()
        name = (name or "").strip()
        if not name:
            raise ValidationError("Tournament Name is required.")

        TournamentService._get_snapshot(db, tournament_id)
        ref = db.collection(TOURNAMENTS_COLLECTION).document(tournament_id)
        ref.update({"name": name, "updatedAt": firestore.SERVER_TIMESTAMP})
        return TournamentService._from_snapshot(ref.get())

    @staticmethod
    def report_winner(
        tournament_id: str,
        round_index: int,
        match_index: int,
        winning_team_id: str,
        db: Client | None = None,
    ) -> Tournament:
        """Record a match winner and persist the progressed bracket."""
        if db is None:
            db = firestore.client()
        doc = TournamentService._get_snapshot(db, tournament_id)
        tournament = TournamentService._from_snapshot(doc)

        updated = BracketEngine.report_winner(
            tournament, round_index, match_index, winning_team_id
        )

        ref = db.collection(TOURNAMENTS_COLLECTION).document(tournament_id)
        ref.update(
            {
                "rounds": TournamentService._to_rounds(updated["bracket"]),
                "status": updated["status"],
                "updatedAt": firestore.SERVER_TIMESTAMP,
            }
        )
        if updated["status"] == STATUS_COMPLETED:
            champion = BracketEngine.champion(updated["bracket"])
            logging.info(
                f"Tournament {tournament_id} completed; champion "
                f"{champion['name'] if champion else 'unknown'}"
            )
        return TournamentService._from_snapshot(ref.get())

    @staticmethod
    def delete_tournament(tournament_id: str, db: Client | None = None) -> None:
        """Delete a tournament document."""
        if db is None:
            db = firestore.client()
        TournamentService._get_snapshot(db, tournament_id)
        db.collection(TOURNAMENTS_COLLECTION).document(tournament_id).delete()

    @staticmethod
    def summary(db: Client | None = None) -> dict[str, int]:
        """Count tournaments for the dashboard cards."""
        if db is None:
            db = firestore.client()
        statuses = [
            (doc.to_dict() or {}).get("status")
            for doc in db.collection(TOURNAMENTS_COLLECTION).stream()
            if doc.exists
        ]
        completed = sum(1 for s in statuses if s == STATUS_COMPLETED)
        return {
            "total": len(statuses),
            "active": len(statuses) - completed,
            "completed": completed,
        }
