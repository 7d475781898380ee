"""Data models for the tournament blueprint."""

from __future__ import annotations

from typing import Any, List, Optional, TypedDict

from shuttleboard.core.types import FirestoreDocument


class Participant(TypedDict):
    """A club member or guest entrant who can be placed on a team."""

    id: str
    name: str
    gender: str
    kind: str  # member/guest


class Team(TypedDict):
    """The unit occupying a bracket slot."""

    id: str
    name: str
    players: list[Participant]
    isBye: bool


class Match(TypedDict):
    """One bracket cell."""

    matchId: str
    team1: Optional[Team]
    team2: Optional[Team]
    winner: Optional[Team]


Round = List[Match]
Bracket = List[Round]


class Tournament(FirestoreDocument, total=False):
    """A tournament record as exchanged with the API layer."""

    name: str
    format: str
    status: str
    bracket: Bracket

    # UI and calculated fields
    champion: Optional[Team]
    createdAt: Any


class StoredRound(TypedDict):
    """A bracket round as persisted in Firestore, which cannot nest arrays."""

    index: int
    matches: list[Match]
