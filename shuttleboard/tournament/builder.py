"""Builds the seeded opening round of a single-elimination tournament."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any, Optional

from shuttleboard.core.constants import (
    DOUBLES_FORMATS,
    FEMALE,
    GENDERS,
    KIND_GUEST,
    MALE,
    MENS_DOUBLES,
    MENS_SINGLES,
    MIN_DOUBLES_PLAYERS,
    MIN_SINGLES_PLAYERS,
    MIXED_DOUBLES,
    STATUS_UPCOMING,
    TEAM_NAME_POOL,
    TOURNAMENT_FORMATS,
    WOMENS_DOUBLES,
    WOMENS_SINGLES,
)
from shuttleboard.errors import ValidationError

from .utils import make_bye, match_id, next_power_of_two, shuffled

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import Participant, Round, Team, Tournament


class BracketBuilder:
    """Turns a creation request into a tournament with a seeded Round 0."""

    @staticmethod
    def make_guest(name: str, gender: str) -> Participant:
        """Create an ad hoc guest entrant with a fresh identity."""
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise ValidationError("Guest Name is required.")
        if gender not in GENDERS:
            raise ValidationError(f"Invalid gender for guest {name}: {gender}.")
        return {
            "id": f"guest-{uuid.uuid4().hex}",
            "name": name,
            "gender": gender,
            "kind": KIND_GUEST,
        }

    @staticmethod
    def eligible_participants(
        pool: Iterable[Participant], tournament_format: str
    ) -> list[Participant]:
        """Restrict the participant pool to players allowed in the format."""
        if tournament_format in (MENS_SINGLES, MENS_DOUBLES):
            return [p for p in pool if p.get("gender") == MALE]
        if tournament_format in (WOMENS_SINGLES, WOMENS_DOUBLES):
            return [p for p in pool if p.get("gender") == FEMALE]
        if tournament_format == MIXED_DOUBLES:
            return [p for p in pool if p.get("gender") in GENDERS]
        return []

    @staticmethod
    def validate_request(
        name: str, tournament_format: str, selected_ids: list[str]
    ) -> None:
        """Check the count constraints that do not need team formation."""
        if not (name or "").strip():
            raise ValidationError("Tournament Name is required.")
        if tournament_format not in TOURNAMENT_FORMATS:
            raise ValidationError(f"Unknown tournament format: {tournament_format}.")

        is_doubles = tournament_format in DOUBLES_FORMATS
        min_players = MIN_DOUBLES_PLAYERS if is_doubles else MIN_SINGLES_PLAYERS
        if len(selected_ids) < min_players:
            raise ValidationError(
                f"At least {min_players} players must be selected for "
                f"{tournament_format}."
            )
        if is_doubles and len(selected_ids) % 2 != 0:
            raise ValidationError(
                "An even number of players must be selected for Doubles."
            )

    @staticmethod
    def _select(
        pool: Iterable[Participant], tournament_format: str, selected_ids: list[str]
    ) -> list[Participant]:
        """Resolve selected ids against the eligible pool."""
        pool = list(pool)
        names = {p["id"]: p.get("name") or p["id"] for p in pool}
        eligible = {
            p["id"]: p
            for p in BracketBuilder.eligible_participants(pool, tournament_format)
        }
        players = []
        for pid in selected_ids:
            if pid not in eligible:
                raise ValidationError(
                    f"Player {names.get(pid, pid)} is not eligible for "
                    f"{tournament_format}."
                )
            players.append(eligible[pid])
        return players

    @staticmethod
    def _pair(
        first: Participant, second: Participant, index: int, names: list[str]
    ) -> Team:
        # Ordinal fallback once the name pool runs dry
        label = names.pop() if names else str(index + 1)
        return {
            "id": f"team-{index}",
            "name": f"Team {label}",
            "players": [first, second],
            "isBye": False,
        }

    @staticmethod
    def form_teams(
        players: list[Participant], tournament_format: str, rng: Optional[Any] = None
    ) -> list[Team]:
        """Group selected players into the teams that occupy bracket slots.

        Singles wrap each player in their own team. Doubles pair a shuffled
        roster consecutively, and Mixed Doubles pairs the i-th man with the
        i-th woman. Doubles teams take names from a shuffled copy of the pool.
        """
        if tournament_format not in DOUBLES_FORMATS:
            return [
                {"id": p["id"], "name": p["name"], "players": [p], "isBye": False}
                for p in players
            ]

        names = shuffled(TEAM_NAME_POOL, rng)
        roster = shuffled(players, rng)

        if tournament_format == MIXED_DOUBLES:
            men = [p for p in roster if p.get("gender") == MALE]
            women = [p for p in roster if p.get("gender") == FEMALE]
            if len(men) + len(women) != len(roster):
                raise ValidationError(
                    "Every Mixed Doubles player must be listed as Male or Female."
                )
            if len(men) != len(women):
                raise ValidationError(
                    "Mixed Doubles requires an equal number of male and female players."
                )
            pairs = list(zip(men, women))
        else:
            pairs = list(zip(roster[0::2], roster[1::2]))

        return [
            BracketBuilder._pair(first, second, i, names)
            for i, (first, second) in enumerate(pairs)
        ]

    @staticmethod
    def seed_first_round(teams: list[Team], rng: Optional[Any] = None) -> Round:
        """Pad teams with byes to a power of two and build Round 0.

        Every bye is placed against a real team, so a bye pairing always
        resolves to the real side and no bye ever advances.
        """
        bracket_size = next_power_of_two(len(teams))
        num_matches = bracket_size // 2
        num_byes = bracket_size - len(teams)

        seeded = shuffled(teams, rng)
        slots = shuffled(range(num_matches), rng)
        bye_slots = set(slots[:num_byes])

        first_round: Round = []
        remaining = iter(seeded)
        bye_count = 0
        for i in range(num_matches):
            if i in bye_slots:
                team = next(remaining)
                bye = make_bye(bye_count)
                bye_count += 1
                # Side of the bye is part of the seeding
                pair = shuffled([team, bye], rng)
                first_round.append(
                    {
                        "matchId": match_id(0, i),
                        "team1": pair[0],
                        "team2": pair[1],
                        "winner": team,
                    }
                )
            else:
                first_round.append(
                    {
                        "matchId": match_id(0, i),
                        "team1": next(remaining),
                        "team2": next(remaining),
                        "winner": None,
                    }
                )
        return first_round

    @staticmethod
    def build(
        name: str,
        tournament_format: str,
        pool: Iterable[Participant],
        selected_ids: Iterable[str],
        rng: Optional[Any] = None,
    ) -> Tournament:
        """Create a tournament and its opening round from a roster snapshot."""
        # Selection is a set; keep first-seen order
        selected = list(dict.fromkeys(selected_ids))
        BracketBuilder.validate_request(name, tournament_format, selected)

        players = BracketBuilder._select(pool, tournament_format, selected)
        teams = BracketBuilder.form_teams(players, tournament_format, rng)
        first_round = BracketBuilder.seed_first_round(teams, rng)

        logging.info(
            f"Built {tournament_format} bracket '{name.strip()}' with "
            f"{len(teams)} teams and {len(first_round)} opening matches"
        )
        return {
            "name": name.strip(),
            "format": tournament_format,
            "status": STATUS_UPCOMING,
            "bracket": [first_round],
        }
