"""Single-elimination progression: winner reports and round synthesis."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, cast

from shuttleboard.core.constants import (
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_UPCOMING,
)
from shuttleboard.errors import InvalidTransitionError, InvariantViolation

from .utils import is_bye, match_id

if TYPE_CHECKING:
    from .models import Bracket, Match, Round, Team, Tournament


def _copy_bracket(bracket: Bracket) -> Bracket:
    """Copy rounds and matches; teams are immutable and shared."""
    return [[cast("Match", dict(match)) for match in round_] for round_ in bracket]


class BracketEngine:
    """Applies match outcomes to a bracket without mutating its input."""

    @staticmethod
    def is_complete(bracket: Bracket) -> bool:
        """Check whether the final round is a single decided match."""
        if not bracket:
            return False
        last_round = bracket[-1]
        return len(last_round) == 1 and last_round[0].get("winner") is not None

    @staticmethod
    def champion(bracket: Bracket) -> Optional[Team]:
        """Return the tournament winner once the bracket is complete."""
        if not BracketEngine.is_complete(bracket):
            return None
        return bracket[-1][0]["winner"]

    @staticmethod
    def _is_played(match: Match) -> bool:
        # Bye pairings are resolved at build time and never count as played
        return (
            match.get("winner") is not None
            and not is_bye(match.get("team1"))
            and not is_bye(match.get("team2"))
        )

    @staticmethod
    def compute_status(bracket: Bracket) -> str:
        """Derive the tournament status from the bracket alone."""
        if BracketEngine.is_complete(bracket):
            return STATUS_COMPLETED
        if any(BracketEngine._is_played(m) for round_ in bracket for m in round_):
            return STATUS_IN_PROGRESS
        return STATUS_UPCOMING

    @staticmethod
    def synthesize_next_round(bracket: Bracket) -> Bracket:
        """Append the next round if the last one is fully decided.

        Returns a new bracket. Running it again on its own output is a no-op,
        since a freshly appended round has no winners yet.
        """
        result = _copy_bracket(bracket)
        if not result:
            return result

        last_round = result[-1]
        winners = [m["winner"] for m in last_round if m.get("winner") is not None]
        if len(winners) != len(last_round) or len(winners) <= 1:
            return result

        round_index = len(result)
        if len(winners) % 2 != 0:
            message = (
                f"Round {round_index - 1} produced {len(winners)} winners; "
                "cannot pair an odd number of teams."
            )
            logging.error(f"Bracket invariant violated: {message}")
            raise InvariantViolation(message)

        next_round: Round = [
            {
                "matchId": match_id(round_index, i // 2),
                "team1": winners[i],
                "team2": winners[i + 1],
                "winner": None,
            }
            for i in range(0, len(winners), 2)
        ]
        result.append(next_round)
        return result

    @staticmethod
    def _locate(bracket: Bracket, round_index: int, match_index: int) -> Match:
        if not 0 <= round_index < len(bracket):
            raise InvalidTransitionError(f"Round {round_index} does not exist.")
        round_ = bracket[round_index]
        if not 0 <= match_index < len(round_):
            raise InvalidTransitionError(
                f"Match {match_index} does not exist in round {round_index}."
            )
        return round_[match_index]

    @staticmethod
    def report_winner(
        tournament: Tournament,
        round_index: int,
        match_index: int,
        winning_team_id: str,
    ) -> Tournament:
        """Record a match winner and return the updated tournament.

        Raises InvalidTransitionError without touching the input when the
        match is unknown or already decided, the team is not in the match or
        is a bye, or the tournament is already complete.
        """
        bracket = tournament.get("bracket") or []
        if (
            tournament.get("status") == STATUS_COMPLETED
            or BracketEngine.is_complete(bracket)
        ):
            raise InvalidTransitionError("Tournament is already completed.")

        match = BracketEngine._locate(bracket, round_index, match_index)
        if match.get("winner") is not None:
            raise InvalidTransitionError(
                f"Match {match['matchId']} already has a winner."
            )

        winner = next(
            (
                team
                for team in (match.get("team1"), match.get("team2"))
                if team and team["id"] == winning_team_id
            ),
            None,
        )
        if winner is None:
            raise InvalidTransitionError(
                f"Team {winning_team_id} is not playing in match {match['matchId']}."
            )
        if is_bye(winner):
            raise InvalidTransitionError("A bye cannot win a match.")

        updated = _copy_bracket(bracket)
        updated[round_index][match_index]["winner"] = winner
        updated = BracketEngine.synthesize_next_round(updated)

        result = cast("Tournament", dict(tournament))
        result["bracket"] = updated
        result["status"] = BracketEngine.compute_status(updated)
        return result
