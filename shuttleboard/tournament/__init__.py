"""Tournament API blueprint."""

from flask import Blueprint

bp = Blueprint("tournament", __name__, url_prefix="/api/tournaments")

from . import routes  # noqa: E402, F401
from .builder import BracketBuilder  # noqa: E402
from .models import Bracket, Match, Participant, Team, Tournament  # noqa: E402
from .progression import BracketEngine  # noqa: E402
from .services import TournamentService  # noqa: E402

__all__ = [
    "Bracket",
    "BracketBuilder",
    "BracketEngine",
    "Match",
    "Participant",
    "Team",
    "Tournament",
    "TournamentService",
    "routes",
]
