"""Forms for the tournament API.

Flask-WTF reads JSON request bodies as form data, so these validate the shape
of API payloads before they reach the service layer.
"""

from flask_wtf import FlaskForm
from wtforms import IntegerField, SelectField, SelectMultipleField, StringField
from wtforms.validators import DataRequired, NumberRange

from shuttleboard.core.constants import TOURNAMENT_FORMATS


class APIForm(FlaskForm):
    """Base form for JSON endpoints, which carry no CSRF token."""

    class Meta:
        csrf = False

    def first_error(self) -> str:
        """Return the first validation message, prefixed with its field label."""
        for field in self:
            if field.errors:
                message = field.errors[0]
                if field.label.text in message:
                    return message
                return f"{field.label.text}: {message}"
        return "Invalid request."


class TournamentForm(APIForm):
    """Form for creating a tournament."""

    name = StringField(
        "Tournament Name",
        validators=[DataRequired(message="Tournament Name is required.")],
    )

    format = SelectField(
        "Tournament Type",
        choices=[(f, f) for f in TOURNAMENT_FORMATS],
        validators=[DataRequired()],
    )

    # Guests are read straight from the JSON body; they are not form data.
    players = SelectMultipleField("Players", choices=[], validate_choice=False)


class RenameForm(APIForm):
    """Form for editing a tournament's name."""

    name = StringField(
        "Tournament Name",
        validators=[DataRequired(message="Tournament Name is required.")],
    )


class WinnerForm(APIForm):
    """Form for reporting the winner of a match."""

    roundIndex = IntegerField("Round", validators=[NumberRange(min=0)])
    matchIndex = IntegerField("Match", validators=[NumberRange(min=0)])
    winningTeamId = StringField("Winning Team", validators=[DataRequired()])
