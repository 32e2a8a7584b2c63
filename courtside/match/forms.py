"""Forms for the match blueprint."""

from flask_wtf import FlaskForm  # type: ignore
from wtforms import (
    BooleanField,
    DateField,
    FieldList,
    Form,
    FormField,
    StringField,
    TextAreaField,
)
from wtforms.validators import DataRequired, Length, Optional

from .models import MatchSubmission


class SetForm(Form):
    """One set of a match. Scores stay free text until the match is built."""

    s1 = StringField("You")
    s2 = StringField("Opponent")
    tie_break = BooleanField("Tie-break")


class MatchForm(FlaskForm):
    """Form for recording or editing a match."""

    player1 = StringField("Player 1", validators=[Optional(), Length(max=80)])
    player2 = StringField(
        "Opponent",
        validators=[
            DataRequired(message="Please enter an opponent name."),
            Length(max=80),
        ],
    )
    match_date = DateField("Date", validators=[Optional()])
    location = StringField("Location", validators=[Optional(), Length(max=120)])
    sets = FieldList(FormField(SetForm), min_entries=1)
    notes = TextAreaField("Notes", validators=[Optional()])
    duration_hours = StringField("Duration (hours)", default="1")
    use_lights = BooleanField("Lights")
    use_heating = BooleanField("Heating")
    is_guest = BooleanField("Guest rate")
    total_cost = StringField("Total cost", validators=[Optional()])

    def to_submission(self) -> MatchSubmission:
        """Convert the submitted fields into a match submission."""
        return MatchSubmission(
            player1=self.player1.data,
            player2=self.player2.data or "",
            match_date=self.match_date.data,
            location=self.location.data,
            sets=[
                {
                    "s1": entry.get("s1"),
                    "s2": entry.get("s2"),
                    "tieBreak": bool(entry.get("tie_break")),
                }
                for entry in self.sets.data
            ],
            notes=self.notes.data or "",
            duration_hours=self.duration_hours.data,
            use_lights=bool(self.use_lights.data),
            use_heating=bool(self.use_heating.data),
            is_guest=bool(self.is_guest.data),
            total_cost=self.total_cost.data or None,
        )
