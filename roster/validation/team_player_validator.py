"""Regole di validazione per le assegnazioni giocatore/squadra."""

from datetime import date

from roster.validation.common import FieldErrors, add_error, add_years, is_blank

MAX_TEAM_NAME_LENGTH = 200
MAX_CHAMPIONSHIP_NAME_LENGTH = 200
MAX_FUTURE_YEARS_FOR_JOINED_DATE = 1


def _validate_required_name(
    value: str | None, field: str, label: str, max_length: int, errors: FieldErrors,
) -> None:
    if is_blank(value):
        add_error(errors, field, f"{label} is required")
        return
    if len(value.strip()) > max_length:
        add_error(errors, field, f"{label} must not exceed {max_length} characters")


def validate_team_player(record, today: date | None = None) -> FieldErrors:
    """
    team_name / championship_name obbligatori (max 200), joined_date obbligatoria
    e non oltre un anno nel futuro, left_date se presente non precedente a
    joined_date e non nel futuro.
    """
    today = today or date.today()
    errors: FieldErrors = {}

    _validate_required_name(
        getattr(record, "team_name", None), "team_name", "Team name",
        MAX_TEAM_NAME_LENGTH, errors,
    )
    _validate_required_name(
        getattr(record, "championship_name", None), "championship_name", "Championship name",
        MAX_CHAMPIONSHIP_NAME_LENGTH, errors,
    )

    joined_date = getattr(record, "joined_date", None)
    if joined_date is None:
        add_error(errors, "joined_date", "Joined date is required")
    elif joined_date > add_years(today, MAX_FUTURE_YEARS_FOR_JOINED_DATE):
        add_error(
            errors, "joined_date",
            f"Joined date cannot be more than {MAX_FUTURE_YEARS_FOR_JOINED_DATE} year in the future",
        )

    left_date = getattr(record, "left_date", None)
    if left_date is not None:
        if joined_date is not None and left_date < joined_date:
            add_error(errors, "left_date", "Left date cannot be earlier than the joined date")
        if left_date > today:
            add_error(errors, "left_date", "Left date cannot be in the future")

    return errors
