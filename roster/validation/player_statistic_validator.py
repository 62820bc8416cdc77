"""
Regole di validazione per le statistiche partita.

L'esistenza dell'assegnazione referenziata richiede il DB: la controlla il
repository e la aggiunge alla stessa mappa di errori.
"""

from datetime import date

from roster.validation.common import FieldErrors, add_error, is_blank

MAX_MINUTES_PLAYED = 120
MAX_JERSEY_NUMBER = 99


def validate_player_statistic(record, today: date | None = None) -> FieldErrors:
    today = today or date.today()
    errors: FieldErrors = {}

    team_player_id = getattr(record, "team_player_id", None)
    if team_player_id is None or team_player_id < 1:
        add_error(errors, "team_player_id", "Team Player ID is required and must be a positive integer")

    game_date = getattr(record, "game_date", None)
    if game_date is None:
        add_error(errors, "game_date", "Game date is required")
    elif game_date > today:
        add_error(errors, "game_date", "Game date cannot be in the future")

    minutes_played = getattr(record, "minutes_played", None)
    if minutes_played is None or minutes_played < 0:
        add_error(errors, "minutes_played", "Minutes played must be a non-negative integer")
    elif minutes_played > MAX_MINUTES_PLAYED:
        add_error(errors, "minutes_played", f"Minutes played must not exceed {MAX_MINUTES_PLAYED}")

    jersey_number = getattr(record, "jersey_number", None)
    if jersey_number is None or jersey_number < 1:
        add_error(errors, "jersey_number", "Jersey number must be a positive integer")
    elif jersey_number > MAX_JERSEY_NUMBER:
        add_error(errors, "jersey_number", f"Jersey number must not exceed {MAX_JERSEY_NUMBER}")

    goals = getattr(record, "goals", None)
    if goals is None or goals < 0:
        add_error(errors, "goals", "Goals must be a non-negative integer")

    assists = getattr(record, "assists", None)
    if assists is None or assists < 0:
        add_error(errors, "assists", "Assists must be a non-negative integer")

    if is_blank(getattr(record, "created_by", None)):
        add_error(errors, "created_by", "Created by is required")

    return errors
