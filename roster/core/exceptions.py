"""
Eccezioni di dominio del roster.

Tutte recuperabili dal chiamante: i router le traducono in 404 / 422 / 409 / 500.
Ogni eccezione porta tipo entità e identificativo per costruire un messaggio preciso.
"""

from typing import Any


class RosterError(Exception):
    """Base per gli errori del data layer."""


class NotFoundError(RosterError):
    """Operazione su un identificativo senza riga corrispondente."""

    def __init__(self, entity_type: str, entity_id: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} could not be found.")


class ValidationFailedError(RosterError):
    """Una o più violazioni di regole per campo. `errors` contiene la mappa completa."""

    def __init__(self, errors: dict[str, list[str]], entity_type: str | None = None):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        self.entity_type = entity_type
        label = entity_type or "Record"
        super().__init__(f"{label} validation failed: {', '.join(sorted(self.errors))}")


class DuplicateActiveAssignmentError(RosterError):
    """Seconda assegnazione attiva per la stessa terna giocatore/squadra/campionato."""

    def __init__(
        self,
        player_id: int,
        team_name: str,
        championship_name: str,
        team_player_id: int | None = None,
    ):
        self.player_id = player_id
        self.team_name = team_name
        self.championship_name = championship_name
        self.team_player_id = team_player_id
        super().__init__(
            f"Player {player_id} already has an active assignment to "
            f"'{team_name}' in '{championship_name}'."
        )


class PersistenceError(RosterError):
    """Errore dello store sottostante, arricchito con operazione ed entità."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        entity_type: str | None = None,
        entity_id: Any = None,
    ):
        self.operation = operation
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message)
