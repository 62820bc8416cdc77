"""
Servizio assegnazioni giocatore/squadra.

Applica la regola "una sola assegnazione attiva per squadra e campionato":
has_active_duplicate e la scrittura successiva girano nella stessa sessione,
senza commit intermedi, quindi nella stessa transazione.
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from roster.core.exceptions import (
    DuplicateActiveAssignmentError,
    NotFoundError,
    ValidationFailedError,
)
from roster.repositories import PlayerRepository, TeamPlayerRepository
from roster.schemas.team_players import TeamPlayerCreate, TeamPlayerOut, TeamPlayerUpdate
from roster.validation.team_player_validator import validate_team_player

logger = logging.getLogger(__name__)

ENTITY = "TeamPlayer"


def get_teams_for_player(player_id: int, db: Session, include_inactive: bool = False) -> list[TeamPlayerOut]:
    """Assegnazioni del giocatore (solo attive se include_inactive=False), joined_date DESC."""
    repo = TeamPlayerRepository(db)
    rows = repo.list_by_player(player_id) if include_inactive else repo.list_active_by_player(player_id)
    logger.info(
        "Recuperate %s assegnazioni per player_id=%s (include_inactive=%s)",
        len(rows), player_id, include_inactive,
    )
    return [TeamPlayerOut.model_validate(r) for r in rows]


def get_assignment(team_player_id: int, db: Session) -> TeamPlayerOut:
    team_player = TeamPlayerRepository(db).get_by_id(team_player_id)
    if team_player is None:
        raise NotFoundError(ENTITY, team_player_id)
    return TeamPlayerOut.model_validate(team_player)


def add_player_to_team(payload: TeamPlayerCreate, acting_user: str, db: Session) -> TeamPlayerOut:
    """
    Flusso:
      1. Validazione payload (tutti gli errori insieme)
      2. Il giocatore deve esistere
      3. Nessuna assegnazione attiva per stessa squadra e campionato
      4. Insert + commit
    """
    errors = validate_team_player(payload)
    if errors:
        raise ValidationFailedError(errors, ENTITY)

    if not PlayerRepository(db).exists(payload.player_id):
        logger.warning("Player id=%s non trovato durante add_player_to_team", payload.player_id)
        raise NotFoundError("Player", payload.player_id)

    repo = TeamPlayerRepository(db)
    if payload.left_date is None and repo.has_active_duplicate(
        payload.player_id, payload.team_name, payload.championship_name,
    ):
        logger.warning(
            "Assegnazione attiva già presente player_id=%s team=%s championship=%s",
            payload.player_id, payload.team_name, payload.championship_name,
        )
        raise DuplicateActiveAssignmentError(
            payload.player_id, payload.team_name.strip(), payload.championship_name.strip(),
        )

    team_player = repo.add(payload, acting_user)
    return TeamPlayerOut.model_validate(team_player)


def update_assignment(
    team_player_id: int,
    payload: TeamPlayerUpdate,
    acting_user: str,
    db: Session,
) -> TeamPlayerOut:
    errors = validate_team_player(payload)
    if errors:
        raise ValidationFailedError(errors, ENTITY)

    repo = TeamPlayerRepository(db)
    existing = repo.get_by_id(team_player_id)
    if existing is None:
        raise NotFoundError(ENTITY, team_player_id)

    if payload.left_date is None and repo.has_active_duplicate(
        existing.player_id, payload.team_name, payload.championship_name,
        exclude_id=team_player_id,
    ):
        raise DuplicateActiveAssignmentError(
            existing.player_id, payload.team_name.strip(), payload.championship_name.strip(),
            team_player_id=team_player_id,
        )

    team_player = repo.update(team_player_id, payload, acting_user)
    return TeamPlayerOut.model_validate(team_player)


def remove_player_from_team(
    team_player_id: int,
    left_date: date,
    acting_user: str,
    db: Session,
) -> TeamPlayerOut:
    """Chiude l'assegnazione impostando left_date. Non cancella nulla."""
    repo = TeamPlayerRepository(db)
    existing = repo.get_by_id(team_player_id)
    if existing is None:
        raise NotFoundError(ENTITY, team_player_id)

    if not existing.is_active:
        raise ValidationFailedError({"left_date": ["Player has already left the team."]}, ENTITY)

    payload = TeamPlayerUpdate(
        team_name=existing.team_name,
        championship_name=existing.championship_name,
        joined_date=existing.joined_date,
        left_date=left_date,
    )
    team_player = repo.update(team_player_id, payload, acting_user)
    logger.info("Giocatore uscito dall'assegnazione id=%s left_date=%s", team_player_id, left_date)
    return TeamPlayerOut.model_validate(team_player)


def delete_assignment(team_player_id: int, db: Session) -> None:
    if not TeamPlayerRepository(db).delete(team_player_id):
        raise NotFoundError(ENTITY, team_player_id)
