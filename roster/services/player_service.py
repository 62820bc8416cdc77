"""
Servizio giocatori: casi d'uso sopra PlayerRepository.
Converte le entità in PlayerOut e trasforma le assenze in NotFoundError.
"""

import logging

from sqlalchemy.orm import Session

from roster.core.exceptions import NotFoundError
from roster.repositories import PlayerRepository
from roster.schemas.players import PlayerCreate, PlayerOut, PlayerUpdate

logger = logging.getLogger(__name__)


def list_players(db: Session) -> list[PlayerOut]:
    players = PlayerRepository(db).list_all()
    logger.info("Recuperati %s giocatori", len(players))
    return [PlayerOut.model_validate(p) for p in players]


def list_players_for_user(user_id: str, db: Session) -> list[PlayerOut]:
    players = PlayerRepository(db).get_by_user_id(user_id)
    logger.info("Recuperati %s giocatori per user_id=%s", len(players), user_id)
    return [PlayerOut.model_validate(p) for p in players]


def get_player(player_id: int, db: Session) -> PlayerOut:
    player = PlayerRepository(db).get_by_id(player_id)
    if player is None:
        raise NotFoundError("Player", player_id)
    return PlayerOut.model_validate(player)


def create_player(payload: PlayerCreate, acting_user: str, db: Session) -> PlayerOut:
    player = PlayerRepository(db).add(payload, acting_user)
    return PlayerOut.model_validate(player)


def update_player(player_id: int, payload: PlayerUpdate, acting_user: str, db: Session) -> PlayerOut:
    player = PlayerRepository(db).update(player_id, payload, acting_user)
    return PlayerOut.model_validate(player)


def delete_player(player_id: int, db: Session) -> None:
    if not PlayerRepository(db).delete(player_id):
        logger.warning("Player id=%s non trovato per delete", player_id)
        raise NotFoundError("Player", player_id)
