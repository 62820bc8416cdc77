"""Servizio statistiche partita e aggregati per giocatore."""

import logging
from datetime import date

from sqlalchemy.orm import Session

from roster.core.exceptions import NotFoundError
from roster.repositories import PlayerStatisticRepository
from roster.schemas.statistics import (
    PlayerStatisticAggregate,
    PlayerStatisticCreate,
    PlayerStatisticOut,
    PlayerStatisticUpdate,
)

logger = logging.getLogger(__name__)

ENTITY = "PlayerStatistic"


def get_statistics_for_player(
    player_id: int,
    db: Session,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[PlayerStatisticOut]:
    """
    Statistiche del giocatore su tutte le assegnazioni, game_date DESC.
    Con start_date/end_date filtra sull'intervallo (estremi inclusi); un estremo
    mancante resta aperto.
    """
    repo = PlayerStatisticRepository(db)
    if start_date is None and end_date is None:
        rows = repo.list_by_player(player_id)
    else:
        rows = repo.get_by_date_range(
            player_id,
            start_date or date.min,
            end_date or date.max,
        )
    return [PlayerStatisticOut.model_validate(r) for r in rows]


def get_statistics_for_team_player(team_player_id: int, db: Session) -> list[PlayerStatisticOut]:
    rows = PlayerStatisticRepository(db).list_by_team_player(team_player_id)
    return [PlayerStatisticOut.model_validate(r) for r in rows]


def get_statistic(statistic_id: int, db: Session) -> PlayerStatisticOut:
    statistic = PlayerStatisticRepository(db).get_by_id(statistic_id)
    if statistic is None:
        raise NotFoundError(ENTITY, statistic_id)
    return PlayerStatisticOut.model_validate(statistic)


def add_statistic(payload: PlayerStatisticCreate, acting_user: str, db: Session) -> PlayerStatisticOut:
    statistic = PlayerStatisticRepository(db).add(payload, acting_user)
    return PlayerStatisticOut.model_validate(statistic)


def update_statistic(
    statistic_id: int,
    payload: PlayerStatisticUpdate,
    acting_user: str,
    db: Session,
) -> PlayerStatisticOut:
    statistic = PlayerStatisticRepository(db).update(statistic_id, payload, acting_user)
    return PlayerStatisticOut.model_validate(statistic)


def delete_statistic(statistic_id: int, db: Session) -> None:
    if not PlayerStatisticRepository(db).delete(statistic_id):
        raise NotFoundError(ENTITY, statistic_id)


def get_player_aggregates(
    player_id: int,
    db: Session,
    team_player_id: int | None = None,
) -> PlayerStatisticAggregate:
    return PlayerStatisticRepository(db).get_aggregates(player_id, team_player_id)
