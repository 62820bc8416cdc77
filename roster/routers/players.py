"""
API Players: anagrafica giocatori, assegnazioni e statistiche per giocatore,
aggregati per partita.
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from roster.core.database import get_db
from roster.core.identity import get_current_user
from roster.schemas.players import PlayerCreate, PlayerOut, PlayerUpdate
from roster.schemas.statistics import PlayerStatisticAggregate, PlayerStatisticOut
from roster.schemas.team_players import TeamPlayerOut
from roster.services import player_service, player_statistic_service, team_player_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/players", tags=["players"])


@router.get("", response_model=list[PlayerOut])
def list_players(user_id: str | None = None, db: Session = Depends(get_db)):
    """Tutti i giocatori ordinati per nome; con ?user_id= solo quelli del proprietario."""
    if user_id is not None:
        return player_service.list_players_for_user(user_id, db)
    return player_service.list_players(db)


@router.post("", response_model=PlayerOut, status_code=201)
def create_player(
    payload: PlayerCreate,
    db: Session = Depends(get_db),
    acting_user: str = Depends(get_current_user),
):
    return player_service.create_player(payload, acting_user, db)


@router.get("/{player_id}", response_model=PlayerOut)
def get_player(player_id: int, db: Session = Depends(get_db)):
    return player_service.get_player(player_id, db)


@router.put("/{player_id}", response_model=PlayerOut)
def update_player(
    player_id: int,
    payload: PlayerUpdate,
    db: Session = Depends(get_db),
    acting_user: str = Depends(get_current_user),
):
    return player_service.update_player(player_id, payload, acting_user, db)


@router.delete("/{player_id}", status_code=204)
def delete_player(player_id: int, db: Session = Depends(get_db)):
    """Elimina il giocatore con tutte le assegnazioni e le statistiche collegate."""
    player_service.delete_player(player_id, db)


@router.get("/{player_id}/teams", response_model=list[TeamPlayerOut])
def player_teams(player_id: int, include_inactive: bool = False, db: Session = Depends(get_db)):
    return team_player_service.get_teams_for_player(player_id, db, include_inactive=include_inactive)


@router.get("/{player_id}/statistics", response_model=list[PlayerStatisticOut])
def player_statistics(
    player_id: int,
    start_date: date | None = None,
    end_date: date | None = None,
    db: Session = Depends(get_db),
):
    """
    Statistiche del giocatore su tutte le squadre, game_date DESC.
    Parametri opzionali start_date / end_date (inclusi). 400 se start_date > end_date.
    """
    try:
        return player_statistic_service.get_statistics_for_player(
            player_id, db, start_date=start_date, end_date=end_date,
        )
    except ValueError as e:
        logger.warning("Intervallo date non valido player_id=%s: %s", player_id, e)
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{player_id}/aggregates", response_model=PlayerStatisticAggregate)
def player_aggregates(player_id: int, team_player_id: int | None = None, db: Session = Depends(get_db)):
    """Totali e medie per partita. Nessuna statistica: tutto a zero (mai errore)."""
    return player_statistic_service.get_player_aggregates(player_id, db, team_player_id=team_player_id)
