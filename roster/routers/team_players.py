"""API assegnazioni giocatore/squadra/campionato."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from roster.core.database import get_db
from roster.core.identity import get_current_user
from roster.schemas.statistics import PlayerStatisticOut
from roster.schemas.team_players import (
    TeamPlayerCreate,
    TeamPlayerLeave,
    TeamPlayerOut,
    TeamPlayerUpdate,
)
from roster.services import player_statistic_service, team_player_service

router = APIRouter(prefix="/api/team-players", tags=["team-players"])


@router.post("", response_model=TeamPlayerOut, status_code=201)
def add_player_to_team(
    payload: TeamPlayerCreate,
    db: Session = Depends(get_db),
    acting_user: str = Depends(get_current_user),
):
    """409 se il giocatore ha già un'assegnazione attiva per stessa squadra e campionato."""
    return team_player_service.add_player_to_team(payload, acting_user, db)


@router.get("/{team_player_id}", response_model=TeamPlayerOut)
def get_assignment(team_player_id: int, db: Session = Depends(get_db)):
    return team_player_service.get_assignment(team_player_id, db)


@router.put("/{team_player_id}", response_model=TeamPlayerOut)
def update_assignment(
    team_player_id: int,
    payload: TeamPlayerUpdate,
    db: Session = Depends(get_db),
    acting_user: str = Depends(get_current_user),
):
    return team_player_service.update_assignment(team_player_id, payload, acting_user, db)


@router.post("/{team_player_id}/leave", response_model=TeamPlayerOut)
def leave_team(
    team_player_id: int,
    payload: TeamPlayerLeave,
    db: Session = Depends(get_db),
    acting_user: str = Depends(get_current_user),
):
    """Chiude l'assegnazione. Lo storico e le statistiche restano."""
    return team_player_service.remove_player_from_team(team_player_id, payload.left_date, acting_user, db)


@router.delete("/{team_player_id}", status_code=204)
def delete_assignment(team_player_id: int, db: Session = Depends(get_db)):
    team_player_service.delete_assignment(team_player_id, db)


@router.get("/{team_player_id}/statistics", response_model=list[PlayerStatisticOut])
def assignment_statistics(team_player_id: int, db: Session = Depends(get_db)):
    return player_statistic_service.get_statistics_for_team_player(team_player_id, db)
