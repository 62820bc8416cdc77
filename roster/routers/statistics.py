"""API statistiche partita."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from roster.core.database import get_db
from roster.core.identity import get_current_user
from roster.schemas.statistics import (
    PlayerStatisticCreate,
    PlayerStatisticOut,
    PlayerStatisticUpdate,
)
from roster.services import player_statistic_service

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


@router.post("", response_model=PlayerStatisticOut, status_code=201)
def add_statistic(
    payload: PlayerStatisticCreate,
    db: Session = Depends(get_db),
    acting_user: str = Depends(get_current_user),
):
    return player_statistic_service.add_statistic(payload, acting_user, db)


@router.get("/{statistic_id}", response_model=PlayerStatisticOut)
def get_statistic(statistic_id: int, db: Session = Depends(get_db)):
    return player_statistic_service.get_statistic(statistic_id, db)


@router.put("/{statistic_id}", response_model=PlayerStatisticOut)
def update_statistic(
    statistic_id: int,
    payload: PlayerStatisticUpdate,
    db: Session = Depends(get_db),
    acting_user: str = Depends(get_current_user),
):
    return player_statistic_service.update_statistic(statistic_id, payload, acting_user, db)


@router.delete("/{statistic_id}", status_code=204)
def delete_statistic(statistic_id: int, db: Session = Depends(get_db)):
    player_statistic_service.delete_statistic(statistic_id, db)
