"""Pydantic schemas per statistiche partita e aggregati."""

from datetime import date, datetime

from pydantic import BaseModel


class PlayerStatisticCreate(BaseModel):
    team_player_id: int = 0
    game_date: date | None = None
    minutes_played: int = 0
    is_starter: bool = False
    jersey_number: int = 0
    goals: int = 0
    assists: int = 0
    created_by: str | None = None


class PlayerStatisticUpdate(BaseModel):
    team_player_id: int = 0
    game_date: date | None = None
    minutes_played: int = 0
    is_starter: bool = False
    jersey_number: int = 0
    goals: int = 0
    assists: int = 0


class PlayerStatisticOut(BaseModel):
    id: int
    team_player_id: int
    game_date: date
    minutes_played: int
    is_starter: bool
    jersey_number: int
    goals: int
    assists: int

    created_at: datetime
    created_by: str
    updated_at: datetime | None = None
    updated_by: str | None = None

    class Config:
        from_attributes = True


class PlayerStatisticAggregate(BaseModel):
    """Totali e medie per partita. Insieme vuoto: tutto a zero."""
    game_count: int = 0
    total_minutes_played: int = 0
    total_goals: int = 0
    total_assists: int = 0
    average_minutes_played: float = 0.0
    average_goals: float = 0.0
    average_assists: float = 0.0
