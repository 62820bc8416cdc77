"""Pydantic schemas per le assegnazioni giocatore/squadra."""

from datetime import date, datetime

from pydantic import BaseModel


class TeamPlayerCreate(BaseModel):
    player_id: int
    team_name: str = ""
    championship_name: str = ""
    joined_date: date | None = None
    left_date: date | None = None
    created_by: str | None = None


class TeamPlayerUpdate(BaseModel):
    """Campi modificabili; player_id non cambia dopo la creazione."""
    team_name: str = ""
    championship_name: str = ""
    joined_date: date | None = None
    left_date: date | None = None


class TeamPlayerLeave(BaseModel):
    left_date: date


class TeamPlayerOut(BaseModel):
    id: int
    player_id: int
    team_name: str
    championship_name: str
    joined_date: date
    left_date: date | None = None
    is_active: bool

    created_at: datetime
    created_by: str
    updated_at: datetime | None = None
    updated_by: str | None = None

    class Config:
        from_attributes = True
