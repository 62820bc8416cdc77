"""Pydantic schemas per API Players."""

from datetime import date, datetime

from pydantic import BaseModel


class PlayerCreate(BaseModel):
    """
    Payload di creazione. I vincoli (lunghezze, date, genere, URL) sono
    applicati dalle regole di validazione, non qui, così che il chiamante
    riceva tutti gli errori per campo in un colpo solo.
    """
    user_id: str = ""
    name: str = ""
    date_of_birth: date | None = None
    gender: str | None = None
    photo_url: str | None = None
    # Pre-popolabile in seed/migrazioni; altrimenti l'utente corrente
    created_by: str | None = None


class PlayerUpdate(BaseModel):
    user_id: str = ""
    name: str = ""
    date_of_birth: date | None = None
    gender: str | None = None
    photo_url: str | None = None


class PlayerOut(BaseModel):
    id: int
    user_id: str
    name: str
    date_of_birth: date
    age: int | None = None
    gender: str | None = None
    photo_url: str | None = None

    created_at: datetime
    created_by: str
    updated_at: datetime | None = None
    updated_by: str | None = None

    class Config:
        from_attributes = True
