"""
Player ORM model. Entità radice del roster: anagrafica e blocco audit.
L'età è derivata dalla data di nascita, mai salvata nel DB.
"""

from datetime import date

from sqlalchemy import Column, Date, DateTime, Index, Integer, String
from sqlalchemy.orm import relationship

from roster.core.database import Base


def calculate_age(date_of_birth: date | None, today: date | None = None) -> int | None:
    """
    Età in anni compiuti alla data `today` (default: oggi).
    Se il compleanno non è ancora arrivato nell'anno si sottrae uno;
    un nato il 29/02 compie gli anni il 01/03 negli anni non bisestili.
    """
    if date_of_birth is None:
        return None
    today = today or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(450), nullable=False)
    name = Column(String(200), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(50), nullable=True)
    photo_url = Column(String(500), nullable=True)

    # --- AUDIT ---
    created_at = Column(DateTime(timezone=True), nullable=False)
    created_by = Column(String(450), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)
    updated_by = Column(String(450), nullable=True)

    # --- RELAZIONI ---
    team_players = relationship(
        "TeamPlayer",
        back_populates="player",
        cascade="all, delete-orphan",
    )

    # --- INDICI ---
    __table_args__ = (
        Index("ix_players_user_id", "user_id"),
        Index("ix_players_name", "name"),
        Index("ix_players_date_of_birth", "date_of_birth"),
        Index("ix_players_user_id_name", "user_id", "name"),
    )

    @property
    def age(self) -> int | None:
        return calculate_age(self.date_of_birth)

    def __repr__(self):
        return f"<Player(id={self.id}, name='{self.name}', user_id='{self.user_id}')>"
