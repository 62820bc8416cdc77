"""
Statistiche di una singola partita per un'assegnazione giocatore/squadra.
Una riga per partita; aggregati (totali, medie) calcolati in lettura.
"""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from roster.core.database import Base


class PlayerStatistic(Base):
    __tablename__ = "player_statistics"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    team_player_id = Column(
        Integer, ForeignKey("team_players.id", ondelete="CASCADE"),
        nullable=False,
    )
    game_date = Column(Date, nullable=False)

    # --- GAME ---
    minutes_played = Column(Integer, nullable=False, default=0)
    is_starter = Column(Boolean, nullable=False, default=False)
    jersey_number = Column(Integer, nullable=False)
    goals = Column(Integer, nullable=False, default=0)
    assists = Column(Integer, nullable=False, default=0)

    # --- AUDIT ---
    created_at = Column(DateTime(timezone=True), nullable=False)
    created_by = Column(String(450), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)
    updated_by = Column(String(450), nullable=True)

    # --- RELAZIONI ---
    team_player = relationship("TeamPlayer", back_populates="statistics")

    # --- INDICI ---
    __table_args__ = (
        Index("ix_player_statistics_team_player_id", "team_player_id"),
        Index("ix_player_statistics_game_date", "game_date"),
        Index("ix_player_statistics_team_player_id_game_date", "team_player_id", "game_date"),
    )

    def __repr__(self):
        return (
            f"<PlayerStatistic(id={self.id}, team_player_id={self.team_player_id}, "
            f"game_date={self.game_date})>"
        )
