"""
Assegnazione di un giocatore a una squadra in un campionato, su una finestra temporale.
Attiva finché left_date è NULL: lo stato è calcolato, non salvato.
"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import relationship

from roster.core.database import Base


class TeamPlayer(Base):
    __tablename__ = "team_players"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    player_id = Column(
        Integer, ForeignKey("players.id", ondelete="CASCADE"),
        nullable=False,
    )
    team_name = Column(String(200), nullable=False)
    championship_name = Column(String(200), nullable=False)
    joined_date = Column(Date, nullable=False)
    left_date = Column(Date, nullable=True)

    # --- AUDIT ---
    created_at = Column(DateTime(timezone=True), nullable=False)
    created_by = Column(String(450), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)
    updated_by = Column(String(450), nullable=True)

    # --- RELAZIONI ---
    player = relationship("Player", back_populates="team_players")
    statistics = relationship(
        "PlayerStatistic",
        back_populates="team_player",
        cascade="all, delete-orphan",
    )

    # --- INDICI ---
    # Il vincolo "una sola assegnazione attiva" dipende da left_date: indice
    # unique parziale dove il dialetto lo supporta, controllo esplicito nei service.
    __table_args__ = (
        Index("ix_team_players_player_id", "player_id"),
        Index("ix_team_players_team_name", "team_name"),
        Index("ix_team_players_is_active", "left_date"),
        Index("ix_team_players_player_id_is_active", "player_id", "left_date"),
        Index(
            "ix_team_players_player_team_championship",
            "player_id", "team_name", "championship_name",
        ),
        Index(
            "uq_team_players_active_assignment",
            "player_id", "team_name", "championship_name",
            unique=True,
            sqlite_where=text("left_date IS NULL"),
            postgresql_where=text("left_date IS NULL"),
        ),
    )

    @property
    def is_active(self) -> bool:
        return self.left_date is None

    def __repr__(self):
        return (
            f"<TeamPlayer(id={self.id}, player_id={self.player_id}, "
            f"team='{self.team_name}', championship='{self.championship_name}')>"
        )
