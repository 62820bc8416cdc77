"""
Repository statistiche partita.

Letture per giocatore (join su team_players), per assegnazione e per intervallo
di date, tutte ordinate per game_date DESC. Aggregati (totali e medie per
partita) calcolati in SQL con COUNT/SUM/AVG; il caso vuoto ritorna tutto a zero.
"""

import logging
from datetime import date

from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session

from roster.core.audit import resolve_acting_user, stamp_audit
from roster.core.exceptions import NotFoundError, ValidationFailedError
from roster.models import PlayerStatistic, TeamPlayer
from roster.repositories.base import persistence_errors
from roster.schemas.statistics import (
    PlayerStatisticAggregate,
    PlayerStatisticCreate,
    PlayerStatisticUpdate,
)
from roster.validation.common import add_error
from roster.validation.player_statistic_validator import validate_player_statistic

logger = logging.getLogger(__name__)

ENTITY = "PlayerStatistic"

STAT_FIELDS = (
    "team_player_id",
    "game_date",
    "minutes_played",
    "is_starter",
    "jersey_number",
    "goals",
    "assists",
)


class PlayerStatisticRepository:
    def __init__(self, db: Session):
        self._db = db

    # ------------------------------------------------------------------
    # Letture
    # ------------------------------------------------------------------

    def _by_player_stmt(self, player_id: int):
        return (
            select(PlayerStatistic)
            .join(TeamPlayer, PlayerStatistic.team_player_id == TeamPlayer.id)
            .where(TeamPlayer.player_id == player_id)
            .order_by(PlayerStatistic.game_date.desc(), PlayerStatistic.id.desc())
        )

    def list_by_player(self, player_id: int) -> list[PlayerStatistic]:
        with persistence_errors(self._db, "list_by_player", ENTITY):
            return list(self._db.scalars(self._by_player_stmt(player_id)))

    def list_by_team_player(self, team_player_id: int) -> list[PlayerStatistic]:
        with persistence_errors(self._db, "list_by_team_player", ENTITY):
            stmt = (
                select(PlayerStatistic)
                .where(PlayerStatistic.team_player_id == team_player_id)
                .order_by(PlayerStatistic.game_date.desc(), PlayerStatistic.id.desc())
            )
            return list(self._db.scalars(stmt))

    def get_by_date_range(self, player_id: int, start_date: date, end_date: date) -> list[PlayerStatistic]:
        """Statistiche del giocatore con start_date <= game_date <= end_date."""
        if start_date > end_date:
            raise ValueError("start_date must not be after end_date")
        with persistence_errors(self._db, "get_by_date_range", ENTITY):
            stmt = self._by_player_stmt(player_id).where(
                PlayerStatistic.game_date >= start_date,
                PlayerStatistic.game_date <= end_date,
            )
            return list(self._db.scalars(stmt))

    def get_by_id(self, statistic_id: int) -> PlayerStatistic | None:
        with persistence_errors(self._db, "get_by_id", ENTITY, statistic_id):
            return self._db.get(PlayerStatistic, statistic_id)

    def exists(self, statistic_id: int) -> bool:
        with persistence_errors(self._db, "exists", ENTITY, statistic_id):
            return bool(self._db.scalar(select(exists().where(PlayerStatistic.id == statistic_id))))

    def get_aggregates(self, player_id: int, team_player_id: int | None = None) -> PlayerStatisticAggregate:
        """
        Totali e medie per partita sulle statistiche del giocatore, opzionalmente
        ristrette a una singola assegnazione. Nessuna riga: tutto a zero.
        """
        stmt = (
            select(
                func.count(PlayerStatistic.id),
                func.coalesce(func.sum(PlayerStatistic.minutes_played), 0),
                func.coalesce(func.sum(PlayerStatistic.goals), 0),
                func.coalesce(func.sum(PlayerStatistic.assists), 0),
                func.coalesce(func.avg(PlayerStatistic.minutes_played), 0),
                func.coalesce(func.avg(PlayerStatistic.goals), 0),
                func.coalesce(func.avg(PlayerStatistic.assists), 0),
            )
            .join(TeamPlayer, PlayerStatistic.team_player_id == TeamPlayer.id)
            .where(TeamPlayer.player_id == player_id)
        )
        if team_player_id is not None:
            stmt = stmt.where(PlayerStatistic.team_player_id == team_player_id)

        with persistence_errors(self._db, "get_aggregates", ENTITY):
            (
                game_count, total_minutes, total_goals, total_assists,
                avg_minutes, avg_goals, avg_assists,
            ) = self._db.execute(stmt).one()

        game_count = int(game_count or 0)
        if game_count == 0:
            logger.debug("Nessuna statistica per player_id=%s team_player_id=%s", player_id, team_player_id)
            return PlayerStatisticAggregate()

        total_minutes = int(total_minutes)
        total_goals = int(total_goals)
        total_assists = int(total_assists)

        result = PlayerStatisticAggregate(
            game_count=game_count,
            total_minutes_played=total_minutes,
            total_goals=total_goals,
            total_assists=total_assists,
            average_minutes_played=float(avg_minutes),
            average_goals=float(avg_goals),
            average_assists=float(avg_assists),
        )
        logger.info(
            "Aggregati player_id=%s team_player_id=%s: games=%s goals=%s assists=%s",
            player_id, team_player_id, game_count, total_goals, total_assists,
        )
        return result

    # ------------------------------------------------------------------
    # Scritture
    # ------------------------------------------------------------------

    def _validate(self, candidate: PlayerStatistic, statistic_id: int | None = None) -> None:
        """Regole pure + esistenza dell'assegnazione referenziata, in un'unica mappa."""
        errors = validate_player_statistic(candidate)
        if "team_player_id" not in errors:
            with persistence_errors(self._db, "validate", ENTITY, statistic_id):
                found = self._db.scalar(
                    select(exists().where(TeamPlayer.id == candidate.team_player_id))
                )
            if not found:
                add_error(
                    errors, "team_player_id",
                    f"Team assignment with ID {candidate.team_player_id} does not exist",
                )
        if errors:
            logger.warning("Validazione PlayerStatistic id=%s fallita: %s", statistic_id, errors)
            raise ValidationFailedError(errors, ENTITY)

    def add(self, payload: PlayerStatisticCreate, acting_user: str) -> PlayerStatistic:
        statistic = PlayerStatistic(
            **{field: getattr(payload, field) for field in STAT_FIELDS},
            created_by=(payload.created_by or "").strip() or resolve_acting_user(acting_user),
        )
        self._validate(statistic)
        stamp_audit(statistic, is_new=True, acting_user=acting_user)

        with persistence_errors(self._db, "add", ENTITY):
            self._db.add(statistic)
            self._db.commit()
            self._db.refresh(statistic)

        logger.info(
            "PlayerStatistic creata id=%s team_player_id=%s game_date=%s",
            statistic.id, statistic.team_player_id, statistic.game_date,
        )
        return statistic

    def update(self, statistic_id: int, payload: PlayerStatisticUpdate, acting_user: str) -> PlayerStatistic:
        statistic = self.get_by_id(statistic_id)
        if statistic is None:
            logger.warning("PlayerStatistic id=%s non trovata per update", statistic_id)
            raise NotFoundError(ENTITY, statistic_id)

        # Candidato transiente: la riga tracciata resta intatta se la validazione fallisce
        candidate = PlayerStatistic(
            **{field: getattr(payload, field) for field in STAT_FIELDS},
            created_by=statistic.created_by,
        )
        self._validate(candidate, statistic_id)

        for field in STAT_FIELDS:
            setattr(statistic, field, getattr(payload, field))
        stamp_audit(statistic, is_new=False, acting_user=acting_user)

        with persistence_errors(self._db, "update", ENTITY, statistic_id):
            self._db.commit()
            self._db.refresh(statistic)

        logger.info("PlayerStatistic aggiornata id=%s", statistic_id)
        return statistic

    def delete(self, statistic_id: int) -> bool:
        statistic = self.get_by_id(statistic_id)
        if statistic is None:
            return False

        with persistence_errors(self._db, "delete", ENTITY, statistic_id):
            self._db.delete(statistic)
            self._db.commit()

        logger.info("PlayerStatistic eliminata id=%s", statistic_id)
        return True
