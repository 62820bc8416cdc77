"""
Repository delle assegnazioni giocatore/squadra.

Espone has_active_duplicate come primitiva: add/update non applicano da soli
la regola "una sola assegnazione attiva per squadra e campionato", la
applicano i service chiamando il controllo nella stessa transazione.
L'indice unique parziale su left_date IS NULL resta come rete di sicurezza:
se scatta al commit l'errore diventa DuplicateActiveAssignmentError.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roster.core.audit import stamp_audit
from roster.core.exceptions import (
    DuplicateActiveAssignmentError,
    NotFoundError,
    ValidationFailedError,
)
from roster.models import TeamPlayer
from roster.repositories.base import persistence_errors
from roster.schemas.team_players import TeamPlayerCreate, TeamPlayerUpdate
from roster.validation.team_player_validator import validate_team_player

logger = logging.getLogger(__name__)

ENTITY = "TeamPlayer"


class TeamPlayerRepository:
    def __init__(self, db: Session):
        self._db = db

    # ------------------------------------------------------------------
    # Letture
    # ------------------------------------------------------------------

    def list_by_player(self, player_id: int) -> list[TeamPlayer]:
        """Tutte le assegnazioni del giocatore, più recenti prima (joined_date DESC)."""
        with persistence_errors(self._db, "list_by_player", ENTITY):
            stmt = (
                select(TeamPlayer)
                .where(TeamPlayer.player_id == player_id)
                .order_by(TeamPlayer.joined_date.desc(), TeamPlayer.id.desc())
            )
            return list(self._db.scalars(stmt))

    def list_active_by_player(self, player_id: int) -> list[TeamPlayer]:
        with persistence_errors(self._db, "list_active_by_player", ENTITY):
            stmt = (
                select(TeamPlayer)
                .where(TeamPlayer.player_id == player_id, TeamPlayer.left_date.is_(None))
                .order_by(TeamPlayer.joined_date.desc(), TeamPlayer.id.desc())
            )
            return list(self._db.scalars(stmt))

    def get_by_id(self, team_player_id: int) -> TeamPlayer | None:
        with persistence_errors(self._db, "get_by_id", ENTITY, team_player_id):
            return self._db.get(TeamPlayer, team_player_id)

    def exists(self, team_player_id: int) -> bool:
        with persistence_errors(self._db, "exists", ENTITY, team_player_id):
            return bool(self._db.scalar(select(exists().where(TeamPlayer.id == team_player_id))))

    def has_active_duplicate(
        self,
        player_id: int,
        team_name: str,
        championship_name: str,
        exclude_id: int | None = None,
    ) -> bool:
        """
        True se esiste un'assegnazione attiva (left_date NULL) dello stesso giocatore
        con stessa squadra e campionato. exclude_id esclude la riga in aggiornamento.
        Non fa commit: condivide la transazione dell'insert/update successivo.
        """
        if not team_name or not team_name.strip():
            raise ValueError("Team name cannot be null or whitespace.")
        if not championship_name or not championship_name.strip():
            raise ValueError("Championship name cannot be null or whitespace.")

        condition = (
            (TeamPlayer.player_id == player_id)
            & (TeamPlayer.team_name == team_name.strip())
            & (TeamPlayer.championship_name == championship_name.strip())
            & TeamPlayer.left_date.is_(None)
        )
        if exclude_id is not None:
            condition = condition & (TeamPlayer.id != exclude_id)

        with persistence_errors(self._db, "has_active_duplicate", ENTITY, exclude_id):
            found = bool(self._db.scalar(select(exists().where(condition))))

        logger.debug(
            "has_active_duplicate player_id=%s team=%s championship=%s exclude_id=%s -> %s",
            player_id, team_name, championship_name, exclude_id, found,
        )
        return found

    # ------------------------------------------------------------------
    # Scritture
    # ------------------------------------------------------------------

    def _commit(self, team_player: TeamPlayer, operation: str) -> None:
        """
        Commit con traduzione della violazione dell'indice unique parziale.
        Dopo il rollback si verifica se esiste davvero un duplicato attivo:
        altri IntegrityError (es. FK) restano PersistenceError.
        """
        player_id = team_player.player_id
        team_name = team_player.team_name
        championship_name = team_player.championship_name
        own_id = team_player.id
        is_active = team_player.left_date is None

        try:
            with persistence_errors(self._db, operation, ENTITY, own_id):
                try:
                    self._db.commit()
                except IntegrityError:
                    self._db.rollback()
                    if is_active and self.has_active_duplicate(
                        player_id, team_name, championship_name, exclude_id=own_id,
                    ):
                        raise DuplicateActiveAssignmentError(
                            player_id, team_name, championship_name, team_player_id=own_id,
                        )
                    raise
        except DuplicateActiveAssignmentError:
            logger.warning(
                "Assegnazione attiva duplicata player_id=%s team=%s championship=%s",
                player_id, team_name, championship_name,
            )
            raise

    def add(self, payload: TeamPlayerCreate, acting_user: str) -> TeamPlayer:
        errors = validate_team_player(payload)
        if errors:
            logger.warning("Validazione TeamPlayer fallita per player_id=%s: %s", payload.player_id, errors)
            raise ValidationFailedError(errors, ENTITY)

        team_player = TeamPlayer(
            player_id=payload.player_id,
            team_name=payload.team_name.strip(),
            championship_name=payload.championship_name.strip(),
            joined_date=payload.joined_date,
            left_date=payload.left_date,
            created_by=payload.created_by or "",
        )
        stamp_audit(team_player, is_new=True, acting_user=acting_user)

        self._db.add(team_player)
        self._commit(team_player, "add")
        with persistence_errors(self._db, "add", ENTITY):
            self._db.refresh(team_player)

        logger.info(
            "TeamPlayer creato id=%s player_id=%s team=%s championship=%s",
            team_player.id, team_player.player_id, team_player.team_name, team_player.championship_name,
        )
        return team_player

    def update(self, team_player_id: int, payload: TeamPlayerUpdate, acting_user: str) -> TeamPlayer:
        errors = validate_team_player(payload)
        if errors:
            logger.warning("Validazione TeamPlayer id=%s fallita: %s", team_player_id, errors)
            raise ValidationFailedError(errors, ENTITY)

        team_player = self.get_by_id(team_player_id)
        if team_player is None:
            logger.warning("TeamPlayer id=%s non trovato per update", team_player_id)
            raise NotFoundError(ENTITY, team_player_id)

        team_player.team_name = payload.team_name.strip()
        team_player.championship_name = payload.championship_name.strip()
        team_player.joined_date = payload.joined_date
        team_player.left_date = payload.left_date
        stamp_audit(team_player, is_new=False, acting_user=acting_user)

        self._commit(team_player, "update")
        with persistence_errors(self._db, "update", ENTITY, team_player_id):
            self._db.refresh(team_player)

        logger.info("TeamPlayer aggiornato id=%s active=%s", team_player_id, team_player.is_active)
        return team_player

    def delete(self, team_player_id: int) -> bool:
        """Elimina l'assegnazione e le sue statistiche. False se assente."""
        team_player = self.get_by_id(team_player_id)
        if team_player is None:
            return False

        with persistence_errors(self._db, "delete", ENTITY, team_player_id):
            self._db.delete(team_player)
            self._db.commit()

        logger.info("TeamPlayer eliminato id=%s (cascade statistiche)", team_player_id)
        return True
