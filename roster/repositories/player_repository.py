"""
Repository Player: CRUD sull'entità radice del roster.
La cancellazione elimina in cascata assegnazioni e statistiche.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from roster.core.audit import stamp_audit
from roster.core.exceptions import NotFoundError, ValidationFailedError
from roster.models import Player
from roster.repositories.base import persistence_errors
from roster.schemas.players import PlayerCreate, PlayerUpdate
from roster.validation.player_validator import validate_player

logger = logging.getLogger(__name__)

ENTITY = "Player"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class PlayerRepository:
    def __init__(self, db: Session):
        self._db = db

    def list_all(self) -> list[Player]:
        with persistence_errors(self._db, "list_all", ENTITY):
            return list(self._db.scalars(select(Player).order_by(Player.name, Player.id)))

    def get_by_id(self, player_id: int) -> Player | None:
        with persistence_errors(self._db, "get_by_id", ENTITY, player_id):
            return self._db.get(Player, player_id)

    def get_by_user_id(self, user_id: str) -> list[Player]:
        with persistence_errors(self._db, "get_by_user_id", ENTITY):
            stmt = select(Player).where(Player.user_id == user_id).order_by(Player.name, Player.id)
            return list(self._db.scalars(stmt))

    def exists(self, player_id: int) -> bool:
        with persistence_errors(self._db, "exists", ENTITY, player_id):
            return bool(self._db.scalar(select(exists().where(Player.id == player_id))))

    def add(self, payload: PlayerCreate, acting_user: str) -> Player:
        errors = validate_player(payload)
        if errors:
            logger.warning("Validazione Player fallita: %s", errors)
            raise ValidationFailedError(errors, ENTITY)

        player = Player(
            user_id=payload.user_id.strip(),
            name=payload.name.strip(),
            date_of_birth=payload.date_of_birth,
            gender=_clean(payload.gender),
            photo_url=_clean(payload.photo_url),
            created_by=payload.created_by or "",
        )
        stamp_audit(player, is_new=True, acting_user=acting_user)

        with persistence_errors(self._db, "add", ENTITY):
            self._db.add(player)
            self._db.commit()
            self._db.refresh(player)

        logger.info("Player creato id=%s name=%s by=%s", player.id, player.name, player.created_by)
        return player

    def update(self, player_id: int, payload: PlayerUpdate, acting_user: str) -> Player:
        errors = validate_player(payload)
        if errors:
            logger.warning("Validazione Player id=%s fallita: %s", player_id, errors)
            raise ValidationFailedError(errors, ENTITY)

        player = self.get_by_id(player_id)
        if player is None:
            logger.warning("Player id=%s non trovato per update", player_id)
            raise NotFoundError(ENTITY, player_id)

        player.user_id = payload.user_id.strip()
        player.name = payload.name.strip()
        player.date_of_birth = payload.date_of_birth
        player.gender = _clean(payload.gender)
        player.photo_url = _clean(payload.photo_url)
        stamp_audit(player, is_new=False, acting_user=acting_user)

        with persistence_errors(self._db, "update", ENTITY, player_id):
            self._db.commit()
            self._db.refresh(player)
        logger.info("Player aggiornato id=%s by=%s", player_id, player.updated_by)
        return player

    def delete(self, player_id: int) -> bool:
        """Elimina il giocatore e, in cascata, assegnazioni e statistiche. False se assente."""
        player = self.get_by_id(player_id)
        if player is None:
            return False

        with persistence_errors(self._db, "delete", ENTITY, player_id):
            self._db.delete(player)
            self._db.commit()

        logger.info("Player eliminato id=%s (cascade assegnazioni/statistiche)", player_id)
        return True
