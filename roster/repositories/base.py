"""
Gestione errori DB comune ai repository.

Ogni operazione è una unit-of-work: commit o rollback prima di ritornare.
Gli errori SQLAlchemy diventano PersistenceError (operazione, entità, id);
nessun retry qui, la policy appartiene alla configurazione dello store.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roster.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def persistence_errors(
    db: Session,
    operation: str,
    entity_type: str,
    entity_id: Any = None,
) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        try:
            db.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback fallito dopo errore su %s %s id=%s", operation, entity_type, entity_id)
        logger.exception(
            "Errore DB durante %s %s id=%s: %s",
            operation, entity_type, entity_id, e,
        )
        raise PersistenceError(
            f"Database error during {operation} of {entity_type}"
            + (f" with ID {entity_id}" if entity_id is not None else ""),
            operation=operation,
            entity_type=entity_type,
            entity_id=entity_id,
        ) from e
