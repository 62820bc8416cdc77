"""SQLAlchemy engine, session, dependency e creazione tabelle."""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from roster.core.config import get_database_url

logger = logging.getLogger(__name__)

engine = create_engine(
    get_database_url(),
    pool_pre_ping=True,
    echo=False,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite non applica ON DELETE CASCADE senza PRAGMA foreign_keys."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db():
    """Dependency that yields a DB session. Caller must close."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Crea tutte le tabelle del roster.
    I modelli devono essere importati prima per registrare i metadata.
    """
    from roster.models import player, player_statistic, team_player  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completato")
