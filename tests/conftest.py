import os
from datetime import date

# Il motore applicativo viene creato all'import: serve un DATABASE_URL
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from roster.core.database import Base, get_db
from roster.main import app
from roster import models  # noqa: F401
from roster.repositories import PlayerRepository, TeamPlayerRepository
from roster.schemas.players import PlayerCreate
from roster.schemas.team_players import TeamPlayerCreate

# In-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh in-memory database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """TestClient with database dependency override."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def player_payload():
    return PlayerCreate(
        user_id="owner-1",
        name="Marco Rossi",
        date_of_birth=date(1995, 6, 1),
        gender="Male",
        photo_url="https://example.com/rossi.png",
    )


@pytest.fixture
def player(db_session, player_payload):
    return PlayerRepository(db_session).add(player_payload, "coach-1")


@pytest.fixture
def team_player(db_session, player):
    payload = TeamPlayerCreate(
        player_id=player.id,
        team_name="Lions",
        championship_name="Spring League",
        joined_date=date(2024, 1, 10),
    )
    return TeamPlayerRepository(db_session).add(payload, "coach-1")
