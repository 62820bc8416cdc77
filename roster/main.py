"""Roster Manager: API giocatori, assegnazioni squadra e statistiche partita."""

import logging

from fastapi import FastAPI

from roster.core.config import get_log_level
from roster.core.database import init_db
from roster.routers import health_router, players_router, statistics_router, team_players_router
from roster.routers.errors import register_exception_handlers

app = FastAPI(
    title="Roster Manager",
    description="Players, team assignments and per-game statistics with audit trail.",
    version="0.1.0",
)

app.include_router(health_router)
app.include_router(players_router)
app.include_router(team_players_router)
app.include_router(statistics_router)

register_exception_handlers(app)


@app.on_event("startup")
def on_startup():
    """Configura il logging e crea le tabelle all'avvio."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
    init_db()
