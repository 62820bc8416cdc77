"""Configurazione applicativa. Caricata da environment (.env supportato)."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SYSTEM_USER = "system"


def get_database_url() -> str:
    """Return DATABASE_URL from environment. Raises if missing."""
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is required")
    return url


def get_system_user() -> str:
    """
    Utente usato per l'audit quando il chiamante non fornisce un'identità
    (seed, script, richieste senza header X-User-Id).
    """
    user = (os.environ.get("ROSTER_SYSTEM_USER") or "").strip()
    return user or DEFAULT_SYSTEM_USER


def get_log_level() -> str:
    return (os.environ.get("LOG_LEVEL") or "INFO").upper()
