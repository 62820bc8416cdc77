"""Identità dell'utente corrente per le scritture: header X-User-Id, opaco."""

from fastapi import Header

from roster.core.audit import resolve_acting_user


def get_current_user(x_user_id: str | None = Header(default=None)) -> str:
    """Dependency FastAPI. Il formato dell'id non viene mai validato."""
    return resolve_acting_user(x_user_id)
