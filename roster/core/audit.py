"""
Audit stamping: created_at/created_by all'inserimento, updated_at/updated_by
ad ogni modifica. Chiamato dai repository subito prima del commit.
"""

from datetime import datetime, timezone

from roster.core.config import get_system_user


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_acting_user(acting_user: str | None) -> str:
    """Utente corrente; se vuoto ricade sull'utente di sistema."""
    if acting_user and acting_user.strip():
        return acting_user
    return get_system_user()


def stamp_audit(
    record,
    is_new: bool,
    acting_user: str | None,
    now: datetime | None = None,
) -> None:
    """
    Applica il blocco audit al record, in place.

    Insert: created_at sempre, created_by solo se vuoto (seed/migrazioni possono
    pre-popolarlo). Update: updated_at e updated_by sempre.
    Nessun altro campo viene toccato.
    """
    stamp_time = now or utc_now()
    user = resolve_acting_user(acting_user)

    if is_new:
        record.created_at = stamp_time
        if not (record.created_by or "").strip():
            record.created_by = user
    else:
        record.updated_at = stamp_time
        record.updated_by = user
