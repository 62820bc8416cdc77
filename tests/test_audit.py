from datetime import datetime, timezone

from roster.core.audit import resolve_acting_user, stamp_audit
from roster.models import Player


def test_insert_sets_created_fields():
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    record = Player(created_by="")
    stamp_audit(record, is_new=True, acting_user="coach-1", now=now)
    assert record.created_at == now
    assert record.created_by == "coach-1"
    assert record.updated_at is None
    assert record.updated_by is None


def test_insert_keeps_prepopulated_creator():
    record = Player(created_by="seed-script")
    stamp_audit(record, is_new=True, acting_user="coach-1")
    assert record.created_by == "seed-script"
    assert record.created_at is not None


def test_update_sets_only_updated_fields():
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    record = Player(created_at=created, created_by="coach-1", name="Marco")
    stamp_audit(record, is_new=False, acting_user="coach-2", now=now)
    assert record.created_at == created
    assert record.created_by == "coach-1"
    assert record.updated_at == now
    assert record.updated_by == "coach-2"
    assert record.name == "Marco"


def test_blank_user_falls_back_to_system():
    assert resolve_acting_user(None) == "system"
    assert resolve_acting_user("   ") == "system"
    assert resolve_acting_user("coach-1") == "coach-1"


def test_system_user_from_environment(monkeypatch):
    monkeypatch.setenv("ROSTER_SYSTEM_USER", "importer")
    record = Player(created_by=None)
    stamp_audit(record, is_new=True, acting_user="")
    assert record.created_by == "importer"
