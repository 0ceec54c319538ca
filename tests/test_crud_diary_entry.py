from datetime import date

import pytest

from healthtrack import crud
from healthtrack.core.errors import NotFound, ValidationError
from healthtrack.models.diary_entry import DiaryEntry
from healthtrack.schemas.diary_entry import DiaryEntryCreate, DiaryEntryUpdate, DiaryMood

TODAY = date(2024, 3, 14)


def _new(db, user, content="Went for a long walk.", **fields):
    return crud.diary_entry.create(db, user_id=user.id, obj_in={"date": TODAY, "content": content, **fields})


def test_create_assigns_id_and_stores_fields(db, user_a):
    entry = crud.diary_entry.create(
        db,
        user_id=user_a.id,
        obj_in=DiaryEntryCreate(date=TODAY, title="Pi day", content="Baked a pie.", mood=DiaryMood.HAPPY),
    )
    assert entry.id is not None
    assert entry.title == "Pi day"
    assert entry.mood == "happy"
    assert entry.created_at is not None


@pytest.mark.parametrize("content", ["", "   ", "\n\t"])
def test_blank_content_is_rejected_and_nothing_written(db, user_a, content):
    with pytest.raises(ValidationError) as exc_info:
        _new(db, user_a, content=content)
    assert exc_info.value.errors[0]["field"] == "content"
    assert db.query(DiaryEntry).count() == 0


def test_unknown_mood_is_rejected(db, user_a):
    with pytest.raises(ValidationError):
        _new(db, user_a, mood="furious")


def test_title_and_mood_are_optional(db, user_a):
    entry = _new(db, user_a)
    assert entry.title is None
    assert entry.mood is None


def test_multiple_entries_per_day_listed_newest_first(db, user_a):
    first = _new(db, user_a, content="Morning")
    second = _new(db, user_a, content="Afternoon")
    third = _new(db, user_a, content="Evening")

    listed = crud.diary_entry.list(db, user_id=user_a.id)
    assert [e.id for e in listed] == [third.id, second.id, first.id]


def test_update_changes_only_supplied_fields_and_touches_timestamp(db, user_a):
    entry = _new(db, user_a, title="Draft", mood="calm")
    before = entry.updated_at

    updated = crud.diary_entry.update(db, id=entry.id, obj_in=DiaryEntryUpdate(content="Rewritten"))

    assert updated.content == "Rewritten"
    assert updated.title == "Draft"
    assert updated.mood == "calm"
    assert updated.updated_at >= before


def test_update_can_clear_optional_title(db, user_a):
    entry = _new(db, user_a, title="Temporary")
    updated = crud.diary_entry.update(db, id=entry.id, obj_in={"title": None})
    assert updated.title is None


def test_update_rejects_blank_content(db, user_a):
    entry = _new(db, user_a)
    with pytest.raises(ValidationError):
        crud.diary_entry.update(db, id=entry.id, obj_in={"content": "  "})
    assert crud.diary_entry.get(db, id=entry.id).content == "Went for a long walk."


def test_update_missing_raises_not_found(db, user_a):
    with pytest.raises(NotFound):
        crud.diary_entry.update(db, id=9999, obj_in={"content": "Anything"})


def test_get_miss_returns_none(db, user_a):
    assert crud.diary_entry.get(db, id=12345) is None


def test_delete_reports_whether_anything_was_removed(db, user_a):
    entry = _new(db, user_a)
    assert crud.diary_entry.delete(db, id=entry.id) is True
    assert crud.diary_entry.delete(db, id=entry.id) is False
    assert crud.diary_entry.get(db, id=entry.id) is None


def test_user_scoped_access_hides_other_users_entries(db, user_a, user_b):
    entry = _new(db, user_a)

    assert crud.diary_entry.list(db, user_id=user_b.id) == []
    assert crud.diary_entry.get(db, id=entry.id, user_id=user_b.id) is None
    assert crud.diary_entry.delete(db, id=entry.id, user_id=user_b.id) is False
    with pytest.raises(NotFound):
        crud.diary_entry.update(db, id=entry.id, obj_in={"content": "Hijacked"}, user_id=user_b.id)

    assert crud.diary_entry.get(db, id=entry.id, user_id=user_a.id).content == "Went for a long walk."
