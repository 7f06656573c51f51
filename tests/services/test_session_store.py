from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from career_quiz.constants import SessionStatus
from career_quiz.errors import StorageError


@pytest.mark.asyncio
async def test_create_and_lookup(store, make_session):
    record = await store.create(make_session(session_id="quiz_1"))
    assert record.id is not None
    assert (await store.get_by_id(record.id)).session_id == "quiz_1"
    assert (await store.get_by_session_id("quiz_1")).id == record.id
    assert await store.get_by_session_id("quiz_missing") is None
    assert await store.get_by_id(9999) is None


@pytest.mark.asyncio
async def test_duplicate_session_id_is_a_storage_error(store, make_session):
    await store.create(make_session(session_id="quiz_dup"))
    with pytest.raises(StorageError):
        await store.create(make_session(session_id="quiz_dup"))


@pytest.mark.asyncio
async def test_list_newest_first_with_status_filter(store, make_session):
    base = datetime(2026, 3, 1, tzinfo=timezone.utc)
    await store.create(make_session(session_id="old", started_at=base))
    await store.create(make_session(session_id="new", started_at=base + timedelta(days=2)))
    await store.create(make_session(session_id="mid", started_at=base + timedelta(days=1),
                                    status=SessionStatus.INCOMPLETE.value, scores=None, top_three_code=None))

    assert [r.session_id for r in await store.list_by_status()] == ["new", "mid", "old"]
    assert [r.session_id for r in await store.list_by_status(SessionStatus.COMPLETE)] == ["new", "old"]
    assert [r.session_id for r in await store.list_by_status(SessionStatus.INCOMPLETE)] == ["mid"]


@pytest.mark.asyncio
async def test_delete_by_id(store, make_session):
    record = await store.create(make_session())
    assert await store.delete_by_id(record.id) is True
    assert await store.get_by_id(record.id) is None
    assert await store.delete_by_id(record.id) is False


@pytest.mark.asyncio
async def test_count_by_status(store, make_session):
    now = datetime(2026, 10, 18, 15, 0, tzinfo=timezone.utc)
    await store.create(make_session(started_at=now - timedelta(hours=2)))
    await store.create(make_session(started_at=now - timedelta(days=3)))
    await store.create(make_session(started_at=now - timedelta(hours=1),
                                    status=SessionStatus.INCOMPLETE.value, scores=None, top_three_code=None))

    counts = await store.count_by_status(now=now)
    assert counts.total == 3
    assert counts.complete == 2
    assert counts.incomplete == 1
    assert counts.today == 2


@pytest.mark.asyncio
async def test_driver_errors_surface_as_storage_error(store, mocker):
    mocker.patch.object(store.db, "execute", side_effect=OperationalError("SELECT", {}, Exception("db down")))
    with pytest.raises(StorageError):
        await store.list_by_status()
    with pytest.raises(StorageError):
        await store.count_by_status()
