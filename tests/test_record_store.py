# tests/test_record_store.py

import pytest

from core.record_store import RecordStore
from core.response import ErrorCode
from core.retry import RetryPolicy


@pytest.mark.asyncio
async def test_reload_replaces_store_wholesale(client, service):
    store = RecordStore(client)
    await store.reload()

    service.records = [{"id": 9, "name": "Zed", "email": "zed@x.com"}]
    response = await store.reload()

    assert response.success
    assert store.students == tuple(service.as_students())
    assert response.data["students"] == store.students


@pytest.mark.asyncio
async def test_failed_reload_keeps_previous_sequence(client, service):
    store = RecordStore(client)
    await store.reload()
    before = store.students

    service.fail("list", status=500)
    response = await store.reload()

    assert not response.success
    assert response.error is ErrorCode.LOAD_FAILED
    assert response.status_code == 500
    assert response.detail == (
        "Failed to load students. Please check if the server is running."
    )
    assert store.students == before


@pytest.mark.asyncio
async def test_reload_to_empty_collection(client, service):
    store = RecordStore(client)
    await store.reload()

    service.records = []
    await store.reload()

    assert store.students == ()
    assert store.is_empty


@pytest.mark.asyncio
async def test_reload_uses_retry_policy(client, service):
    store = RecordStore(client, RetryPolicy(attempts=2, delay=0))
    service.fail("list", status=502, times=1)

    response = await store.reload()

    assert response.success
    assert service.verbs_called() == ["list", "list"]


@pytest.mark.asyncio
async def test_find_student_by_id(client):
    store = RecordStore(client)
    await store.reload()

    found = store.find_student_by_id(2)
    missing = store.find_student_by_id(42)

    assert found.success
    assert found.data["record"].name == "Carlos Diaz"
    assert not missing.success
    assert missing.error is ErrorCode.NOT_FOUND
