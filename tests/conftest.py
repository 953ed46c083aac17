# tests/conftest.py

import asyncio
import json

import httpx
import pytest
import pytest_asyncio

from core.client import StudentServiceClient
from core.form_controller import FormController
from core.orchestrator import RequestOrchestrator
from core.record_store import RecordStore
from core.session import Session
from models.student import Student

BASE_URL = "http://students.test"

VERBS = {"GET": "list", "POST": "create", "PUT": "update", "DELETE": "delete"}


class FakeStudentService:
    """
    In-memory stand-in for the remote collection service, served through httpx.MockTransport.

    Records every request, can fail a verb with a status code or a dropped connection,
    and can hold a verb in flight until the test releases it.
    """

    def __init__(self, records: list[dict] | None = None):
        self.records: list[dict] = [dict(record) for record in records or []]
        self.next_id = max((record["id"] for record in self.records), default=0) + 1
        self.requests: list[tuple[str, str, dict | None]] = []
        self._failures: dict[str, tuple[int | None, int | None]] = {}
        self._held: dict[str, tuple[asyncio.Event, asyncio.Event]] = {}

    # === test controls ===

    def fail(self, verb: str, status: int | None = 500, times: int | None = None) -> None:
        # status None drops the connection instead of answering
        self._failures[verb] = (status, times)

    def hold(self, verb: str) -> tuple[asyncio.Event, asyncio.Event]:
        arrived, release = asyncio.Event(), asyncio.Event()
        self._held[verb] = (arrived, release)
        return arrived, release

    def verbs_called(self) -> list[str]:
        return [VERBS[method] for method, _, _ in self.requests]

    def as_students(self) -> list[Student]:
        return [Student.from_dict(record) for record in self.records]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    # === request handling ===

    async def handler(self, request: httpx.Request) -> httpx.Response:
        verb = VERBS[request.method]
        payload = json.loads(request.content) if request.content else None
        self.requests.append((request.method, request.url.path, payload))

        if verb in self._held:
            arrived, release = self._held.pop(verb)
            arrived.set()
            await release.wait()

        should_fail, status = self._take_failure(verb)
        if should_fail:
            if status is None:
                raise httpx.ConnectError("Connection refused", request=request)
            return httpx.Response(status, json={"error": "boom"})

        if verb == "list":
            return httpx.Response(200, json=self.records)

        if verb == "create":
            record = {"id": self.next_id, **payload}
            self.next_id += 1
            self.records.append(record)
            return httpx.Response(200, json=record)

        student_id = int(request.url.path.rsplit("/", 1)[-1])

        if verb == "update":
            for record in self.records:
                if record["id"] == student_id:
                    record.update(payload)
                    return httpx.Response(200, json=record)
            return httpx.Response(200)

        self.records = [record for record in self.records if record["id"] != student_id]
        return httpx.Response(200)

    def _take_failure(self, verb: str) -> tuple[bool, int | None]:
        if verb not in self._failures:
            return False, None

        status, times = self._failures[verb]

        if times is not None:
            if times <= 1:
                del self._failures[verb]
            else:
                self._failures[verb] = (status, times - 1)

        return True, status


@pytest.fixture
def sample_records():
    return [
        {"id": 1, "name": "Ann", "email": "a@x.com"},
        {"id": 2, "name": "Carlos Diaz", "email": "cdiaz@school.edu"},
        {"id": 3, "name": "Dana", "email": "DANA@Example.org"},
    ]


@pytest.fixture
def sample_student():
    return Student(1, "Ann", "a@x.com")


@pytest.fixture
def service(sample_records):
    return FakeStudentService(sample_records)


@pytest.fixture
def single_student_service():
    return FakeStudentService([{"id": 1, "name": "Ann", "email": "a@x.com"}])


@pytest_asyncio.fixture
async def client(service):
    async with StudentServiceClient(BASE_URL, transport=service.transport) as client:
        yield client


@pytest_asyncio.fixture
async def single_student_client(single_student_service):
    async with StudentServiceClient(
        BASE_URL, transport=single_student_service.transport
    ) as client:
        yield client


def build_orchestrator(client: StudentServiceClient) -> RequestOrchestrator:
    return RequestOrchestrator(
        client=client,
        store=RecordStore(client),
        form=FormController(),
        session=Session(),
    )


@pytest.fixture
def orchestrator(client):
    return build_orchestrator(client)


@pytest_asyncio.fixture
async def mounted_orchestrator(orchestrator):
    response = await orchestrator.mount()
    assert response.success
    return orchestrator


@pytest_asyncio.fixture
async def single_student_orchestrator(single_student_client):
    orchestrator = build_orchestrator(single_student_client)
    response = await orchestrator.mount()
    assert response.success
    return orchestrator
