# tests/conftest.py
import httpx
import pytest
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from skillquest.api.deps import get_question_source
from skillquest.db.mongo import ensure_indexes, get_db
from skillquest.main import app
from skillquest.services.question_source import QuestionSource

UPSTREAM_URL = "https://aptitude.test"


def make_pool(endpoint: str, size: int) -> list:
    return [
        {
            "id": f"{endpoint}-{i}",
            "question": f"{endpoint} question {i}?",
            "options": ["A", "B", "C", "D"],
            "answer": "A",
            "explanation": "because",
        }
        for i in range(size)
    ]


@pytest.fixture
def db():
    client = AsyncMongoMockClient()
    return client["skillquest_test"]


@pytest.fixture
def question_pools():
    """Question pools served by the fake aptitude API, keyed by endpoint.

    Tests mutate this dict to shape upstream responses; an endpoint mapped
    to an int is answered with that HTTP status code.
    """
    return {
        "Age": make_pool("Age", 20),
        "Calendar": make_pool("Calendar", 20),
        "ProfitAndLoss": make_pool("ProfitAndLoss", 3),
    }


@pytest.fixture
def upstream_calls():
    return []


@pytest.fixture
async def upstream(question_pools, upstream_calls):
    def handler(request: httpx.Request) -> httpx.Response:
        endpoint = request.url.path.strip("/")
        upstream_calls.append(endpoint)
        data = question_pools.get(endpoint)
        if data is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(data, int):
            return httpx.Response(data, text="upstream error")
        return httpx.Response(200, json=data)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    yield client
    await client.aclose()


@pytest.fixture
async def client(db, upstream):
    await ensure_indexes(db)
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_question_source] = lambda: QuestionSource(upstream, UPSTREAM_URL)
    app.state.rate_limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
    app.dependency_overrides.clear()


async def register(ac, email, role="candidate", company_name=None, password="secret123"):
    payload = {"email": email, "password": password, "name": email.split("@")[0], "role": role}
    if company_name:
        payload["companyName"] = company_name
    r = await ac.post("/api/auth/register", json=payload)
    assert r.status_code == 201, r.text
    body = r.json()
    return {"Authorization": f"Bearer {body['token']}"}, body["user"]


JOB_PAYLOAD = {
    "title": "Data Analyst",
    "department": "Analytics",
    "location": "Remote",
    "type": "Full-time",
    "description": "SQL and dashboards",
    "requirements": ["SQL", "Power BI"],
    "salary": {"min": "50000", "max": "70000"},
}
