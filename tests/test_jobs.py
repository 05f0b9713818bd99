# tests/test_jobs.py
import pytest

from conftest import JOB_PAYLOAD, register


@pytest.mark.asyncio
async def test_company_creates_job(client):
    headers, user = await register(client, "acme@example.com", role="company", company_name="Acme")
    r = await client.post("/api/jobs", json=JOB_PAYLOAD, headers=headers)
    assert r.status_code == 201
    job = r.json()
    assert job["company"] == user["id"]
    assert job["isActive"] is True
    assert job["quests"] == []
    assert job["createdAt"]


@pytest.mark.asyncio
async def test_numeric_salary_kept_as_text(client):
    headers, _ = await register(client, "acme@example.com", role="company")
    payload = dict(JOB_PAYLOAD, salary={"min": 50000, "max": 70000})
    r = await client.post("/api/jobs", json=payload, headers=headers)
    assert r.status_code == 201
    assert r.json()["salary"] == {"min": "50000", "max": "70000"}


@pytest.mark.asyncio
async def test_job_with_embedded_quest(client):
    headers, _ = await register(client, "acme@example.com", role="company")
    quest = {"type": "aptitude", "title": "Numbers", "duration": 30, "questions": 10,
             "passingScore": 70, "topics": ["Age"]}
    r = await client.post("/api/jobs", json=dict(JOB_PAYLOAD, quests=[quest]), headers=headers)
    assert r.status_code == 201
    saved = r.json()["quests"][0]
    assert saved["difficulty"] == "Medium"
    assert saved["questionsPerTopic"] == 5
    assert saved["enabled"] is True


@pytest.mark.asyncio
async def test_quest_bounds_are_enforced(client):
    headers, _ = await register(client, "acme@example.com", role="company")
    quest = {"type": "aptitude", "title": "Numbers", "duration": 0, "questions": 10, "passingScore": 170}
    r = await client.post("/api/jobs", json=dict(JOB_PAYLOAD, quests=[quest]), headers=headers)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_missing_required_job_fields(client):
    headers, _ = await register(client, "acme@example.com", role="company")
    payload = {k: v for k, v in JOB_PAYLOAD.items() if k != "department"}
    r = await client.post("/api/jobs", json=payload, headers=headers)
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid request data"

    r = await client.post("/api/jobs", json=dict(JOB_PAYLOAD, salary={"min": "1"}), headers=headers)
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_candidate_cannot_create_job(client):
    headers, _ = await register(client, "cand@example.com")
    r = await client.post("/api/jobs", json=JOB_PAYLOAD, headers=headers)
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_create_job_requires_auth(client):
    r = await client.post("/api/jobs", json=JOB_PAYLOAD)
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_public_listing_shows_active_jobs_with_company_name(client):
    headers, user = await register(client, "acme@example.com", role="company", company_name="Acme")
    await client.post("/api/jobs", json=JOB_PAYLOAD, headers=headers)
    await client.post("/api/jobs", json=dict(JOB_PAYLOAD, title="Old role", isActive=False), headers=headers)

    r = await client.get("/api/jobs")
    assert r.status_code == 200
    jobs = r.json()
    assert [j["title"] for j in jobs] == ["Data Analyst"]
    assert jobs[0]["company"] == {"id": user["id"], "companyName": "Acme"}


@pytest.mark.asyncio
async def test_company_sees_only_its_own_jobs(client):
    acme, _ = await register(client, "acme@example.com", role="company", company_name="Acme")
    globex, _ = await register(client, "globex@example.com", role="company", company_name="Globex")
    await client.post("/api/jobs", json=JOB_PAYLOAD, headers=acme)
    await client.post("/api/jobs", json=dict(JOB_PAYLOAD, title="Engineer"), headers=globex)

    r = await client.get("/api/company/jobs", headers=globex)
    assert r.status_code == 200
    assert [j["title"] for j in r.json()] == ["Engineer"]


@pytest.mark.asyncio
async def test_admin_cannot_list_company_jobs(client):
    headers, _ = await register(client, "admin@example.com", role="admin")
    r = await client.get("/api/company/jobs", headers=headers)
    assert r.status_code == 403
