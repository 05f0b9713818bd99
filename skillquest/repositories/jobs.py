# skillquest/repositories/jobs.py
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from skillquest.db.mongo import JOBS_COLLECTION
from skillquest.repositories.users import to_object_id


def _now():
    return datetime.now(timezone.utc)


def _to_job(doc):
    if not doc:
        return None
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    if doc.get("company") is not None:
        doc["company"] = str(doc["company"])
    return doc


async def create_job(db, company_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    payload = dict(data)
    payload["company"] = to_object_id(company_id)
    payload.setdefault("quests", [])
    payload.setdefault("isActive", True)
    payload["createdAt"] = _now()
    res = await db[JOBS_COLLECTION].insert_one(payload)
    payload["_id"] = res.inserted_id
    return _to_job(payload)


async def list_active_jobs(db) -> List[Dict[str, Any]]:
    cur = db[JOBS_COLLECTION].find({"isActive": True}).sort("createdAt", DESCENDING)
    return [_to_job(d) async for d in cur]


async def list_jobs_by_company(db, company_id: str) -> List[Dict[str, Any]]:
    cur = db[JOBS_COLLECTION].find({"company": to_object_id(company_id)}).sort("createdAt", DESCENDING)
    return [_to_job(d) async for d in cur]


async def push_quest(db, company_id: str, quest: Dict[str, Any],
                     job_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    Append ``quest`` to a job owned by ``company_id``: the job named by
    ``job_id`` when given, otherwise the company's oldest job.
    Returns the updated job, or None when no job matched.
    """
    query: Dict[str, Any] = {"company": to_object_id(company_id)}
    if job_id is not None:
        oid = to_object_id(job_id)
        if oid is None:
            return None
        query["_id"] = oid
    doc = await db[JOBS_COLLECTION].find_one_and_update(
        query,
        {"$push": {"quests": quest}},
        sort=[("_id", ASCENDING)],
        return_document=ReturnDocument.AFTER,
    )
    return _to_job(doc)


async def find_job_by_quest_id(db, test_id: str) -> Optional[Dict[str, Any]]:
    return _to_job(await db[JOBS_COLLECTION].find_one({"quests.testId": test_id}))
