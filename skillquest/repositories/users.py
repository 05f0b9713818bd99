# skillquest/repositories/users.py
from typing import Any, Dict, Iterable, Optional
from datetime import datetime, timezone
from bson import ObjectId
from bson.errors import InvalidId

from skillquest.db.mongo import USERS_COLLECTION


def _now():
    return datetime.now(timezone.utc)


def to_object_id(value) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def _to_id(doc):
    # convert Mongo's _id (ObjectId) to str when returning
    if not doc:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc["_id"])
        del doc["_id"]
    return doc


async def find_user_by_email(db, email: str) -> Optional[Dict[str, Any]]:
    doc = await db[USERS_COLLECTION].find_one({"email": email})
    return _to_id(doc)


async def get_user(db, user_id: str) -> Optional[Dict[str, Any]]:
    oid = to_object_id(user_id)
    if oid is None:
        return None
    doc = await db[USERS_COLLECTION].find_one({"_id": oid})
    return _to_id(doc)


async def create_user(db, email: str, password_hash: str, name: str, role: str,
                      company_name: Optional[str] = None) -> Dict[str, Any]:
    """Insert a user. Raises pymongo DuplicateKeyError when the email is taken."""
    payload = {
        "email": email,
        "password": password_hash,
        "name": name,
        "role": role,
        "companyName": company_name,
        "createdAt": _now(),
    }
    res = await db[USERS_COLLECTION].insert_one(payload)
    payload["_id"] = res.inserted_id
    return _to_id(payload)


async def get_company_names(db, user_ids: Iterable) -> Dict[str, Optional[str]]:
    oids = [oid for oid in (to_object_id(u) for u in set(user_ids)) if oid is not None]
    if not oids:
        return {}
    out = {}
    cur = db[USERS_COLLECTION].find({"_id": {"$in": oids}}, {"companyName": 1})
    async for d in cur:
        out[str(d["_id"])] = d.get("companyName")
    return out
