# skillquest/repositories/sessions.py
from typing import Any, Dict, Optional

from skillquest.db.mongo import SESSIONS_COLLECTION


async def save_session(db, record: Dict[str, Any]) -> None:
    await db[SESSIONS_COLLECTION].insert_one(dict(record))


async def get_session(db, session_id: str) -> Optional[Dict[str, Any]]:
    doc = await db[SESSIONS_COLLECTION].find_one({"sessionId": session_id})
    if not doc:
        return None
    doc = dict(doc)
    doc.pop("_id", None)
    return doc
