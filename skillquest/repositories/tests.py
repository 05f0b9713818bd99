# skillquest/repositories/tests.py
from typing import Any, Dict, Optional

from skillquest.db.mongo import TESTS_COLLECTION


def _strip_id(doc):
    if not doc:
        return None
    doc = dict(doc)
    doc.pop("_id", None)
    return doc


async def create_test_config(db, config: Dict[str, Any]) -> Dict[str, Any]:
    """Insert a configuration. Raises pymongo DuplicateKeyError on a reused testId."""
    await db[TESTS_COLLECTION].insert_one(dict(config))
    return dict(config)


async def get_test_config(db, test_id: str) -> Optional[Dict[str, Any]]:
    return _strip_id(await db[TESTS_COLLECTION].find_one({"testId": test_id}))
