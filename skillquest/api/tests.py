# skillquest/api/tests.py
from fastapi import APIRouter, Depends

from skillquest.api.deps import get_catalog, get_current_user, get_session_assembler
from skillquest.core.topics import TopicCatalog
from skillquest.db.mongo import get_db
from skillquest.models.session import SessionPayload
from skillquest.models.test_config import TestConfigIn, TestConfigOut, TopicsOut
from skillquest.services import sessions as sessions_service
from skillquest.services import tests as tests_service
from skillquest.services.sessions import SessionAssembler

router = APIRouter(tags=["Tests"])


@router.get("/topics", response_model=TopicsOut)
async def list_topics(catalog: TopicCatalog = Depends(get_catalog)):
    return {"topics": catalog.names}


@router.post("/company/tests", response_model=TestConfigOut)
async def create_test_config(
    payload: TestConfigIn,
    user: dict = Depends(get_current_user),
    catalog: TopicCatalog = Depends(get_catalog),
    db=Depends(get_db),
):
    return await tests_service.create_test_config(db, user, payload, catalog)


@router.post("/tests/{test_id}/start", response_model=SessionPayload)
async def start_test(
    test_id: str,
    user: dict = Depends(get_current_user),
    assembler: SessionAssembler = Depends(get_session_assembler),
    db=Depends(get_db),
):
    return await assembler.start_session(db, user, test_id)


@router.get("/sessions/{session_id}", response_model=SessionPayload)
async def get_session(session_id: str, user: dict = Depends(get_current_user), db=Depends(get_db)):
    return await sessions_service.get_session(db, user, session_id)
