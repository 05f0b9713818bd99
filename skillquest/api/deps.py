# skillquest/api/deps.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from skillquest.core.config import settings
from skillquest.core.topics import TopicCatalog
from skillquest.db.mongo import get_db
from skillquest.services import auth as auth_service
from skillquest.services.question_source import QuestionSource
from skillquest.services.sessions import SessionAssembler

# missing credentials are reported by authenticate() with the app's error shape
security = HTTPBearer(auto_error=False)


def get_catalog(request: Request) -> TopicCatalog:
    return request.app.state.topics


def get_question_source(request: Request) -> QuestionSource:
    return QuestionSource(
        request.app.state.http_client,
        settings.APTITUDE_API_URL,
        timeout=settings.QUESTION_FETCH_TIMEOUT_SEC,
    )


def get_session_assembler(
    source: QuestionSource = Depends(get_question_source),
    catalog: TopicCatalog = Depends(get_catalog),
) -> SessionAssembler:
    return SessionAssembler(source, catalog, assembly_timeout=settings.SESSION_ASSEMBLY_TIMEOUT_SEC)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db=Depends(get_db),
) -> dict:
    token = credentials.credentials if credentials else None
    return await auth_service.authenticate(db, token)

