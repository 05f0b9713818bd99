# skillquest/services/sessions.py
"""
Test session assembly.

A session is built from a test configuration by fetching the question pool
of every configured topic, sampling ``questionsPerTopic`` questions from each
pool, and keeping only the public fields of the sampled questions.
"""
import asyncio
import logging
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from skillquest.core.errors import NotFoundError, UpstreamError
from skillquest.core.topics import TopicCatalog
from skillquest.models.session import SessionPayload, SessionQuestion, SessionRecord, SessionTopic
from skillquest.models.test_config import DEFAULT_DURATION
from skillquest.repositories import jobs as jobs_repo
from skillquest.repositories import sessions as sessions_repo
from skillquest.repositories import tests as tests_repo
from skillquest.services.question_source import QuestionSource

logger = logging.getLogger(__name__)

DEFAULT_QUESTIONS_PER_TOPIC = 5


def _public_question(q: Dict[str, Any], topic: str) -> SessionQuestion:
    qid = q.get("id")
    if qid is not None and not isinstance(qid, (int, str)):
        qid = str(qid)
    options = q.get("options") or []
    if not isinstance(options, list):
        options = [options]
    try:
        return SessionQuestion(id=qid, question=str(q.get("question") or ""), options=options, topic=topic)
    except PydanticValidationError as exc:
        logger.error("Question source sent an unusable question for %s", topic)
        raise UpstreamError("Failed to start test") from exc


def sample_questions(pool: List[Dict[str, Any]], quota: int, topic: str,
                     rng: Optional[random.Random] = None) -> List[SessionQuestion]:
    """Shuffle ``pool`` uniformly and keep the first ``quota`` questions, tagged with ``topic``."""
    rng = rng or random
    shuffled = list(pool)
    rng.shuffle(shuffled)
    return [_public_question(q, topic) for q in shuffled[:quota]]


def _is_active(config: Dict[str, Any]) -> bool:
    return config.get("isActive") is not False and config.get("enabled") is not False


class SessionAssembler:
    def __init__(self, source: QuestionSource, catalog: TopicCatalog,
                 assembly_timeout: float = 30.0, rng: Optional[random.Random] = None):
        self._source = source
        self._catalog = catalog
        self._assembly_timeout = assembly_timeout
        self._rng = rng

    async def _find_config(self, db, test_id: str) -> Dict[str, Any]:
        config = await tests_repo.get_test_config(db, test_id)
        if config is None:
            # configurations that only exist inside a job's quest list
            job = await jobs_repo.find_job_by_quest_id(db, test_id)
            if job is None:
                raise NotFoundError("Test not found")
            config = next((q for q in job.get("quests", []) if q.get("testId") == test_id), None)
        if config is None or not _is_active(config):
            raise NotFoundError("Test not found or inactive")
        return config

    async def _fetch_pools(self, topics: List[str]) -> List[List[Dict[str, Any]]]:
        endpoints = [self._catalog.endpoint_for(t) for t in topics]
        try:
            results = await asyncio.wait_for(
                asyncio.gather(*(self._source.fetch_pool(e) for e in endpoints), return_exceptions=True),
                timeout=self._assembly_timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.error("Fetching questions for %d topics timed out", len(topics))
            raise UpstreamError("Failed to start test") from exc

        for result in results:
            if isinstance(result, UpstreamError):
                raise result
            if isinstance(result, BaseException):
                raise UpstreamError("Failed to start test") from result
        return results

    async def start_session(self, db, actor: dict, test_id: str) -> SessionPayload:
        config = await self._find_config(db, test_id)
        topics = list(config.get("topics") or [])
        quota = config.get("questionsPerTopic") or DEFAULT_QUESTIONS_PER_TOPIC

        pools = await self._fetch_pools(topics)

        session_topics = [
            SessionTopic(name=topic, questions=sample_questions(pool, quota, topic, self._rng))
            for topic, pool in zip(topics, pools)
        ]
        record = SessionRecord(
            sessionId=f"{test_id}-{actor['id']}-{int(time.time() * 1000)}-{uuid.uuid4().hex}",
            testId=test_id,
            userId=actor["id"],
            startTime=datetime.now(timezone.utc).isoformat(),
            duration=config.get("duration") or DEFAULT_DURATION,
            passingScore=config.get("passingScore"),
            topics=session_topics,
            totalQuestions=sum(len(t.questions) for t in session_topics),
        )
        await sessions_repo.save_session(db, record.model_dump())
        logger.info("Session %s started with %d questions", record.sessionId, record.totalQuestions)
        return SessionPayload(**record.model_dump(exclude={"userId", "passingScore"}))


async def get_session(db, actor: dict, session_id: str) -> SessionPayload:
    record = await sessions_repo.get_session(db, session_id)
    if record is None or (record.get("userId") != actor["id"] and actor.get("role") != "admin"):
        raise NotFoundError("Session not found")
    return SessionPayload(**record)
