# skillquest/services/tests.py
import logging
from datetime import datetime, timezone

from pymongo.errors import DuplicateKeyError

from skillquest.core.errors import ConflictError, ValidationError
from skillquest.core.topics import TopicCatalog
from skillquest.models.test_config import (
    DEFAULT_DURATION,
    DEFAULT_PASSING_SCORE,
    TestConfigIn,
    TestConfigOut,
)
from skillquest.repositories import jobs as jobs_repo
from skillquest.repositories import tests as tests_repo
from skillquest.services.auth import authorize

logger = logging.getLogger(__name__)


async def create_test_config(db, actor: dict, payload: TestConfigIn, catalog: TopicCatalog) -> TestConfigOut:
    """
    Validate and store a company's test configuration, then attach it to
    one of the company's jobs.

    The configuration is addressable by ``testId`` on its own; attaching it
    to a job only mirrors it into that job's quest list. A company without
    a matching job still gets its configuration stored.
    """
    authorize(actor, ("company", "admin"))

    if not payload.testId or not payload.name or not payload.topics or not payload.questionsPerTopic:
        raise ValidationError("Missing required fields")
    if payload.questionsPerTopic < 1:
        raise ValidationError("questionsPerTopic must be at least 1")
    catalog.validate(payload.topics)

    config = TestConfigOut(
        testId=payload.testId,
        company=actor["id"],
        jobId=payload.jobId,
        name=payload.name,
        description=payload.description,
        duration=payload.duration or DEFAULT_DURATION,
        topics=list(payload.topics),
        questionsPerTopic=payload.questionsPerTopic,
        passingScore=DEFAULT_PASSING_SCORE if payload.passingScore is None else payload.passingScore,
        isActive=payload.isActive is not False,
        createdAt=datetime.now(timezone.utc).isoformat(),
    )

    if await tests_repo.get_test_config(db, config.testId):
        raise ConflictError(f"Test ID already exists: {config.testId}")
    try:
        await tests_repo.create_test_config(db, config.model_dump())
    except DuplicateKeyError:
        raise ConflictError(f"Test ID already exists: {payload.testId}") from None

    job = await jobs_repo.push_quest(db, actor["id"], config.model_dump(), job_id=payload.jobId)
    if job is None:
        logger.warning("Test %s was not attached to any job of company %s", config.testId, actor["id"])
    else:
        logger.info("Test %s attached to job %s", config.testId, job["id"])
    return config
