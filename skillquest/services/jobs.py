# skillquest/services/jobs.py
import logging
from typing import List

from skillquest.models.job import CompanyRef, JobCreate, JobOut
from skillquest.repositories import jobs as jobs_repo
from skillquest.repositories import users as users_repo
from skillquest.services.auth import authorize

logger = logging.getLogger(__name__)


async def create_job(db, actor: dict, data: JobCreate) -> JobOut:
    authorize(actor, ("company", "admin"))
    job = await jobs_repo.create_job(db, actor["id"], data.model_dump())
    logger.info("Job %s created by %s", job["id"], actor["id"])
    return JobOut(**job)


async def list_active_jobs(db) -> List[JobOut]:
    """Active jobs with the owning company resolved to its public name."""
    jobs = await jobs_repo.list_active_jobs(db)
    names = await users_repo.get_company_names(db, [j["company"] for j in jobs if j.get("company")])
    out = []
    for job in jobs:
        company_id = job.get("company")
        if company_id is not None:
            job["company"] = CompanyRef(id=company_id, companyName=names.get(company_id))
        out.append(JobOut(**job))
    return out


async def list_jobs_for_company(db, actor: dict) -> List[JobOut]:
    authorize(actor, ("company",))
    return [JobOut(**j) for j in await jobs_repo.list_jobs_by_company(db, actor["id"])]
