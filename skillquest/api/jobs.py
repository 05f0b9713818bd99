# skillquest/api/jobs.py
from typing import List

from fastapi import APIRouter, Depends

from skillquest.api.deps import get_current_user
from skillquest.db.mongo import get_db
from skillquest.models.job import JobCreate, JobOut
from skillquest.services import jobs as jobs_service

router = APIRouter(tags=["Jobs"])


@router.post("/jobs", status_code=201, response_model=JobOut)
async def create_job(payload: JobCreate, user: dict = Depends(get_current_user), db=Depends(get_db)):
    return await jobs_service.create_job(db, user, payload)


@router.get("/jobs", response_model=List[JobOut])
async def list_jobs(db=Depends(get_db)):
    return await jobs_service.list_active_jobs(db)


@router.get("/company/jobs", response_model=List[JobOut])
async def list_company_jobs(user: dict = Depends(get_current_user), db=Depends(get_db)):
    return await jobs_service.list_jobs_for_company(db, user)
