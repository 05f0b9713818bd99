# skillquest/api/auth.py
from fastapi import APIRouter, Depends

from skillquest.api.deps import get_current_user
from skillquest.db.mongo import get_db
from skillquest.models.user import AuthOut, LoginIn, PublicUser, RegisterIn
from skillquest.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", status_code=201, response_model=AuthOut)
async def register(payload: RegisterIn, db=Depends(get_db)):
    return await auth_service.register(
        db, payload.email, payload.password, payload.name, payload.role, payload.companyName
    )


@router.post("/login", response_model=AuthOut)
async def login(payload: LoginIn, db=Depends(get_db)):
    return await auth_service.login(db, payload.email, payload.password)


@router.get("/me", response_model=PublicUser)
async def me(user: dict = Depends(get_current_user)):
    return PublicUser.from_doc(user)
