# skillquest/services/auth.py
import logging
from typing import Iterable, Optional

from pymongo.errors import DuplicateKeyError

from skillquest.core.errors import ConflictError, ForbiddenError, UnauthorizedError
from skillquest.core.security import (
    JWTError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from skillquest.models.user import AuthOut, PublicUser
from skillquest.repositories import users as users_repo

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def _issue(user: dict) -> AuthOut:
    token = create_access_token(user["id"], user["role"])
    return AuthOut(token=token, user=PublicUser.from_doc(user))


async def register(db, email: str, password: str, name: str, role: str,
                   company_name: Optional[str] = None) -> AuthOut:
    if await users_repo.find_user_by_email(db, email):
        raise ConflictError("Email already registered")
    try:
        user = await users_repo.create_user(db, email, hash_password(password), name, role, company_name)
    except DuplicateKeyError:
        # lost a race with a concurrent registration of the same email
        raise ConflictError("Email already registered") from None
    logger.info("Registered user %s with role %s", user["id"], role)
    return _issue(user)


async def login(db, email: str, password: str) -> AuthOut:
    user = await users_repo.find_user_by_email(db, email)
    # same error for unknown email and wrong password
    if not user or not verify_password(password, user.get("password", "")):
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return _issue(user)


async def authenticate(db, token: Optional[str]) -> dict:
    """Resolve a bearer token to the stored user."""
    if not token:
        raise UnauthorizedError("Authentication required")
    try:
        td = decode_access_token(token)
    except JWTError:
        raise UnauthorizedError("Invalid token") from None
    if not td.sub:
        raise UnauthorizedError("Invalid token")
    user = await users_repo.get_user(db, td.sub)
    if not user:
        raise UnauthorizedError("User not found")
    return user


def authorize(user: dict, allowed_roles: Iterable[str]) -> None:
    if user.get("role") not in set(allowed_roles):
        raise ForbiddenError("Access denied")
