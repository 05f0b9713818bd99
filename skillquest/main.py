# skillquest/main.py
import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skillquest.api.auth import router as auth_router
from skillquest.api.health import router as health_router
from skillquest.api.jobs import router as jobs_router
from skillquest.api.tests import router as tests_router
from skillquest.core.config import settings
from skillquest.core.errors import RateLimitError, SkillQuestError
from skillquest.core.logging_config import sanitize_log_data, setup_logging
from skillquest.core.rate_limit import RATE_LIMIT_MESSAGE, FixedWindowRateLimiter, get_client_ip
from skillquest.core.topics import TopicCatalog
from skillquest.db.mongo import close_db, init_db

logger = logging.getLogger(__name__)

app = FastAPI(title="SkillQuest API")

# built once; request handlers only read it
app.state.topics = TopicCatalog()
app.state.rate_limiter = FixedWindowRateLimiter(settings.RATE_LIMIT_MAX_REQUESTS, settings.RATE_LIMIT_WINDOW_SEC)
app.state.http_client = None

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def rate_limit_middleware(request: Request, call_next):
    client_ip = get_client_ip(request, settings.trusted_proxies)
    if not request.app.state.rate_limiter.hit(client_ip):
        # middleware sits outside the exception handlers, so render the error directly
        return await skillquest_error_handler(request, RateLimitError(RATE_LIMIT_MESSAGE))
    return await call_next(request)


@app.exception_handler(SkillQuestError)
async def skillquest_error_handler(request: Request, exc: SkillQuestError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    if isinstance(exc.body, dict):
        logger.warning("Rejected %s %s body: %s", request.method, request.url.path, sanitize_log_data(exc.body))
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request data", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error on %s %s (headers: %s)",
        request.method, request.url.path, sanitize_log_data(dict(request.headers)),
    )
    content = {"error": "Internal Server Error"}
    if settings.is_development:
        content["detail"] = repr(exc)
    return JSONResponse(status_code=500, content=content)


app.include_router(auth_router, prefix="/api")
app.include_router(jobs_router, prefix="/api")
app.include_router(tests_router, prefix="/api")
app.include_router(health_router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    app.state.http_client = httpx.AsyncClient(timeout=settings.QUESTION_FETCH_TIMEOUT_SEC)
    await init_db()


@app.on_event("shutdown")
async def shutdown_event():
    if app.state.http_client is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
    close_db()


def run():
    import uvicorn

    uvicorn.run("skillquest.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
