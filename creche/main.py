# creche/main.py
import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.middleware.sessions import SessionMiddleware
from starlette.responses import JSONResponse

from creche.core.config import settings
from creche.core.errors import CrecheError, ValidationFailed
from creche.core.logging import correlation_id, setup_logging
from creche.db.session import SessionLocal, init_db

# Routers
from creche.routers import auth, health
from creche.routers import applications, children, fees, attendance
from creche.routers import messages, notifications, teachers, announcements, documents

log = logging.getLogger("creche.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.SEED_ON_STARTUP:
        from creche.services.seed import seed_demo

        db = SessionLocal()
        try:
            seed_demo(db)
        finally:
            db.close()
    yield


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.CRECHE_NAME, lifespan=lifespan)

    # ---------------- Session cookie ----------------
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        max_age=settings.SESSION_MAX_AGE,
        same_site="lax",
        https_only=settings.SESSION_HTTPS_ONLY,
    )

    # ---------------- Correlation-ID ----------------
    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next):
        cid = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        request.state.correlation_id = cid
        token = correlation_id.set(cid)
        try:
            resp = await call_next(request)
        finally:
            correlation_id.reset(token)
        resp.headers["X-Correlation-ID"] = cid
        return resp

    # ---------------- Error handlers ----------------
    @app.exception_handler(CrecheError)
    async def creche_error_handler(request: Request, exc: CrecheError):
        if exc.status_code >= 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        err = ValidationFailed.from_pydantic(exc.errors())
        return JSONResponse(status_code=err.status_code, content=err.to_body())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        log.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    # ---------------- Mount routers ----------------
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(auth.router, prefix="/api", tags=["Auth"])
    for r in (applications, children, fees, attendance, messages,
              notifications, teachers, announcements, documents):
        app.include_router(r.router, prefix="/api")

    return app


app = create_app()
