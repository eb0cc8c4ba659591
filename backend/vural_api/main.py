import logging
from contextlib import asynccontextmanager

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vural_api.api.health import router as health_router
from vural_api.api.routes_admin import router as admin_router
from vural_api.api.routes_auth import router as auth_router
from vural_api.api.routes_blog import router as blog_router
from vural_api.api.routes_calculator import router as calculator_router
from vural_api.api.routes_catalogue import router as catalogue_router
from vural_api.api.routes_content import router as content_router
from vural_api.api.routes_customers import router as customers_router
from vural_api.api.routes_inbox import router as inbox_router
from vural_api.api.routes_packages import router as packages_router
from vural_api.api.routes_settings import router as settings_router
from vural_api.config import settings
from vural_api.db import SessionLocal, init_db
from vural_api.logging_config import configure_logging
from vural_api.services.auth_service import AuthService
from vural_api.services.errors import ServiceException

configure_logging(settings.LOG_LEVEL)
log = logging.getLogger(__name__)


def purge_revoked_tokens():
    db = SessionLocal()
    try:
        n = AuthService(db).purge_revoked()
        if n:
            log.info("purged %d expired revoked tokens", n)
    except Exception:
        log.exception("token purge job failed")
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db()

    scheduler = None
    if settings.SCHEDULER_ENABLED:
        scheduler = BackgroundScheduler()
        scheduler.add_job(
            purge_revoked_tokens,
            "interval",
            seconds=settings.TOKEN_PURGE_INTERVAL_SECONDS,
            id="purge_revoked_tokens",
        )
        scheduler.start()

    try:
        yield
    finally:
        if scheduler is not None:
            scheduler.shutdown(wait=False)


app = FastAPI(title="Vural Enerji - Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceException)
async def service_exception_handler(request: Request, exc: ServiceException):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


prefix = settings.API_PREFIX.rstrip("/")

app.include_router(health_router, prefix=prefix, tags=["health"])

app.include_router(catalogue_router, prefix=prefix)

app.include_router(auth_router, prefix=prefix)

app.include_router(customers_router, prefix=prefix)

app.include_router(blog_router, prefix=prefix)

app.include_router(inbox_router, prefix=prefix)

app.include_router(content_router, prefix=prefix)

app.include_router(packages_router, prefix=prefix)

app.include_router(calculator_router, prefix=prefix)

app.include_router(settings_router, prefix=prefix)

app.include_router(admin_router, prefix=prefix)
