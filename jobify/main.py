"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from jobify.app.api.v1.auth.routes import router as auth_router
from jobify.app.api.v1.jobs.routes import router as jobs_router
from jobify.app.api.v1.stats.routes import router as stats_router
from jobify.app.core.config import INVALIDATE_HEADER, settings
from jobify.app.core.exceptions import RedirectRequired
from jobify.app.core.logging_config import get_logger, setup_logging
from jobify.app.db.base import Base
from jobify.app.db import session as db_session
from jobify.app.utils import cache

# Import models so they register with Base.metadata
import jobify.app.models  # noqa: F401

setup_logging()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=db_session.engine)
    await cache.connect()
    yield
    await cache.close()


app = FastAPI(
    title="Jobify API",
    description="Job application tracking API",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[INVALIDATE_HEADER],
)


@app.exception_handler(RedirectRequired)
async def redirect_required_handler(request: Request, exc: RedirectRequired):
    """Abort the action and send the caller elsewhere (sign-in page or job list)."""
    logger.info(
        "Redirecting %s %s -> %s reason=%s",
        request.method,
        request.url.path,
        exc.location,
        exc.reason,
    )
    return RedirectResponse(url=exc.location, status_code=303)


app.include_router(auth_router, prefix="/api")
app.include_router(jobs_router, prefix="/api")
app.include_router(stats_router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": "Jobify API", "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
