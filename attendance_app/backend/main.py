# attendance_app/backend/main.py
from fastapi import FastAPI, Response, status
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from pathlib import Path
import asyncpg
import logging

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from .config.config import settings
from .api import students, attendance
from .db.schema import ensure_schema
from .metrics.counters import render_metrics
from .common.datetime_utils import utc_now
from .logging.logging_config import setup_logging

from .api.utilities.limiter import limiter

logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Creates the PostgreSQL pool and the tables on startup, closes the pool on shutdown.

    There is no degraded mode: if the database cannot be reached the error is
    re-raised and the server refuses to start.
    """
    setup_logging()
    logger.info("Application starting...")
    try:
        postgres_pool = await asyncpg.create_pool(**settings.pool_kwargs())
        await ensure_schema(postgres_pool)
    except Exception:
        logger.critical("Database connection failed, aborting startup.", exc_info=True)
        raise

    app.state.postgres_pool = postgres_pool
    logger.info("PostgreSQL connection pool created.")

    yield

    logger.info("Application shutting down...")
    await app.state.postgres_pool.close()
    logger.info("PostgreSQL connection pool closed.")


app = FastAPI(
    title="Student Attendance API",
    description="Students and their daily present/absent attendance.",
    version="1.0.0",
    lifespan=lifespan
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.include_router(students.router, prefix="/api")
app.include_router(attendance.router, prefix="/api")


@app.get("/health", tags=["System"])
def health_check():
    """Liveness check. The timestamp is UTC with a trailing Z."""
    return {"status": "OK", "timestamp": utc_now().isoformat().replace("+00:00", "Z")}


@app.get("/metrics", tags=["System"])
def metrics():
    """Prometheus text exposition of the process metrics and attendance counters."""
    try:
        payload, content_type = render_metrics()
    except Exception:
        logger.error("Metrics exposition failed.", exc_info=True)
        return Response(content="Failed to render metrics", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, media_type="text/plain")
    return Response(content=payload, media_type=content_type)


# Registered last so that it only catches paths no route above claimed.
app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_config=None)
