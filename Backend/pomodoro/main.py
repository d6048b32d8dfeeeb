import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI

from pomodoro.config import settings
from pomodoro.database import engine
from pomodoro.models import Base

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize Sentry
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=0.2 if settings.ENVIRONMENT == "production" else 1.0,
        send_default_pii=False,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables. A missing database must not stop the server;
    # requests fail with 500 until it becomes reachable.
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Connected to database")
    except Exception:
        logger.exception("Database connection error")

    yield

    # Shutdown
    await engine.dispose()


app = FastAPI(
    title="Pomodoro API",
    version="0.1.0",
    lifespan=lifespan,
)

# Middleware
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from pomodoro.middleware.error_handler import register_error_handlers  # noqa: E402

register_error_handlers(app)

# Routers
from pomodoro.routers.sessions import router as sessions_router  # noqa: E402
from pomodoro.routers.stats import router as stats_router  # noqa: E402
from pomodoro.routers.users import router as users_router  # noqa: E402

app.include_router(sessions_router)
app.include_router(stats_router)
app.include_router(users_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running on port %d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
