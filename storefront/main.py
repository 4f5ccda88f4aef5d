"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from storefront.api import router as api_router
from storefront.core.config import settings
from storefront.core.database import SessionLocal
from storefront.core.errors import register_error_handlers
from storefront.core.logging_config import configure_logging
from storefront.services.roles import ensure_default_roles

logger = logging.getLogger(__name__)


def _seed_roles() -> None:
    db = SessionLocal()
    try:
        ensure_default_roles(db)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and rebuild the role lookup table before serving."""
    configure_logging(settings.LOG_LEVEL)
    if settings.SEED_ROLES:
        await run_in_threadpool(_seed_roles)
    logger.info("Storefront API started (env=%s)", settings.APP_ENV)
    yield


app = FastAPI(
    title="Storefront API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Storefront API"}
