from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cardcrm import __version__
from cardcrm.config import settings
from cardcrm.database import engine
from cardcrm.models import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting cardcrm (news_enabled=%s)", settings.news_enabled)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Card CRM",
        version=__version__,
        lifespan=lifespan,
    )

    from cardcrm.api.router import api_router
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
