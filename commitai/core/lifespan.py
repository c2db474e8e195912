from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from commitai import __version__

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = app.state.settings
    logger.info(
        "CommitAI API starting",
        extra={"app_env": settings.app_env, "version": __version__},
    )
    try:
        yield
    finally:
        logger.info("CommitAI API stopped")
