"""mindtrack FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from mindtrack.api import health, journal, practitioners
from mindtrack.core.config import settings

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
)

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app.include_router(health.router)
app.include_router(journal.router)
app.include_router(practitioners.router)
