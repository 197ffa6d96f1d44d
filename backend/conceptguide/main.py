"""FastAPI application entry point."""
from __future__ import annotations
import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from conceptguide.api import pages
from conceptguide.container import get_concept_repo
from conceptguide.core import config
from conceptguide.persistence.loader import ConceptDataError

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# App creation
# ------------------------------------------------------------------
app = FastAPI(
    title=config.SITE_NAME,
    description="SEO-optimized pages for a catalog of programming concepts",
    version="1.0.0",
)


# ------------------------------------------------------------------
# Startup: configure logging and load the catalog once
# ------------------------------------------------------------------
@app.on_event("startup")
def on_startup():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        get_concept_repo()
    except ConceptDataError:
        logger.exception("Cannot serve pages: concept data failed to load")
        raise


# ------------------------------------------------------------------
# Routers
# ------------------------------------------------------------------
app.include_router(pages.router)

# ------------------------------------------------------------------
# Stylesheet shared by both page types
# ------------------------------------------------------------------
if os.path.isdir(config.STATIC_DIR):
    app.mount("/static", StaticFiles(directory=config.STATIC_DIR), name="static")
