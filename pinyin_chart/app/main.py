"""
Pinyin Chart API
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database.db import init_db
from ..schema.constants import Script
from ..schema.rules import load_rule_table, set_rule_table
from .core.config import RULE_TABLE_FILE
from .routers import chart, practice, review

logger = logging.getLogger(__name__)


# Initialize database and the optional rule table on startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Pinyin Chart API...")
    init_db()
    if RULE_TABLE_FILE is not None:
        set_rule_table(load_rule_table(RULE_TABLE_FILE))
    logger.info("Pinyin Chart API ready")
    yield
    logger.info("Pinyin Chart API stopped")


app = FastAPI(title="Pinyin Chart API", version=__version__, lifespan=lifespan)


# CORS middleware for frontend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chart.router)
app.include_router(practice.router)
app.include_router(review.router)


@app.get("/")
def root():
    return {
        "name": "Pinyin Chart API",
        "version": __version__,
        "scripts": [script.value for script in Script],
        "default_script": settings.script,
        "default_display_mode": settings.display_mode,
    }
