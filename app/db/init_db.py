"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all() runs.
"""

import logging

from sqlalchemy import Engine

from app.models.base import Base
from app.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured on %s", engine.url.render_as_string(hide_password=True))
