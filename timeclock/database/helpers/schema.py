"""Schema creation helpers for the configured engine."""

import logging

from sqlalchemy.engine import Engine

from timeclock.database.config.connection_engine import connection_engine, metadata
import timeclock.database.entities  # noqa: F401  registers the tables on `metadata`

logger = logging.getLogger(__name__)


def create_schema(engine: Engine = connection_engine) -> None:
    """Create every missing table."""
    logger.info("Creating schema on %s", engine.url.render_as_string(hide_password=True))
    metadata.create_all(engine)


def drop_schema(engine: Engine = connection_engine) -> None:
    """Drop every table known to the metadata."""
    logger.info("Dropping schema on %s", engine.url.render_as_string(hide_password=True))
    metadata.drop_all(engine)
