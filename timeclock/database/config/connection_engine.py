"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the time-clock backend:
- Builds the SQLAlchemy connection URL from environment-backed settings.
- Creates the Engine (connection pool + SQL execution entry point).
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.

Notes
-----
- Uses `URL.create(...)` so credentials never get concatenated by hand.
- SQLite (the default) ignores username/password/host and gets foreign-key
  enforcement switched on. An in-memory database (`DB_DATABASE_NAME=:memory:`)
  runs on one shared connection so every session and thread sees the same data;
  the test-suite relies on this.
- All ORM models must inherit from `declarativeBase`.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import MetaData

from timeclock.database.config.config import settings

connection_url = URL.create(
    drivername=settings.DB_DRIVER_NAME,
    username=settings.DB_USERNAME,
    password=settings.DB_PASSWORD,
    host=settings.DB_HOST,
    port=settings.DB_PORT,
    database=settings.DB_DATABASE_NAME,
)
"""Connection URL assembled from Settings."""

engine_options = {"echo": settings.DB_ECHO}
if connection_url.get_backend_name() == "sqlite" and connection_url.database in (None, "", ":memory:"):
    # a single shared connection, otherwise each thread gets its own empty database
    engine_options.update(poolclass=StaticPool, connect_args={"check_same_thread": False})

connection_engine = create_engine(connection_url, **engine_options)
"""Engine object: manages connections, executes SQL, and pools."""

metadata = MetaData()
"""Schema-level information about tables, constraints and indexes. Shared across all models."""

declarativeBase = declarative_base(metadata=metadata)
"""Root class for ORM models."""

if connection_url.get_backend_name() == "sqlite":
    @event.listens_for(connection_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        """SQLite leaves foreign keys unenforced unless asked per connection."""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
