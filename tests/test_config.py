"""
TimeClock — Settings Tests
==========================

What we test:
    ✅ environment values reach the settings singleton
    ✅ LOG_LEVEL is normalised to upper case and validated
    ✅ the engine URL is built from the driver and database name
"""

import pytest
from pydantic import ValidationError

from timeclock.database.config.config import Settings, settings
from timeclock.database.config.connection_engine import connection_url


def test_environment_reaches_settings():
    assert settings.DB_DRIVER_NAME == "sqlite"
    assert settings.DB_DATABASE_NAME == ":memory:"
    assert settings.AUDIT_ACTOR == "test-suite"


def test_log_level_is_upper_cased():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


def test_connection_url():
    assert connection_url.drivername == "sqlite"
    assert connection_url.database == ":memory:"
