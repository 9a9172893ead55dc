"""
TimeClock — Test Configuration (conftest.py)
============================================

Shared pytest fixtures for the whole suite.

The settings singleton and the engine are built at import time, so the
environment is pointed at an in-memory SQLite database *before* anything from
`timeclock` is imported. Every test gets a freshly created schema which is
dropped again afterwards.
"""

import os

os.environ["DB_DRIVER_NAME"] = "sqlite"
os.environ["DB_DATABASE_NAME"] = ":memory:"
os.environ["AUDIT_ACTOR"] = "test-suite"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402

from timeclock.database.builders import CustomerBuilder, JobBuilder, PayBuilder  # noqa: E402
from timeclock.database.helpers.schema import create_schema, drop_schema  # noqa: E402


@pytest.fixture(autouse=True)
def database():
    """Create the schema for one test and drop it afterwards."""
    create_schema()
    yield
    drop_schema()


@pytest.fixture
def make_customer():
    """Factory for built, not yet persisted customers."""
    def _make(name: str = "Acme Ltd.", contact: str = "Jane Doe"):
        return CustomerBuilder.create().set_name(name).set_contact(contact).build()
    return _make


@pytest.fixture
def make_pay():
    def _make(hourly_rate="25.50", working_hours="8", currency="EUR"):
        return (PayBuilder.create()
                .set_hourly_rate(hourly_rate)
                .set_working_hours(working_hours)
                .set_currency(currency)
                .build())
    return _make


@pytest.fixture
def make_job():
    """Factory for built, not yet persisted jobs."""
    def _make(developer_id: int = 7, status: str = "OPEN", project_name: str = "timeclock",
              customer=None, pay=None, order_number: int = 1001):
        return (JobBuilder.create()
                .set_developer_id(developer_id)
                .set_order_number(order_number)
                .set_project_name(project_name)
                .set_branch_name("develop")
                .set_status(status)
                .set_customer(customer)
                .set_pay(pay)
                .build())
    return _make
