"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy database sessions
using Python context variables and a decorator-based transaction wrapper.

It lets a session travel across function calls without explicitly threading
it through arguments. Service methods decorated with ``@transactional`` run
inside a managed transaction: every DAO call made in one service call shares
one session and is committed (or rolled back) as a unit.

Key features
~~~~~~~~~~~~
- Context variable storing the active session
- Implicit reuse of an existing session (nested service calls join the
  outer transaction)
- Commit on success, rollback and re-raise on any failure
- Clean session closure after execution
- ``session_scope()`` context manager with the same semantics, for scripts
  and tests driving DAOs directly
"""

import contextvars
import logging
from contextlib import contextmanager
from functools import wraps
from typing import Iterator, Optional

from sqlalchemy.orm import Session, sessionmaker

from timeclock.database.config.connection_engine import connection_engine

logger = logging.getLogger(__name__)

db_session_context: contextvars.ContextVar[Optional[Session]] = contextvars.ContextVar(
    "db_session_context", default=None
)
"""Context variable storing the active SQLAlchemy session."""

SessionLocal = sessionmaker(bind=connection_engine, expire_on_commit=False)
"""Session factory. Entities stay readable after their transaction commits."""


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Provide a transactional scope around a series of operations.

    Reuses the session bound to the current context if there is one; in that
    case commit/rollback stay with the outer owner.

    Example
    -------
    >>> with session_scope() as session:
    ...     CustomerDao().save(session, customer)
    """
    session = db_session_context.get()
    if session is not None:
        yield session
        return

    session = SessionLocal()
    token = db_session_context.set(session)
    try:
        yield session
        session.flush()
        session.commit()
    except Exception as e:
        logger.debug("Rolling back transaction: %s", e)
        session.rollback()
        raise e
    finally:
        session.close()
        db_session_context.reset(token)


def transactional(func):
    """
    Decorator to wrap functions in a managed SQLAlchemy transaction.

    Ensures that:
    - If a session already exists in context, it is reused.
    - Otherwise, a new session is created, committed, and closed.
    - On errors, the session is rolled back and the error re-raised unchanged.

    Parameters
    ----------
    func : callable
        The function to wrap. It must accept a `session` keyword argument.

    Returns
    -------
    callable
        The wrapped function, executed within a database transaction.

    Example
    -------
    >>> @transactional
    ... def rename_customer(customer_id: int, name: str, session=None):
    ...     customer = session.get(Customer, customer_id)
    ...     customer.name = name
    """
    @wraps(func)
    def wrap_func(*args, **kwargs):
        with session_scope() as session:
            return func(*args, session=session, **kwargs)

    return wrap_func
