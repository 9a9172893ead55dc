"""
TimeClock — Application Exceptions
==================================

Exceptions raised by the time-clock code itself. Failures surfaced by
SQLAlchemy are *not* wrapped; they reach the caller unchanged:

    sqlalchemy.exc.NoResultFound         → named lookup matched no row
    sqlalchemy.exc.MultipleResultsFound  → named lookup matched several rows
    sqlalchemy.exc.IntegrityError        → NOT NULL / unique / FK violated
    sqlalchemy.orm.exc.StaleDataError    → optimistic version mismatch

Hierarchy:
    TimeClockError (base)
    ├── EntityNotFoundError     → remove() of an entity that is not persisted
    ├── EntityValidationError   → builder missing a required field
    └── BuilderStateError       → builder reused after build()
"""

from typing import Any, Dict, Optional


class TimeClockError(Exception):
    """
    Base exception for all time-clock application errors.

    Attributes:
        message:  Human-readable description.
        context:  Additional debug info (entity name, key, field).
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class EntityNotFoundError(TimeClockError):
    """Raised when an entity expected to be persisted has no row in the database."""

    def __init__(
        self,
        entity: str = "entity",
        key: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {entity} is not persisted"
        if key is not None:
            message = f"{entity} with key '{key}' is not persisted"
        ctx = context or {}
        ctx["entity"] = entity
        if key is not None:
            ctx["key"] = key
        super().__init__(message=message, context=ctx)
        self.entity = entity
        self.key = key


class EntityValidationError(TimeClockError):
    """Raised by a builder when a mandatory field was never set."""

    def __init__(
        self,
        entity: str,
        field: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx.update(entity=entity, field=field)
        super().__init__(message=f"{entity}.{field} is required", context=ctx)
        self.entity = entity
        self.field = field


class BuilderStateError(TimeClockError):
    """Raised when a builder is used again after it produced its entity."""

    def __init__(self, builder: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"{builder} has already built its entity; create a new builder",
            context=context,
        )
