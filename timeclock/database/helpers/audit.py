"""
Audit stamping
==============

Pre-save / pre-update hooks invoked by ``CrudDao``. They fill the embedded
audit columns of any entity using ``AuditMixin``; other objects pass through
untouched.

The acting user is read from ``audit_actor_context``; when nothing is bound
the configured ``settings.AUDIT_ACTOR`` is recorded.
"""

import contextvars
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from timeclock.database.config.config import settings
from timeclock.database.entities.mixins import AuditMixin

audit_actor_context: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "audit_actor_context", default=None
)
"""Actor recorded by the audit hooks for the current context."""


def current_actor() -> str:
    return audit_actor_context.get() or settings.AUDIT_ACTOR


@contextmanager
def acting_as(actor: str) -> Iterator[None]:
    """Bind ``actor`` as the audit actor for the duration of the block."""
    token = audit_actor_context.set(actor)
    try:
        yield
    finally:
        audit_actor_context.reset(token)


def stamp_created(entity) -> None:
    """Fill creation and modification audit columns before an insert."""
    if not isinstance(entity, AuditMixin):
        return
    now = datetime.now(timezone.utc)
    actor = current_actor()
    entity.created_on = now
    entity.created_by = actor
    entity.modified_on = now
    entity.modified_by = actor


def stamp_modified(entity, created_on: Optional[datetime] = None, created_by: Optional[str] = None) -> None:
    """
    Fill modification audit columns before an update.

    ``created_on`` / ``created_by`` carry the stored creation values so a
    detached copy cannot rewrite who created the row.
    """
    if not isinstance(entity, AuditMixin):
        return
    if created_on is not None:
        entity.created_on = created_on
    if created_by is not None:
        entity.created_by = created_by
    entity.modified_on = datetime.now(timezone.utc)
    entity.modified_by = current_actor()
