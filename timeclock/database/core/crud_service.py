"""
Generic CRUD service
====================

``CrudService`` wraps a ``CrudDao`` and runs each operation inside the
``@transactional`` boundary: everything one call does commits together or
is rolled back, and the original exception reaches the caller. Besides the
boundary it adds nothing; every method delegates straight to the DAO.

Entities returned by the service are detached once the call returns, with
all their columns (and eagerly loaded associations) readable. Pass them back
to ``update`` / ``remove`` in a later call; the DAO merges or re-loads them.
"""

from typing import Generic, List, Optional, TypeVar

from sqlalchemy.orm import Session

from timeclock.database.daos.crud_dao import CrudDao
from timeclock.database.helpers.transactionManagement import transactional

T = TypeVar("T")
K = TypeVar("K")


class CrudService(Generic[T, K]):
    """Transactional pass-through over a ``CrudDao``."""

    def __init__(self, crud_dao: CrudDao[T, K]):
        self.crud_dao = crud_dao

    @transactional
    def save(self, entity: T, session: Session = None) -> None:
        """Insert the entity; identity, version and audit are set on return."""
        self.crud_dao.save(session, entity)

    @transactional
    def get(self, primary_key: K, session: Session = None) -> Optional[T]:
        """Find by primary key; None if absent."""
        return self.crud_dao.get(session, primary_key)

    @transactional
    def getAll(self, session: Session = None) -> List[T]:
        return self.crud_dao.getAll(session)

    @transactional
    def update(self, entity: T, session: Session = None) -> T:
        """Merge the entity's state; raises StaleDataError on version mismatch."""
        return self.crud_dao.update(session, entity)

    @transactional
    def remove(self, entity: T, session: Session = None) -> None:
        self.crud_dao.remove(session, entity)

    @transactional
    def removeAll(self, session: Session = None) -> None:
        self.crud_dao.removeAll(session)

    @transactional
    def isExist(self, primary_key: K, session: Session = None) -> bool:
        return self.crud_dao.isExist(session, primary_key)

    @transactional
    def isExistEntity(self, entity: T, session: Session = None) -> bool:
        return self.crud_dao.isExistEntity(session, entity)

    @transactional
    def clear(self, session: Session = None) -> None:
        self.crud_dao.clear(session)

    @transactional
    def close(self, session: Session = None) -> None:
        self.crud_dao.close(session)
