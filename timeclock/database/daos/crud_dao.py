"""
Generic CRUD DAO

Purpose
-------
One data-access class parameterised by entity type and key type, providing
the uniform persistence operations every entity needs:

- save / get / getAll / update / remove / removeAll
- isExist (by key) / isExistEntity (by value)
- clear / close of the unit of work

Design
------
- The managed entity type is passed explicitly to the constructor; there is
  no runtime inspection of generic parameters.
- Every method expects the active SQLAlchemy `Session` supplied by the
  caller (normally a `@transactional` service method). Commit and rollback
  belong to the caller; `save`, `update` and the removals flush so that
  identities, versions and constraint violations surface immediately.
- Audit columns are filled by explicit pre-save / pre-update hooks
  (`timeclock.database.helpers.audit`), not by ORM events.

Error Handling
--------------
- Each method logs `Error in <Dao>.<method>. Error Message: ...` and re-raises
  the original exception. Nothing is recovered locally:
    * `IntegrityError` on NOT NULL / unique / foreign-key violations
    * `StaleDataError` when the version of the written entity is not the
      stored one, or its row was deleted meanwhile
    * `EntityNotFoundError` when `remove` gets an entity without a row
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from timeclock.database.helpers.audit import stamp_created, stamp_modified
from timeclock.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")


class CrudDao(Generic[T, K]):
    """
    Data Access Object implementing C.R.U.D. for one entity type.

    Parameters
    ----------
    entity_type : type
        The mapped entity class this DAO manages.
    """

    def __init__(self, entity_type: Type[T]):
        self.entity_type = entity_type

    def save(self, session: Session, entity: T) -> None:
        """
        Make an instance managed and persistent.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        entity : T
            New entity instance. Related entities reached through the
            save-update cascade are inserted (and audited) with it.

        Raises
        ------
        IntegrityError
            If a NOT NULL, unique or foreign-key constraint is broken.
        """
        try:
            for obj in self._cascaded(entity):
                if inspect(obj).transient:
                    stamp_created(obj)
            session.add(entity)
            session.flush()
        except Exception as e:
            logger.error("Error in %s.save. Error Message: %s", type(self).__name__, e)
            raise e

    def get(self, session: Session, primary_key: K) -> Optional[T]:
        """
        Find by primary key.

        Returns
        -------
        T | None
            The entity, taken from the session's identity map when already
            loaded, or None if no row has that key.
        """
        try:
            return session.get(self.entity_type, primary_key)
        except Exception as e:
            logger.error("Error in %s.get. Error Message: %s", type(self).__name__, e)
            raise e

    def getAll(self, session: Session) -> List[T]:
        """
        Return every entity of the managed type, in no guaranteed order.
        """
        try:
            return list(session.scalars(select(self.entity_type)).all())
        except Exception as e:
            logger.error("Error in %s.getAll. Error Message: %s", type(self).__name__, e)
            raise e

    def update(self, session: Session, entity: T) -> T:
        """
        Merge the state of the given (possibly detached) entity into the
        current persistence context.

        Audit columns are stamped on the merged instances, never on the
        object passed in. New associations reached through the cascade get
        their creation audit, changed ones their modification audit.

        Returns
        -------
        T
            The managed instance carrying the merged state.

        Raises
        ------
        StaleDataError
            If the entity's version differs from the stored one, or the
            entity carries a key and a version but its row is gone.
        """
        try:
            key = self._primary_key(entity)
            stored = session.get(self.entity_type, key) if key is not None else None
            if stored is None and key is not None and getattr(entity, "version", None) is not None:
                raise StaleDataError(
                    f"{self.entity_type.__name__} with key '{key}' was deleted by another transaction"
                )
            created = (stored.created_on, stored.created_by) if stored is not None else (None, None)

            merged = session.merge(entity)
            for obj in self._cascaded(merged):
                state = inspect(obj)
                if state.transient or state.pending:
                    stamp_created(obj)
                elif obj is merged:
                    stamp_modified(obj, *created)
                elif session.is_modified(obj):
                    stamp_modified(obj)
            session.flush()
            return merged
        except Exception as e:
            logger.error("Error in %s.update. Error Message: %s", type(self).__name__, e)
            raise e

    def remove(self, session: Session, entity: T) -> None:
        """
        Remove the specified entity instance.

        Accepts an instance managed by `session` or a detached copy whose row
        still exists.

        Raises
        ------
        EntityNotFoundError
            If the entity is transient, pending, or its row is gone.
        """
        try:
            state = inspect(entity)
            if state.persistent and state.session is session:
                target = entity
            else:
                key = self._primary_key(entity)
                target = session.get(self.entity_type, key) if key is not None else None
                if target is None:
                    raise EntityNotFoundError(self.entity_type.__name__, key)
            session.delete(target)
            session.flush()
        except Exception as e:
            logger.error("Error in %s.remove. Error Message: %s", type(self).__name__, e)
            raise e

    def removeAll(self, session: Session) -> None:
        """
        Remove every entity of the managed type, one row at a time so each
        deletion goes through the regular unit-of-work path.
        """
        try:
            for entity in self.getAll(session):
                session.delete(entity)
            session.flush()
        except Exception as e:
            logger.error("Error in %s.removeAll. Error Message: %s", type(self).__name__, e)
            raise e

    def isExist(self, session: Session, primary_key: K) -> bool:
        """Check whether a row with the given primary key exists."""
        return self.get(session, primary_key) is not None

    def isExistEntity(self, session: Session, entity: T) -> bool:
        """
        Check whether an entity with the same column values is stored.

        Membership is tested against the full `getAll()` result by value,
        not by key, so the cost is linear in the table size.
        """
        return any(candidate.same_values(entity) for candidate in self.getAll(session))

    def clear(self, session: Session) -> None:
        """Detach every instance from the session without touching the database."""
        session.expunge_all()

    def close(self, session: Session) -> None:
        """Close the session, releasing its connection."""
        session.close()

    def _primary_key(self, entity: T):
        identity = inspect(self.entity_type).primary_key_from_instance(entity)
        if any(value is None for value in identity):
            return None
        return identity[0] if len(identity) == 1 else tuple(identity)

    def _cascaded(self, entity: T):
        state = inspect(entity)
        yield entity
        for obj, _mapper, _state, _dict in state.mapper.cascade_iterator("save-update", state):
            yield obj
