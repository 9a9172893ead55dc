"""
Base builder
============

``EntityBuilder`` carries the mechanics shared by every entity builder:
a fluent ``_set`` used by the concrete ``set_*`` methods, required-field
validation in ``build()``, and one-shot semantics (a builder produces a
single instance and refuses further use afterwards).

``from_entity`` starts from a field-by-field copy of an existing entity,
identity and version included. The copy is transient, so handing it to
``CrudDao.update`` merges it onto the stored row and the version check
still applies.
"""

from typing import Any, Generic, Optional, Tuple, Type, TypeVar

from timeclock.database.entities.mixins import AUDIT_COLUMNS
from timeclock.exceptions import BuilderStateError, EntityValidationError

T = TypeVar("T")


class EntityBuilder(Generic[T]):
    """Fluent builder over a single entity instance."""

    entity_type: Type[T]
    required_fields: Tuple[str, ...] = ()
    copied_relationships: Tuple[str, ...] = ()

    def __init__(self, entity: Optional[T] = None):
        self.entity: T = entity if entity is not None else self.entity_type()
        self._built = False

    @classmethod
    def create(cls):
        """Create a builder over a fresh entity."""
        return cls()

    @classmethod
    def from_entity(cls, entity: T):
        """Create a builder over a detached copy of ``entity``."""
        copy = cls.entity_type()
        for key, value in entity.column_values().items():
            setattr(copy, key, value)
        for key in AUDIT_COLUMNS:
            setattr(copy, key, getattr(entity, key))
        for key in cls.copied_relationships:
            setattr(copy, key, getattr(entity, key))
        return cls(copy)

    def _set(self, field: str, value: Any):
        if self._built:
            raise BuilderStateError(type(self).__name__)
        setattr(self.entity, field, value)
        return self

    def set_version(self, version: int):
        """Pin the version the caller last read, so `update` checks against it."""
        return self._set("version", version)

    def build(self) -> T:
        """Validate mandatory fields and return the entity."""
        if self._built:
            raise BuilderStateError(type(self).__name__)
        for field in self.required_fields:
            value = getattr(self.entity, field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise EntityValidationError(self.entity_type.__name__, field)
        self._built = True
        return self.entity
