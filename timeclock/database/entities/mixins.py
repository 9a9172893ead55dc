"""
Shared entity mixins
====================

- ``Audit``: immutable snapshot of the embedded audit metadata.
- ``AuditMixin``: adds the four audit columns to the owning table and
  exposes them as a single ``audit`` attribute.
- ``ComparableMixin``: value view of an entity's mapped columns, used for
  value-equality membership tests (``CrudDao.isExistEntity``).

The audit columns are filled by the DAO through the hooks in
``timeclock.database.helpers.audit``, never by database triggers.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, VARCHAR, inspect
from sqlalchemy.orm import Mapped, mapped_column

AUDIT_COLUMNS = ("created_on", "created_by", "modified_on", "modified_by")


@dataclass(frozen=True)
class Audit:
    """
    Embedded audit metadata.

    Attributes
    ----------
    created_on : datetime | None
        When the row was inserted (UTC).
    created_by : str | None
        Actor that inserted the row.
    modified_on : datetime | None
        When the row was last written (UTC).
    modified_by : str | None
        Actor that last wrote the row.
    """

    created_on: Optional[datetime] = None
    created_by: Optional[str] = None
    modified_on: Optional[datetime] = None
    modified_by: Optional[str] = None


class AuditMixin:
    """Embeds the audit columns into the entity's table."""

    created_on: Mapped[Optional[datetime]] = mapped_column(
        "Created_On", DateTime(timezone=True), nullable=True
    )
    created_by: Mapped[Optional[str]] = mapped_column(
        "Created_By", VARCHAR(255), nullable=True
    )
    modified_on: Mapped[Optional[datetime]] = mapped_column(
        "Modified_On", DateTime(timezone=True), nullable=True
    )
    modified_by: Mapped[Optional[str]] = mapped_column(
        "Modified_By", VARCHAR(255), nullable=True
    )

    @property
    def audit(self) -> Audit:
        """Current audit values as an immutable snapshot."""
        return Audit(
            created_on=self.created_on,
            created_by=self.created_by,
            modified_on=self.modified_on,
            modified_by=self.modified_by,
        )

    @audit.setter
    def audit(self, value: Audit) -> None:
        self.created_on = value.created_on
        self.created_by = value.created_by
        self.modified_on = value.modified_on
        self.modified_by = value.modified_by


class ComparableMixin:
    """Gives entities a value view over their mapped columns."""

    def column_values(self) -> Dict[str, Any]:
        """
        Return every mapped column attribute except the audit columns.

        Identity and version are included, so two instances compare equal
        only when they describe the same row in the same state.
        """
        mapper = inspect(type(self))
        return {
            attr.key: getattr(self, attr.key)
            for attr in mapper.column_attrs
            if attr.key not in AUDIT_COLUMNS
        }

    def same_values(self, other: Any) -> bool:
        """True when ``other`` is the same entity type with equal column values."""
        return type(other) is type(self) and other.column_values() == self.column_values()
