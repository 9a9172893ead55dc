"""
Entities Package — SQLAlchemy 2.0 ORM Models
============================================

The `entities` package maps the time-clock tables to Python classes using
SQLAlchemy 2.0-typed mappings. These classes are consumed by the DAOs
(`daos` package) and produced by the builders (`builders` package).

Conventions
-----------
- SQLAlchemy 2.0 style `Mapped[...]` + `mapped_column(...)`
- Integer identities generated by the database
- Every table carries the audit columns (`AuditMixin`) and an optimistic
  lock counter (`version`, mapped as the mapper's `version_id_col`)
- Timezone-aware timestamps (UTC)

Contents
--------
- Audit / AuditMixin
    Embedded audit metadata: created/modified timestamps and actors.

- Customer
    A customer the work is done for. Fields: `customer_id`, `name`, `contact`.

- Pay
    Payment terms of a job. Fields: `pay_id`, `hourly_rate`, `working_hours`, `currency`.

- Job
    A unit of developer work. References one Customer and one Pay; both are
    persisted together with the Job but never deleted with it.
"""

from timeclock.database.entities.mixins import Audit, AuditMixin, ComparableMixin
from timeclock.database.entities.customer import Customer
from timeclock.database.entities.pay import Pay
from timeclock.database.entities.job import Job

__all__ = ["Audit", "AuditMixin", "ComparableMixin", "Customer", "Pay", "Job"]
