"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

The `daos` package encapsulates every interaction with the ORM entities,
offering CRUD APIs to the service layer while hiding query details.

Conventions
-----------
- Every DAO method takes the active `Session` as its first argument
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs log and re-raise exceptions so upper layers decide error policy

Contents
--------
- CrudDao
    Generic C.R.U.D. over one entity type (explicit constructor argument):
    save, get, getAll, update, remove, removeAll, isExist, isExistEntity,
    clear, close.

- CustomerDao
    * getByCustomerId / getByCustomerName (single result or raise)
    * updateContactByCustomerId (read → builder copy → update)
    * removeByCustomerId, isExistWithCustomerId

- JobDao
    * getByJobId, getAllByDeveloperId, getAllByStatus, getAllByProjectName
    * updateStatusByJobId

- PayDao
    * getByPayId
"""

from timeclock.database.daos.crud_dao import CrudDao
from timeclock.database.daos.customer_dao import CustomerDao
from timeclock.database.daos.job_dao import JobDao
from timeclock.database.daos.pay_dao import PayDao

__all__ = ["CrudDao", "CustomerDao", "JobDao", "PayDao"]
