"""
Job DAO

`CrudDao` specialisation for `Job` entities: single-result lookup by ID,
filtered listings by developer, status and project, and a status update
that goes through the builder and `update` (version-checked).
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from timeclock.database.builders.job_builder import JobBuilder
from timeclock.database.daos.crud_dao import CrudDao
from timeclock.database.entities.job import Job

logger = logging.getLogger(__name__)


class JobDao(CrudDao[Job, int]):
    """Data Access Object for `Job` entities."""

    def __init__(self):
        super().__init__(Job)

    def getByJobId(self, session: Session, job_id: int) -> Job:
        """Return the job with the given ID; raises NoResultFound if absent."""
        try:
            return session.execute(select(Job).where(Job.job_id == job_id)).scalar_one()
        except Exception as e:
            logger.error("Error in JobDao.getByJobId. Error Message: %s", e)
            raise e

    def getAllByDeveloperId(self, session: Session, developer_id: int) -> List[Job]:
        try:
            stmt = select(Job).where(Job.developer_id == developer_id).order_by(Job.job_id)
            return list(session.scalars(stmt).all())
        except Exception as e:
            logger.error("Error in JobDao.getAllByDeveloperId. Error Message: %s", e)
            raise e

    def getAllByStatus(self, session: Session, status: str) -> List[Job]:
        try:
            stmt = select(Job).where(Job.status == status).order_by(Job.job_id)
            return list(session.scalars(stmt).all())
        except Exception as e:
            logger.error("Error in JobDao.getAllByStatus. Error Message: %s", e)
            raise e

    def getAllByProjectName(self, session: Session, project_name: str) -> List[Job]:
        try:
            stmt = select(Job).where(Job.project_name == project_name).order_by(Job.job_id)
            return list(session.scalars(stmt).all())
        except Exception as e:
            logger.error("Error in JobDao.getAllByProjectName. Error Message: %s", e)
            raise e

    def updateStatusByJobId(self, session: Session, job_id: int, status: str) -> Job:
        """Set a new status on the job with the given ID."""
        job = JobBuilder.from_entity(self.getByJobId(session, job_id)).set_status(status).build()
        return self.update(session, job)
