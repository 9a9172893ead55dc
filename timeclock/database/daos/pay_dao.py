"""Pay DAO: `CrudDao` for `Pay` plus a single-result lookup by ID."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from timeclock.database.daos.crud_dao import CrudDao
from timeclock.database.entities.pay import Pay

logger = logging.getLogger(__name__)


class PayDao(CrudDao[Pay, int]):

    def __init__(self):
        super().__init__(Pay)

    def getByPayId(self, session: Session, pay_id: int) -> Pay:
        try:
            return session.execute(select(Pay).where(Pay.pay_id == pay_id)).scalar_one()
        except Exception as e:
            logger.error("Error in PayDao.getByPayId. Error Message: %s", e)
            raise e
