"""
Entity services and their wiring.

Each service extends ``CrudService`` with the entity-specific lookups of its
DAO, still one transaction per call. The module-level instances at the bottom
are the application's single place where services are bound to DAOs; the API
router imports them from here.
"""

from typing import List

from sqlalchemy.orm import Session

from timeclock.database.core.crud_service import CrudService
from timeclock.database.daos.customer_dao import CustomerDao
from timeclock.database.daos.job_dao import JobDao
from timeclock.database.daos.pay_dao import PayDao
from timeclock.database.entities.customer import Customer
from timeclock.database.entities.job import Job
from timeclock.database.entities.pay import Pay
from timeclock.database.helpers.transactionManagement import transactional


class CustomerService(CrudService[Customer, int]):

    def __init__(self, customer_dao: CustomerDao):
        super().__init__(customer_dao)
        self.customer_dao = customer_dao

    @transactional
    def getByCustomerId(self, customer_id: int, session: Session = None) -> Customer:
        return self.customer_dao.getByCustomerId(session, customer_id)

    @transactional
    def getByCustomerName(self, name: str, session: Session = None) -> Customer:
        return self.customer_dao.getByCustomerName(session, name)

    @transactional
    def updateContactByCustomerId(self, customer_id: int, contact: str, session: Session = None) -> Customer:
        return self.customer_dao.updateContactByCustomerId(session, customer_id, contact)

    @transactional
    def removeByCustomerId(self, customer_id: int, session: Session = None) -> None:
        self.customer_dao.removeByCustomerId(session, customer_id)

    @transactional
    def isExistWithCustomerId(self, customer_id: int, session: Session = None) -> bool:
        return self.customer_dao.isExistWithCustomerId(session, customer_id)


class JobService(CrudService[Job, int]):

    def __init__(self, job_dao: JobDao):
        super().__init__(job_dao)
        self.job_dao = job_dao

    @transactional
    def getByJobId(self, job_id: int, session: Session = None) -> Job:
        return self.job_dao.getByJobId(session, job_id)

    @transactional
    def getAllByDeveloperId(self, developer_id: int, session: Session = None) -> List[Job]:
        return self.job_dao.getAllByDeveloperId(session, developer_id)

    @transactional
    def getAllByStatus(self, status: str, session: Session = None) -> List[Job]:
        return self.job_dao.getAllByStatus(session, status)

    @transactional
    def getAllByProjectName(self, project_name: str, session: Session = None) -> List[Job]:
        return self.job_dao.getAllByProjectName(session, project_name)

    @transactional
    def updateStatusByJobId(self, job_id: int, status: str, session: Session = None) -> Job:
        return self.job_dao.updateStatusByJobId(session, job_id, status)


class PayService(CrudService[Pay, int]):

    def __init__(self, pay_dao: PayDao):
        super().__init__(pay_dao)
        self.pay_dao = pay_dao

    @transactional
    def getByPayId(self, pay_id: int, session: Session = None) -> Pay:
        return self.pay_dao.getByPayId(session, pay_id)


customer_service = CustomerService(CustomerDao())
job_service = JobService(JobDao())
pay_service = PayService(PayDao())
