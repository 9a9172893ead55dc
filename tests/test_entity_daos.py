"""
TimeClock — Entity DAO Tests
============================

Business-key lookups and updates of `CustomerDao`, `JobDao` and `PayDao`.

What we test:
    ✅ single-result lookups: found / NoResultFound / MultipleResultsFound
    ✅ updateContactByCustomerId changes only the contact and bumps the version
    ✅ removeByCustomerId / isExistWithCustomerId
    ✅ job listings by developer, status and project are ordered by ID
    ✅ updateStatusByJobId keeps the associations
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import MultipleResultsFound, NoResultFound

from timeclock.database.daos import CustomerDao, JobDao, PayDao
from timeclock.database.helpers.transactionManagement import session_scope


class TestCustomerDao:

    def setup_method(self):
        self.dao = CustomerDao()

    def test_get_by_customer_id(self, make_customer):
        with session_scope() as session:
            customer = make_customer(name="Umbrella")
            self.dao.save(session, customer)

        with session_scope() as session:
            assert self.dao.getByCustomerId(session, customer.customer_id).name == "Umbrella"

    def test_get_by_customer_id_unknown(self):
        with pytest.raises(NoResultFound):
            with session_scope() as session:
                self.dao.getByCustomerId(session, 404)

    def test_get_by_customer_name_unique(self, make_customer):
        with session_scope() as session:
            self.dao.save(session, make_customer(name="Acme"))
            self.dao.save(session, make_customer(name="Globex"))

        with session_scope() as session:
            assert self.dao.getByCustomerName(session, "Globex").name == "Globex"

    def test_get_by_customer_name_no_match(self, make_customer):
        with session_scope() as session:
            self.dao.save(session, make_customer(name="Acme"))

        with pytest.raises(NoResultFound):
            with session_scope() as session:
                self.dao.getByCustomerName(session, "Nobody")

    def test_get_by_customer_name_duplicates(self, make_customer):
        with session_scope() as session:
            self.dao.save(session, make_customer(name="Acme"))
            self.dao.save(session, make_customer(name="Acme"))

        with pytest.raises(MultipleResultsFound):
            with session_scope() as session:
                self.dao.getByCustomerName(session, "Acme")

    def test_update_contact_changes_only_contact(self, make_customer):
        customer = make_customer(name="Acme", contact="Jane Doe")
        with session_scope() as session:
            self.dao.save(session, customer)

        with session_scope() as session:
            self.dao.updateContactByCustomerId(session, customer.customer_id, "John Roe")

        with session_scope() as session:
            stored = self.dao.getByCustomerId(session, customer.customer_id)
            assert stored.contact == "John Roe"
            assert stored.name == "Acme"
            assert stored.version == 2
            assert stored.created_by == customer.created_by

    def test_update_contact_of_unknown_customer(self):
        with pytest.raises(NoResultFound):
            with session_scope() as session:
                self.dao.updateContactByCustomerId(session, 12, "John Roe")

    def test_remove_by_customer_id(self, make_customer):
        customer = make_customer()
        with session_scope() as session:
            self.dao.save(session, customer)
            assert self.dao.isExistWithCustomerId(session, customer.customer_id)

        with session_scope() as session:
            self.dao.removeByCustomerId(session, customer.customer_id)

        with session_scope() as session:
            assert not self.dao.isExistWithCustomerId(session, customer.customer_id)

    def test_remove_by_unknown_customer_id(self):
        with pytest.raises(NoResultFound):
            with session_scope() as session:
                self.dao.removeByCustomerId(session, 3)


class TestJobDao:

    def setup_method(self):
        self.dao = JobDao()

    def _store(self, jobs):
        with session_scope() as session:
            for job in jobs:
                self.dao.save(session, job)

    def test_get_by_job_id_loads_associations(self, make_job, make_customer, make_pay):
        job = make_job(customer=make_customer(name="Acme"), pay=make_pay())
        self._store([job])

        with session_scope() as session:
            stored = self.dao.getByJobId(session, job.job_id)

        assert stored.customer.name == "Acme"
        assert stored.pay.currency == "EUR"

    def test_get_by_job_id_unknown(self):
        with pytest.raises(NoResultFound):
            with session_scope() as session:
                self.dao.getByJobId(session, 1)

    def test_filters(self, make_job):
        jobs = [
            make_job(developer_id=1, status="OPEN", project_name="alpha"),
            make_job(developer_id=2, status="DONE", project_name="alpha"),
            make_job(developer_id=1, status="DONE", project_name="beta"),
        ]
        self._store(jobs)
        ids = [job.job_id for job in jobs]

        with session_scope() as session:
            assert [j.job_id for j in self.dao.getAllByDeveloperId(session, 1)] == [ids[0], ids[2]]
            assert [j.job_id for j in self.dao.getAllByStatus(session, "DONE")] == [ids[1], ids[2]]
            assert [j.job_id for j in self.dao.getAllByProjectName(session, "alpha")] == [ids[0], ids[1]]
            assert self.dao.getAllByStatus(session, "CANCELLED") == []

    def test_update_status_keeps_associations(self, make_job, make_customer, make_pay):
        job = make_job(customer=make_customer(), pay=make_pay())
        self._store([job])

        with session_scope() as session:
            updated = self.dao.updateStatusByJobId(session, job.job_id, "DONE")
            assert updated.status == "DONE"
            assert updated.version == 2

        with session_scope() as session:
            stored = self.dao.getByJobId(session, job.job_id)
            assert stored.status == "DONE"
            assert stored.customer.customer_id == job.customer.customer_id
            assert stored.pay.pay_id == job.pay.pay_id


class TestPayDao:

    def test_get_by_pay_id(self, make_pay):
        pay = make_pay(hourly_rate="30", working_hours="2.5")
        with session_scope() as session:
            PayDao().save(session, pay)

        with session_scope() as session:
            stored = PayDao().getByPayId(session, pay.pay_id)
            assert stored.hourly_rate == Decimal("30")
            assert stored.total == Decimal("75")

    def test_get_by_pay_id_unknown(self):
        with pytest.raises(NoResultFound):
            with session_scope() as session:
                PayDao().getByPayId(session, 77)
