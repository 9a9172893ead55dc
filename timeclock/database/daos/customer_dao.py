"""
Customer DAO

Purpose
-------
`CrudDao` specialisation for the `Customer` entity adding business-key lookups:

- getByCustomerId(session, customer_id)
- getByCustomerName(session, name)
- updateContactByCustomerId(session, customer_id, contact)
- removeByCustomerId(session, customer_id)
- isExistWithCustomerId(session, customer_id)

Error Handling
--------------
- The single-result lookups use `.scalar_one()`: zero rows raise
  `NoResultFound`, more than one raise `MultipleResultsFound`. Both are
  logged and re-raised unchanged.
- `updateContactByCustomerId` reads and writes in two steps. A concurrent
  change between them is only caught by the version check in `update`.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from timeclock.database.builders.customer_builder import CustomerBuilder
from timeclock.database.daos.crud_dao import CrudDao
from timeclock.database.entities.customer import Customer

logger = logging.getLogger(__name__)


class CustomerDao(CrudDao[Customer, int]):
    """Data Access Object for `Customer` entities."""

    def __init__(self):
        super().__init__(Customer)

    def getByCustomerId(self, session: Session, customer_id: int) -> Customer:
        """
        Return the customer with the given ID.

        Raises
        ------
        NoResultFound
            If no customer has that ID.
        """
        try:
            stmt = select(Customer).where(Customer.customer_id == customer_id)
            return session.execute(stmt).scalar_one()
        except Exception as e:
            logger.error("Error in CustomerDao.getByCustomerId. Error Message: %s", e)
            raise e

    def getByCustomerName(self, session: Session, name: str) -> Customer:
        """
        Return the customer with the given name.

        Raises
        ------
        NoResultFound
            If no customer has that name.
        MultipleResultsFound
            If the name is shared by several customers.
        """
        try:
            stmt = select(Customer).where(Customer.name == name)
            return session.execute(stmt).scalar_one()
        except Exception as e:
            logger.error("Error in CustomerDao.getByCustomerName. Error Message: %s", e)
            raise e

    def updateContactByCustomerId(self, session: Session, customer_id: int, contact: str) -> Customer:
        """
        Replace the contact person of a customer.

        Builds a modified copy of the stored customer and writes it back
        through `update`, so the optimistic version check applies.
        """
        customer = CustomerBuilder.from_entity(
            self.getByCustomerId(session, customer_id)
        ).set_contact(contact).build()
        return self.update(session, customer)

    def removeByCustomerId(self, session: Session, customer_id: int) -> None:
        """Remove the customer with the given ID (NoResultFound if absent)."""
        self.remove(session, self.getByCustomerId(session, customer_id))

    def isExistWithCustomerId(self, session: Session, customer_id: int) -> bool:
        """Check whether any stored customer carries the given ID."""
        return any(customer.customer_id == customer_id for customer in self.getAll(session))
