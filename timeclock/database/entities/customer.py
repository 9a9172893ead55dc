"""
Customer ORM Model
==================

The ``Customer`` ORM model represents a client the developers work for. It maps
to the ``customer`` table and is referenced one-to-one by ``Job``.

Key features
~~~~~~~~~~~~
- Database-generated 64-bit primary key (``customer_id``)
- Customer name (looked up by the ``getByCustomerName`` query)
- Contact person, updated through ``CustomerDao.updateContactByCustomerId``
- Embedded audit columns and an optimistic-lock ``version``
"""

from typing import Optional

from sqlalchemy import BigInteger, Integer, VARCHAR
from sqlalchemy.orm import Mapped, mapped_column

from timeclock.database.config.connection_engine import declarativeBase
from timeclock.database.entities.mixins import AuditMixin, ComparableMixin


class Customer(AuditMixin, ComparableMixin, declarativeBase):
    """
    ORM model for the `customer` table.

    Attributes
    ----------
    customer_id : int
        Primary key, generated on insert.
    name : str
        Name of the customer.
    contact : str | None
        Contact person on the customer's side.
    version : int
        Optimistic-lock counter, bumped on every update.
    """

    __tablename__ = "customer"

    customer_id: Mapped[int] = mapped_column(
        "Customer_Id",
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    """Primary key of the customer."""

    name: Mapped[str] = mapped_column(
        "Name", VARCHAR(255), nullable=False
    )
    """Name of the customer (max length 255)."""

    contact: Mapped[Optional[str]] = mapped_column(
        "Contact", VARCHAR(255), nullable=True
    )
    """Contact person of the customer."""

    version: Mapped[int] = mapped_column(
        "Version", Integer, nullable=False
    )
    """Optimistic-lock counter managed by the mapper."""

    __mapper_args__ = {"version_id_col": version}

    def __init__(
        self,
        name: Optional[str] = None,
        contact: Optional[str] = None,
        customer_id: Optional[int] = None,
    ):
        """
        Initialize a new Customer object.

        Parameters
        ----------
        name : str
            Name of the customer.
        contact : str | None
            Contact person.
        customer_id : int | None
            Primary key; leave empty for new customers.
        """
        self.customer_id = customer_id
        self.name = name
        self.contact = contact

    def __str__(self) -> str:
        return f"Customer: id:{self.customer_id}, name: {self.name}, contact: {self.contact}"
