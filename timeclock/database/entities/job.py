"""
Job ORM Model
=============

The ``Job`` ORM model represents one piece of developer work and maps to the
``job`` table.

Key features
~~~~~~~~~~~~
- Database-generated integer primary key (``job_id``)
- Developer reference and order number
- Mandatory project name and status; optional branch / package / class names
  and a free-text comment
- One-to-one ``customer`` and ``pay`` associations, loaded eagerly. The default
  ``save-update, merge`` cascade inserts them together with the job; there is
  no delete cascade, so removing a job leaves its customer and pay in place.
- Embedded audit columns and an optimistic-lock ``version``
"""

from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, Integer, TEXT, VARCHAR
from sqlalchemy.orm import Mapped, mapped_column, relationship

from timeclock.database.config.connection_engine import declarativeBase
from timeclock.database.entities.customer import Customer
from timeclock.database.entities.mixins import AuditMixin, ComparableMixin
from timeclock.database.entities.pay import Pay


class Job(AuditMixin, ComparableMixin, declarativeBase):
    """
    ORM model for the `job` table.

    Attributes
    ----------
    job_id : int
        Primary key, generated on insert.
    developer_id : int
        Identifier of the developer doing the work.
    order_number : int
        Order number of the job.
    project_name : str
        Project the job belongs to (required).
    branch_name : str | None
        VCS branch (e.g. on GitHub).
    package_name : str | None
        Package touched by the job.
    class_name : str | None
        Class touched by the job.
    status : str
        Current status of the job (required).
    comment : str | None
        Free-text comment.
    customer : Customer | None
        The customer the job is done for.
    pay : Pay | None
        Payment terms of the job.
    version : int
        Optimistic-lock counter.
    """

    __tablename__ = "job"

    job_id: Mapped[int] = mapped_column(
        "Job_Id", Integer, primary_key=True, autoincrement=True
    )
    developer_id: Mapped[int] = mapped_column(
        "Developer_Id", Integer, nullable=False
    )
    order_number: Mapped[int] = mapped_column(
        "Order_Number", Integer, nullable=False
    )
    project_name: Mapped[str] = mapped_column(
        "Project", VARCHAR(255), nullable=False
    )
    branch_name: Mapped[Optional[str]] = mapped_column(
        "Branch", VARCHAR(255), nullable=True
    )
    package_name: Mapped[Optional[str]] = mapped_column(
        "Package", VARCHAR(255), nullable=True
    )
    class_name: Mapped[Optional[str]] = mapped_column(
        "Class_Name", VARCHAR(255), nullable=True
    )
    status: Mapped[str] = mapped_column(
        "Status", VARCHAR(64), nullable=False
    )
    comment: Mapped[Optional[str]] = mapped_column(
        "Comment", TEXT, nullable=True
    )

    customer_id: Mapped[Optional[int]] = mapped_column(
        "Customer_Id",
        BigInteger().with_variant(Integer, "sqlite"),
        ForeignKey("customer.Customer_Id"),
        nullable=True,
    )
    pay_id: Mapped[Optional[int]] = mapped_column(
        "Pay_Id", Integer, ForeignKey("pay.Pay_Id"), nullable=True
    )

    customer: Mapped[Optional[Customer]] = relationship(Customer, lazy="joined")
    pay: Mapped[Optional[Pay]] = relationship(Pay, lazy="joined")

    version: Mapped[int] = mapped_column(
        "Version", Integer, nullable=False
    )

    __mapper_args__ = {"version_id_col": version}

    def __init__(
        self,
        developer_id: Optional[int] = None,
        order_number: Optional[int] = None,
        project_name: Optional[str] = None,
        status: Optional[str] = None,
        branch_name: Optional[str] = None,
        package_name: Optional[str] = None,
        class_name: Optional[str] = None,
        comment: Optional[str] = None,
        customer: Optional[Customer] = None,
        pay: Optional[Pay] = None,
        job_id: Optional[int] = None,
    ):
        """
        Initialize a new Job object. Prefer ``JobBuilder`` in application code,
        it validates the mandatory fields.
        """
        self.job_id = job_id
        self.developer_id = developer_id
        self.order_number = order_number
        self.project_name = project_name
        self.status = status
        self.branch_name = branch_name
        self.package_name = package_name
        self.class_name = class_name
        self.comment = comment
        self.customer = customer
        self.pay = pay

    def __str__(self) -> str:
        return (
            f"Job: id:{self.job_id}, developer: {self.developer_id}, "
            f"project: {self.project_name}, status: {self.status}"
        )
