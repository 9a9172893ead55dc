"""
Pay ORM Model
=============

The ``Pay`` ORM model holds the payment terms of a single job and maps to the
``pay`` table. A ``Job`` owns exactly one ``Pay``; the pay row is inserted
together with its job but survives the job's deletion.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import CHAR, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from timeclock.database.config.connection_engine import declarativeBase
from timeclock.database.entities.mixins import AuditMixin, ComparableMixin

DEFAULT_CURRENCY = "HUF"


class Pay(AuditMixin, ComparableMixin, declarativeBase):
    """
    ORM model for the `pay` table.

    Attributes
    ----------
    pay_id : int
        Primary key, generated on insert.
    hourly_rate : Decimal
        Agreed rate per working hour.
    working_hours : Decimal
        Hours booked so far.
    currency : str
        ISO-4217 currency code of ``hourly_rate``.
    version : int
        Optimistic-lock counter.
    """

    __tablename__ = "pay"

    pay_id: Mapped[int] = mapped_column(
        "Pay_Id", Integer, primary_key=True, autoincrement=True
    )
    hourly_rate: Mapped[Decimal] = mapped_column(
        "Hourly_Rate", Numeric(12, 2), nullable=False
    )
    working_hours: Mapped[Decimal] = mapped_column(
        "Working_Hours", Numeric(8, 2), nullable=False, default=Decimal("0")
    )
    currency: Mapped[str] = mapped_column(
        "Currency", CHAR(3), nullable=False, default=DEFAULT_CURRENCY
    )
    version: Mapped[int] = mapped_column(
        "Version", Integer, nullable=False
    )

    __mapper_args__ = {"version_id_col": version}

    def __init__(
        self,
        hourly_rate: Optional[Decimal] = None,
        working_hours: Optional[Decimal] = None,
        currency: Optional[str] = None,
        pay_id: Optional[int] = None,
    ):
        self.pay_id = pay_id
        self.hourly_rate = hourly_rate
        self.working_hours = working_hours if working_hours is not None else Decimal("0")
        self.currency = currency or DEFAULT_CURRENCY

    @property
    def total(self) -> Decimal:
        """Amount earned so far: ``hourly_rate * working_hours``."""
        return Decimal(self.hourly_rate or 0) * Decimal(self.working_hours or 0)

    def __str__(self) -> str:
        return f"Pay: id:{self.pay_id}, rate: {self.hourly_rate} {self.currency}, hours: {self.working_hours}"
