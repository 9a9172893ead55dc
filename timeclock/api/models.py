"""
Pydantic models used for request/response validation and API data contracts.

Request models carry only what a client may set; response models are read
straight from the ORM entities (`from_attributes=True`). Update requests
carry the `version` the client last read, so stale writes are rejected.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerDetails(BaseModel):
    """Fields a client sends to create a customer."""
    name: str = Field(..., min_length=1, max_length=255, description="Name of the customer.", examples=["Acme Ltd."])
    contact: Optional[str] = Field(None, max_length=255, description="Contact person.", examples=["Jane Doe"])


class CustomerUpdate(CustomerDetails):
    """Full replacement of a customer's fields."""
    version: int = Field(..., description="Version the client last read.")


class ContactUpdate(BaseModel):
    contact: str = Field(..., max_length=255, description="New contact person.")


class PayDetails(BaseModel):
    """Fields a client sends to create a pay record."""
    hourly_rate: Decimal = Field(..., ge=0, description="Rate per working hour.")
    working_hours: Decimal = Field(Decimal("0"), ge=0, description="Hours booked so far.")
    currency: str = Field("HUF", min_length=3, max_length=3, description="ISO-4217 currency code.")


class PayUpdate(PayDetails):
    version: int = Field(..., description="Version the client last read.")


class JobDetails(BaseModel):
    """Fields a client sends to create a job."""
    developer_id: int = Field(..., description="Identifier of the developer.")
    order_number: int = Field(..., description="Order number of the job.")
    project_name: str = Field(..., min_length=1, max_length=255)
    status: str = Field(..., min_length=1, max_length=64, examples=["OPEN"])
    branch_name: Optional[str] = None
    package_name: Optional[str] = None
    class_name: Optional[str] = None
    comment: Optional[str] = None
    customer_id: Optional[int] = Field(None, description="Existing customer to attach.")
    pay_id: Optional[int] = Field(None, description="Existing pay record to attach.")


class JobUpdate(JobDetails):
    version: int = Field(..., description="Version the client last read.")


class StatusUpdate(BaseModel):
    status: str = Field(..., min_length=1, max_length=64)


class AuditInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    created_on: Optional[datetime] = None
    created_by: Optional[str] = None
    modified_on: Optional[datetime] = None
    modified_by: Optional[str] = None


class CustomerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_id: int
    name: str
    contact: Optional[str] = None
    version: int
    audit: AuditInfo


class PayOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pay_id: int
    hourly_rate: Decimal
    working_hours: Decimal
    currency: str
    total: Decimal
    version: int
    audit: AuditInfo


class JobOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    job_id: int
    developer_id: int
    order_number: int
    project_name: str
    status: str
    branch_name: Optional[str] = None
    package_name: Optional[str] = None
    class_name: Optional[str] = None
    comment: Optional[str] = None
    customer: Optional[CustomerOut] = None
    pay: Optional[PayOut] = None
    version: int
    audit: AuditInfo
