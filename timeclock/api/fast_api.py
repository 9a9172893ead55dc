"""
FastAPI Router — Customers • Pays • Jobs
========================================

Purpose
-------
Exposes the service layer over HTTP for the admin frontend:
- Customers: list, create, read, lookup by name, replace, contact update, delete
- Pays: list, create, read, replace, delete
- Jobs: list (optionally filtered), create, read, replace, status update, delete

Key Notes
---------
- Input validation via Pydantic models in `timeclock.api.models`.
- Every route calls exactly one service method per write, so a request is one
  transaction (reads needed to resolve associations run before it).
- Errors from the service layer are not caught here; the exception handlers
  registered in `timeclock.main` map them to status codes.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response, status

from timeclock.api.models import (
    ContactUpdate,
    CustomerDetails,
    CustomerOut,
    CustomerUpdate,
    JobDetails,
    JobOut,
    JobUpdate,
    PayDetails,
    PayOut,
    PayUpdate,
    StatusUpdate,
)
from timeclock.database.builders import CustomerBuilder, JobBuilder, PayBuilder
from timeclock.database.core.services import customer_service, job_service, pay_service

router = APIRouter()
"""Router holding the customer, pay and job routes."""


def _found(entity, kind: str, key: int):
    if entity is None:
        raise HTTPException(status_code=404, detail=f"{kind} {key} not found")
    return entity


# -----------------------
# Customers
# -----------------------
@router.get("/customers", response_model=List[CustomerOut])
def list_customers():
    return customer_service.getAll()


@router.post("/customers", response_model=CustomerOut, status_code=status.HTTP_201_CREATED)
def create_customer(data: CustomerDetails):
    customer = CustomerBuilder.create().set_name(data.name).set_contact(data.contact).build()
    customer_service.save(customer)
    return customer


@router.get("/customers/by-name/{name}", response_model=CustomerOut)
def get_customer_by_name(name: str):
    """Lookup by business key; 404 when unknown, 409 when the name is ambiguous."""
    return customer_service.getByCustomerName(name)


@router.get("/customers/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: int):
    return _found(customer_service.get(customer_id), "Customer", customer_id)


@router.put("/customers/{customer_id}", response_model=CustomerOut)
def replace_customer(customer_id: int, data: CustomerUpdate):
    stored = _found(customer_service.get(customer_id), "Customer", customer_id)
    customer = (CustomerBuilder.from_entity(stored)
                .set_name(data.name)
                .set_contact(data.contact)
                .set_version(data.version)
                .build())
    return customer_service.update(customer)


@router.patch("/customers/{customer_id}/contact", response_model=CustomerOut)
def update_customer_contact(customer_id: int, data: ContactUpdate):
    return customer_service.updateContactByCustomerId(customer_id, data.contact)


@router.delete("/customers/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: int):
    customer_service.removeByCustomerId(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------
# Pays
# -----------------------
@router.get("/pays", response_model=List[PayOut])
def list_pays():
    return pay_service.getAll()


@router.post("/pays", response_model=PayOut, status_code=status.HTTP_201_CREATED)
def create_pay(data: PayDetails):
    pay = (PayBuilder.create()
           .set_hourly_rate(data.hourly_rate)
           .set_working_hours(data.working_hours)
           .set_currency(data.currency)
           .build())
    pay_service.save(pay)
    return pay


@router.get("/pays/{pay_id}", response_model=PayOut)
def get_pay(pay_id: int):
    return _found(pay_service.get(pay_id), "Pay", pay_id)


@router.put("/pays/{pay_id}", response_model=PayOut)
def replace_pay(pay_id: int, data: PayUpdate):
    stored = _found(pay_service.get(pay_id), "Pay", pay_id)
    pay = (PayBuilder.from_entity(stored)
           .set_hourly_rate(data.hourly_rate)
           .set_working_hours(data.working_hours)
           .set_currency(data.currency)
           .set_version(data.version)
           .build())
    return pay_service.update(pay)


@router.delete("/pays/{pay_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pay(pay_id: int):
    pay_service.remove(pay_service.getByPayId(pay_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------
# Jobs
# -----------------------
def _fill_job(builder: JobBuilder, data: JobDetails) -> JobBuilder:
    customer = customer_service.getByCustomerId(data.customer_id) if data.customer_id is not None else None
    pay = pay_service.getByPayId(data.pay_id) if data.pay_id is not None else None
    return (builder
            .set_developer_id(data.developer_id)
            .set_order_number(data.order_number)
            .set_project_name(data.project_name)
            .set_status(data.status)
            .set_branch_name(data.branch_name)
            .set_package_name(data.package_name)
            .set_class_name(data.class_name)
            .set_comment(data.comment)
            .set_customer(customer)
            .set_pay(pay))


@router.get("/jobs", response_model=List[JobOut])
def list_jobs(developer_id: Optional[int] = None, status: Optional[str] = None, project_name: Optional[str] = None):
    """List jobs; at most one filter is applied, in the order developer, status, project."""
    if developer_id is not None:
        return job_service.getAllByDeveloperId(developer_id)
    if status is not None:
        return job_service.getAllByStatus(status)
    if project_name is not None:
        return job_service.getAllByProjectName(project_name)
    return job_service.getAll()


@router.post("/jobs", response_model=JobOut, status_code=status.HTTP_201_CREATED)
def create_job(data: JobDetails):
    job = _fill_job(JobBuilder.create(), data).build()
    job_service.save(job)
    return job


@router.get("/jobs/{job_id}", response_model=JobOut)
def get_job(job_id: int):
    return _found(job_service.get(job_id), "Job", job_id)


@router.put("/jobs/{job_id}", response_model=JobOut)
def replace_job(job_id: int, data: JobUpdate):
    stored = _found(job_service.get(job_id), "Job", job_id)
    job = _fill_job(JobBuilder.from_entity(stored), data).set_version(data.version).build()
    return job_service.update(job)


@router.patch("/jobs/{job_id}/status", response_model=JobOut)
def update_job_status(job_id: int, data: StatusUpdate):
    return job_service.updateStatusByJobId(job_id, data.status)


@router.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(job_id: int):
    job_service.remove(job_service.getByJobId(job_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
