"""
The `core` package is the service layer between callers (API routers, scripts)
and the DAOs.

Contents
--------
- crud_service
    `CrudService`: generic transactional pass-through over a `CrudDao`.
- services
    `CustomerService`, `JobService`, `PayService` adding the entity-specific
    lookups, and the wired `customer_service`, `job_service`, `pay_service`
    instances.
"""
