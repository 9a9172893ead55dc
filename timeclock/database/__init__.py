"""
The `database` package is responsible for all interactions with the time-clock database.
It provides configuration, entity definitions, builders, CRUD data access, and the
transactional service layer on top of it.

Contents:
    - config:
        Configuration settings and the SQLAlchemy engine / declarative base.

    - entities:
        SQLAlchemy entity models (Job, Customer, Pay) and the embedded audit mixin.

    - builders:
        Fluent builders producing fully populated entity instances.

    - daos:
        The generic `CrudDao` plus entity-specific lookups for customers, jobs and pays.

    - core:
        The transactional service layer (`CrudService` and its specialisations)
        and the wired service instances used by the API.

    - helpers:
        Transaction management, schema creation, and audit stamping.
"""
