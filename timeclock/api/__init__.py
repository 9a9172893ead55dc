"""
API Package — FastAPI Router • Models
=====================================

The HTTP interface of the administration backend.

Contents
--------
- fast_api
    FastAPI router with endpoints for:
      • Customers: list, create, read, lookup by name, replace, contact update, delete
      • Pays: list, create, read, replace, delete
      • Jobs: list with developer/status/project filters, create, read, replace,
        status update, delete

- models
    Pydantic data contracts: `*Details` for creation, `*Update` for replacement
    (carrying the client's `version`), `*Out` for responses read from the ORM
    entities, plus `ContactUpdate` and `StatusUpdate` for partial updates.
"""
