"""
The `helpers` package provides utility functions and decorators
that support database operations and cross-cutting concerns.

Contents
--------
- transactionManagement
    - Context variable (`db_session_context`) propagating the active session across calls
    - `@transactional` decorator and `session_scope()` context manager:
        - Reuse an existing session if one is active in context
        - Create, commit, and close a new session otherwise
        - Roll back the session on errors and re-raise
- audit
    - `stamp_created` / `stamp_modified` hooks called by the DAOs before insert/update
    - `acting_as(actor)` binding the audit actor for a block of work
- schema
    - `create_schema()` / `drop_schema()` on the configured engine
"""
