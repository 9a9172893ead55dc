"""
TimeClock administration backend.

Persistent time-tracking records (jobs, customers, pays) behind a generic CRUD
data-access layer and a transactional service layer, with a thin FastAPI surface.
"""
