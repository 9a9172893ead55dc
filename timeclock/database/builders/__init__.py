"""
Builders Package — fluent entity construction
=============================================

One builder per entity, each a thin subclass of ``EntityBuilder``:

- CustomerBuilder  (required: name)
- PayBuilder       (required: hourly_rate, working_hours, currency)
- JobBuilder       (required: developer_id, order_number, project_name, status)

Usage
-----
.. code-block:: python

    job = (JobBuilder.create()
           .set_developer_id(7)
           .set_order_number(1001)
           .set_project_name("timeclock")
           .set_status("OPEN")
           .set_customer(customer)
           .build())
"""

from timeclock.database.builders.base_builder import EntityBuilder
from timeclock.database.builders.customer_builder import CustomerBuilder
from timeclock.database.builders.job_builder import JobBuilder
from timeclock.database.builders.pay_builder import PayBuilder

__all__ = ["EntityBuilder", "CustomerBuilder", "JobBuilder", "PayBuilder"]
