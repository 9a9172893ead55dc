"""
Job builder
===========

``JobBuilder`` produces ``Job`` instances from values configured by the
setters. Developer id, order number, project name and status are mandatory;
``build()`` raises ``EntityValidationError`` naming the first one missing.

``from_entity`` also carries over the job's customer and pay references, so
an updated copy keeps its associations.
"""

from typing import Optional

from timeclock.database.builders.base_builder import EntityBuilder
from timeclock.database.entities.customer import Customer
from timeclock.database.entities.job import Job
from timeclock.database.entities.pay import Pay


class JobBuilder(EntityBuilder[Job]):

    entity_type = Job
    required_fields = ("developer_id", "order_number", "project_name", "status")
    copied_relationships = ("customer", "pay")

    def set_developer_id(self, developer_id: int) -> "JobBuilder":
        return self._set("developer_id", developer_id)

    def set_order_number(self, order_number: int) -> "JobBuilder":
        return self._set("order_number", order_number)

    def set_project_name(self, project_name: str) -> "JobBuilder":
        return self._set("project_name", project_name)

    def set_branch_name(self, branch_name: Optional[str]) -> "JobBuilder":
        return self._set("branch_name", branch_name)

    def set_package_name(self, package_name: Optional[str]) -> "JobBuilder":
        return self._set("package_name", package_name)

    def set_class_name(self, class_name: Optional[str]) -> "JobBuilder":
        return self._set("class_name", class_name)

    def set_status(self, status: str) -> "JobBuilder":
        return self._set("status", status)

    def set_comment(self, comment: Optional[str]) -> "JobBuilder":
        return self._set("comment", comment)

    def set_customer(self, customer: Optional[Customer]) -> "JobBuilder":
        return self._set("customer", customer)

    def set_pay(self, pay: Optional[Pay]) -> "JobBuilder":
        return self._set("pay", pay)
