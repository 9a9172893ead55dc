"""Builder for ``Customer`` entities."""

from typing import Optional

from timeclock.database.builders.base_builder import EntityBuilder
from timeclock.database.entities.customer import Customer


class CustomerBuilder(EntityBuilder[Customer]):
    """
    Builds ``Customer`` instances from values configured by the setters.

    Example
    -------
    >>> customer = CustomerBuilder.create().set_name("Acme").set_contact("Jane Doe").build()
    """

    entity_type = Customer
    required_fields = ("name",)

    def set_name(self, name: str) -> "CustomerBuilder":
        return self._set("name", name)

    def set_contact(self, contact: Optional[str]) -> "CustomerBuilder":
        return self._set("contact", contact)
