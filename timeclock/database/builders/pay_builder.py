"""Builder for ``Pay`` entities."""

from decimal import Decimal
from typing import Union

from timeclock.database.builders.base_builder import EntityBuilder
from timeclock.database.entities.pay import Pay

Amount = Union[Decimal, int, str]


class PayBuilder(EntityBuilder[Pay]):
    """Builds ``Pay`` instances. Amounts are normalised to ``Decimal``."""

    entity_type = Pay
    required_fields = ("hourly_rate", "working_hours", "currency")

    def set_hourly_rate(self, hourly_rate: Amount) -> "PayBuilder":
        return self._set("hourly_rate", Decimal(str(hourly_rate)))

    def set_working_hours(self, working_hours: Amount) -> "PayBuilder":
        return self._set("working_hours", Decimal(str(working_hours)))

    def set_currency(self, currency: str) -> "PayBuilder":
        return self._set("currency", currency.upper())
