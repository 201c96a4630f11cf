"""Order aggregate — a customer's purchase at a location.

An Order owns its OrderProduct line items: they are removed with it.
"""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Integer

from storefront.domain import storefront
from storefront.model.customer import Customer
from storefront.model.location import Location

# Seed rows carry a fixed creation time so repeated generation yields equal rows
SEED_CREATED_AT = datetime(2020, 1, 1, tzinfo=UTC)


def _now():
    return datetime.now(UTC)


@storefront.aggregate
class Order:
    id = Integer(identifier=True)
    created_at = DateTime(default=_now)
    complete = Boolean(default=False)
    customer_id = Integer(default=0)
    location_id = Integer(default=0)

    def primary_key(self) -> int:
        return self.id

    @classmethod
    def generate_seeded_data(cls) -> list["Order"]:
        """Two completed orders, each by a different customer at a different location."""
        customers = Customer.generate_seeded_data()
        locations = Location.generate_seeded_data()
        return [
            cls(
                id=1,
                created_at=SEED_CREATED_AT,
                complete=True,
                customer_id=customers[0].id,
                location_id=locations[0].id,
            ),
            cls(
                id=2,
                created_at=SEED_CREATED_AT,
                complete=True,
                customer_id=customers[1].id,
                location_id=locations[1].id,
            ),
        ]
