"""LocationProduct aggregate — one inventory slot pairing a Location with a Product.

The same (location, product) pair may appear in several rows: each row is one
stocked instance, not a counter. Only the integer foreign keys are stored;
the referenced objects are looked up through the persistence gateway.
"""

from protean.fields import Integer

from storefront.domain import storefront
from storefront.model.location import Location
from storefront.model.product import Product


@storefront.aggregate
class LocationProduct:
    id = Integer(identifier=True)
    location_id = Integer(default=0)
    product_id = Integer(default=0)

    def primary_key(self) -> int:
        return self.id

    @classmethod
    def generate_seeded_data(cls) -> list["LocationProduct"]:
        """Two slots for every (location, product) combination of the seed data.

        Keys are copied from fresh Location and Product seed rows, so they always
        match what a separate seeding of those tables produces.
        """
        locations = Location.generate_seeded_data()
        products = Product.generate_seeded_data()

        rows = []
        for location in locations:
            for product in products:
                for _ in range(2):
                    rows.append(
                        cls(
                            id=len(rows) + 1,
                            location_id=location.id,
                            product_id=product.id,
                        )
                    )
        return rows
