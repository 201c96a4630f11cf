"""Location aggregate — a physical store."""

from protean.fields import Integer, String

from storefront.domain import storefront


@storefront.aggregate
class Location:
    """A store where products are stocked and orders are placed."""

    id = Integer(identifier=True)
    name = String(required=True, max_length=100)

    def primary_key(self) -> int:
        return self.id

    @classmethod
    def generate_seeded_data(cls) -> list["Location"]:
        return [
            cls(id=1, name="Downtown"),
            cls(id=2, name="Riverside"),
        ]
