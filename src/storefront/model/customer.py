"""Customer aggregate — a person who places orders."""

from protean.fields import Integer, String

from storefront.domain import storefront


@storefront.aggregate
class Customer:
    """A registered shopper. Referenced by Order through `customer_id`."""

    id = Integer(identifier=True)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=255)

    def primary_key(self) -> int:
        return self.id

    @classmethod
    def generate_seeded_data(cls) -> list["Customer"]:
        """Build the fixed Customer rows used to bootstrap an empty store."""
        return [
            cls(id=1, first_name="Ada", last_name="Lovelace", email="ada.lovelace@example.com"),
            cls(id=2, first_name="Alan", last_name="Turing", email="alan.turing@example.com"),
        ]
