"""Product aggregate — an item that can be stocked and ordered."""

from protean.fields import Integer, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A catalogue item. Stock is tracked elsewhere, one LocationProduct row per slot."""

    id = Integer(identifier=True)
    name = String(required=True, max_length=100)
    description = Text()

    def primary_key(self) -> int:
        return self.id

    @classmethod
    def generate_seeded_data(cls) -> list["Product"]:
        return [
            cls(id=1, name="Apple", description="Crisp red apple"),
            cls(id=2, name="Banana", description="Ripe yellow banana"),
        ]
