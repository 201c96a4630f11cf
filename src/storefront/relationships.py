"""Foreign-key declarations shared by validation and the persistence gateway.

Relationships are plain integer keys. Nothing here resolves them to objects;
the gateway does that on demand and checks that every key exists at commit.
"""

from dataclasses import dataclass

from storefront.model.customer import Customer
from storefront.model.location import Location
from storefront.model.location_product import LocationProduct
from storefront.model.order import Order
from storefront.model.order_product import OrderProduct
from storefront.model.product import Product


@dataclass(frozen=True)
class ForeignKey:
    field_name: str
    target: type


# Declaration order is the order in which validation reports failures
_FOREIGN_KEYS = {
    LocationProduct: (
        ForeignKey("location_id", Location),
        ForeignKey("product_id", Product),
    ),
    Order: (
        ForeignKey("customer_id", Customer),
        ForeignKey("location_id", Location),
    ),
    OrderProduct: (
        ForeignKey("order_id", Order),
        ForeignKey("product_id", Product),
    ),
}

# Owner -> owned entity types; owned rows are deleted with their owner
OWNERSHIP = {
    Order: (OrderProduct,),
}

# Insertion order that satisfies every foreign key
ENTITY_TYPES = (Customer, Location, Product, LocationProduct, Order, OrderProduct)


def foreign_keys(entity_cls) -> tuple[ForeignKey, ...]:
    """Foreign keys carried by `entity_cls`, empty for leaf entities."""
    return _FOREIGN_KEYS.get(entity_cls, ())


def referencing(target_cls) -> list[tuple[type, ForeignKey]]:
    """Every (entity type, foreign key) pair that points at `target_cls`."""
    return [
        (entity_cls, fk) for entity_cls, fks in _FOREIGN_KEYS.items() for fk in fks if fk.target is target_cls
    ]


def owned_by(owner_cls) -> tuple[type, ...]:
    return OWNERSHIP.get(owner_cls, ())
