"""Repositories with the lookups the Storefront needs beyond get/add."""

from storefront.domain import storefront
from storefront.model.location_product import LocationProduct
from storefront.model.order import Order
from storefront.model.order_product import OrderProduct


@storefront.repository(part_of=LocationProduct)
class LocationProductRepository:
    def at_location(self, location_id: int) -> list[LocationProduct]:
        """Every inventory slot stocked at a location."""
        return self._dao.query.filter(location_id=location_id).limit(None).all().items

    def slots_for(self, location_id: int, product_id: int) -> list[LocationProduct]:
        """Every slot holding `product_id` at `location_id`. Duplicates are separate slots."""
        query = self._dao.query.filter(location_id=location_id, product_id=product_id)
        return query.limit(None).all().items


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_customer(self, customer_id: int) -> list[Order]:
        return self._dao.query.filter(customer_id=customer_id).limit(None).all().items

    def open_at_location(self, location_id: int) -> list[Order]:
        """Orders at a location that are not yet complete."""
        return self._dao.query.filter(location_id=location_id, complete=False).limit(None).all().items


@storefront.repository(part_of=OrderProduct)
class OrderProductRepository:
    def for_order(self, order_id: int) -> list[OrderProduct]:
        """Line items of an order."""
        return self._dao.query.filter(order_id=order_id).limit(None).all().items
