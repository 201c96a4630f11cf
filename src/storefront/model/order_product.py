"""OrderProduct aggregate — a line item of an Order."""

from protean.fields import Integer

from storefront.domain import storefront
from storefront.model.order import Order
from storefront.model.product import Product


@storefront.aggregate
class OrderProduct:
    """One ordered product. Cannot outlive its Order."""

    id = Integer(identifier=True)
    order_id = Integer(default=0)
    product_id = Integer(default=0)

    def primary_key(self) -> int:
        return self.id

    @classmethod
    def generate_seeded_data(cls) -> list["OrderProduct"]:
        orders = Order.generate_seeded_data()
        products = Product.generate_seeded_data()

        rows = []
        for order in orders:
            for product in products:
                rows.append(cls(id=len(rows) + 1, order_id=order.id, product_id=product.id))
        return rows
