"""Application tests for writes and reads through the persistence gateway."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.model.customer import Customer
from storefront.model.location import Location
from storefront.model.location_product import LocationProduct
from storefront.model.order import Order
from storefront.model.order_product import OrderProduct
from storefront.model.product import Product


def _customer(**overrides):
    defaults = {"id": 1, "first_name": "Grace", "last_name": "Hopper", "email": "grace@example.com"}
    defaults.update(overrides)
    return Customer(**defaults)


@pytest.fixture
def parents(gateway):
    """One customer, location and product in the store."""
    gateway.add(_customer())
    gateway.add(Location(id=1, name="Harbor"))
    gateway.add(Product(id=1, name="Cherry"))
    return gateway


class TestAdd:
    def test_add_leaf_entity(self, gateway):
        gateway.add(Location(id=1, name="Harbor"))
        assert gateway.get(Location, 1).name == "Harbor"

    def test_add_entity_with_resolved_keys(self, parents):
        parents.add(Order(id=1, customer_id=1, location_id=1))
        stored = parents.get(Order, 1)
        assert stored.customer_id == 1
        assert stored.complete is False

    def test_non_positive_key_rejected_with_messages(self, parents):
        with pytest.raises(ValidationError) as exc:
            parents.add(Order(id=1, customer_id=0, location_id=1))

        assert list(exc.value.messages) == ["customer_id"]
        assert exc.value.messages["customer_id"] == ["Order.customer_id cannot be less than or equal to zero!"]

    def test_failures_keep_rule_order(self, parents):
        with pytest.raises(ValidationError) as exc:
            parents.add(Order(id=1, customer_id=-1, location_id=-1))
        assert list(exc.value.messages) == ["customer_id", "location_id"]

    def test_rejected_entity_is_not_stored(self, parents):
        with pytest.raises(ValidationError):
            parents.add(LocationProduct(id=1, location_id=0, product_id=1))
        assert not parents.exists(LocationProduct, 1)

    def test_rejected_entity_is_not_repaired(self, parents):
        slot = LocationProduct(id=1, location_id=-4, product_id=1)
        with pytest.raises(ValidationError):
            parents.add(slot)
        assert slot.location_id == -4

    def test_dangling_key_rejected(self, parents):
        with pytest.raises(ValidationError) as exc:
            parents.add(Order(id=1, customer_id=1, location_id=99))
        assert exc.value.messages == {"location_id": ["Order.location_id references a missing Location"]}

    def test_dangling_keys_all_reported(self, gateway):
        with pytest.raises(ValidationError) as exc:
            gateway.add(OrderProduct(id=1, order_id=5, product_id=6))
        assert list(exc.value.messages) == ["order_id", "product_id"]

    def test_duplicate_primary_key_rejected(self, parents):
        with pytest.raises(ValidationError) as exc:
            parents.add(Location(id=1, name="Another"))
        assert "id" in exc.value.messages
        assert parents.get(Location, 1).name == "Harbor"

    def test_duplicate_pairs_are_separate_slots(self, parents):
        parents.add(LocationProduct(id=1, location_id=1, product_id=1))
        parents.add(LocationProduct(id=2, location_id=1, product_id=1))
        assert len(parents.all(LocationProduct)) == 2


class TestCreate:
    def test_assigns_first_key_in_empty_table(self, gateway):
        location = gateway.create(Location, name="Harbor")
        assert location.primary_key() == 1

    def test_assigns_next_key(self, parents):
        parents.add(Location(id=5, name="Pier"))
        location = parents.create(Location, name="Bay")
        assert location.primary_key() == 6

    def test_created_entity_is_validated(self, parents):
        with pytest.raises(ValidationError):
            parents.create(Order, customer_id=1)


class TestUpdate:
    def test_update_existing(self, parents):
        parents.add(Order(id=1, customer_id=1, location_id=1))

        order = parents.get(Order, 1)
        order.complete = True
        parents.update(order)

        assert parents.get(Order, 1).complete is True

    def test_update_validates(self, parents):
        parents.add(Order(id=1, customer_id=1, location_id=1))

        order = parents.get(Order, 1)
        order.location_id = 0
        with pytest.raises(ValidationError) as exc:
            parents.update(order)
        assert "location_id" in exc.value.messages

    def test_update_missing_row(self, parents):
        with pytest.raises(ObjectNotFoundError):
            parents.update(Order(id=42, customer_id=1, location_id=1))


class TestReads:
    def test_get_missing(self, gateway):
        with pytest.raises(ObjectNotFoundError):
            gateway.get(Customer, 1)

    def test_exists(self, parents):
        assert parents.exists(Customer, 1)
        assert not parents.exists(Customer, 2)

    def test_resolve_foreign_key(self, parents):
        order = Order(id=1, customer_id=1, location_id=1)
        assert parents.resolve(order, "customer_id").first_name == "Grace"
        assert parents.resolve(order, "location_id").name == "Harbor"

    def test_resolve_missing_target(self, parents):
        with pytest.raises(ObjectNotFoundError):
            parents.resolve(Order(id=1, customer_id=2, location_id=1), "customer_id")

    def test_resolve_rejects_plain_field(self, parents):
        with pytest.raises(ValueError):
            parents.resolve(Order(id=1, customer_id=1, location_id=1), "complete")


class TestRemove:
    def test_remove_unreferenced(self, parents):
        parents.remove(parents.get(Location, 1))
        assert not parents.exists(Location, 1)

    def test_remove_order_cascades_to_line_items(self, parents):
        parents.add(Order(id=1, customer_id=1, location_id=1))
        parents.add(OrderProduct(id=1, order_id=1, product_id=1))
        parents.add(OrderProduct(id=2, order_id=1, product_id=1))

        parents.remove(parents.get(Order, 1))

        assert not parents.exists(Order, 1)
        assert parents.all(OrderProduct) == []

    def test_remove_order_leaves_other_orders_items(self, parents):
        parents.add(Order(id=1, customer_id=1, location_id=1))
        parents.add(Order(id=2, customer_id=1, location_id=1))
        parents.add(OrderProduct(id=1, order_id=1, product_id=1))
        parents.add(OrderProduct(id=2, order_id=2, product_id=1))

        parents.remove(parents.get(Order, 1))

        assert [row.id for row in parents.all(OrderProduct)] == [2]

    def test_referenced_location_cannot_be_removed(self, parents):
        parents.add(LocationProduct(id=1, location_id=1, product_id=1))

        with pytest.raises(ValidationError) as exc:
            parents.remove(parents.get(Location, 1))

        assert "still referenced by 1 LocationProduct" in exc.value.messages["id"][0]
        assert parents.exists(Location, 1)

    def test_referenced_customer_cannot_be_removed(self, parents):
        parents.add(Order(id=1, customer_id=1, location_id=1))
        with pytest.raises(ValidationError):
            parents.remove(parents.get(Customer, 1))

    def test_line_item_removed_alone(self, parents):
        parents.add(Order(id=1, customer_id=1, location_id=1))
        parents.add(OrderProduct(id=1, order_id=1, product_id=1))

        parents.remove(parents.get(OrderProduct, 1))

        assert parents.exists(Order, 1)
        assert not parents.exists(OrderProduct, 1)
