"""Storefront bounded context — Customers, Locations, Products and Orders.

Holds the multi-location retail model: customers place orders at locations,
and locations stock products under one or more inventory slots.
"""

from protean.domain import Domain

from storefront.utils.logging import get_logger

logger = get_logger(__name__)

storefront = Domain(name="storefront")
