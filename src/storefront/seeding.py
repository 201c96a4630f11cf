"""Bootstrap an empty store with the fixed seed dataset.

Rows go in through the persistence gateway in dependency order, so they pass the
same validation and reference checks as any other write.
"""

from storefront.domain import logger
from storefront.persistence.gateway import PersistenceGateway
from storefront.relationships import ENTITY_TYPES


def seed_sequence() -> list:
    """Seed rows of every entity type, parents before children."""
    rows = []
    for entity_cls in ENTITY_TYPES:
        rows.extend(entity_cls.generate_seeded_data())
    return rows


def is_empty(gateway: PersistenceGateway) -> bool:
    return not any(gateway.all(entity_cls) for entity_cls in ENTITY_TYPES)


def seed_store(gateway: PersistenceGateway | None = None) -> int:
    """Insert the seed dataset into an empty store and return the number of rows written.

    A store that already holds data is left alone and 0 is returned.
    """
    gateway = gateway or PersistenceGateway()

    if not is_empty(gateway):
        logger.info("Store already holds data, skipping seed")
        return 0

    rows = seed_sequence()
    for row in rows:
        gateway.add(row)

    logger.info("Seeded store", rows=len(rows))
    return len(rows)
