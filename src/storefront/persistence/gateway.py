"""Persistence gateway — the only path by which Storefront entities reach the store.

Every insert and update runs `validate()` first and then checks that each
foreign key resolves to an existing row. Writes that fail either check are
rejected with a `ValidationError` and the entity is left untouched.

Deletion policy:
    - An Order takes its OrderProducts with it.
    - A Customer, Location or Product that is still referenced cannot be removed.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.domain import logger
from storefront.relationships import foreign_keys, owned_by, referencing
from storefront.validation import ValidationContext, as_error_messages, validate


class PersistenceGateway:
    def __init__(self, context: ValidationContext | None = None):
        self.context = context or ValidationContext()

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def _repository(self, entity_cls):
        return current_domain.repository_for(entity_cls)

    def get(self, entity_cls, primary_key: int):
        """Fetch one row by primary key. Raises `ObjectNotFoundError` when absent."""
        return self._repository(entity_cls).get(primary_key)

    def exists(self, entity_cls, primary_key: int) -> bool:
        try:
            self.get(entity_cls, primary_key)
        except ObjectNotFoundError:
            return False
        return True

    def all(self, entity_cls) -> list:
        return self._repository(entity_cls)._dao.query.limit(None).all().items

    def resolve(self, entity, field_name: str):
        """Load the row that the foreign key `field_name` of `entity` points at."""
        fk = next((fk for fk in foreign_keys(type(entity)) if fk.field_name == field_name), None)
        if fk is None:
            raise ValueError(f"{type(entity).__name__}.{field_name} is not a foreign key")
        return self.get(fk.target, getattr(entity, field_name))

    def next_primary_key(self, entity_cls) -> int:
        return max((row.primary_key() for row in self.all(entity_cls)), default=0) + 1

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------
    def _check(self, entity):
        entity_name = type(entity).__name__

        failures = validate(entity, self.context)
        if failures:
            logger.warning(
                "Rejected invalid entity",
                entity=entity_name,
                primary_key=entity.primary_key(),
                failures=[f.message for f in failures],
            )
            raise ValidationError(as_error_messages(failures))

        dangling = {}
        for fk in foreign_keys(type(entity)):
            if not self.exists(fk.target, getattr(entity, fk.field_name)):
                dangling[fk.field_name] = [f"{entity_name}.{fk.field_name} references a missing {fk.target.__name__}"]
        if dangling:
            logger.warning(
                "Rejected entity with dangling references",
                entity=entity_name,
                primary_key=entity.primary_key(),
                fields=list(dangling),
            )
            raise ValidationError(dangling)

    def add(self, entity):
        """Insert a new row. The primary key must not be taken."""
        entity_cls = type(entity)
        if self.exists(entity_cls, entity.primary_key()):
            raise ValidationError(
                {"id": [f"{entity_cls.__name__} with id {entity.primary_key()} is already present"]}
            )

        self._check(entity)
        self._repository(entity_cls).add(entity)
        logger.info("Inserted entity", entity=entity_cls.__name__, primary_key=entity.primary_key())
        return entity

    def create(self, entity_cls, **attributes):
        """Build an entity with the next free primary key and insert it."""
        entity = entity_cls(id=self.next_primary_key(entity_cls), **attributes)
        return self.add(entity)

    def update(self, entity):
        """Persist changes to an existing row. Raises `ObjectNotFoundError` when absent."""
        entity_cls = type(entity)
        self.get(entity_cls, entity.primary_key())

        self._check(entity)
        self._repository(entity_cls).add(entity)
        logger.info("Updated entity", entity=entity_cls.__name__, primary_key=entity.primary_key())
        return entity

    def remove(self, entity):
        """Delete a row, cascading to owned rows and refusing while others still reference it."""
        entity_cls = type(entity)
        primary_key = entity.primary_key()
        owned = owned_by(entity_cls)

        blockers = {}
        cascades = []
        for referrer_cls, fk in referencing(entity_cls):
            query = self._repository(referrer_cls)._dao.query.filter(**{fk.field_name: primary_key})
            rows = query.limit(None).all().items
            if not rows:
                continue
            if referrer_cls in owned:
                cascades.extend(rows)
            else:
                blockers[referrer_cls.__name__] = len(rows)

        if blockers:
            logger.warning(
                "Refused to remove referenced entity",
                entity=entity_cls.__name__,
                primary_key=primary_key,
                referenced_by=blockers,
            )
            raise ValidationError(
                {
                    "id": [
                        f"{entity_cls.__name__} {primary_key} is still referenced by "
                        + ", ".join(f"{count} {name}" for name, count in blockers.items())
                    ]
                }
            )

        for row in cascades:
            self.remove(row)
        if cascades:
            logger.info(
                "Cascaded removal to owned rows",
                entity=entity_cls.__name__,
                primary_key=primary_key,
                removed=len(cascades),
            )

        self._repository(entity_cls)._dao.delete(entity)
        logger.info("Removed entity", entity=entity_cls.__name__, primary_key=primary_key)
