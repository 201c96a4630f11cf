"""Pre-commit validation of Storefront entities.

`validate()` reports every locally detectable foreign-key problem as a list of
`ValidationFailure` records. It never raises and never changes the entity; the
persistence gateway decides what to do with the failures.

Only non-positive keys are detectable here. A positive key that points at a
missing row is caught by the gateway when it commits.
"""

from dataclasses import dataclass

from storefront.relationships import foreign_keys


@dataclass(frozen=True)
class ValidationFailure:
    attribute: str
    entity: str
    message: str


@dataclass(frozen=True)
class ValidationContext:
    """Caller information passed along with every validation. Unused by current rules."""

    caller: str | None = None
    locale: str | None = None


def _non_positive_key(entity_name: str, field_name: str) -> ValidationFailure:
    return ValidationFailure(
        attribute=field_name,
        entity=entity_name,
        message=f"{entity_name}.{field_name} cannot be less than or equal to zero!",
    )


def validate(entity, context: ValidationContext | None = None) -> list[ValidationFailure]:
    """Return the validation failures of `entity`, in foreign-key declaration order.

    Entities without foreign keys (Customer, Location, Product) always validate
    clean. The primary key is assigned by the gateway and is not checked.
    """
    entity_name = type(entity).__name__
    failures = []
    for fk in foreign_keys(type(entity)):
        value = getattr(entity, fk.field_name)
        if value is None or value <= 0:
            failures.append(_non_positive_key(entity_name, fk.field_name))
    return failures


def as_error_messages(failures: list[ValidationFailure]) -> dict[str, list[str]]:
    """Group failures into the `{attribute: [message, ...]}` shape of `ValidationError`."""
    messages: dict[str, list[str]] = {}
    for failure in failures:
        messages.setdefault(failure.attribute, []).append(failure.message)
    return messages
