"""Validation result — immutable mapping of field to its single error."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating a field set.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validate_fields(store.snapshot())
        if not result:
            show(result.errors)

    ``errors`` maps each failing field to exactly one message::

        {"name": "Name must be at least 3 characters."}

    Passing fields have no entry.
    """

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    @property
    def messages(self) -> tuple[str, ...]:
        """Error messages in field order."""
        return tuple(self.errors.values())

    def error_for(self, field_name: str) -> str | None:
        """Return the message for *field_name*, or None when it passed."""
        return self.errors.get(field_name)

    def __hash__(self) -> int:
        return hash(tuple(self.errors.items()))

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
