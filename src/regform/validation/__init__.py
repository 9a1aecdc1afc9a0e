"""Form validation — per-field rules, one message per failing field.

Usage::

    from regform.validation import validate_fields

    result = validate_fields(store.snapshot())
    if not result:
        # result.errors == {"email": "Email must be valid."}
        ...

``validate()`` is the generic engine underneath; ``validate_fields()``
applies the registration rule table to a ``FieldSet``.
"""

from collections.abc import Mapping
from typing import Any

from regform.fields import FieldSet
from regform.validation.result import ValidationResult
from regform.validation.rules import (
    AGREE_TERMS_MESSAGE,
    EMAIL_MESSAGE,
    GENDER_MESSAGE,
    NAME_MESSAGE,
    Validator,
    checked,
    email,
    min_length,
    selected,
)

__all__ = [
    "AGREE_TERMS_MESSAGE",
    "EMAIL_MESSAGE",
    "GENDER_MESSAGE",
    "MESSAGES",
    "NAME_MESSAGE",
    "ValidationResult",
    "Validator",
    "checked",
    "email",
    "min_length",
    "registration_rules",
    "selected",
    "validate",
    "validate_fields",
]

# Field -> its one canonical message
MESSAGES: dict[str, str] = {
    "name": NAME_MESSAGE,
    "email": EMAIL_MESSAGE,
    "agreeTerms": AGREE_TERMS_MESSAGE,
    "gender": GENDER_MESSAGE,
}


def registration_rules() -> dict[str, list[Validator]]:
    """Return the rule table for the registration form."""
    return {
        "name": [min_length(3)],
        "email": [email],
        "agreeTerms": [checked],
        "gender": [selected],
    }


def validate(
    data: Mapping[str, Any],
    rules: dict[str, list[Validator]],
) -> ValidationResult:
    """Validate data against a set of rules.

    Args:
        data: Any mapping of field names to values. Missing fields are
            validated as ``None``.
        rules: A dict mapping field names to lists of validator
            functions. Each validator returns an error message string
            on failure, or ``None`` on success.

    Returns:
        A ``ValidationResult`` whose ``.errors`` maps each failing field
        to its first error message.

    Every field is checked regardless of the others; a field stops at its
    first failing validator so it never carries more than one message.
    """
    errors: dict[str, str] = {}

    for field_name, validators in rules.items():
        value = data.get(field_name)
        for validator in validators:
            error = validator(value)
            if error is not None:
                errors[field_name] = error
                break

    return ValidationResult(errors=errors)


def validate_fields(field_set: FieldSet) -> ValidationResult:
    """Validate all four registration fields. Pure and deterministic."""
    return validate(field_set.as_record(), registration_rules())
