"""Field store — the current values of the registration form.

``FieldSet`` is an immutable record of all four fields. ``FieldStore`` is
the mutable holder a host updates field by field as the user types::

    store = FieldStore()
    store.set_name("Gary Oldman")
    store.toggle_agree_terms()
    store.select_gender("male")
    store.snapshot()
    # FieldSet(name='Gary Oldman', email='', agree_terms=True, gender='male')

The store performs no validation. Values may be transiently invalid
(an empty name, an unchecked box) between updates.

Field names used by ``get``/``set`` and by emitted records are the
wire names: ``name``, ``email``, ``agreeTerms``, ``gender``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Any

from regform.errors import UnknownFieldError

# Wire name -> FieldSet attribute, in display order
FIELD_ATTRS: dict[str, str] = {
    "name": "name",
    "email": "email",
    "agreeTerms": "agree_terms",
    "gender": "gender",
}

FIELD_NAMES: tuple[str, ...] = tuple(FIELD_ATTRS)


def _attr(field: str) -> str:
    try:
        return FIELD_ATTRS[field]
    except KeyError:
        raise UnknownFieldError(field, FIELD_NAMES) from None


@dataclass(frozen=True, slots=True)
class FieldSet:
    """The complete current value of all form fields."""

    name: str = ""
    email: str = ""
    agree_terms: bool = False
    gender: str = ""

    def get(self, field: str) -> Any:
        """Return the value of *field* by wire name."""
        return getattr(self, _attr(field))

    def with_value(self, field: str, value: Any) -> FieldSet:
        """Return a copy with *field* replaced."""
        return replace(self, **{_attr(field): value})

    def as_record(self) -> dict[str, Any]:
        """Return the emitted record: wire names mapped to literal values."""
        return {field: getattr(self, attr) for field, attr in FIELD_ATTRS.items()}

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> FieldSet:
        """Build a FieldSet from wire-named keys. Missing keys keep defaults."""
        return cls(**{_attr(field): value for field, value in record.items()})


class FieldStore:
    """Mutable holder of the current form values.

    Single writer (the host UI), many readers (validation, submission).
    ``lock`` is reentrant; ``submit`` holds it across read-validate-emit
    so a concurrent host never emits values older than the ones validated.
    """

    __slots__ = ("_values", "lock")

    def __init__(self, initial: FieldSet | None = None) -> None:
        self._values = initial or FieldSet()
        self.lock = threading.RLock()

    def __repr__(self) -> str:
        return f"FieldStore({self._values!r})"

    # -- Generic access ---------------------------------------------------

    def get(self, field: str) -> Any:
        """Return the current value of *field*."""
        with self.lock:
            return self._values.get(field)

    def set(self, field: str, value: Any) -> None:
        """Replace the value of *field*. No validation is performed."""
        with self.lock:
            self._values = self._values.with_value(field, value)

    def snapshot(self) -> FieldSet:
        """Return the current values as an immutable FieldSet."""
        with self.lock:
            return self._values

    def reset(self) -> None:
        """Restore the initial (empty) values."""
        with self.lock:
            self._values = FieldSet()

    # -- Host operations --------------------------------------------------

    def set_name(self, value: str) -> None:
        self.set("name", value)

    def set_email(self, value: str) -> None:
        self.set("email", value)

    def set_agree_terms(self, value: bool) -> None:
        self.set("agreeTerms", value)

    def toggle_agree_terms(self) -> None:
        """Flip the terms checkbox, like a click on it."""
        with self.lock:
            self.set("agreeTerms", not self._values.agree_terms)

    def select_gender(self, value: str) -> None:
        """Select a gender option. Switching between options is always allowed."""
        self.set("gender", value)
