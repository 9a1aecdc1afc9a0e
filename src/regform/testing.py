"""Test utilities for regform hosts.

``RecordingSink`` captures every emitted record so tests can assert on
what a submit sent out. The assertion helpers accept a
``RegistrationForm``, an ``ErrorDisplay``, a submission outcome or a
``ValidationResult`` and produce a clear message on failure::

    sink = RecordingSink()
    form = RegistrationForm(sink=sink)
    ...
    form.submit()
    assert sink.last == {...}
    assert_only_error(form, "email")
"""

from typing import Any

from regform.display import ErrorDisplay
from regform.form import RegistrationForm
from regform.submission import Emit, Reject
from regform.validation.result import ValidationResult

__all__ = [
    "RecordingSink",
    "assert_no_errors",
    "assert_only_error",
    "shown_errors",
]


class RecordingSink:
    """A sink that keeps every record it receives, in order."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def __call__(self, record: dict[str, Any]) -> None:
        self.calls.append(dict(record))

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last(self) -> dict[str, Any] | None:
        """The most recent record, or None if nothing was emitted."""
        return self.calls[-1] if self.calls else None

    def clear(self) -> None:
        self.calls.clear()


def shown_errors(
    target: RegistrationForm | ErrorDisplay | ValidationResult | Emit | Reject,
) -> dict[str, str]:
    """Return the field -> message pairs of *target*."""
    match target:
        case RegistrationForm():
            return dict(target.errors.items())
        case ErrorDisplay():
            return dict(target.items())
        case ValidationResult():
            return dict(target.errors)
        case Emit() | Reject():
            return dict(target.result.errors)
    msg = f"Cannot read errors from {type(target).__name__}"
    raise TypeError(msg)


def assert_no_errors(target: Any) -> None:
    """Assert no error message is shown."""
    errors = shown_errors(target)
    assert not errors, f"Expected no errors, got {errors}"


def assert_only_error(target: Any, field: str) -> None:
    """Assert exactly one error is shown and it belongs to *field*."""
    errors = shown_errors(target)
    assert list(errors) == [field], (
        f"Expected only an error for {field!r}, got {errors}"
    )
