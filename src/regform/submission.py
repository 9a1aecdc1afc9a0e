"""Submission — validate the current fields and emit the record.

Every submit call is independent: validation runs fresh, the record is
emitted whether or not it is valid, and the outcome says which::

    outcome = submit(store.snapshot(), sink=print)
    match outcome:
        case Emit(record=record):
            ...
        case Reject(result=result):
            show(result.errors)

There is no submission counter, no debounce and no cached state between
calls. Two submits with unchanged fields give two emissions and two equal
outcomes.
"""

import logging
from dataclasses import dataclass
from typing import Any

from regform.display import ErrorDisplay
from regform.fields import FieldSet, FieldStore
from regform.sinks import LoggingSink, RecordSink
from regform.validation import validate_fields
from regform.validation.result import ValidationResult

logger = logging.getLogger("regform.submission")


@dataclass(frozen=True, slots=True)
class Emit:
    """All fields passed. ``field_set`` holds the values that were emitted."""

    field_set: FieldSet

    @property
    def record(self) -> dict[str, Any]:
        """A fresh copy of the emitted record."""
        return self.field_set.as_record()

    @property
    def result(self) -> ValidationResult:
        return ValidationResult()

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Reject:
    """At least one field failed. The record was still emitted."""

    field_set: FieldSet
    result: ValidationResult

    @property
    def record(self) -> dict[str, Any]:
        """A fresh copy of the emitted record."""
        return self.field_set.as_record()

    @property
    def ok(self) -> bool:
        return False


type SubmissionOutcome = Emit | Reject


def submit(field_set: FieldSet, *, sink: RecordSink) -> SubmissionOutcome:
    """Validate *field_set*, emit its record to *sink*, return the outcome.

    The sink is called exactly once, with its own record of the literal
    values of *field_set*, on success and on failure alike.
    """
    result = validate_fields(field_set)
    logger.debug("submit: %d invalid field(s)", len(result.errors))
    sink(field_set.as_record())
    if result:
        return Emit(field_set=field_set)
    return Reject(field_set=field_set, result=result)


class SubmissionController:
    """Submits the current contents of a ``FieldStore``.

    Reads the store at call time, never earlier, and holds the store lock
    for the whole read-validate-emit sequence. The error display is
    cleared and recomputed on every call.
    """

    __slots__ = ("display", "sink", "store")

    def __init__(
        self,
        store: FieldStore,
        *,
        sink: RecordSink | None = None,
        display: ErrorDisplay | None = None,
    ) -> None:
        self.store = store
        self.sink = sink or LoggingSink()
        self.display = display if display is not None else ErrorDisplay()

    def submit(self) -> SubmissionOutcome:
        with self.store.lock:
            self.display.clear()
            outcome = submit(self.store.snapshot(), sink=self.sink)
            self.display.show(outcome.result)
            return outcome
