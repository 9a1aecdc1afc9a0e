"""RegistrationForm — one form instance.

Owns a ``FieldStore``, a ``SubmissionController`` and the ``ErrorDisplay``
it writes to. Hosts (CLI, GUI, web) drive it with plain calls::

    form = RegistrationForm()
    form.set_name("Gary Oldman")
    form.set_email("gary.oldman@gmail.com")
    form.toggle_agree_terms()
    form.select_gender("male")
    outcome = form.submit()
    form.errors.messages  # []
"""

from typing import Any

from regform.config import FormConfig
from regform.display import ErrorDisplay
from regform.fields import FieldSet, FieldStore
from regform.sinks import RecordSink
from regform.submission import SubmissionController, SubmissionOutcome


class RegistrationForm:
    """Name, email, terms checkbox and gender radio, plus a submit action."""

    __slots__ = ("_controller", "config", "errors", "store")

    def __init__(
        self,
        *,
        sink: RecordSink | None = None,
        config: FormConfig | None = None,
        initial: FieldSet | None = None,
    ) -> None:
        self.config = config or FormConfig()
        self.store = FieldStore(initial)
        self.errors = ErrorDisplay()
        self._controller = SubmissionController(
            self.store, sink=sink, display=self.errors,
        )

    def __repr__(self) -> str:
        return f"RegistrationForm({self.store.snapshot()!r})"

    @property
    def values(self) -> FieldSet:
        return self.store.snapshot()

    def get(self, field: str) -> Any:
        return self.store.get(field)

    def set(self, field: str, value: Any) -> None:
        self.store.set(field, value)

    def set_name(self, value: str) -> None:
        self.store.set_name(value)

    def set_email(self, value: str) -> None:
        self.store.set_email(value)

    def set_agree_terms(self, value: bool) -> None:
        self.store.set_agree_terms(value)

    def toggle_agree_terms(self) -> None:
        self.store.toggle_agree_terms()

    def select_gender(self, value: str) -> None:
        self.store.select_gender(value)

    def submit(self) -> SubmissionOutcome:
        """Validate and emit the current values; refresh ``errors``."""
        return self._controller.submit()
