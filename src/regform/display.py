"""Error display channel.

Holds the ``(field, message)`` pairs a host should show next to its
inputs. ``show()`` replaces everything on each submit; nothing from a
previous submit survives.
"""

from regform.fields import FIELD_NAMES
from regform.validation.result import ValidationResult


class ErrorDisplay:
    """The messages currently shown, one per invalid field."""

    __slots__ = ("_shown",)

    def __init__(self) -> None:
        self._shown: dict[str, str] = {}

    def show(self, result: ValidationResult) -> None:
        """Clear the display and show the errors of *result*."""
        self._shown = {f: result.errors[f] for f in FIELD_NAMES if f in result.errors}

    def clear(self) -> None:
        self._shown = {}

    def message_for(self, field_name: str) -> str | None:
        """Message shown under *field_name*, or None."""
        return self._shown.get(field_name)

    @property
    def messages(self) -> list[str]:
        """Shown messages in field order."""
        return list(self._shown.values())

    def items(self) -> list[tuple[str, str]]:
        return list(self._shown.items())

    def __len__(self) -> int:
        return len(self._shown)

    def __repr__(self) -> str:
        return f"ErrorDisplay({self._shown!r})"
