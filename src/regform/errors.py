"""regform exception hierarchy.

Validation failures are never raised; they come back as
``ValidationResult`` data. These types cover misuse of the API itself.
"""


class RegformError(Exception):
    """Base for all regform-specific errors."""


class ConfigurationError(RegformError):
    """Raised when form configuration is invalid.

    Typically raised by ``FormConfig.__post_init__``.
    """


class UnknownFieldError(RegformError, KeyError):
    """Raised when a field name is not part of the registration form."""

    def __init__(self, field: str, known: tuple[str, ...]) -> None:
        self.field = field
        self.known = known
        super().__init__(field)

    def __str__(self) -> str:
        options = ", ".join(self.known)
        return f"Unknown field {self.field!r}. Known fields: {options}"
