"""Form configuration.

FormConfig is a frozen dataclass — immutable after creation, checked once
at construction, no string-key dict lookups.
"""

from dataclasses import dataclass

from regform.errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Registration form configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(log_level="debug", log_format="json")

    Rules and their error messages are fixed and are not configurable.
    """

    # Options offered by hosts for the gender field
    gender_choices: tuple[str, ...] = ("male", "female")

    # Logging (applied by the CLI)
    log_level: str = "warning"
    log_format: str = "text"

    def __post_init__(self) -> None:
        if not self.gender_choices or not all(self.gender_choices):
            msg = "gender_choices must contain at least one non-empty option"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)
        if self.log_format not in LOG_FORMATS:
            msg = f"log_format must be one of {', '.join(LOG_FORMATS)}, got {self.log_format!r}"
            raise ConfigurationError(msg)
