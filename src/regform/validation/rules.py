"""Built-in validation rules for the registration form.

Each validator is a callable with the signature::

    def rule(value: Any) -> str | None:
        '''Return error message, or None if valid.'''

Every rule returns a fixed literal message. Values of the wrong type are
reported as invalid rather than raising, so any input produces a result.

Parameterized validators are factory functions that return a validator::

    def min_length(n: int, message: str) -> Validator:
        def check(value: Any) -> str | None:
            ...
        return check
"""

import re
from collections.abc import Callable
from typing import Any

# Type alias for a validator function
type Validator = Callable[[Any], str | None]


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

NAME_MESSAGE = "Name must be at least 3 characters."
EMAIL_MESSAGE = "Email must be valid."
AGREE_TERMS_MESSAGE = "You must agree to the terms."
GENDER_MESSAGE = "You must select a gender."


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int, message: str = NAME_MESSAGE) -> Validator:
    """String must be at least *n* characters, counted untrimmed."""

    def check(value: Any) -> str | None:
        if not isinstance(value, str) or len(value) < n:
            return message
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# local@domain.tld. Checks structure, not deliverability. Domain labels
# must be non-empty, so "a@.com" and "a@b." fail.
_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)+")


def email(value: Any) -> str | None:
    """Value must look like ``local@domain.tld``."""
    if not isinstance(value, str) or not _EMAIL_RE.fullmatch(value):
        return EMAIL_MESSAGE
    return None


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def checked(value: Any) -> str | None:
    """Checkbox must be ticked. Only ``True`` passes; truthy stand-ins do not."""
    if value is not True:
        return AGREE_TERMS_MESSAGE
    return None


def selected(value: Any) -> str | None:
    """An option must be selected (non-empty string)."""
    if not isinstance(value, str) or not value:
        return GENDER_MESSAGE
    return None
