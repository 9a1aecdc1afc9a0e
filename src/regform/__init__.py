"""regform — registration form validation and submission.

Four fields (name, email, agreeTerms, gender), one fixed rule each, one
fixed message per failing field. Every submit emits the full record to a
sink and reports which fields failed.

Basic usage::

    from regform import RegistrationForm

    form = RegistrationForm(sink=print)
    form.set_name("Gary Oldman")
    form.set_email("gary.oldman@gmail.com")
    form.toggle_agree_terms()
    form.select_gender("male")
    form.submit()
    # {'name': 'Gary Oldman', 'email': 'gary.oldman@gmail.com',
    #  'agreeTerms': True, 'gender': 'male'}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Emit",
    "ErrorDisplay",
    "FieldSet",
    "FieldStore",
    "FormConfig",
    "RegformError",
    "RegistrationForm",
    "Reject",
    "SubmissionController",
    "UnknownFieldError",
    "ValidationResult",
    "submit",
    "validate_fields",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import regform`` fast while providing a clean top-level API.
    """
    if name == "RegistrationForm":
        from regform.form import RegistrationForm

        return RegistrationForm

    if name == "FormConfig":
        from regform.config import FormConfig

        return FormConfig

    if name in ("FieldSet", "FieldStore"):
        from regform import fields as _fields

        return getattr(_fields, name)

    if name == "ErrorDisplay":
        from regform.display import ErrorDisplay

        return ErrorDisplay

    if name in ("Emit", "Reject", "SubmissionController", "submit"):
        from regform import submission as _submission

        return getattr(_submission, name)

    if name in ("ValidationResult", "validate_fields"):
        from regform import validation as _validation

        return getattr(_validation, name)

    if name in ("ConfigurationError", "RegformError", "UnknownFieldError"):
        from regform import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
