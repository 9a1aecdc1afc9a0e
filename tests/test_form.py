"""End-to-end tests for RegistrationForm — fill, submit, check emission and errors."""

import pytest

from regform.form import RegistrationForm
from regform.testing import RecordingSink, assert_no_errors, assert_only_error

VALID_FORM_VALUES = {
    "name": "Gary Oldman",
    "email": "gary.oldman@gmail.com",
    "agreeTerms": True,
    "gender": "male",
}

FORM_ERRORS = {
    "name": "Name must be at least 3 characters.",
    "email": "Email must be valid.",
    "agreeTerms": "You must agree to the terms.",
    "gender": "You must select a gender.",
}


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def form(sink: RecordingSink) -> RegistrationForm:
    return RegistrationForm(sink=sink)


def fill_with_valid_values(form: RegistrationForm) -> None:
    form.set_name(VALID_FORM_VALUES["name"])
    form.set_email(VALID_FORM_VALUES["email"])
    form.toggle_agree_terms()
    form.select_gender("male")


# ---------------------------------------------------------------------------
# Successful submissions
# ---------------------------------------------------------------------------


class TestValidSubmission:
    def test_all_fields_correct(self, form: RegistrationForm, sink: RecordingSink) -> None:
        fill_with_valid_values(form)
        form.submit()

        assert sink.last == VALID_FORM_VALUES
        assert_no_errors(form)

    def test_very_long_name(self, form: RegistrationForm, sink: RecordingSink) -> None:
        long_name = "Hubert Blaine Wolfeschlegelsteinhausenbergerdorff"
        fill_with_valid_values(form)
        form.set_name("")
        form.set_name(long_name)
        form.submit()

        assert sink.last == {**VALID_FORM_VALUES, "name": long_name}
        assert_no_errors(form)

    def test_complex_email(self, form: RegistrationForm, sink: RecordingSink) -> None:
        address = "test.name+alias@example.co.uk"
        fill_with_valid_values(form)
        form.set_email(address)
        form.submit()

        assert sink.last == {**VALID_FORM_VALUES, "email": address}
        assert_no_errors(form)

    def test_change_gender(self, form: RegistrationForm, sink: RecordingSink) -> None:
        fill_with_valid_values(form)
        form.select_gender("female")
        form.submit()

        assert sink.last == {**VALID_FORM_VALUES, "gender": "female"}
        assert_no_errors(form)

    def test_resubmit_after_success(self, form: RegistrationForm, sink: RecordingSink) -> None:
        fill_with_valid_values(form)
        form.submit()
        assert sink.call_count == 1

        form.submit()
        assert sink.call_count == 2
        assert sink.calls == [VALID_FORM_VALUES, VALID_FORM_VALUES]
        assert_no_errors(form)


# ---------------------------------------------------------------------------
# Rejected submissions
# ---------------------------------------------------------------------------


class TestInvalidSubmission:
    def test_cleared_name(self, form: RegistrationForm, sink: RecordingSink) -> None:
        fill_with_valid_values(form)
        form.set_name("")
        form.submit()

        assert sink.last == {**VALID_FORM_VALUES, "name": ""}
        assert form.errors.messages == [FORM_ERRORS["name"]]

    def test_short_name(self, form: RegistrationForm, sink: RecordingSink) -> None:
        fill_with_valid_values(form)
        form.set_name("Ga")
        form.submit()

        assert sink.last == {**VALID_FORM_VALUES, "name": "Ga"}
        assert form.errors.messages == [FORM_ERRORS["name"]]

    def test_invalid_email(self, form: RegistrationForm, sink: RecordingSink) -> None:
        bad = '"gary.oldman.gmail.com"'
        fill_with_valid_values(form)
        form.set_email(bad)
        form.submit()

        assert sink.last == {**VALID_FORM_VALUES, "email": bad}
        assert form.errors.messages == [FORM_ERRORS["email"]]

    def test_terms_unchecked(self, form: RegistrationForm, sink: RecordingSink) -> None:
        fill_with_valid_values(form)
        form.toggle_agree_terms()
        form.submit()

        assert sink.last == {**VALID_FORM_VALUES, "agreeTerms": False}
        assert form.errors.messages == [FORM_ERRORS["agreeTerms"]]

    def test_gender_unselected(self, form: RegistrationForm, sink: RecordingSink) -> None:
        form.set_name(VALID_FORM_VALUES["name"])
        form.set_email(VALID_FORM_VALUES["email"])
        form.toggle_agree_terms()
        form.submit()

        assert sink.last == {**VALID_FORM_VALUES, "gender": ""}
        assert form.errors.messages == [FORM_ERRORS["gender"]]

    def test_untouched_form(self, form: RegistrationForm, sink: RecordingSink) -> None:
        outcome = form.submit()

        assert not outcome.ok
        assert sink.call_count == 1
        assert form.errors.messages == list(FORM_ERRORS.values())


# ---------------------------------------------------------------------------
# Remediation
# ---------------------------------------------------------------------------


class TestRemediation:
    def test_fixing_field_clears_only_its_error(self, form: RegistrationForm) -> None:
        form.set_name("Ga")
        form.set_email("nope")
        form.toggle_agree_terms()
        form.select_gender("male")
        form.submit()
        assert form.errors.message_for("name") == FORM_ERRORS["name"]
        assert form.errors.message_for("email") == FORM_ERRORS["email"]

        form.set_name("Gary")
        form.submit()
        assert form.errors.message_for("name") is None
        assert_only_error(form, "email")

    def test_fix_then_resubmit_succeeds(self, form: RegistrationForm, sink: RecordingSink) -> None:
        fill_with_valid_values(form)
        form.set_email("broken")
        assert not form.submit().ok

        form.set_email(VALID_FORM_VALUES["email"])
        assert form.submit().ok
        assert sink.last == VALID_FORM_VALUES
        assert_no_errors(form)
