"""Tests for regform.fields — FieldSet record and FieldStore."""

import threading

import pytest

from regform.errors import UnknownFieldError
from regform.fields import FIELD_NAMES, FieldSet, FieldStore


class TestFieldSet:
    def test_defaults(self) -> None:
        fs = FieldSet()
        assert fs.name == ""
        assert fs.email == ""
        assert fs.agree_terms is False
        assert fs.gender == ""

    def test_as_record_uses_wire_names(self) -> None:
        fs = FieldSet(name="Gary", email="g@x.io", agree_terms=True, gender="male")
        assert fs.as_record() == {
            "name": "Gary",
            "email": "g@x.io",
            "agreeTerms": True,
            "gender": "male",
        }

    def test_as_record_key_order(self) -> None:
        assert list(FieldSet().as_record()) == list(FIELD_NAMES)

    def test_get_by_wire_name(self) -> None:
        assert FieldSet(agree_terms=True).get("agreeTerms") is True

    def test_with_value_returns_copy(self) -> None:
        fs = FieldSet()
        changed = fs.with_value("name", "Gary")
        assert changed.name == "Gary"
        assert fs.name == ""

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            FieldSet().name = "x"  # type: ignore[misc]

    def test_from_record(self) -> None:
        fs = FieldSet.from_record({"name": "Gary", "agreeTerms": True})
        assert fs == FieldSet(name="Gary", agree_terms=True)

    def test_from_record_unknown_key(self) -> None:
        with pytest.raises(UnknownFieldError):
            FieldSet.from_record({"phone": "555"})

    def test_from_record_rejects_attribute_names(self) -> None:
        with pytest.raises(UnknownFieldError) as exc_info:
            FieldSet.from_record({"agreeTerms": True, "agree_terms": False})
        assert exc_info.value.field == "agree_terms"


class TestFieldStore:
    def test_initial_values(self) -> None:
        assert FieldStore().snapshot() == FieldSet()

    def test_set_and_get(self) -> None:
        store = FieldStore()
        store.set("email", "gary@example.com")
        assert store.get("email") == "gary@example.com"

    def test_no_validation_on_set(self) -> None:
        store = FieldStore()
        store.set("name", "")
        store.set("email", "not an email")
        assert store.get("email") == "not an email"

    def test_unknown_field_get(self) -> None:
        with pytest.raises(UnknownFieldError):
            FieldStore().get("phone")

    def test_toggle_agree_terms(self) -> None:
        store = FieldStore()
        store.toggle_agree_terms()
        assert store.get("agreeTerms") is True
        store.toggle_agree_terms()
        assert store.get("agreeTerms") is False

    def test_select_gender_switch(self) -> None:
        store = FieldStore()
        store.select_gender("male")
        store.select_gender("female")
        assert store.get("gender") == "female"

    def test_named_setters(self) -> None:
        store = FieldStore()
        store.set_name("Gary Oldman")
        store.set_email("gary.oldman@gmail.com")
        store.set_agree_terms(True)
        assert store.snapshot() == FieldSet(
            name="Gary Oldman", email="gary.oldman@gmail.com", agree_terms=True,
        )

    def test_snapshot_is_detached(self) -> None:
        store = FieldStore()
        before = store.snapshot()
        store.set_name("Gary")
        assert before.name == ""
        assert store.snapshot().name == "Gary"

    def test_reset(self) -> None:
        store = FieldStore(FieldSet(name="Gary", gender="male"))
        store.reset()
        assert store.snapshot() == FieldSet()

    def test_concurrent_toggles(self) -> None:
        store = FieldStore()

        def flip() -> None:
            for _ in range(100):
                store.toggle_agree_terms()

        threads = [threading.Thread(target=flip) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        # 400 flips under the lock land back on the initial value
        assert store.get("agreeTerms") is False
