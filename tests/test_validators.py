"""
Noteful Backend: Validator Unit Tests
======================================

What we test:
    ✅ Identifier shape: 24 hex chars, either case, strings only
    ✅ Required-field presence: missing, None, "" and [] all count as missing
    ✅ ensure_* helpers raise ValidationError with the client-facing message
    ✅ ensure_valid_id(s) hand back the lowercase form
"""

import pytest

from noteful.exceptions import ValidationError
from noteful.models.common import generate_object_id
from noteful.validators import (
    INVALID_FOLDER_ID_MESSAGE,
    ensure_present,
    ensure_valid_id,
    ensure_valid_ids,
    is_present,
    is_valid_id,
)


class TestIsValidId:

    @pytest.mark.parametrize("value", [
        "000000000000000000000000",
        "5c1b8d2e0a1f3e4d5c6b7a89",
        "ABCDEFabcdef012345678901",
    ])
    def test_accepts_24_hex_characters(self, value):
        assert is_valid_id(value) is True

    @pytest.mark.parametrize("value", [
        "not-a-valid-id",
        "DOESNOTEXIST",
        "5c1b8d2e0a1f3e4d5c6b7a8",     # 23 chars
        "5c1b8d2e0a1f3e4d5c6b7a890",   # 25 chars
        "5c1b8d2e0a1f3e4d5c6b7a8g",    # non-hex
        "5c1b8d2e0a1f3e4d5c6b7a8\n",
        "",
        None,
        123,
    ])
    def test_rejects_everything_else(self, value):
        assert is_valid_id(value) is False

    def test_generated_ids_are_valid_and_distinct(self):
        ids = {generate_object_id() for _ in range(500)}
        assert len(ids) == 500
        assert all(is_valid_id(i) for i in ids)


class TestIsPresent:

    def test_present_value(self):
        assert is_present({"name": "Work"}, "name") is True

    @pytest.mark.parametrize("payload", [
        {},
        {"name": None},
        {"name": ""},
        {"wrong": "missing name field"},
    ])
    def test_missing_values(self, payload):
        assert is_present(payload, "name") is False

    def test_empty_list_counts_as_missing(self):
        assert is_present({"tags": []}, "tags") is False


class TestEnsureHelpers:

    def test_ensure_valid_id_default_message(self):
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid_id("nope")
        assert exc_info.value.message == "The `id` is not valid"
        assert exc_info.value.context == {"field": "id"}

    def test_ensure_valid_id_custom_message(self):
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid_id("nope", message=INVALID_FOLDER_ID_MESSAGE, field="folderId")
        assert exc_info.value.message == "The `folderId` is not valid"

    def test_ensure_valid_id_returns_value(self):
        value = generate_object_id()
        assert ensure_valid_id(value) == value

    def test_ensure_valid_id_lowercases(self):
        value = generate_object_id()
        assert ensure_valid_id(value.upper()) == value

    def test_ensure_valid_ids_returns_lowercase_list(self):
        ids = [generate_object_id(), generate_object_id()]
        assert ensure_valid_ids(id_.upper() for id_ in ids) == ids

    def test_ensure_valid_ids_stops_at_first_bad_element(self):
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid_ids([generate_object_id(), "bad"])
        assert exc_info.value.message == "The tag `id` is not valid"

    def test_ensure_present_names_the_field(self):
        with pytest.raises(ValidationError) as exc_info:
            ensure_present({}, "title")
        assert exc_info.value.message == "Missing `title` in request body"
        assert exc_info.value.field == "title"
