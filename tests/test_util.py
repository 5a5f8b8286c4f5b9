from datetime import date, datetime
from types import SimpleNamespace

import pytest

from exchange_crm.util.errors import DEFAULT_FALLBACK, get_error_message
from exchange_crm.util.exceptions import NotFoundException, ValidationException
from exchange_crm.util.formatters import parse_date


class TestErrorMessage:

    def test_app_exception_uses_user_message(self):
        error = ValidationException(message = "Name is required.", details = "name")

        assert str(error) == "VALIDATION_ERROR: Name is required."
        assert get_error_message(error) == "Name is required."

    def test_app_exception_default_message(self):
        assert get_error_message(NotFoundException()) == "Record not found."

    def test_exception_text(self):
        assert get_error_message(RuntimeError("connection reset")) == "connection reset"

    def test_exception_without_text_falls_back(self):
        assert get_error_message(ValueError()) == DEFAULT_FALLBACK

    def test_exception_without_text_reads_message_attribute(self):
        error = ValueError()
        error.message = " Bucket missing "

        assert get_error_message(error) == "Bucket missing"

    def test_mapping_message(self):
        assert get_error_message({"message": "  Duplicate key  "}) == "Duplicate key"

    def test_object_message(self):
        assert get_error_message(SimpleNamespace(message = "Rate limited")) == "Rate limited"

    @pytest.mark.parametrize("error", [
        None,
        "",
        {"message": "   "},
        {"message": 42},
        {"error": "no message key"},
        SimpleNamespace(message = None)
    ])
    def test_fallback(self, error):
        assert get_error_message(error) == DEFAULT_FALLBACK
        assert get_error_message(error, "Could not save.") == "Could not save."


class TestParseDate:

    def test_empty(self):
        assert parse_date(None) is None
        assert parse_date("") is None

    def test_date_objects(self):
        assert parse_date(date(2026, 3, 1)) == date(2026, 3, 1)
        assert parse_date(datetime(2026, 3, 1, 15, 30)) == date(2026, 3, 1)

    @pytest.mark.parametrize("value", [
        "2026-03-01",
        " 2026-03-01 ",
        "2026-03-01T15:30:00Z",
        "2026-03-01 15:30:00"
    ])
    def test_time_part_dropped(self, value):
        assert parse_date(value) == date(2026, 3, 1)

    @pytest.mark.parametrize("value", ["2026-01-01garbage", "2026-02-30", "03/01/2026", "soon"])
    def test_invalid(self, value):
        with pytest.raises(ValidationException) as error:
            parse_date(value, "close_date")

        assert error.value.message == "close_date must be a date (YYYY-MM-DD)."
