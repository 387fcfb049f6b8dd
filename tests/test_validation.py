"""Tests for field validation helpers and error types."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from dateutil import tz

from bizdash.domain import validation
from bizdash.domain.errors import (
    DomainError,
    StoreWriteFailure,
    ValidationError,
    record_not_found,
)
from bizdash.domain.validation import (
    optional_text,
    parse_head_count,
    parse_money,
    parse_percentage,
    parse_timestamp,
    require_text,
    validate_fields,
)
from bizdash.utils.date_parser import to_local_date


class TestErrors:
    """Tests for the error types."""

    def test_validation_error_is_value_error(self):
        """Domain errors stay compatible with ValueError handling."""
        error = ValidationError({"name": "Name is required."})
        assert isinstance(error, DomainError)
        assert isinstance(error, ValueError)
        assert error.field == "name"
        assert str(error) == "Name is required."

    def test_store_write_failure_message(self):
        """Write failures name the operation, kind and record."""
        failure = StoreWriteFailure("update", "client", "abc", RuntimeError("disk full"))
        assert str(failure) == "Could not update client record abc: disk full"
        assert failure.record_id == "abc"

    def test_record_not_found(self):
        """Not-found messages start with the capitalized kind."""
        assert record_not_found("project", "p1") == "Project p1 not found"


class TestTextFields:
    """Tests for text checks."""

    def test_require_text_strips(self):
        """Surrounding whitespace is removed."""
        assert require_text("name", "  Ana  ", "Name is required.") == "Ana"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_require_text_rejects_blank(self, value):
        """Blank text is rejected with the given message."""
        with pytest.raises(ValidationError) as excinfo:
            require_text("name", value, "Name is required.")
        assert excinfo.value.errors == {"name": "Name is required."}

    def test_optional_text(self):
        """Blank optional text becomes None."""
        assert optional_text(None) is None
        assert optional_text("  ") is None
        assert optional_text(" hi ") == "hi"


class TestNumericFields:
    """Tests for numeric checks."""

    def test_parse_money_accepts_zero(self):
        """Zero is allowed unless positive is required."""
        assert parse_money("price", "0", "Price must be a positive number.") == Decimal("0")

    def test_parse_money_rejects_negative(self):
        """Negative amounts get the bound message."""
        with pytest.raises(ValidationError, match="Price must be a positive number."):
            parse_money("price", "-1", "Price must be a positive number.")

    def test_parse_money_positive_rejects_zero(self):
        """positive=True excludes zero."""
        with pytest.raises(ValidationError):
            parse_money("bill", 0, "Bill must be a positive number.", positive=True)

    def test_parse_money_rejects_text(self):
        """Non-numeric input names the field."""
        with pytest.raises(ValidationError) as excinfo:
            parse_money("material_cost", "abc", "Material cost cannot be negative.")
        assert excinfo.value.errors["material_cost"] == "Material cost must be a number."

    def test_parse_percentage_bounds(self):
        """Percentages run from 0 to 100 inclusive."""
        assert parse_percentage("tip_percent", "0") == Decimal("0")
        assert parse_percentage("tip_percent", 100) == Decimal("100")
        with pytest.raises(ValidationError, match="Tip cannot be negative."):
            parse_percentage("tip_percent", "-5")
        with pytest.raises(ValidationError, match="Tip cannot exceed 100%."):
            parse_percentage("tip_percent", "100.01")

    def test_parse_head_count(self):
        """At least one whole person."""
        assert parse_head_count("num_people", "3") == 3
        with pytest.raises(ValidationError, match="Must be at least 1 person."):
            parse_head_count("num_people", 0)
        with pytest.raises(ValidationError, match="must be a whole number"):
            parse_head_count("num_people", "1.5")


class TestTimestampFields:
    """Tests for timestamp checks."""

    def test_date_string_is_local_midnight(self):
        """A day string becomes the start of that local day."""
        value = parse_timestamp("date", "2024-05-10", "Date is required.")
        assert value.tzinfo is not None
        assert to_local_date(value) == date(2024, 5, 10)

    def test_datetime_passes_through(self):
        """Explicit timestamps are kept as given."""
        instant = datetime(2024, 5, 10, 15, 0, tzinfo=timezone.utc)
        assert parse_timestamp("date", instant, "Date is required.") == instant

    def test_naive_datetime_is_local_time(self):
        """A naive local midnight stays on its own calendar day."""
        value = parse_timestamp("date", datetime(2024, 5, 10), "Date is required.")
        assert value.tzinfo is not None
        assert to_local_date(value) == date(2024, 5, 10)

    def test_naive_datetime_in_western_zone(self, monkeypatch):
        """West of UTC a local midnight is not pushed to the previous day."""
        zone = tz.gettz("America/Sao_Paulo")
        monkeypatch.setattr(validation, "local_timezone", lambda: zone)
        value = parse_timestamp("date", datetime(2024, 5, 10), "Date is required.")
        assert to_local_date(value, zone) == date(2024, 5, 10)
        assert value.astimezone(timezone.utc).hour == 3

    def test_missing_timestamp(self):
        """Missing values get the required message."""
        with pytest.raises(ValidationError, match="Date is required."):
            parse_timestamp("date", None, "Date is required.")

    def test_invalid_timestamp(self):
        """Unparseable strings are reported per field."""
        with pytest.raises(ValidationError, match="End date is not a valid date."):
            parse_timestamp("end_date", "someday", "End date is invalid.")


def test_validate_fields_collects_every_error():
    """Every failing field is reported at once."""
    with pytest.raises(ValidationError) as excinfo:
        validate_fields(
            {
                "name": lambda: require_text("name", "", "Name is required."),
                "price": lambda: parse_money("price", "-3", "Price must be a positive number."),
                "phone": lambda: optional_text("555"),
            }
        )
    assert excinfo.value.errors == {
        "name": "Name is required.",
        "price": "Price must be a positive number.",
    }


def test_validate_fields_returns_values():
    """Passing checks return their coerced values."""
    values = validate_fields({"price": lambda: parse_money("price", "$10.50", "bad")})
    assert values == {"price": Decimal("10.50")}
