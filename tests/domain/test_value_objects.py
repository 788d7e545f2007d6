"""Tests for domain value objects."""

from decimal import Decimal

import pytest

from stockview.domain import (
    AbsentAlert,
    RawAlert,
    StructuredAlert,
    coerce_amount,
    decode_alert_config,
    format_amount,
)


class TestDecodeAlertConfig:
    """Tests for alert configuration decoding."""

    def test_mapping(self) -> None:
        """A mapping with min_quantity is structured."""
        assert decode_alert_config({"min_quantity": 7}) == StructuredAlert(7)

    def test_json_text(self) -> None:
        """JSON text is decoded."""
        assert decode_alert_config('{"min_quantity": 12}') == StructuredAlert(12)

    def test_numeric_string_threshold(self) -> None:
        """An integer-like string threshold is accepted."""
        assert decode_alert_config({"min_quantity": "8"}) == StructuredAlert(8)

    def test_none_is_absent(self) -> None:
        """No config at all is absent."""
        assert decode_alert_config(None) == AbsentAlert()

    def test_json_null_is_absent(self) -> None:
        """JSON null decodes to absent."""
        assert decode_alert_config("null") == AbsentAlert()

    def test_non_mapping_json_is_absent(self) -> None:
        """JSON that is not an object carries no threshold."""
        assert decode_alert_config("42") == AbsentAlert()

    def test_mapping_without_threshold_is_absent(self) -> None:
        """A mapping without min_quantity is absent."""
        assert decode_alert_config({}) == AbsentAlert()

    def test_invalid_json_is_raw(self) -> None:
        """Undecodable text is kept verbatim."""
        assert decode_alert_config("min=5") == RawAlert("min=5")

    def test_non_numeric_threshold_is_raw(self) -> None:
        """A threshold that is not a number cannot be used."""
        result = decode_alert_config({"min_quantity": "lots"})
        assert isinstance(result, RawAlert)

    def test_fractional_threshold(self) -> None:
        """A fractional threshold is kept exactly."""
        assert decode_alert_config('{"min_quantity": 5.5}') == StructuredAlert(Decimal("5.5"))
        assert StructuredAlert(Decimal("5.5")).to_payload() == {"min_quantity": 5.5}

    def test_integral_float_threshold_is_int(self) -> None:
        """A whole-number threshold written with a fraction is an int."""
        result = decode_alert_config({"min_quantity": "7.0"})
        assert result == StructuredAlert(7)
        assert isinstance(result.min_quantity, int)

    def test_already_decoded_passes_through(self) -> None:
        """Decoding is idempotent."""
        alert = StructuredAlert(3)
        assert decode_alert_config(alert) is alert

    def test_payloads(self) -> None:
        """Each variant serializes back for the store."""
        assert StructuredAlert(4).to_payload() == {"min_quantity": 4}
        assert RawAlert("x").to_payload() == "x"
        assert AbsentAlert().to_payload() is None


class TestAmounts:
    """Tests for price coercion and formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1500.50", Decimal("1500.50")),
            (" 20 ", Decimal("20")),
            (19.99, Decimal("19.99")),
            (300, Decimal("300")),
        ],
    )
    def test_coerce(self, value, expected: Decimal) -> None:
        """Numbers and numeric strings are coerced to Decimal."""
        assert coerce_amount(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "NaN", True])
    def test_coerce_unknown(self, value) -> None:
        """Non-numeric values become None."""
        assert coerce_amount(value) is None

    def test_format_thousands(self) -> None:
        """Amounts are grouped in thousands."""
        assert format_amount(Decimal("1234567")) == "Ksh 1,234,567"

    def test_format_drops_trailing_zeros(self) -> None:
        """Trailing fraction zeros are dropped."""
        assert format_amount(Decimal("1234.50")) == "Ksh 1,234.5"

    def test_format_rounds_to_three_places(self) -> None:
        """At most three fraction digits are shown."""
        assert format_amount(Decimal("0.12345")) == "Ksh 0.123"

    def test_format_unknown(self) -> None:
        """Unknown amounts are shown as a dash."""
        assert format_amount(None) == "-"

    def test_format_custom_label(self) -> None:
        """The currency label is configurable."""
        assert format_amount(Decimal("5"), currency_label="USD") == "USD 5"
