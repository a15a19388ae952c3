"""Unit tests for domain value objects."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.value_objects import (
    Currency,
    Money,
    OrderDate,
    ProductId,
    SupplierId,
)

UUID_TEXT = "3f2b8c1e-9a4d-4e6f-8b1a-2c3d4e5f6a7b"


# ── Identifiers ──────────────────────────────────────────────────────────────


class TestIdentifier:

    def test_valid_uuid_accepted(self):
        assert SupplierId(UUID_TEXT).value == UUID_TEXT

    def test_uppercase_uuid_accepted(self):
        assert ProductId(UUID_TEXT.upper()).value == UUID_TEXT.upper()

    def test_generate_returns_subclass(self):
        sid = SupplierId.generate()
        pid = ProductId.generate()
        assert isinstance(sid, SupplierId)
        assert isinstance(pid, ProductId)
        assert sid.value != pid.value

    @pytest.mark.parametrize(
        "raw",
        ["", "not-a-uuid", "3f2b8c1e9a4d4e6f8b1a2c3d4e5f6a7b", "{" + UUID_TEXT + "}", None, 42],
    )
    def test_invalid_value_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid SupplierId"):
            SupplierId(raw)

    def test_error_names_the_identifier_kind(self):
        with pytest.raises(ValidationError, match="Invalid ProductId: bogus. Must be a valid UUID"):
            ProductId("bogus")

    def test_equality_by_value(self):
        assert SupplierId(UUID_TEXT) == SupplierId(UUID_TEXT)
        assert hash(SupplierId(UUID_TEXT)) == hash(SupplierId(UUID_TEXT))

    def test_different_kinds_not_equal(self):
        assert SupplierId(UUID_TEXT) != ProductId(UUID_TEXT)

    def test_str(self):
        assert str(ProductId(UUID_TEXT)) == UUID_TEXT


# ── Currency ─────────────────────────────────────────────────────────────────


class TestCurrency:

    def test_of_known_code(self):
        assert Currency.of("EUR") is Currency.EUR
        assert Currency.EUR.code == "EUR"

    def test_of_strips_whitespace(self):
        assert Currency.of(" GBP ") is Currency.GBP

    @pytest.mark.parametrize("code", ["usd", "CHF", "", None])
    def test_unknown_code_rejected(self, code):
        with pytest.raises(ValidationError, match="Must be one of USD, EUR, GBP, JPY"):
            Currency.of(code)

    def test_str(self):
        assert str(Currency.JPY) == "JPY"


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_rounds_to_cents(self):
        m = Money(10.5, Currency.USD)
        assert m.amount == Decimal("10.50")
        assert m.currency is Currency.USD

    def test_rounding_is_half_up(self):
        assert Money(2.675, Currency.USD).amount == Decimal("2.68")
        assert Money(Decimal("0.125"), Currency.USD).amount == Decimal("0.13")
        assert Money(Decimal("0.124"), Currency.USD).amount == Decimal("0.12")

    def test_zero_is_allowed(self):
        assert Money(0, Currency.EUR) == Money.zero(Currency.EUR)

    @pytest.mark.parametrize(
        "amount", [-0.01, -1, float("inf"), float("nan"), Decimal("NaN"), "10", None, True]
    )
    def test_invalid_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="non-negative number"):
            Money(amount, Currency.USD)

    @pytest.mark.parametrize("amount", [1e30, Decimal("1e27"), 10**40])
    def test_amount_beyond_decimal_precision_rejected(self, amount):
        with pytest.raises(ValidationError, match="Amount is too large"):
            Money(amount, Currency.USD)

    def test_largest_roundable_amount_accepted(self):
        assert Money(Decimal("1e25"), Currency.USD).amount == Decimal("1e25")

    def test_currency_must_be_currency(self):
        with pytest.raises(ValidationError, match="valid Currency object"):
            Money(10, "USD")

    def test_of_factory_from_string(self):
        assert Money.of("25.99") == Money(Decimal("25.99"), Currency.USD)
        assert Money.of("7", Currency.GBP).currency is Currency.GBP

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_addition(self):
        result = Money(0.1, Currency.USD).add(Money(0.2, Currency.USD))
        assert result == Money(0.3, Currency.USD)

    def test_plus_operator(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_addition_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="different currencies"):
            Money(10, Currency.USD).add(Money(5, Currency.EUR))

    def test_addition_of_non_money_rejected(self):
        with pytest.raises(ValidationError, match="different currencies"):
            Money(10, Currency.USD).add(5)

    def test_multiplication(self):
        assert Money(45.99, Currency.USD).multiply(5) == Money(229.95, Currency.USD)

    def test_multiplication_rounds_half_up(self):
        assert Money(10.01, Currency.USD) * 1.5 == Money(Decimal("15.02"), Currency.USD)

    def test_multiplication_by_zero(self):
        assert Money(99, Currency.JPY).multiply(0) == Money.zero(Currency.JPY)

    @pytest.mark.parametrize("factor", [-1, float("inf"), float("nan"), "2", None])
    def test_invalid_multiplier_rejected(self, factor):
        with pytest.raises(ValidationError, match="Multiplier must be a non-negative number"):
            Money(10, Currency.USD).multiply(factor)

    def test_multiplication_overflow_rejected(self):
        with pytest.raises(ValidationError, match="Amount is too large"):
            Money(Decimal("1e25"), Currency.USD).multiply(1000)

    def test_operations_do_not_mutate(self):
        m = Money(10, Currency.USD)
        m.add(Money(1, Currency.USD))
        m.multiply(3)
        assert m == Money(10, Currency.USD)

    def test_is_frozen(self):
        m = Money(10, Currency.USD)
        with pytest.raises(AttributeError):
            m.amount = Decimal("0")

    def test_equality_needs_same_currency(self):
        assert Money(10, Currency.USD) != Money(10, Currency.EUR)

    def test_str_formatting(self):
        assert str(Money(459.85, Currency.USD)) == "USD 459.85"
        assert str(Money(5, Currency.EUR)) == "EUR 5.00"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")

    def test_comparison_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot compare"):
            Money(1, Currency.USD) < Money(2, Currency.GBP)


# ── OrderDate ────────────────────────────────────────────────────────────────


class TestOrderDate:

    def test_from_aware_datetime(self):
        instant = datetime(2023, 10, 25, 14, 30, tzinfo=timezone.utc)
        assert OrderDate(instant).instant == instant

    def test_naive_datetime_read_as_utc(self):
        assert OrderDate(datetime(2023, 10, 25, 14, 30)).instant.tzinfo is timezone.utc

    def test_from_iso_string(self):
        assert OrderDate("2023-10-25T14:30:00Z") == OrderDate(datetime(2023, 10, 25, 14, 30))

    def test_equal_instants_in_different_zones(self):
        plus_two = timezone(timedelta(hours=2))
        assert OrderDate(datetime(2023, 10, 25, 16, 30, tzinfo=plus_two)) == OrderDate(
            datetime(2023, 10, 25, 14, 30, tzinfo=timezone.utc)
        )

    @pytest.mark.parametrize("raw", ["not a date", "2023-13-45", 1698244200, None])
    def test_invalid_value_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid date"):
            OrderDate(raw)

    def test_now_is_utc(self):
        assert OrderDate.now().instant.tzinfo is timezone.utc

    def test_str_is_human_friendly(self):
        assert str(OrderDate("2023-10-25T14:30:00+00:00")) == "October 25, 2023, 02:30 PM"

    def test_isoformat(self):
        assert OrderDate("2023-10-25T14:30:00+00:00").isoformat() == "2023-10-25T14:30:00+00:00"
