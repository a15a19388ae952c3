"""Value Objects shared across the procurement domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from procurement.domain.exceptions import ValidationError

_CENT = Decimal("0.01")


def to_decimal(value: object) -> Decimal | None:
    """Coerce a finite int/float/Decimal to Decimal, or return None."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    # str() keeps 45.99 as 45.99 instead of its binary expansion
    result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    if not result.is_finite():
        return None
    return result


def _round_cents(amount: Decimal) -> Decimal:
    try:
        return amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        # quantize needs more digits than the context precision allows
        raise ValidationError(f"Amount is too large: {amount}") from exc


# ── Identifiers ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Identifier:
    """A UUID-backed identifier.

    Subclasses name what is being identified; two identifiers of different
    kinds never compare equal even when their text matches.
    """

    value: str

    def __post_init__(self) -> None:
        if not _is_canonical_uuid(self.value):
            raise ValidationError(
                f"Invalid {type(self).__name__}: {self.value}. Must be a valid UUID"
            )

    @classmethod
    def generate(cls):
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value


def _is_canonical_uuid(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    # uuid.UUID also accepts braces, urn: prefixes and bare hex
    return str(parsed) == value.lower()


@dataclass(frozen=True)
class SupplierId(Identifier):
    """Identifies a supplier."""


@dataclass(frozen=True)
class ProductId(Identifier):
    """Identifies a product being ordered."""


# ── Currency ─────────────────────────────────────────────────────────────────


class Currency(Enum):
    """The closed set of currencies a purchase order can be priced in."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def of(cls, code: str) -> Currency:
        """Resolve an ISO code, raising ValidationError for unknown codes."""
        if isinstance(code, str):
            code = code.strip()
        try:
            return cls(code)
        except ValueError as exc:
            valid = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Invalid currency code: {code}. Must be one of {valid}"
            ) from exc

    def __str__(self) -> str:
        return self.value


# ── Money ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Amounts are held as Decimal rounded half-up to two places, so
    ``Money(45.99, Currency.USD) * 5`` is exactly ``USD 229.95``.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        amount = to_decimal(self.amount)
        if amount is None or amount < 0:
            raise ValidationError("Amount must be a non-negative number")
        if not isinstance(self.currency, Currency):
            raise ValidationError("Currency must be a valid Currency object")
        # abs() folds Decimal("-0") into 0
        object.__setattr__(self, "amount", _round_cents(abs(amount)))

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        if not isinstance(other, Money) or other.currency != self.currency:
            raise ValidationError("Cannot add Money with different currencies")
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: int | float | Decimal) -> Money:
        multiplier = to_decimal(factor)
        if multiplier is None or multiplier < 0:
            raise ValidationError("Multiplier must be a non-negative number")
        return Money(self.amount * multiplier, self.currency)

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __mul__(self, factor: int | float | Decimal) -> Money:
        return self.multiply(factor)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency.code} {self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money) or other.currency != self.currency:
            raise ValidationError(
                f"Cannot compare {self.currency} with "
                f"{getattr(other, 'currency', type(other).__name__)}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: Currency = Currency.USD) -> Money:
        """Convenient factory that also accepts numeric strings."""
        if isinstance(amount, str):
            try:
                amount = Decimal(amount.strip())
            except InvalidOperation as exc:
                raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(amount, currency)

    @staticmethod
    def zero(currency: Currency) -> Money:
        return Money(Decimal("0"), currency)


# ── OrderDate ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class OrderDate:
    """The point in time a purchase order was placed.

    Accepts a datetime or an ISO-8601 string. Naive values are read as UTC.
    """

    instant: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "instant", _parse_instant(self.instant))

    @classmethod
    def now(cls) -> OrderDate:
        return cls(datetime.now(timezone.utc))

    def isoformat(self) -> str:
        return self.instant.isoformat()

    def __str__(self) -> str:
        # e.g. "October 25, 2023, 02:30 PM"
        return f"{self.instant:%B} {self.instant.day}, {self.instant:%Y, %I:%M %p}"


def _parse_instant(value: object) -> datetime:
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError(f"Invalid date: {value}") from exc
    if not isinstance(value, datetime):
        raise ValidationError(f"Invalid date: {value}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value
