"""Supplier entity.

Suppliers are who purchase orders are placed with. They live outside the
PurchaseOrder aggregate; an order refers to its supplier only by SupplierId.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.value_objects import Money, SupplierId

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class Supplier:
    id: SupplierId
    name: str
    contact_email: str | None = None
    last_order_total_price: Money | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, SupplierId):
            raise ValidationError("Supplier ID must be a valid SupplierId object")
        if (
            not isinstance(self.name, str)
            or not MIN_NAME_LENGTH <= len(self.name) <= MAX_NAME_LENGTH
        ):
            raise ValidationError(
                f"Supplier name must be between {MIN_NAME_LENGTH} "
                f"and {MAX_NAME_LENGTH} characters"
            )
        if self.contact_email is not None and not (
            isinstance(self.contact_email, str) and _EMAIL_RE.match(self.contact_email)
        ):
            raise ValidationError("Contact email must be a valid email address or null")
        if self.last_order_total_price is not None and not isinstance(
            self.last_order_total_price, Money
        ):
            raise ValidationError("Last order total price must be a Money object or null")

    @staticmethod
    def register(name: str, contact_email: str | None = None) -> Supplier:
        """Create a new supplier with a freshly generated id."""
        return Supplier(id=SupplierId.generate(), name=name, contact_email=contact_email)
