"""Application service: Register Supplier use case."""

from __future__ import annotations

import logging

from procurement.application.dto import SupplierDTO
from procurement.domain.model.supplier import Supplier

logger = logging.getLogger(__name__)


class RegisterSupplierHandler:

    def handle(self, name: str, contact_email: str | None = None) -> SupplierDTO:
        supplier = Supplier.register(name=name, contact_email=contact_email)
        logger.info("Registered supplier %s (%s)", supplier.name, supplier.id)
        return SupplierDTO(
            id=supplier.id.value,
            name=supplier.name,
            contact_email=supplier.contact_email,
        )
