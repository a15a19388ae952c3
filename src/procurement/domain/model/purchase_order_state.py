"""Purchase order lifecycle.

The lifecycle is a fixed table of ``(status, event) -> status`` edges:

    Draft     --submit-->   Submitted
    Submitted --approve-->  Approved
    Approved  --ship-->     Shipped
    Shipped   --complete--> Completed
    any state except Completed and Canceled --cancel--> Canceled

Completed and Canceled have no outgoing edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from procurement.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class PurchaseOrderStatus(Enum):
    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    APPROVED = "Approved"
    SHIPPED = "Shipped"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


class PurchaseOrderEvent(Enum):
    SUBMIT = "submit"
    APPROVE = "approve"
    SHIP = "ship"
    COMPLETE = "complete"
    CANCEL = "cancel"


_S = PurchaseOrderStatus
_E = PurchaseOrderEvent

_TRANSITIONS: dict[tuple[PurchaseOrderStatus, PurchaseOrderEvent], PurchaseOrderStatus] = {
    (_S.DRAFT, _E.SUBMIT): _S.SUBMITTED,
    (_S.SUBMITTED, _E.APPROVE): _S.APPROVED,
    (_S.APPROVED, _E.SHIP): _S.SHIPPED,
    (_S.SHIPPED, _E.COMPLETE): _S.COMPLETED,
    (_S.DRAFT, _E.CANCEL): _S.CANCELED,
    (_S.SUBMITTED, _E.CANCEL): _S.CANCELED,
    (_S.APPROVED, _E.CANCEL): _S.CANCELED,
    (_S.SHIPPED, _E.CANCEL): _S.CANCELED,
}

_REJECTIONS: dict[PurchaseOrderEvent, str] = {
    _E.SUBMIT: "PurchaseOrder can only be submitted from Draft state",
    _E.APPROVE: "PurchaseOrder can only be approved from Submitted state",
    _E.SHIP: "PurchaseOrder can only be shipped from Approved state",
    _E.COMPLETE: "PurchaseOrder can only be completed from Shipped state",
    _E.CANCEL: "PurchaseOrder cannot be canceled once Completed",
}


@dataclass(frozen=True)
class PurchaseOrderState:
    """Immutable lifecycle position of a purchase order.

    Transitions never mutate; they return a new state or raise
    ValidationError.
    """

    status: PurchaseOrderStatus = PurchaseOrderStatus.DRAFT

    def __post_init__(self) -> None:
        if not isinstance(self.status, PurchaseOrderStatus):
            raise ValidationError(_invalid_state_message(self.status))

    @staticmethod
    def of(value: str) -> PurchaseOrderState:
        """Parse a state value such as ``"Submitted"``."""
        try:
            return PurchaseOrderState(PurchaseOrderStatus(value))
        except ValueError as exc:
            raise ValidationError(_invalid_state_message(value)) from exc

    # --- Transitions ----------------------------------------------------------

    def to_submitted(self) -> PurchaseOrderState:
        return transition(self, PurchaseOrderEvent.SUBMIT)

    def to_approved(self) -> PurchaseOrderState:
        return transition(self, PurchaseOrderEvent.APPROVE)

    def to_shipped(self) -> PurchaseOrderState:
        return transition(self, PurchaseOrderEvent.SHIP)

    def to_completed(self) -> PurchaseOrderState:
        return transition(self, PurchaseOrderEvent.COMPLETE)

    def to_canceled(self) -> PurchaseOrderState:
        return transition(self, PurchaseOrderEvent.CANCEL)

    # --- Queries --------------------------------------------------------------

    @property
    def value(self) -> str:
        return self.status.value

    def is_draft(self) -> bool:
        """True while items may still be added."""
        return self.status == PurchaseOrderStatus.DRAFT

    def is_terminal(self) -> bool:
        return not self.allowed_events()

    def allowed_events(self) -> list[PurchaseOrderEvent]:
        return [event for (status, event) in _TRANSITIONS if status == self.status]

    def __str__(self) -> str:
        return self.status.value


def transition(current: PurchaseOrderState, event: PurchaseOrderEvent) -> PurchaseOrderState:
    """Apply *event* to *current*, returning the next state.

    Raises ValidationError when the table has no edge for the pair.
    """
    if not isinstance(event, PurchaseOrderEvent):
        raise ValidationError(f"Unknown purchase order event: {event}")
    target = _TRANSITIONS.get((current.status, event))
    if target is None:
        if event == PurchaseOrderEvent.CANCEL and current.status == PurchaseOrderStatus.CANCELED:
            raise ValidationError("PurchaseOrder is already Canceled")
        raise ValidationError(_REJECTIONS[event])
    logger.debug("Purchase order state %s -> %s on %s", current.value, target.value, event.value)
    return PurchaseOrderState(target)


def _invalid_state_message(value: object) -> str:
    valid = ", ".join(status.value for status in PurchaseOrderStatus)
    return f"Invalid purchase order state: {value}. Must be one of {valid}"
