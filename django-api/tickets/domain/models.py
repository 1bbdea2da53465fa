"""Domain models produced while handling a purchase.

These are pure domain objects with no API input rules.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from tickets.domain.value_objects import TicketCategory, TicketTypeRequest

PURCHASE_SUCCEEDED = 200


@dataclass(frozen=True)
class TicketData:
    """Ticket quantities aggregated per category for one purchase."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        totals = {category: 0 for category in TicketCategory}
        for request in requests:
            totals[request.ticket_type] += request.quantity
        return cls(
            adult=totals[TicketCategory.ADULT],
            child=totals[TicketCategory.CHILD],
            infant=totals[TicketCategory.INFANT],
        )

    def quantity(self, category: TicketCategory) -> int:
        return getattr(self, category.value.lower())

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant

    @property
    def has_minors(self) -> bool:
        return self.child > 0 or self.infant > 0


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a successful purchase."""

    total_amount_to_pay: int
    tickets_to_buy: int
    code: int = PURCHASE_SUCCEEDED
