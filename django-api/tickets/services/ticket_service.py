"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from typing import Any

from tickets.domain import (
    AccountId,
    InvalidAccountIdError,
    InvalidPurchaseError,
    InvalidTicketRequestsError,
    PurchasePolicy,
    PurchaseResult,
    TicketCategory,
    TicketData,
    TicketLimitExceededError,
    TicketTypeRequest,
    UnaccompaniedMinorError,
)
from tickets.gateways.interfaces import PaymentCharger, SeatReserver

logger = logging.getLogger(__name__)


class TicketService:
    """Service that validates, prices and executes ticket purchases."""

    def __init__(
        self,
        payment_charger: PaymentCharger,
        seat_reserver: SeatReserver,
        policy: PurchasePolicy | None = None,
    ) -> None:
        self._payment_charger = payment_charger
        self._seat_reserver = seat_reserver
        self._policy = policy or PurchasePolicy()

    @property
    def policy(self) -> PurchasePolicy:
        return self._policy

    def validate_account_id(self, account_id: Any) -> AccountId:
        """Return the parsed account ID.

        Raises:
            InvalidAccountIdError: If the value is not a positive integer.
        """
        parsed = AccountId.parse(account_id)
        if parsed is None:
            raise InvalidAccountIdError(account_id)
        return parsed

    def validate_ticket_type_requests(
        self, ticket_type_requests: Any
    ) -> tuple[TicketTypeRequest, ...]:
        """Return the requests as a tuple.

        Raises:
            InvalidTicketRequestsError: If the value is not a list or tuple
                of TicketTypeRequest.
        """
        if not isinstance(ticket_type_requests, (list, tuple)):
            raise InvalidTicketRequestsError(ticket_type_requests)
        if not all(isinstance(r, TicketTypeRequest) for r in ticket_type_requests):
            raise InvalidTicketRequestsError(ticket_type_requests)
        return tuple(ticket_type_requests)

    def validate_children_and_infants(self, ticket_data: TicketData) -> None:
        if ticket_data.has_minors and ticket_data.adult == 0:
            raise UnaccompaniedMinorError(ticket_data)

    def validate_ticket_count(self, ticket_data: TicketData) -> None:
        if self.compute_tickets_to_buy(ticket_data) > self._policy.max_tickets:
            raise TicketLimitExceededError(ticket_data, self._policy.max_tickets)

    def compute_tickets_to_buy(self, ticket_data: TicketData) -> int:
        return ticket_data.total

    def compute_price(self, ticket_data: TicketData) -> int:
        prices = self._policy.prices
        return sum(
            ticket_data.quantity(category) * prices.price_for(category)
            for category in TicketCategory
        )

    def purchase_tickets(
        self, account_id: Any, ticket_type_requests: Any
    ) -> PurchaseResult:
        """Validate and price a purchase, then charge and reserve seats.

        Checks run in a fixed order and the first failure wins. Nothing is
        charged or reserved unless every check passes. Errors raised by the
        payment or seat gateways propagate unchanged.

        Raises:
            InvalidAccountIdError: If the account ID is not a positive integer.
            InvalidTicketRequestsError: If the requests are malformed.
            UnaccompaniedMinorError: If minors are requested without an adult.
            TicketLimitExceededError: If the purchase exceeds the ticket limit.
        """
        try:
            account = self.validate_account_id(account_id)
            requests = self.validate_ticket_type_requests(ticket_type_requests)
            ticket_data = TicketData.from_requests(requests)
            self.validate_children_and_infants(ticket_data)
            self.validate_ticket_count(ticket_data)
        except InvalidPurchaseError as exc:
            logger.info("Purchase rejected: %s", exc.code.value)
            raise

        tickets_to_buy = self.compute_tickets_to_buy(ticket_data)
        total_amount_to_pay = self.compute_price(ticket_data)

        self._payment_charger.charge(account.value, total_amount_to_pay)
        self._seat_reserver.reserve(account.value, tickets_to_buy)

        logger.info(
            "Purchase completed for account %s: %s ticket(s), amount %s",
            account.value,
            tickets_to_buy,
            total_amount_to_pay,
        )
        return PurchaseResult(
            total_amount_to_pay=total_amount_to_pay,
            tickets_to_buy=tickets_to_buy,
        )
