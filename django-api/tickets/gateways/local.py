"""In-process gateway implementations.

Stand-ins for the payment provider and the seat booking system. They
check argument types the way the real clients do, then record the call
in the log.
"""

import logging

from tickets.gateways.interfaces import PaymentCharger, SeatReserver

logger = logging.getLogger(__name__)


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")


class LocalPaymentCharger(PaymentCharger):
    """Payment gateway that accepts every well-formed charge."""

    def charge(self, account_id: int, amount: int) -> None:
        _require_int("account_id", account_id)
        _require_int("amount", amount)
        logger.info("Charged account %s: %s", account_id, amount)


class LocalSeatReserver(SeatReserver):
    """Seat booking gateway that accepts every well-formed reservation."""

    def reserve(self, account_id: int, seat_count: int) -> None:
        _require_int("account_id", account_id)
        _require_int("seat_count", seat_count)
        logger.info("Reserved %s seat(s) for account %s", seat_count, account_id)
