"""Gateway interfaces for the services a purchase hands off to.

Gateways must be swappable. Implementations either succeed or raise;
the ticket service neither retries nor compensates.
"""

from abc import ABC, abstractmethod


class PaymentCharger(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def charge(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` currency units to the account."""
        ...


class SeatReserver(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account."""
        ...
