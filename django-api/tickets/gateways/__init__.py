from tickets.gateways.interfaces import PaymentCharger, SeatReserver
from tickets.gateways.local import LocalPaymentCharger, LocalSeatReserver

__all__ = [
    "PaymentCharger",
    "SeatReserver",
    "LocalPaymentCharger",
    "LocalSeatReserver",
]
