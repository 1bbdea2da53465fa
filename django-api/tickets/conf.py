"""Purchase settings read from ``settings.TICKETS``."""

from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.domain import PriceList, PurchasePolicy
from tickets.gateways.interfaces import PaymentCharger, SeatReserver
from tickets.services import TicketService

DEFAULTS: dict[str, Any] = {
    "MAX_TICKETS_PER_PURCHASE": 20,
    "ADULT_TICKET_PRICE": 20,
    "CHILD_TICKET_PRICE": 10,
    "PAYMENT_CHARGER": "tickets.gateways.local.LocalPaymentCharger",
    "SEAT_RESERVER": "tickets.gateways.local.LocalSeatReserver",
}


def get_setting(name: str) -> Any:
    return getattr(settings, "TICKETS", {}).get(name, DEFAULTS[name])


def get_purchase_policy() -> PurchasePolicy:
    return PurchasePolicy(
        max_tickets=get_setting("MAX_TICKETS_PER_PURCHASE"),
        prices=PriceList(
            adult=get_setting("ADULT_TICKET_PRICE"),
            child=get_setting("CHILD_TICKET_PRICE"),
        ),
    )


def get_payment_charger() -> PaymentCharger:
    return import_string(get_setting("PAYMENT_CHARGER"))()


def get_seat_reserver() -> SeatReserver:
    return import_string(get_setting("SEAT_RESERVER"))()


def get_ticket_service() -> TicketService:
    """Build a TicketService wired from the current settings."""
    return TicketService(
        payment_charger=get_payment_charger(),
        seat_reserver=get_seat_reserver(),
        policy=get_purchase_policy(),
    )
