"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Self

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class TicketCategory(Enum):
    """The closed set of ticket categories a venue sells."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account. Always strictly positive."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be positive")

    @classmethod
    def parse(cls, raw: Any) -> Self | None:
        """Parse an int or integer string into an AccountId.

        Returns None when the value is not an integer or is not positive.
        """
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            number = raw
        elif isinstance(raw, str) and _INTEGER_PATTERN.fullmatch(raw.strip()):
            try:
                number = int(raw.strip())
            except ValueError:
                # beyond the interpreter's integer string conversion limit
                return None
        else:
            return None
        if number <= 0:
            return None
        return cls(value=number)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for a number of tickets of a single category."""

    ticket_type: TicketCategory
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketCategory):
            raise ValueError(f"Unknown ticket type: {self.ticket_type!r}")
        if not _is_int(self.quantity):
            raise ValueError("Ticket quantity must be an integer")
        if self.quantity < 0:
            raise ValueError("Ticket quantity cannot be negative")


@dataclass(frozen=True)
class PriceList:
    """Unit prices per category, in whole currency units.

    Infant tickets are always free and have no configurable price.
    """

    adult: int = 20
    child: int = 10

    def __post_init__(self) -> None:
        if not (_is_int(self.adult) and _is_int(self.child)):
            raise ValueError("Ticket price must be an integer")
        if self.adult < 0 or self.child < 0:
            raise ValueError("Ticket price cannot be negative")

    def price_for(self, category: TicketCategory) -> int:
        if category is TicketCategory.ADULT:
            return self.adult
        if category is TicketCategory.CHILD:
            return self.child
        return 0


@dataclass(frozen=True)
class PurchasePolicy:
    """Limits and prices applied to every purchase a service handles."""

    max_tickets: int = 20
    prices: PriceList = PriceList()

    def __post_init__(self) -> None:
        if not _is_int(self.max_tickets):
            raise ValueError("Maximum ticket count must be an integer")
        if not isinstance(self.prices, PriceList):
            raise ValueError("Prices must be a PriceList")
        if self.max_tickets < 0:
            raise ValueError("Maximum ticket count cannot be negative")
