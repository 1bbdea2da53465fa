from tickets.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidAccountIdError,
    InvalidPurchaseError,
    InvalidTicketRequestsError,
    TicketLimitExceededError,
    UnaccompaniedMinorError,
)
from tickets.domain.models import PurchaseResult, TicketData
from tickets.domain.value_objects import (
    AccountId,
    PriceList,
    PurchasePolicy,
    TicketCategory,
    TicketTypeRequest,
)

__all__ = [
    "AccountId",
    "TicketCategory",
    "TicketTypeRequest",
    "PriceList",
    "PurchasePolicy",
    "TicketData",
    "PurchaseResult",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
    "InvalidAccountIdError",
    "InvalidTicketRequestsError",
    "UnaccompaniedMinorError",
    "TicketLimitExceededError",
]
