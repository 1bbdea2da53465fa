"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_TICKET_REQUESTS = "INVALID_TICKET_REQUESTS"
    UNACCOMPANIED_MINOR = "UNACCOMPANIED_MINOR"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"


@dataclass(frozen=True, eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


@dataclass(frozen=True, eq=False)
class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a business rule.

    ``context`` holds the offending input for diagnostics and is never
    returned to API clients.
    """

    context: tuple[Any, ...] = ()
    status_code: int = 400


class InvalidAccountIdError(InvalidPurchaseError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self, account_id: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Account ID is invalid",
            context=(account_id,),
        )


class InvalidTicketRequestsError(InvalidPurchaseError):
    """Raised when the ticket requests are not a list of TicketTypeRequest."""

    def __init__(self, ticket_type_requests: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUESTS,
            message="ticketTypeRequests received are invalid",
            context=(ticket_type_requests,),
        )


class UnaccompaniedMinorError(InvalidPurchaseError):
    """Raised when child or infant tickets are requested without an adult."""

    def __init__(self, ticket_data: Any) -> None:
        super().__init__(
            code=ErrorCode.UNACCOMPANIED_MINOR,
            message="Cannot purchase child / infant tickets without an accompanying adult",
            context=(ticket_data,),
        )


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when more tickets are requested than one purchase allows."""

    def __init__(self, ticket_data: Any, max_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=(
                f"Too many tickets purchased (maximum of {max_tickets} per transaction)"
            ),
            context=(ticket_data,),
        )
