"""Purchase endpoint.

Turns the JSON body into ticket requests, hands them to TicketService and
maps rejected purchases to 400 responses. Diagnostic context stays in the log.
"""

import logging
from collections.abc import Mapping
from typing import Any

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.conf import get_ticket_service
from tickets.domain import InvalidPurchaseError
from tickets.handlers.serializers import (
    PurchaseResultSerializer,
    TicketTypeRequestSerializer,
)

logger = logging.getLogger(__name__)


def _to_ticket_type_requests(raw: Any) -> Any:
    """Convert list items to TicketTypeRequest where they are well formed.

    Malformed items and non-list payloads are returned untouched so the
    service rejects them after checking the account ID.
    """
    if not isinstance(raw, list):
        return raw
    converted = []
    for item in raw:
        serializer = TicketTypeRequestSerializer(data=item)
        converted.append(serializer.to_domain() if serializer.is_valid() else item)
    return converted


def _error_response(error: InvalidPurchaseError) -> Response:
    return Response(
        {
            "code": error.status_code,
            "error": error.code.value,
            "message": error.message,
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        payload = request.data if isinstance(request.data, Mapping) else {}
        account_id = payload.get("account_id")
        ticket_type_requests = _to_ticket_type_requests(
            payload.get("ticket_type_requests")
        )

        service = get_ticket_service()
        try:
            result = service.purchase_tickets(account_id, ticket_type_requests)
        except InvalidPurchaseError as exc:
            logger.warning("Rejected purchase request: %s %r", exc, exc.context)
            return _error_response(exc)

        return Response(PurchaseResultSerializer(result).data, status=status.HTTP_200_OK)
