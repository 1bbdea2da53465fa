"""Serializers for transforming API payloads to and from domain models."""

from rest_framework import serializers

from tickets.domain import TicketCategory, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for a single TicketTypeRequest."""

    ticket_type = serializers.ChoiceField(
        choices=[category.value for category in TicketCategory]
    )
    quantity = serializers.IntegerField(min_value=0)

    def to_domain(self) -> TicketTypeRequest:
        return TicketTypeRequest(
            ticket_type=TicketCategory(self.validated_data["ticket_type"]),
            quantity=self.validated_data["quantity"],
        )


class PurchaseResultSerializer(serializers.Serializer):
    """Serializer for PurchaseResult domain model."""

    code = serializers.IntegerField()
    total_amount_to_pay = serializers.IntegerField()
    tickets_to_buy = serializers.IntegerField()
